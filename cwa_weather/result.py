from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from cwa_weather.errors import WeatherError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: WeatherError

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[Any], Err]
