# test/cwa_data.py
from typing import List, Optional

# 模拟气象署回传的资料
SLOT_TIMES = [
    ("2026-10-19 18:00:00", "2026-10-20 06:00:00"),
    ("2026-10-20 06:00:00", "2026-10-20 18:00:00"),
    ("2026-10-20 18:00:00", "2026-10-21 06:00:00"),
]

DEFAULT_36H_VALUES = {
    "Wx": ["多雲", "晴時多雲", "多雲短暫雨"],
    "PoP": ["10", "20", "60"],
    "MinT": ["20", "22", "21"],
    "CI": ["舒適", "舒適至悶熱", "舒適"],
    "MaxT": ["24", "29", "25"],
}


def forecast_36h_element(name: str, values: List[str], times=None) -> dict:
    times = times or SLOT_TIMES
    return {
        "elementName": name,
        "time": [
            {
                "startTime": start,
                "endTime": end,
                "parameter": {"parameterName": value},
            }
            for (start, end), value in zip(times, values)
        ],
    }


def forecast_36h(location_name: str = "臺北市", elements: Optional[dict] = None) -> dict:
    elements = DEFAULT_36H_VALUES if elements is None else elements
    return {
        "success": "true",
        "records": {
            "datasetDescription": "三十六小時天氣預報",
            "location": [
                {
                    "locationName": location_name,
                    "weatherElement": [
                        forecast_36h_element(name, values) for name, values in elements.items()
                    ],
                }
            ],
        },
    }


def week_times(count: int) -> list:
    return [
        (f"2026-10-{19 + i:02d} 18:00:00", f"2026-10-{20 + i:02d} 06:00:00")
        for i in range(count)
    ]


def forecast_week(location_name: str = "臺北市", temperatures=None, descriptions=None) -> dict:
    temperatures = temperatures if temperatures is not None else ["25", "26", "24", "23", "27", "28", "22"]
    times = week_times(len(temperatures))
    if descriptions is None:
        descriptions = ["多雲"] * len(temperatures)
    return {
        "success": "true",
        "records": {
            "locations": [
                {
                    "datasetDescription": "臺灣各縣市鄉鎮未來1週逐12小時天氣預報",
                    "location": [
                        {
                            "locationName": location_name,
                            "weatherElement": [
                                {
                                    "elementName": "T",
                                    "time": [
                                        {"startTime": s, "endTime": e, "elementValue": {"value": t}}
                                        for (s, e), t in zip(times, temperatures)
                                    ],
                                },
                                {
                                    "elementName": "Wx",
                                    "time": [
                                        {
                                            "startTime": s,
                                            "endTime": e,
                                            "elementValue": [{"value": d, "measures": "自定義 Wx 文字"}],
                                        }
                                        for (s, e), d in zip(times, descriptions)
                                        if d is not None
                                    ],
                                },
                            ],
                        }
                    ],
                }
            ]
        },
    }


def uv_index(location_name: str = "Taipei City", value: str = "7") -> dict:
    return {
        "success": "true",
        "records": {
            "datasetDescription": "紫外線指數預報",
            "locations": [
                {
                    "location": [
                        {
                            "locationName": location_name,
                            "weatherElement": [
                                {"elementName": "UVI", "elementValue": {"value": value}}
                            ],
                        }
                    ]
                }
            ],
        },
    }
