import uvicorn
from cwa_weather import config


def main():
    uvicorn.run("cwa_weather.main:app", host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
