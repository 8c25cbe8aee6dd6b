# config.py
import os

from dotenv import load_dotenv

from models import SpotConfig

load_dotenv()

SPOT_NAME = "Beit Yanai"
SPOT_LATITUDE = 32.38
SPOT_LONGITUDE = 34.86

MARINE_BASE_URL = "https://marine-api.open-meteo.com/v1/marine"
WEATHER_BASE_URL = "https://api.open-meteo.com/v1/forecast"
FORECAST_BASE_URL = "https://api.open-meteo.com/v1/forecast"

MARINE_HOURLY = ["wave_height"]
WIND_HOURLY = ["wind_speed_10m", "wind_direction_10m"]
FORECAST_DAILY = [
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_probability_max",
    "wind_speed_10m_max",
]

USER_AGENT = "beit-yanai-surf-report/v1.0"
HTTP_TIMEOUT_SECONDS = float(os.getenv("SURF_HTTP_TIMEOUT", "10"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def default_spot() -> SpotConfig:
    """the one spot this skill reports on"""
    return SpotConfig(name=SPOT_NAME, latitude=SPOT_LATITUDE, longitude=SPOT_LONGITUDE)


def _spot_query(spot: SpotConfig) -> str:
    return f"latitude={spot.latitude}&longitude={spot.longitude}"


def marine_url(spot: SpotConfig) -> str:
    return (
        f"{MARINE_BASE_URL}?{_spot_query(spot)}"
        f"&hourly={','.join(MARINE_HOURLY)}&timezone=auto"
    )


def weather_url(spot: SpotConfig) -> str:
    return (
        f"{WEATHER_BASE_URL}?{_spot_query(spot)}"
        f"&hourly={','.join(WIND_HOURLY)}&timezone=auto"
    )


def forecast_url(spot: SpotConfig) -> str:
    return (
        f"{FORECAST_BASE_URL}?{_spot_query(spot)}"
        f"&daily={','.join(FORECAST_DAILY)}&timezone=auto"
    )
