"""
surf report service - fetches upstream data and resolves it to spoken values
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import ValidationError

from api import get_daily_forecast, get_marine_conditions, get_wind_conditions
from api.errors import UpstreamDataError
from config import HTTP_TIMEOUT_SECONDS
from models import (
    CurrentConditions,
    ForecastResponse,
    MarineResponse,
    SpotConfig,
    TodayForecast,
    WindResponse,
)
from services.helpers import (
    degrees_to_cardinal,
    kmh_to_knots,
    nearest_time_index,
    weather_description,
)

logger = logging.getLogger(__name__)


def spot_local_now(utc_offset_seconds: int) -> datetime:
    """current wall-clock time at the spot, naive like open-meteo's timestamps"""
    now_utc = datetime.now(timezone.utc)
    return (now_utc + timedelta(seconds=utc_offset_seconds)).replace(tzinfo=None)


def _value_at(values: list, idx: int, field: str):
    value = values[idx]
    if value is None:
        raise UpstreamDataError(f"no {field} value at index {idx}")
    return value


class ForecastService:
    """service for turning open-meteo data into current conditions and today's forecast"""

    def __init__(self, spot: SpotConfig, timeout: float = HTTP_TIMEOUT_SECONDS):
        self.spot = spot
        self.timeout = timeout

    def fetch_current(self) -> tuple[MarineResponse, WindResponse]:
        """
        fetch marine and wind data concurrently

        returns:
            (marine response, wind response), only when both succeed

        raises:
            ForecastUnavailable: the failure of whichever request failed
        """
        with ThreadPoolExecutor(max_workers=2) as pool:
            marine_future = pool.submit(get_marine_conditions, self.spot, self.timeout)
            wind_future = pool.submit(get_wind_conditions, self.spot, self.timeout)
            return marine_future.result(), wind_future.result()

    def current_conditions(self, now: Optional[datetime] = None) -> CurrentConditions:
        """
        resolve wave height and wind for the hour closest to now

        args:
            now: reference time; defaults to the current time at the spot

        returns:
            validated CurrentConditions

        raises:
            ForecastUnavailable: if either fetch fails or the data can't be resolved
        """
        marine, wind = self.fetch_current()

        marine_now = now or spot_local_now(marine.utc_offset_seconds)
        wind_now = now or spot_local_now(wind.utc_offset_seconds)

        try:
            marine_idx = nearest_time_index(marine.hourly.time, marine_now)
            wind_idx = nearest_time_index(wind.hourly.time, wind_now)

            wave_height = _value_at(marine.hourly.wave_height, marine_idx, "wave_height")
            wind_speed_kmh = _value_at(wind.hourly.wind_speed_10m, wind_idx, "wind_speed_10m")
            wind_dir_deg = _value_at(wind.hourly.wind_direction_10m, wind_idx, "wind_direction_10m")

            conditions = CurrentConditions(
                timestamp=marine.hourly.time[marine_idx],
                wave_height_m=wave_height,
                wind_speed_knots=kmh_to_knots(wind_speed_kmh),
                wind_direction=degrees_to_cardinal(wind_dir_deg),
            )
        except UpstreamDataError:
            raise
        except (ValidationError, ValueError) as e:
            raise UpstreamDataError(f"could not resolve current conditions: {e}") from e

        logger.info(
            "current conditions at %s for %s: %.1fm, %.1fkn %s",
            self.spot.name, conditions.timestamp, conditions.wave_height_m,
            conditions.wind_speed_knots, conditions.wind_direction,
        )
        return conditions

    def todays_forecast(self) -> TodayForecast:
        """
        fetch the daily forecast and resolve its first (today's) entry

        raises:
            ForecastUnavailable: if the fetch fails or today's values are missing
        """
        forecast: ForecastResponse = get_daily_forecast(self.spot, self.timeout)
        daily = forecast.daily

        try:
            today = TodayForecast(
                date=daily.time[0],
                condition=weather_description(_value_at(daily.weather_code, 0, "weather_code")),
                temperature_max_c=_value_at(daily.temperature_2m_max, 0, "temperature_2m_max"),
                temperature_min_c=_value_at(daily.temperature_2m_min, 0, "temperature_2m_min"),
                precipitation_probability=_value_at(
                    daily.precipitation_probability_max, 0, "precipitation_probability_max"
                ),
                wind_speed_max_knots=kmh_to_knots(
                    _value_at(daily.wind_speed_10m_max, 0, "wind_speed_10m_max")
                ),
            )
        except ValidationError as e:
            raise UpstreamDataError(f"could not resolve today's forecast: {e}") from e

        logger.info("forecast for %s on %s: %s", self.spot.name, today.date, today.condition)
        return today
