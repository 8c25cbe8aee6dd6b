"""
open-meteo api clients
"""

from .errors import FetchError, ForecastUnavailable, UpstreamDataError
from .marine import get_marine_conditions
from .weather import get_daily_forecast, get_wind_conditions

__all__ = [
    "ForecastUnavailable",
    "FetchError",
    "UpstreamDataError",
    "get_marine_conditions",
    "get_wind_conditions",
    "get_daily_forecast",
]
