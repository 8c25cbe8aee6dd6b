"""
business logic services
"""

from .forecast import ForecastService
from .helpers import degrees_to_cardinal, kmh_to_knots, nearest_time_index, weather_description

__all__ = [
    "ForecastService",
    "degrees_to_cardinal",
    "kmh_to_knots",
    "nearest_time_index",
    "weather_description",
]
