"""
unit and label conversions plus nearest-hour lookup
"""

import math
from datetime import datetime
from typing import Sequence

import pandas as pd

KMH_TO_KNOTS = 0.539957

CARDINAL_DIRECTIONS = (
    "north", "north-northeast", "northeast", "east-northeast",
    "east", "east-southeast", "southeast", "south-southeast",
    "south", "south-southwest", "southwest", "west-southwest",
    "west", "west-northwest", "northwest", "north-northwest",
)

UNKNOWN_CONDITIONS = "unknown conditions"

# wmo weather interpretation codes as used by open-meteo
WEATHER_CODES = {
    0: "clear sky",
    1: "mainly clear",
    2: "partly cloudy",
    3: "overcast",
    45: "fog",
    48: "depositing rime fog",
    51: "light drizzle",
    53: "moderate drizzle",
    55: "dense drizzle",
    56: "light freezing drizzle",
    57: "dense freezing drizzle",
    61: "slight rain",
    63: "moderate rain",
    65: "heavy rain",
    66: "light freezing rain",
    67: "heavy freezing rain",
    71: "slight snow fall",
    73: "moderate snow fall",
    75: "heavy snow fall",
    77: "snow grains",
    80: "slight rain showers",
    81: "moderate rain showers",
    82: "violent rain showers",
    85: "slight snow showers",
    86: "heavy snow showers",
    95: "thunderstorm",
    96: "thunderstorm with slight hail",
    99: "thunderstorm with heavy hail",
}


class EmptySeriesError(ValueError):
    """a time series had no entries to pick from"""


def kmh_to_knots(kmh: float) -> float:
    """convert km/h to knots, unrounded"""
    return kmh * KMH_TO_KNOTS


def degrees_to_cardinal(degrees: float) -> str:
    """
    convert a bearing in degrees to one of 16 compass labels

    out-of-range bearings wrap around, so -90 is west and 360 is north.
    sector boundaries round up (11.25 is north-northeast).

    raises:
        ValueError: if degrees is nan or infinite
    """
    if not math.isfinite(degrees):
        raise ValueError(f"bearing must be finite, got {degrees}")
    normalized = degrees % 360
    index = math.floor(normalized / 22.5 + 0.5) % 16
    return CARDINAL_DIRECTIONS[index]


def weather_description(code: int) -> str:
    """wmo code to a spoken phrase; unknown codes get a generic phrase"""
    return WEATHER_CODES.get(code, UNKNOWN_CONDITIONS)


def nearest_time_index(timestamps: Sequence[str], now: datetime) -> int:
    """
    find the entry closest to now in an hourly time axis

    args:
        timestamps: iso-8601 strings, as returned in open-meteo's hourly.time
        now: reference instant, compared as wall-clock time when the
            timestamps carry no offset; a naive now is read as utc when
            the timestamps carry mixed offsets

    returns:
        position of the closest timestamp; the first one wins a tie

    raises:
        EmptySeriesError: if timestamps is empty
        ValueError: if a timestamp cannot be parsed
    """
    if len(timestamps) == 0:
        raise EmptySeriesError("cannot pick the current hour from an empty time series")

    parsed = [pd.Timestamp(t) for t in timestamps]
    # mixed utc offsets only share a dtype once converted to utc
    mixed_offsets = len({p.utcoffset() for p in parsed}) > 1
    times = pd.Series(pd.to_datetime(list(timestamps), utc=mixed_offsets))
    reference = pd.Timestamp(now)
    if times.dt.tz is None and reference.tzinfo is not None:
        reference = reference.tz_localize(None)
    elif times.dt.tz is not None and reference.tzinfo is None:
        reference = reference.tz_localize(times.dt.tz)

    # argmin returns the first minimal position
    return int((times - reference).abs().argmin())
