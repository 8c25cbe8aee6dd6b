"""
weather forecast api client
"""

from pydantic import ValidationError

from api.client import fetch_json
from api.errors import UpstreamDataError
from config import HTTP_TIMEOUT_SECONDS, forecast_url, weather_url
from models import ForecastResponse, SpotConfig, WindResponse


def get_wind_conditions(spot: SpotConfig, timeout: float = HTTP_TIMEOUT_SECONDS) -> WindResponse:
    """
    fetch hourly wind speed (km/h) and direction for a spot from open-meteo

    args:
        spot: surf spot to query
        timeout: request timeout in seconds

    returns:
        validated wind response

    raises:
        FetchError: if api request fails
        UpstreamDataError: if api response doesn't match expected schema
    """
    data = fetch_json(weather_url(spot), timeout=timeout)

    try:
        return WindResponse.model_validate(data)
    except ValidationError as e:
        raise UpstreamDataError(f"invalid weather api response: {e}") from e


def get_daily_forecast(spot: SpotConfig, timeout: float = HTTP_TIMEOUT_SECONDS) -> ForecastResponse:
    """
    fetch the daily forecast (weather code, temperatures, rain chance, max wind)

    raises:
        FetchError: if api request fails
        UpstreamDataError: if api response doesn't match expected schema
    """
    data = fetch_json(forecast_url(spot), timeout=timeout)

    try:
        return ForecastResponse.model_validate(data)
    except ValidationError as e:
        raise UpstreamDataError(f"invalid forecast api response: {e}") from e


if __name__ == "__main__":
    from config import default_spot
    spot = default_spot()
    print(get_wind_conditions(spot))
    print(get_daily_forecast(spot))
