"""
marine weather api client
"""

from pydantic import ValidationError

from api.client import fetch_json
from api.errors import UpstreamDataError
from config import HTTP_TIMEOUT_SECONDS, marine_url
from models import MarineResponse, SpotConfig


def get_marine_conditions(spot: SpotConfig, timeout: float = HTTP_TIMEOUT_SECONDS) -> MarineResponse:
    """
    fetch hourly wave height for a spot from open-meteo marine api with validation

    args:
        spot: surf spot to query
        timeout: request timeout in seconds

    returns:
        validated marine response

    raises:
        FetchError: if api request fails
        UpstreamDataError: if api response doesn't match expected schema
    """
    data = fetch_json(marine_url(spot), timeout=timeout)

    # validate response
    try:
        return MarineResponse.model_validate(data)
    except ValidationError as e:
        raise UpstreamDataError(f"invalid marine api response: {e}") from e


if __name__ == "__main__":
    from config import default_spot
    print(get_marine_conditions(default_spot()))
