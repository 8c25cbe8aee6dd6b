import pytest
import requests

from api import (
    FetchError,
    ForecastUnavailable,
    UpstreamDataError,
    get_daily_forecast,
    get_marine_conditions,
    get_wind_conditions,
)
from config import USER_AGENT, forecast_url, marine_url, weather_url
from conftest import FakeResponse, forecast_payload, marine_payload, wind_payload


def test_urls_match_open_meteo_templates(spot):
    assert marine_url(spot) == (
        "https://marine-api.open-meteo.com/v1/marine?latitude=32.38&longitude=34.86"
        "&hourly=wave_height&timezone=auto"
    )
    assert weather_url(spot) == (
        "https://api.open-meteo.com/v1/forecast?latitude=32.38&longitude=34.86"
        "&hourly=wind_speed_10m,wind_direction_10m&timezone=auto"
    )
    assert forecast_url(spot) == (
        "https://api.open-meteo.com/v1/forecast?latitude=32.38&longitude=34.86"
        "&daily=weather_code,temperature_2m_max,temperature_2m_min,"
        "precipitation_probability_max,wind_speed_10m_max&timezone=auto"
    )


def test_marine_fetch_parses_payload(spot, fake_http):
    response = FakeResponse(marine_payload(["2024-01-01T12:00"], [1.2], 7200))
    calls = fake_http({"marine-api": response})

    marine = get_marine_conditions(spot, timeout=3)

    assert marine.hourly.wave_height == [1.2]
    assert marine.utc_offset_seconds == 7200
    url, kwargs = calls[0]
    assert url == marine_url(spot)
    assert kwargs["timeout"] == 3
    assert kwargs["headers"]["User-Agent"] == USER_AGENT
    assert response.closed


def test_wind_fetch_parses_payload(spot, fake_http):
    fake_http({"hourly=wind": FakeResponse(wind_payload(["2024-01-01T12:00"], [10], [0]))})

    wind = get_wind_conditions(spot)

    assert wind.hourly.wind_speed_10m == [10.0]
    assert wind.hourly.wind_direction_10m == [0.0]


def test_daily_forecast_fetch_parses_payload(spot, fake_http):
    fake_http({"daily=": FakeResponse(forecast_payload())})

    forecast = get_daily_forecast(spot)

    assert forecast.daily.weather_code[0] == 61
    assert forecast.daily.time[0] == "2024-01-01"


def test_connection_error_becomes_fetch_error(spot, fake_http):
    fake_http({"marine-api": requests.ConnectionError("boom")})

    with pytest.raises(FetchError):
        get_marine_conditions(spot)


def test_timeout_becomes_fetch_error(spot, fake_http):
    fake_http({"hourly=wind": requests.Timeout("slow")})

    with pytest.raises(FetchError):
        get_wind_conditions(spot)


def test_http_error_status_becomes_fetch_error(spot, fake_http):
    response = FakeResponse({"error": True, "reason": "bad"}, status_code=500)
    fake_http({"daily=": response})

    with pytest.raises(FetchError):
        get_daily_forecast(spot)
    assert response.closed


def test_non_json_body_is_upstream_error(spot, fake_http):
    fake_http({"marine-api": FakeResponse(text="<html>oops</html>")})

    with pytest.raises(UpstreamDataError):
        get_marine_conditions(spot)


def test_missing_fields_is_upstream_error(spot, fake_http):
    fake_http({"hourly=wind": FakeResponse({"hourly": {"time": ["2024-01-01T12:00"]}})})

    with pytest.raises(UpstreamDataError):
        get_wind_conditions(spot)


def test_empty_series_is_upstream_error(spot, fake_http):
    fake_http({"marine-api": FakeResponse(marine_payload([], []))})

    with pytest.raises(UpstreamDataError):
        get_marine_conditions(spot)


def test_ragged_series_is_upstream_error(spot, fake_http):
    payload = marine_payload(["2024-01-01T12:00", "2024-01-01T13:00"], [1.2])
    fake_http({"marine-api": FakeResponse(payload)})

    with pytest.raises(UpstreamDataError):
        get_marine_conditions(spot)


def test_all_failures_share_one_base():
    assert issubclass(FetchError, ForecastUnavailable)
    assert issubclass(UpstreamDataError, ForecastUnavailable)
