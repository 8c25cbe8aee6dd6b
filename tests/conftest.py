import pytest
import requests

from models import SpotConfig


class FakeResponse:
    """stands in for requests.Response in the api clients"""

    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        if self.text is not None:
            raise ValueError(f"not json: {self.text}")
        return self.payload


@pytest.fixture
def spot():
    return SpotConfig(name="Beit Yanai", latitude=32.38, longitude=34.86)


@pytest.fixture
def fake_http(monkeypatch):
    """
    route requests.get by url substring

    usage: fake_http({"marine-api": FakeResponse(...), "hourly=wind": requests.ConnectionError()})
    """
    calls = []

    def install(routes):
        def fake_get(url, **kwargs):
            calls.append((url, kwargs))
            for fragment, outcome in routes.items():
                if fragment in url:
                    if isinstance(outcome, Exception):
                        raise outcome
                    return outcome
            raise AssertionError(f"unexpected url {url}")

        monkeypatch.setattr(requests, "get", fake_get)
        return calls

    return install


def marine_payload(times, heights, utc_offset_seconds=0):
    return {
        "utc_offset_seconds": utc_offset_seconds,
        "timezone": "Asia/Jerusalem",
        "hourly": {"time": times, "wave_height": heights},
    }


def wind_payload(times, speeds, directions, utc_offset_seconds=0):
    return {
        "utc_offset_seconds": utc_offset_seconds,
        "timezone": "Asia/Jerusalem",
        "hourly": {
            "time": times,
            "wind_speed_10m": speeds,
            "wind_direction_10m": directions,
        },
    }


def forecast_payload(code=61, tmax=22, tmin=15, precip=40, wind=20):
    return {
        "utc_offset_seconds": 7200,
        "timezone": "Asia/Jerusalem",
        "daily": {
            "time": ["2024-01-01", "2024-01-02"],
            "weather_code": [code, 0],
            "temperature_2m_max": [tmax, 20],
            "temperature_2m_min": [tmin, 12],
            "precipitation_probability_max": [precip, 0],
            "wind_speed_10m_max": [wind, 8],
        },
    }
