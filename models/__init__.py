"""
pydantic models for the surf report skill: spot config, api payloads, resolved values
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from datetime import datetime


class SpotConfig(BaseModel):
    """fixed surf spot the skill reports on"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="spoken spot name")
    latitude: float = Field(ge=-90, le=90, description="latitude coordinate")
    longitude: float = Field(ge=-180, le=180, description="longitude coordinate")


def _check_parallel(series: BaseModel) -> BaseModel:
    """every array in a series must line up with its time axis"""
    expected = len(series.time)
    for name, values in series:
        if len(values) != expected:
            raise ValueError(
                f"series length mismatch: {name} has {len(values)} entries, "
                f"time has {expected}"
            )
    return series


# api response validation models
class MarineHourly(BaseModel):
    """validation model for marine api hourly response"""
    time: list[str] = Field(min_length=1)
    wave_height: list[Optional[float]]

    @model_validator(mode='after')
    def validate_lengths(self):
        return _check_parallel(self)


class WindHourly(BaseModel):
    """validation model for weather api hourly wind response"""
    time: list[str] = Field(min_length=1)
    wind_speed_10m: list[Optional[float]]
    wind_direction_10m: list[Optional[float]]

    @model_validator(mode='after')
    def validate_lengths(self):
        return _check_parallel(self)


class ForecastDaily(BaseModel):
    """validation model for weather api daily response"""
    time: list[str] = Field(min_length=1)
    weather_code: list[Optional[int]]
    temperature_2m_max: list[Optional[float]]
    temperature_2m_min: list[Optional[float]]
    precipitation_probability_max: list[Optional[float]]
    wind_speed_10m_max: list[Optional[float]]

    @model_validator(mode='after')
    def validate_lengths(self):
        return _check_parallel(self)


class MarineResponse(BaseModel):
    """validation model for marine api response"""
    hourly: MarineHourly
    utc_offset_seconds: int
    timezone: Optional[str] = None


class WindResponse(BaseModel):
    """validation model for weather api response (hourly wind)"""
    hourly: WindHourly
    utc_offset_seconds: int
    timezone: Optional[str] = None


class ForecastResponse(BaseModel):
    """validation model for weather api response (daily forecast)"""
    daily: ForecastDaily
    utc_offset_seconds: int
    timezone: Optional[str] = None


class CurrentConditions(BaseModel):
    """surf conditions for the hour closest to now"""
    timestamp: str = Field(description="matched hour in iso format")
    wave_height_m: float = Field(ge=0, le=30, description="significant wave height in meters")
    wind_speed_knots: float = Field(ge=0, le=200, description="wind speed in knots")
    wind_direction: str = Field(min_length=1, description="16-point cardinal label")

    @field_validator("timestamp")
    @classmethod
    def validate_timestamp(cls, v: str) -> str:
        """validate timestamp is in iso format"""
        try:
            datetime.fromisoformat(v.replace('Z', '+00:00'))
        except ValueError:
            raise ValueError(f"invalid iso format timestamp: {v}")
        return v


class TodayForecast(BaseModel):
    """first entry of the daily forecast"""
    date: str = Field(description="date in yyyy-mm-dd format")
    condition: str = Field(min_length=1, description="weather code description")
    temperature_max_c: float = Field(ge=-50, le=60, description="maximum temperature in celsius")
    temperature_min_c: float = Field(ge=-50, le=60, description="minimum temperature in celsius")
    precipitation_probability: float = Field(ge=0, le=100, description="max precipitation probability in percent")
    wind_speed_max_knots: float = Field(ge=0, le=200, description="maximum wind speed in knots")

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        """validate date is in yyyy-mm-dd format"""
        try:
            datetime.strptime(v, "%Y-%m-%d")
        except ValueError:
            raise ValueError(f"invalid date format: {v}, expected yyyy-mm-dd")
        return v

    @model_validator(mode='after')
    def validate_temperature_range(self):
        """validate min temperature is less than max"""
        if self.temperature_min_c > self.temperature_max_c:
            raise ValueError(
                f"min temperature ({self.temperature_min_c}) cannot be greater than "
                f"max temperature ({self.temperature_max_c})"
            )
        return self


# voice platform request/response
class SkillRequest(BaseModel):
    """the parts of an inbound skill event the dispatcher looks at"""
    request_type: str
    intent_name: Optional[str] = None
    session_id: Optional[str] = None

    @classmethod
    def from_envelope(cls, event: dict[str, Any]) -> "SkillRequest":
        """
        pull request type, intent name and session id out of a raw event

        args:
            event: alexa-style request envelope

        returns:
            parsed SkillRequest
        """
        request = event.get("request") or {}
        intent = request.get("intent") or {}
        session = event.get("session") or {}
        return cls(
            request_type=request.get("type", ""),
            intent_name=intent.get("name"),
            session_id=session.get("sessionId"),
        )


class SkillResponse(BaseModel):
    """spoken reply handed back to the voice platform"""
    speech: Optional[str] = None
    reprompt: Optional[str] = None
    should_end_session: Optional[bool] = None

    @classmethod
    def say(cls, speech: str, reprompt: Optional[str] = None) -> "SkillResponse":
        """speak, keeping the session open only when there is a reprompt"""
        return cls(speech=speech, reprompt=reprompt, should_end_session=reprompt is None)

    def to_envelope(self) -> dict[str, Any]:
        """render the alexa-style response envelope, omitting unset parts"""
        response: dict[str, Any] = {}
        if self.speech is not None:
            response["outputSpeech"] = {"type": "PlainText", "text": self.speech}
        if self.reprompt is not None:
            response["reprompt"] = {
                "outputSpeech": {"type": "PlainText", "text": self.reprompt}
            }
        if self.should_end_session is not None:
            response["shouldEndSession"] = self.should_end_session
        return {"version": "1.0", "response": response}


__all__ = [
    "SpotConfig",
    "MarineResponse",
    "WindResponse",
    "ForecastResponse",
    "CurrentConditions",
    "TodayForecast",
    "SkillRequest",
    "SkillResponse",
]
