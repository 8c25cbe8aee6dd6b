"""
spoken text for the skill: canned phrases and the two report templates
"""

from api.errors import ForecastUnavailable
from models import CurrentConditions, TodayForecast

SURF_REPORT_APOLOGY = (
    "Sorry, I was unable to retrieve the surf report right now. Please try again later."
)
GENERIC_APOLOGY = "Sorry, I had trouble doing what you asked. Please try again."
GOODBYE = "Goodbye! Enjoy the waves!"
FALLBACK = "Sorry, I don't know about that. Try saying \"surf report\"."
LAUNCH_REPROMPT = "Say \"surf report\" to hear the latest conditions."


def welcome(spot_name: str) -> str:
    return (
        f"Welcome to the {spot_name} surf report! You can say \"get the surf report\" "
        f"to hear current conditions, or \"get the forecast\" for today's weather."
    )


def help_text(spot_name: str) -> str:
    return (
        f"You can say \"get the surf report\" to hear the current wave height and wind "
        f"conditions at {spot_name}, or \"get the forecast\" for today's weather."
    )


def reflect(intent_name: str) -> str:
    return f"You just triggered {intent_name}"


def _number(value: float) -> str:
    # 22.0 -> "22", 1.25 -> "1.25"
    return f"{value:g}"


def format_current_conditions(spot_name: str, conditions: CurrentConditions) -> str:
    """sentence for the surf report intent"""
    return (
        f"Currently at {spot_name}, the waves are {_number(conditions.wave_height_m)} meters high "
        f"and the wind is blowing at {conditions.wind_speed_knots:.1f} knots, "
        f"direction {conditions.wind_direction}."
    )


def format_todays_forecast(spot_name: str, forecast: TodayForecast) -> str:
    """sentence for the forecast intent"""
    return (
        f"Today's forecast for {spot_name}: {forecast.condition}, "
        f"with a high of {_number(forecast.temperature_max_c)} degrees and "
        f"a low of {_number(forecast.temperature_min_c)} degrees Celsius. "
        f"There is a {_number(forecast.precipitation_probability)}% chance of precipitation "
        f"and winds up to {forecast.wind_speed_max_knots:.1f} knots."
    )


def apology_for(error: Exception) -> str:
    """map a failure to the phrase the user hears"""
    if isinstance(error, ForecastUnavailable):
        return SURF_REPORT_APOLOGY
    return GENERIC_APOLOGY
