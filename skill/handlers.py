"""
intent handlers, in dispatch order
"""

import logging
from typing import Callable, NamedTuple

from api.errors import ForecastUnavailable
from models import SkillRequest, SkillResponse
from services.forecast import ForecastService
from skill import speech

logger = logging.getLogger(__name__)

LAUNCH_REQUEST = "LaunchRequest"
INTENT_REQUEST = "IntentRequest"
SESSION_ENDED_REQUEST = "SessionEndedRequest"

SURF_REPORT_INTENT = "GetSurfReportIntent"
FORECAST_INTENT = "GetForecastIntent"
HELP_INTENT = "AMAZON.HelpIntent"
CANCEL_INTENT = "AMAZON.CancelIntent"
STOP_INTENT = "AMAZON.StopIntent"
FALLBACK_INTENT = "AMAZON.FallbackIntent"

KNOWN_INTENTS = frozenset({
    SURF_REPORT_INTENT,
    FORECAST_INTENT,
    HELP_INTENT,
    CANCEL_INTENT,
    STOP_INTENT,
    FALLBACK_INTENT,
})


class Route(NamedTuple):
    """a predicate and the handler it guards"""
    name: str
    can_handle: Callable[[SkillRequest], bool]
    handle: Callable[[SkillRequest, ForecastService], SkillResponse]


def is_intent(request: SkillRequest, *names: str) -> bool:
    return request.request_type == INTENT_REQUEST and request.intent_name in names


def handle_launch(request: SkillRequest, service: ForecastService) -> SkillResponse:
    return SkillResponse.say(speech.welcome(service.spot.name), reprompt=speech.LAUNCH_REPROMPT)


def handle_surf_report(request: SkillRequest, service: ForecastService) -> SkillResponse:
    try:
        conditions = service.current_conditions()
    except ForecastUnavailable as e:
        logger.error("error fetching surf data: %s", e)
        return SkillResponse.say(speech.apology_for(e))
    return SkillResponse.say(speech.format_current_conditions(service.spot.name, conditions))


def handle_forecast(request: SkillRequest, service: ForecastService) -> SkillResponse:
    try:
        forecast = service.todays_forecast()
    except ForecastUnavailable as e:
        logger.error("error fetching forecast data: %s", e)
        return SkillResponse.say(speech.apology_for(e))
    return SkillResponse.say(speech.format_todays_forecast(service.spot.name, forecast))


def handle_help(request: SkillRequest, service: ForecastService) -> SkillResponse:
    text = speech.help_text(service.spot.name)
    return SkillResponse.say(text, reprompt=text)


def handle_cancel_stop(request: SkillRequest, service: ForecastService) -> SkillResponse:
    return SkillResponse.say(speech.GOODBYE)


def handle_fallback(request: SkillRequest, service: ForecastService) -> SkillResponse:
    return SkillResponse.say(speech.FALLBACK, reprompt=speech.FALLBACK)


def handle_session_ended(request: SkillRequest, service: ForecastService) -> SkillResponse:
    logger.info("session ended: %s", request.model_dump())
    return SkillResponse()


def handle_intent_reflector(request: SkillRequest, service: ForecastService) -> SkillResponse:
    return SkillResponse.say(speech.reflect(request.intent_name or "an unnamed intent"))


def handle_unhandled(request: SkillRequest, service: ForecastService) -> SkillResponse:
    logger.warning("no handler for request type %r", request.request_type)
    return SkillResponse.say(speech.GENERIC_APOLOGY, reprompt=speech.GENERIC_APOLOGY)


def always(request: SkillRequest) -> bool:
    return True


HANDLERS: tuple[Route, ...] = (
    Route("launch", lambda r: r.request_type == LAUNCH_REQUEST, handle_launch),
    Route("surf_report", lambda r: is_intent(r, SURF_REPORT_INTENT), handle_surf_report),
    Route("forecast", lambda r: is_intent(r, FORECAST_INTENT), handle_forecast),
    Route("help", lambda r: is_intent(r, HELP_INTENT), handle_help),
    Route("cancel_stop", lambda r: is_intent(r, CANCEL_INTENT, STOP_INTENT), handle_cancel_stop),
    Route("fallback", lambda r: is_intent(r, FALLBACK_INTENT), handle_fallback),
    Route("session_ended", lambda r: r.request_type == SESSION_ENDED_REQUEST, handle_session_ended),
    Route(
        "intent_reflector",
        lambda r: r.request_type == INTENT_REQUEST and r.intent_name not in KNOWN_INTENTS,
        handle_intent_reflector,
    ),
    Route("unhandled", always, handle_unhandled),
)
