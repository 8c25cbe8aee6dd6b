"""
request dispatch with a top-level error handler
"""

import logging
from typing import Optional, Sequence

from config import HTTP_TIMEOUT_SECONDS
from models import SkillRequest, SkillResponse, SpotConfig
from services.forecast import ForecastService
from skill import speech
from skill.handlers import HANDLERS, Route, always

logger = logging.getLogger(__name__)


class SkillDispatcher:
    """routes each request to the first handler whose predicate matches"""

    def __init__(self, service: ForecastService, handlers: Sequence[Route] = HANDLERS):
        if not handlers or handlers[-1].can_handle is not always:
            raise ValueError("handler list must end with the always-true catch-all")
        self.service = service
        self.handlers = tuple(handlers)

    def select(self, request: SkillRequest) -> Route:
        for route in self.handlers:
            if route.can_handle(request):
                return route
        # unreachable while the last route is the catch-all
        raise LookupError(f"no handler for {request.request_type}")

    def dispatch(self, request: SkillRequest) -> SkillResponse:
        """run the matching handler; any failure becomes a spoken apology"""
        try:
            route = self.select(request)
            logger.debug("dispatching %s/%s to %s", request.request_type, request.intent_name, route.name)
            return route.handle(request, self.service)
        except Exception as e:
            logger.exception("error handled while dispatching %s: %s", request.request_type, e)
            text = speech.apology_for(e)
            return SkillResponse.say(text, reprompt=text)


def build_skill(spot: SpotConfig, timeout: Optional[float] = None) -> SkillDispatcher:
    """wire a dispatcher for one spot"""
    service = ForecastService(spot, timeout=HTTP_TIMEOUT_SECONDS if timeout is None else timeout)
    return SkillDispatcher(service)
