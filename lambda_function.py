# lambda_function.py
import logging
import sys

from config import LOG_LEVEL, default_spot
from models import SkillRequest
from skill.dispatcher import build_skill

FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
logging.basicConfig(level=LOG_LEVEL, format=FORMAT)
logger = logging.getLogger(__name__)

skill = build_skill(default_spot())


def lambda_handler(event: dict, context=None) -> dict:
    """entry point for the voice platform: event envelope in, response envelope out"""
    request = SkillRequest.from_envelope(event)
    logger.info("request %s intent=%s", request.request_type, request.intent_name)
    return skill.dispatch(request).to_envelope()


if __name__ == "__main__":
    # example: python lambda_function.py GetForecastIntent
    intent_name = sys.argv[1] if len(sys.argv) > 1 else "GetSurfReportIntent"
    if intent_name == "LaunchRequest":
        event = {"request": {"type": "LaunchRequest"}}
    else:
        event = {"request": {"type": "IntentRequest", "intent": {"name": intent_name}}}
    reply = lambda_handler(event)
    print(reply["response"].get("outputSpeech", {}).get("text", ""))
