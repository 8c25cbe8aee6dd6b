"""
shared http helper for the open-meteo clients
"""

import logging
from typing import Any

import requests

from api.errors import FetchError, UpstreamDataError
from config import HTTP_TIMEOUT_SECONDS, USER_AGENT

logger = logging.getLogger(__name__)


def fetch_json(url: str, timeout: float = HTTP_TIMEOUT_SECONDS) -> Any:
    """
    GET a url and decode its json body

    args:
        url: fully-qualified request url
        timeout: seconds before giving up on connect or read

    returns:
        decoded json payload

    raises:
        FetchError: if the request fails or returns a non-2xx status
        UpstreamDataError: if the body is not valid json
    """
    logger.debug("GET %s", url)
    try:
        with requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT}) as response:
            response.raise_for_status()
            try:
                return response.json()
            except ValueError as e:
                raise UpstreamDataError(f"non-json response from {url}: {e}") from e
    except requests.RequestException as e:
        logger.debug("request to %s failed: %s", url, e)
        raise FetchError(f"request to {url} failed: {e}") from e
