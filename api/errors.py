"""
failure types raised by the fetch and conversion layers
"""


class ForecastUnavailable(Exception):
    """surf or weather data could not be produced for this request"""


class FetchError(ForecastUnavailable):
    """network failure, timeout or non-2xx status from an upstream api"""


class UpstreamDataError(ForecastUnavailable, ValueError):
    """upstream answered but the payload is missing, malformed or empty"""
