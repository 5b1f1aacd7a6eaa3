"""Per-request access logging."""

import logging
import time

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """Logs method, path, status and duration of every request.

    Headers and bodies are never logged; they carry caller identity.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        duration_ms = (time.monotonic() - started) * 1000
        logger.info(
            "%s %s %s %.1fms",
            request.method,
            request.path,
            response.status_code,
            duration_ms,
        )
        return response
