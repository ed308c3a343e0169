"""
Request logging middleware for HeBrews
"""
import logging
import time

from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(MiddlewareMixin):
    """
    Logs one line per API request with method, path, status and duration.
    Server errors are logged at ERROR level, client errors at WARNING.
    """

    def process_request(self, request):
        request._started_at = time.monotonic()

    def process_response(self, request, response):
        if not request.path.startswith('/api/'):
            return response

        started_at = getattr(request, '_started_at', None)
        elapsed_ms = (time.monotonic() - started_at) * 1000 if started_at else 0.0
        user = getattr(request, 'user', None)
        username = user.get_username() if user is not None and user.is_authenticated else 'anonymous'

        if response.status_code >= 500:
            log = logger.error
        elif response.status_code >= 400:
            log = logger.warning
        else:
            log = logger.info
        log(
            "%s %s -> %s (%.1f ms, user=%s)",
            request.method, request.path, response.status_code, elapsed_ms, username,
        )
        return response
