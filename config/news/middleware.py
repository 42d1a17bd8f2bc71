"""
Top-level error boundary for the news app.

Any exception that escapes a view is logged as a single line (CR/LF
stripped) and turned into the generic 500 envelope.  The exception text
itself never reaches the client.
"""

from __future__ import annotations

import logging
import re

from django.http import Http404

from .responses import internal_error, route_not_found

logger = logging.getLogger('news')

_LINE_BREAKS_RE = re.compile(r'[\r\n]')


def sanitize_error_message(exc: BaseException) -> str:
    """Return ``str(exc)`` without CR/LF characters, or a placeholder."""
    message = str(exc)
    if not message:
        return 'Unknown error'
    return _LINE_BREAKS_RE.sub('', message)


class JsonErrorMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, Http404):
            return route_not_found()
        logger.error("Server error: %s", sanitize_error_message(exception))
        return internal_error()
