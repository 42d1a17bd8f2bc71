"""
JSON envelope helpers.

Every API response is wrapped as ``{"status": ..., "data": ...}`` on success
or ``{"status": "error", "message": ...}`` on failure.
"""

from django.http import JsonResponse

ROUTE_NOT_FOUND = "Route not found"
ARTICLE_NOT_FOUND = "Article not found"
INTERNAL_ERROR = "Internal server error"


def success(data, **extra) -> JsonResponse:
    return JsonResponse({'status': 'success', 'data': data, **extra})


def error(message: str, status: int) -> JsonResponse:
    return JsonResponse({'status': 'error', 'message': message}, status=status)


def route_not_found() -> JsonResponse:
    return error(ROUTE_NOT_FOUND, status=404)


def internal_error() -> JsonResponse:
    return error(INTERNAL_ERROR, status=500)
