"""
HTTP handlers for the news app.

All handlers are read-only: they answer from the catalog held by
``NewsConfig`` and never modify it.
"""

from __future__ import annotations

from datetime import datetime, timezone
from functools import wraps

from django.apps import apps
from django.conf import settings
from django.core.exceptions import SuspiciousFileOperation
from django.http import Http404, JsonResponse
from django.views.static import serve

from . import __version__, responses
from .catalog import Catalog, isoformat_utc, parse_article_id


def get_catalog() -> Catalog:
    return apps.get_app_config('news').catalog


def get_only(view):
    """Answer anything but GET/HEAD with the route-not-found envelope."""

    @wraps(view)
    def wrapper(request, *args, **kwargs):
        if request.method not in ('GET', 'HEAD'):
            return responses.route_not_found()
        return view(request, *args, **kwargs)

    return wrapper


# =============================================================================
# API
# =============================================================================


@get_only
def article_list(request):
    catalog = get_catalog()
    return responses.success(
        [article.to_dict() for article in catalog],
        total=len(catalog),
    )


@get_only
def article_detail(request, article_id: str):
    article = get_catalog().get(parse_article_id(article_id))
    if article is None:
        return responses.error(responses.ARTICLE_NOT_FOUND, status=404)
    return responses.success(article.to_dict())


@get_only
def health(request):
    return JsonResponse({
        'status': 'healthy',
        'timestamp': isoformat_utc(datetime.now(timezone.utc)),
        'uptime': apps.get_app_config('news').uptime,
        'version': __version__,
    })


# =============================================================================
# Front-end
# =============================================================================


@get_only
def public_file(request, path: str = 'index.html'):
    """
    Serve a file from the public directory, or fall through to the
    route-not-found envelope when there is no such file or the path
    leaves the public directory.
    """
    try:
        return serve(request, path, document_root=settings.NEWS_PUBLIC_DIR)
    except (Http404, SuspiciousFileOperation):
        return responses.route_not_found()


# =============================================================================
# Fallbacks (wired as handler404 / handler500 in ``config.urls``)
# =============================================================================


def not_found(request, exception=None):
    return responses.route_not_found()


def server_error(request):
    return responses.internal_error()
