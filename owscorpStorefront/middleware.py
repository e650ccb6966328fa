"""Custom middleware for the OWSCORP storefront."""

from __future__ import annotations

import logging
from typing import Callable

from django.http import JsonResponse

from infrastructure.container import ServiceContainer
from storefront.context import AppContext
from storefront.services import ErrorCodes

logger = logging.getLogger(__name__)


def recovery_response() -> JsonResponse:
    """500 body telling the client to reload."""
    return JsonResponse(
        {
            "error": ErrorCodes.INTERNAL_ERROR,
            "detail": "Something went wrong.",
            "recovery": {"action": "reload", "label": "Refresh Page"},
        },
        status=500,
    )


class StorefrontContextMiddleware:
    """Attach a per-request :class:`AppContext` as ``request.storefront``.

    The infrastructure container is created once per process and shared by all
    requests; the context itself (session gate, cart, notifications, navigator)
    is built from the browser session for each request and closed afterwards.
    Must run after ``SessionMiddleware``. A failure while building the context
    gets the same recovery response as a failing view.
    """

    def __init__(self, get_response: Callable):
        self.get_response = get_response
        self.container = ServiceContainer()

    def __call__(self, request):
        try:
            request.storefront = AppContext.build(self.container, request.session)
        except Exception as e:
            logger.exception(f"Could not build storefront context for {request.method} {request.path}: {e}")
            return recovery_response()
        try:
            return self.get_response(request)
        finally:
            request.storefront.close()


class ErrorBoundaryMiddleware:
    """Turn unexpected view failures into a JSON error with a recovery action.

    Handled failures never reach this point; anything that does is logged with
    its traceback and the client is told to reload.
    """

    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        logger.exception(f"Unhandled error on {request.method} {request.path}: {exception}")
        return recovery_response()
