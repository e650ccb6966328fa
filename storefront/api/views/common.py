"""Response helpers shared by the storefront views."""

from typing import Any, Dict, Optional

from rest_framework import status
from rest_framework.response import Response

from storefront.context import AppContext
from storefront.domain.navigation import page_to_dict
from storefront.services import ErrorCodes, ServiceResult

ERROR_STATUS = {
    ErrorCodes.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.CART_EMPTY: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.AUTH_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.NOT_AUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCodes.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCodes.REVIEW_NOT_ALLOWED: status.HTTP_403_FORBIDDEN,
    ErrorCodes.SERVICE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.ITEM_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.CHECKOUT_IN_PROGRESS: status.HTTP_409_CONFLICT,
    ErrorCodes.REMOTE_READ_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorCodes.REMOTE_WRITE_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorCodes.CHAT_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorCodes.CHAT_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def get_context(request) -> AppContext:
    return request.storefront


def storefront_response(
    ctx: AppContext, payload: Optional[Dict[str, Any]] = None, status_code: int = status.HTTP_200_OK
) -> Response:
    """Attach the live notification and the page to show to every response body."""
    notification = ctx.notifications.current
    body = dict(payload or {})
    body["notification"] = notification.to_dict() if notification else None
    body["view"] = page_to_dict(ctx.navigator.current)
    return Response(body, status=status_code)


def error_response(ctx: AppContext, result: ServiceResult, notify: bool = False) -> Response:
    if notify:
        ctx.notifications.error(result.error_detail)
    return storefront_response(
        ctx,
        {"error": result.error, "detail": result.error_detail},
        ERROR_STATUS.get(result.error, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def page_block(page) -> Dict[str, Any]:
    return {
        "page": page.page,
        "num_pages": page.num_pages,
        "count": page.count,
        "has_next": page.has_next,
        "has_previous": page.has_previous,
    }
