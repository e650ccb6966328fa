from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.decorators import api_view

from storefront.api.serializers import (
    CartSerializer,
    ErrorResponseSerializer,
    IdentitySerializer,
    NavigateRequestSerializer,
)
from storefront.domain.navigation import page_from_dict, page_to_dict

from .common import get_context, storefront_response


@extend_schema(
    operation_id="storefront_session",
    summary="Current storefront session",
    description="""
    **What it returns:**
    - Session state (`resolving`, `anonymous`, `authenticated`) and the signed-in identity
    - Cart summary
    - Live notification and the page to show
    """,
    tags=["Storefront - Session"],
)
@api_view(["GET"])
def session_state(request):
    ctx = get_context(request)
    identity = ctx.gate.identity
    return storefront_response(
        ctx,
        {
            "state": ctx.gate.state.value,
            "identity": IdentitySerializer(identity).data if identity else None,
            "cart": CartSerializer(ctx.cart.state).data,
        },
    )


@extend_schema(
    operation_id="storefront_navigate",
    summary="Request a view change",
    description="""
    **What it receives:**
    - `page`: page name (e.g. `home`, `developer`, `customer-dashboard`)
    - `params`: the page's typed parameters

    **What it returns:**
    - The requested page and the page actually shown after session checks
    """,
    request=NavigateRequestSerializer,
    responses={400: OpenApiResponse(response=ErrorResponseSerializer, description="Unknown page or parameters")},
    tags=["Storefront - Session"],
)
@api_view(["POST"])
def navigate(request):
    ctx = get_context(request)
    serializer = NavigateRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return storefront_response(ctx, {"errors": serializer.errors}, status.HTTP_400_BAD_REQUEST)

    try:
        page = page_from_dict(serializer.validated_data)
    except ValueError as e:
        return storefront_response(
            ctx, {"error": "validation_error", "detail": str(e)}, status.HTTP_400_BAD_REQUEST
        )

    ctx.navigator.navigate(page)
    return storefront_response(ctx, {"requested": page_to_dict(page)})


@extend_schema(operation_id="storefront_notification", summary="Live notification or dismiss it", tags=["Storefront - Session"])
@api_view(["GET", "DELETE"])
def notification(request):
    ctx = get_context(request)
    if request.method == "DELETE":
        ctx.notifications.dismiss()
    return storefront_response(ctx)
