from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import api_view

from storefront.api.fallback import sample_services
from storefront.api.serializers import (
    AddToCartRequestSerializer,
    CartSerializer,
    ErrorResponseSerializer,
    PurchaseConfirmationSerializer,
    UpdateQuantityRequestSerializer,
)
from storefront.domain.navigation import page_to_dict
from storefront.services import ErrorCodes

from .common import error_response, get_context, storefront_response


class CartViewSet(viewsets.ViewSet):
    """Cart commands for the browser session. The cart lives in the session, no sign-in required."""

    def cart_response(self, ctx, status_code=status.HTTP_200_OK):
        return storefront_response(ctx, {"cart": CartSerializer(ctx.cart.state).data}, status_code)

    @extend_schema(
        operation_id="cart_get",
        summary="Get the session's cart",
        description="""
        **What it returns:**
        - Cart lines in the order they were added
        - `itemCount` and `subtotal`
        """,
        tags=["Storefront - Cart"],
    )
    def list(self, request):
        return self.cart_response(get_context(request))

    @extend_schema(
        operation_id="cart_add_item",
        summary="Add a catalog service to the cart",
        description="""
        **What it receives:**
        - `item_id`: Catalog service id

        **What it returns:**
        - Updated cart. Adding an item already in the cart increments its quantity;
          the price captured on first add is kept.
        """,
        request=AddToCartRequestSerializer,
        responses={
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Service not found"),
        },
        tags=["Storefront - Cart"],
    )
    def add_item(self, request):
        ctx = get_context(request)
        serializer = AddToCartRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return storefront_response(ctx, {"errors": serializer.errors}, status.HTTP_400_BAD_REQUEST)

        item_id = serializer.validated_data["item_id"]
        result = ctx.catalog.get_service(item_id)
        if not result.ok and result.error == ErrorCodes.REMOTE_READ_ERROR:
            # Catalog pages were served from sample data, so look the item up there
            service = next((s for s in sample_services() if s.id == item_id), None)
        else:
            service = result.value if result.ok else None

        if service is None:
            return storefront_response(
                ctx,
                {"error": ErrorCodes.ITEM_NOT_FOUND, "detail": f"Service {item_id} does not exist"},
                status.HTTP_404_NOT_FOUND,
            )

        ctx.cart.add_item(service)
        return self.cart_response(ctx)

    @extend_schema(
        operation_id="cart_update_item",
        summary="Set a line's quantity",
        description="""
        **What it receives:**
        - `quantity` (integer): New quantity; 0 or less removes the line

        Unknown items are left alone.
        """,
        request=UpdateQuantityRequestSerializer,
        tags=["Storefront - Cart"],
    )
    def update_item(self, request, item_id=None):
        ctx = get_context(request)
        serializer = UpdateQuantityRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return storefront_response(ctx, {"errors": serializer.errors}, status.HTTP_400_BAD_REQUEST)

        ctx.cart.set_quantity(item_id, serializer.validated_data["quantity"])
        return self.cart_response(ctx)

    @extend_schema(operation_id="cart_remove_item", summary="Remove a line from the cart", tags=["Storefront - Cart"])
    def remove_item(self, request, item_id=None):
        ctx = get_context(request)
        ctx.cart.remove_item(item_id)
        return self.cart_response(ctx)

    @extend_schema(operation_id="cart_clear", summary="Empty the cart", tags=["Storefront - Cart"])
    def clear(self, request):
        ctx = get_context(request)
        ctx.cart.clear()
        return self.cart_response(ctx)


@extend_schema(
    operation_id="cart_checkout",
    summary="Purchase everything in the cart",
    description="""
    **What it does:**
    - Submits one order line per cart line in a single batch
    - On success the cart is emptied and the buyer dashboard is shown
    - On failure the cart is left unchanged

    **Errors:**
    - 401 when nobody is signed in (the sign-in page is shown)
    - 400 when the cart is empty
    - 409 while another checkout for the same account is running
    - 502 when the order submission fails
    """,
    responses={
        201: OpenApiResponse(response=PurchaseConfirmationSerializer, description="Purchase completed"),
        401: OpenApiResponse(response=ErrorResponseSerializer, description="Not signed in"),
        409: OpenApiResponse(response=ErrorResponseSerializer, description="Checkout already in progress"),
        502: OpenApiResponse(response=ErrorResponseSerializer, description="Order submission failed"),
    },
    tags=["Storefront - Cart"],
)
@api_view(["POST"])
def checkout(request):
    ctx = get_context(request)
    result = ctx.purchase()
    if not result.ok:
        response = error_response(ctx, result)
        response.data["cart"] = CartSerializer(ctx.cart.state).data
        return response

    confirmation = result.value
    return storefront_response(
        ctx,
        {
            "confirmation": PurchaseConfirmationSerializer(confirmation).data,
            "redirect": page_to_dict(confirmation.redirect),
            "cart": CartSerializer(ctx.cart.state).data,
        },
        status.HTTP_201_CREATED,
    )
