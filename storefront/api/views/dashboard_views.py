"""
Signed-in endpoints: buyer and seller dashboards, listing management and the
seller's public profile settings.
"""

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import api_view
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser

from infrastructure.auth import Role
from storefront.api.fallback import services_or_sample
from storefront.api.serializers import (
    DeveloperSettingsSerializer,
    ErrorResponseSerializer,
    ListingRequestSerializer,
    ServiceSerializer,
)
from storefront.domain.navigation import AuthPage
from storefront.domain.sample_data import DEMO_DEVELOPER_ID
from storefront.services import ErrorCodes

from .common import error_response, get_context, storefront_response

logger = logging.getLogger(__name__)

DEVELOPER_FALLBACK_MESSAGE = "Could not fetch your services, showing demo data."


def _require_identity(ctx, message="You must be logged in to view your dashboard."):
    """Return ``(identity, None)`` or ``(None, response)`` after sending the visitor to sign in."""
    identity = ctx.gate.identity
    if identity is not None:
        return identity, None
    ctx.notifications.error(message)
    ctx.navigator.navigate(AuthPage("login"))
    return None, storefront_response(
        ctx, {"error": ErrorCodes.NOT_AUTHENTICATED, "detail": message}, status.HTTP_401_UNAUTHORIZED
    )


def _require_seller(ctx):
    identity, denied = _require_identity(ctx)
    if denied is not None:
        return None, denied
    if identity.role is not Role.SELLER:
        return None, storefront_response(
            ctx,
            {"error": ErrorCodes.PERMISSION_DENIED, "detail": "Only developers can access this page."},
            status.HTTP_403_FORBIDDEN,
        )
    return identity, None


@extend_schema(
    operation_id="dashboard_customer",
    summary="Buyer dashboard",
    description="Services the signed-in visitor has purchased, one entry per service.",
    responses={
        200: ServiceSerializer(many=True),
        401: OpenApiResponse(response=ErrorResponseSerializer, description="Not signed in"),
        502: OpenApiResponse(response=ErrorResponseSerializer, description="Purchase history unavailable"),
    },
    tags=["Storefront - Dashboard"],
)
@api_view(["GET"])
def customer_dashboard(request):
    ctx = get_context(request)
    identity, denied = _require_identity(ctx)
    if denied is not None:
        return denied

    result = ctx.dashboard.purchased_services(identity)
    if not result.ok:
        logger.warning(f"Purchase history read failed for {identity.user_id}: {result.error_detail}")
        ctx.notifications.error("Could not fetch purchase history.")
        return error_response(ctx, result)
    return storefront_response(ctx, {"purchased": ServiceSerializer(result.value, many=True).data})


@extend_schema(
    operation_id="dashboard_developer",
    summary="Seller dashboard",
    description="""
    **What it returns:**
    - The seller's own services (demo services when they cannot be read)
    - Sales analytics: revenue per month and per category, listed services, average rating
    """,
    responses={
        401: OpenApiResponse(response=ErrorResponseSerializer, description="Not signed in"),
        403: OpenApiResponse(response=ErrorResponseSerializer, description="Not a seller"),
    },
    tags=["Storefront - Dashboard"],
)
@api_view(["GET"])
def developer_dashboard(request):
    ctx = get_context(request)
    identity, denied = _require_seller(ctx)
    if denied is not None:
        return denied

    services, sample = services_or_sample(
        ctx.dashboard.developer_services(identity),
        ctx.notifications,
        developer_id=DEMO_DEVELOPER_ID,
        message=DEVELOPER_FALLBACK_MESSAGE,
    )
    return storefront_response(
        ctx,
        {
            "services": ServiceSerializer(services, many=True).data,
            "analytics": ctx.dashboard.analytics(identity.user_id, services),
            "sample": sample,
        },
    )


@extend_schema(
    operation_id="dashboard_delete_service",
    summary="Delete one of the seller's services",
    description="Removes the service's images, then the service. Image removal failures are reported but do not stop the delete.",
    responses={
        404: OpenApiResponse(response=ErrorResponseSerializer, description="Service not found"),
        502: OpenApiResponse(response=ErrorResponseSerializer, description="Delete failed"),
    },
    tags=["Storefront - Dashboard"],
)
@api_view(["DELETE"])
def delete_service(request, service_id):
    ctx = get_context(request)
    identity, denied = _require_seller(ctx)
    if denied is not None:
        return denied

    result = ctx.dashboard.delete_service(identity, service_id)
    if not result.ok:
        return error_response(ctx, result, notify=True)

    deleted = result.value
    message = f'"{deleted.title}" has been deleted.'
    if deleted.image_warning:
        ctx.notifications.error(f"{message} {deleted.image_warning}")
    else:
        ctx.notifications.success(message)
    return storefront_response(ctx, {"deleted": service_id, "image_warning": deleted.image_warning})


class ListingViewSet(viewsets.ViewSet):
    """Create and edit the seller's listings. Accepts multipart forms with `images` files."""

    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def _save(self, request, service_id=None):
        ctx = get_context(request)
        identity, denied = _require_identity(ctx, "Please sign in to manage your services.")
        if denied is not None:
            return denied

        serializer = ListingRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        payload = dict(serializer.validated_data)
        images = payload.pop("images", [])

        result = ctx.listings.save_listing(identity, payload, service_id=service_id, images=images)
        if not result.ok:
            return error_response(ctx, result, notify=True)

        verb = "updated" if service_id else "created"
        ctx.notifications.success(f'Service "{result.value.title}" {verb} successfully!')
        return storefront_response(
            ctx,
            {"service": ServiceSerializer(result.value).data},
            status.HTTP_200_OK if service_id else status.HTTP_201_CREATED,
        )

    @extend_schema(
        operation_id="listing_create",
        summary="Publish a new service",
        description="""
        **What it receives:**
        - `title`, `price` (non-negative), `category`, `description`
        - `images`: optional image files; the first becomes the cover
        """,
        request={"multipart/form-data": ListingRequestSerializer, "application/json": ListingRequestSerializer},
        responses={
            201: ServiceSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid listing"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not a seller"),
        },
        tags=["Storefront - Listings"],
    )
    def create(self, request):
        return self._save(request)

    @extend_schema(
        operation_id="listing_update",
        summary="Edit one of the seller's services",
        request={"multipart/form-data": ListingRequestSerializer, "application/json": ListingRequestSerializer},
        responses={
            200: ServiceSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Service not found"),
        },
        tags=["Storefront - Listings"],
    )
    def update(self, request, pk=None):
        return self._save(request, service_id=pk)


class DeveloperSettingsViewSet(viewsets.ViewSet):
    """The seller's public profile settings."""

    @extend_schema(
        operation_id="developer_settings_get",
        summary="Current profile settings",
        responses={200: DeveloperSettingsSerializer},
        tags=["Storefront - Dashboard"],
    )
    def retrieve(self, request):
        ctx = get_context(request)
        identity, denied = _require_seller(ctx)
        if denied is not None:
            return denied
        return storefront_response(ctx, {"settings": ctx.profiles.settings_form(identity)})

    @extend_schema(
        operation_id="developer_settings_update",
        summary="Update profile settings",
        request=DeveloperSettingsSerializer,
        responses={
            200: DeveloperSettingsSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Full name and email are required"),
        },
        tags=["Storefront - Dashboard"],
    )
    def update(self, request):
        ctx = get_context(request)
        identity, denied = _require_identity(ctx, "Please sign in to update your profile.")
        if denied is not None:
            return denied

        serializer = DeveloperSettingsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = ctx.profiles.update_settings(identity, serializer.validated_data)
        if not result.ok:
            return error_response(ctx, result, notify=True)

        ctx.notifications.success("Profile updated successfully!")
        return storefront_response(ctx, {"settings": ctx.profiles.settings_form(identity)})
