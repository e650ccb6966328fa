"""
Catalog browsing endpoints: service search, categories, the developer
directory and public developer profiles with their reviews.

Failed remote reads fall back to the bundled sample data with a notification.
"""

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.decorators import api_view

from storefront.api.fallback import reviews_or_sample, services_or_sample
from storefront.api.serializers import (
    CategorySerializer,
    DeveloperSummarySerializer,
    ErrorResponseSerializer,
    ReviewRequestSerializer,
    ReviewSerializer,
    ServiceSearchQuerySerializer,
    ServiceSerializer,
)
from storefront.domain.records import CATEGORY_NAMES
from storefront.domain.sample_data import CATEGORIES
from storefront.services import ErrorCodes, ServiceFilters
from storefront.services.catalog_service import (
    developer_directory,
    price_range,
    search_services,
    services_in_category,
)
from storefront.services.review_service import average_rating

from .common import error_response, get_context, page_block, storefront_response

logger = logging.getLogger(__name__)

FILTER_PARAMETERS = [
    OpenApiParameter("price_min", OpenApiTypes.STR, description="Minimum price; ignored when not a number"),
    OpenApiParameter("price_max", OpenApiTypes.STR, description="Maximum price; ignored when not a number"),
    OpenApiParameter("rating", OpenApiTypes.STR, description="Minimum rating; 0 means any"),
    OpenApiParameter("page", OpenApiTypes.INT, description="Page number, clamped to the available pages"),
]


def _query(request):
    serializer = ServiceSearchQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


def _services_page(ctx, services, page):
    current = ctx.catalog.page(services, page)
    return {"services": ServiceSerializer(current.items, many=True).data, "pagination": page_block(current)}


@extend_schema(
    operation_id="catalog_services",
    summary="Search the service catalog",
    description="""
    **What it receives:**
    - `q`: matches title, description or developer name (case-insensitive)
    - `categories`: comma separated category names; empty means all
    - Price, rating and page parameters

    **What it returns:**
    - One page of matching services and the pagination block
    - `sample`: true when the remote catalog could not be read
    """,
    parameters=[
        OpenApiParameter("q", OpenApiTypes.STR, description="Search text"),
        OpenApiParameter("categories", OpenApiTypes.STR, description="Comma separated category names"),
        *FILTER_PARAMETERS,
    ],
    tags=["Storefront - Catalog"],
)
@api_view(["GET"])
def service_list(request):
    ctx = get_context(request)
    query = _query(request)
    services, sample = services_or_sample(ctx.catalog.fetch_services(), ctx.notifications)

    matches = search_services(services, query["q"], ServiceFilters.from_params(query))
    return storefront_response(ctx, {**_services_page(ctx, matches, query["page"]), "query": query["q"], "sample": sample})


@extend_schema(
    operation_id="catalog_service_detail",
    summary="Get one service",
    responses={
        200: ServiceSerializer,
        404: OpenApiResponse(response=ErrorResponseSerializer, description="Service not found"),
        502: OpenApiResponse(response=ErrorResponseSerializer, description="Catalog unavailable"),
    },
    tags=["Storefront - Catalog"],
)
@api_view(["GET"])
def service_detail(request, service_id):
    ctx = get_context(request)
    result = ctx.catalog.get_service(service_id)
    if not result.ok:
        return error_response(ctx, result)
    return storefront_response(ctx, {"service": ServiceSerializer(result.value).data})


@extend_schema(
    operation_id="catalog_categories",
    summary="List categories",
    responses={200: CategorySerializer(many=True)},
    tags=["Storefront - Catalog"],
)
@api_view(["GET"])
def category_list(request):
    ctx = get_context(request)
    return storefront_response(ctx, {"categories": CategorySerializer(CATEGORIES, many=True).data})


@extend_schema(
    operation_id="catalog_category_services",
    summary="Services in one category",
    description="Category listing with the price and rating filters.",
    parameters=FILTER_PARAMETERS,
    responses={404: OpenApiResponse(response=ErrorResponseSerializer, description="Unknown category")},
    tags=["Storefront - Catalog"],
)
@api_view(["GET"])
def category_services(request, category_name):
    ctx = get_context(request)
    if category_name not in CATEGORY_NAMES:
        return storefront_response(
            ctx,
            {"error": ErrorCodes.VALIDATION_ERROR, "detail": f"Unknown category: {category_name}"},
            status.HTTP_404_NOT_FOUND,
        )

    query = _query(request)
    services, sample = services_or_sample(ctx.catalog.fetch_services(), ctx.notifications)
    matches = services_in_category(services, category_name, ServiceFilters.from_params(query))
    return storefront_response(
        ctx, {**_services_page(ctx, matches, query["page"]), "category": category_name, "sample": sample}
    )


@extend_schema(
    operation_id="catalog_developers",
    summary="Developer directory",
    description="One entry per developer with a verified flag, service count and categories.",
    responses={200: DeveloperSummarySerializer(many=True)},
    tags=["Storefront - Catalog"],
)
@api_view(["GET"])
def developer_list(request):
    ctx = get_context(request)
    services, sample = services_or_sample(ctx.catalog.fetch_services(), ctx.notifications)
    developers = developer_directory(services)
    return storefront_response(
        ctx, {"developers": DeveloperSummarySerializer(developers, many=True).data, "sample": sample}
    )


@extend_schema(
    operation_id="catalog_developer_profile",
    summary="Public developer profile",
    description="""
    **What it returns:**
    - The developer's services (paginated) and their price range
    - Bio, verified flag
    - Reviews newest first (paginated) and the average rating
    - `can_review`: whether the signed-in visitor may leave a review
    """,
    parameters=[
        OpenApiParameter("page", OpenApiTypes.INT, description="Services page"),
        OpenApiParameter("reviews_page", OpenApiTypes.INT, description="Reviews page"),
        OpenApiParameter("name", OpenApiTypes.STR, description="Display name when the developer has no services"),
    ],
    tags=["Storefront - Catalog"],
)
@api_view(["GET"])
def developer_profile(request, developer_id):
    ctx = get_context(request)
    services, sample = services_or_sample(
        ctx.catalog.fetch_services(developer_id), ctx.notifications, developer_id=developer_id
    )
    reviews, sample_reviews = reviews_or_sample(ctx.reviews.fetch_reviews(developer_id), ctx.notifications, developer_id)

    eligible = ctx.reviews.can_review(ctx.gate.identity, developer_id)
    if not eligible.ok:
        logger.warning(f"Could not check review eligibility for {developer_id}: {eligible.error_detail}")

    first = services[0] if services else None
    reviews_page = ctx.reviews.page(reviews, request.query_params.get("reviews_page", 1))
    return storefront_response(
        ctx,
        {
            "developer": {
                "developer_id": developer_id,
                "name": first.developer if first else request.query_params.get("name", ""),
                "verified": bool(first and first.developer_verified),
                "bio": ctx.profiles.bio(developer_id),
                "price_range": price_range(services),
            },
            **_services_page(ctx, services, request.query_params.get("page", 1)),
            "reviews": ReviewSerializer(reviews_page.items, many=True).data,
            "reviews_pagination": page_block(reviews_page),
            "average_rating": average_rating(reviews),
            "can_review": bool(eligible.ok and eligible.value),
            "sample": sample or sample_reviews,
        },
    )


@extend_schema(
    operation_id="catalog_developer_review",
    summary="Review a developer",
    description="""
    **What it receives:**
    - `rating` (1 to 5), `comment`

    Only buyers of one of the developer's services may review, and never
    their own profile.
    """,
    request=ReviewRequestSerializer,
    responses={
        201: ReviewSerializer,
        401: OpenApiResponse(response=ErrorResponseSerializer, description="Not signed in"),
        403: OpenApiResponse(response=ErrorResponseSerializer, description="No qualifying purchase"),
    },
    tags=["Storefront - Catalog"],
)
@api_view(["POST"])
def submit_review(request, developer_id):
    ctx = get_context(request)
    serializer = ReviewRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return storefront_response(
            ctx,
            {"error": ErrorCodes.VALIDATION_ERROR, "detail": "Please select a rating."},
            status.HTTP_400_BAD_REQUEST,
        )

    result = ctx.reviews.submit_review(ctx.gate.identity, developer_id, **serializer.validated_data)
    if not result.ok:
        return error_response(ctx, result, notify=True)

    ctx.notifications.success("Thank you for your review!")
    return storefront_response(ctx, {"review": ReviewSerializer(result.value).data}, status.HTTP_201_CREATED)
