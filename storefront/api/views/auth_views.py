"""
Account endpoints behind the storefront's sign-in page.

The auth service's session-change events keep the session gate current, so
every response already carries the follow-up page.
"""

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.decorators import api_view

from storefront.api.serializers import (
    ErrorResponseSerializer,
    IdentitySerializer,
    OAuthResponseSerializer,
    ResetPasswordRequestSerializer,
    SignInRequestSerializer,
    SignUpRequestSerializer,
)

from .common import error_response, get_context, storefront_response

logger = logging.getLogger(__name__)


@extend_schema(
    operation_id="auth_sign_in",
    summary="Sign in with email and password",
    description="""
    **What it receives:**
    - `email`, `password`

    **What it returns:**
    - The signed-in identity; the view switches to the role's dashboard
    """,
    request=SignInRequestSerializer,
    responses={
        200: OpenApiResponse(response=IdentitySerializer, description="Signed in"),
        400: OpenApiResponse(response=ErrorResponseSerializer, description="Missing fields or rejected credentials"),
    },
    tags=["Storefront - Auth"],
)
@api_view(["POST"])
def sign_in(request):
    ctx = get_context(request)
    serializer = SignInRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    result = ctx.account.sign_in(**serializer.validated_data)
    if not result.ok:
        return error_response(ctx, result)
    return storefront_response(ctx, {"identity": IdentitySerializer(result.value).data})


@extend_schema(
    operation_id="auth_sign_up",
    summary="Register a new account",
    description="""
    **What it receives:**
    - `full_name`, `email`, `password`
    - `user_type`: `customer` or `developer`

    The account must be confirmed by email before signing in.
    """,
    request=SignUpRequestSerializer,
    responses={400: OpenApiResponse(response=ErrorResponseSerializer, description="Registration rejected")},
    tags=["Storefront - Auth"],
)
@api_view(["POST"])
def sign_up(request):
    ctx = get_context(request)
    serializer = SignUpRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    result = ctx.account.sign_up(**serializer.validated_data)
    if not result.ok:
        return error_response(ctx, result)
    return storefront_response(ctx, {"message": result.value}, status.HTTP_201_CREATED)


@extend_schema(
    operation_id="auth_reset_password",
    summary="Send a password reset link",
    request=ResetPasswordRequestSerializer,
    responses={400: OpenApiResponse(response=ErrorResponseSerializer, description="Reset rejected")},
    tags=["Storefront - Auth"],
)
@api_view(["POST"])
def reset_password(request):
    ctx = get_context(request)
    serializer = ResetPasswordRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    result = ctx.account.reset_password(**serializer.validated_data)
    if not result.ok:
        return error_response(ctx, result)
    return storefront_response(ctx, {"message": result.value})


@extend_schema(
    operation_id="auth_oauth_url",
    summary="Third-party sign-in URL",
    description="Returns the hosted auth URL for `google` or `github`; the client redirects the browser there.",
    responses={
        200: OAuthResponseSerializer,
        400: OpenApiResponse(response=ErrorResponseSerializer, description="Unsupported provider"),
    },
    tags=["Storefront - Auth"],
)
@api_view(["GET"])
def oauth_url(request, provider):
    ctx = get_context(request)
    result = ctx.account.oauth_url(provider, request.query_params.get("redirect_to"))
    if not result.ok:
        return error_response(ctx, result)
    return storefront_response(ctx, {"provider": provider, "url": result.value})


@extend_schema(
    operation_id="auth_sign_out",
    summary="Sign out",
    description="Ends the session and shows the home page. Signing out while anonymous is a no-op.",
    responses={400: OpenApiResponse(response=ErrorResponseSerializer, description="Remote sign-out failed")},
    tags=["Storefront - Auth"],
)
@api_view(["POST"])
def sign_out(request):
    ctx = get_context(request)
    result = ctx.account.sign_out()
    if not result.ok:
        return error_response(ctx, result)
    return storefront_response(ctx, {"state": ctx.gate.state.value})
