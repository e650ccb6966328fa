from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.decorators import api_view

from storefront.api.serializers import ChatRequestSerializer, ContactRequestSerializer, ErrorResponseSerializer

from .common import error_response, get_context, storefront_response


@extend_schema(
    operation_id="contact_send",
    summary="Send a message to the team or to a developer",
    description="""
    **What it receives:**
    - `email`: Reply address
    - `message`: Message body
    - `developer_id`: Optional recipient developer; omitted for the general contact form
    """,
    request=ContactRequestSerializer,
    responses={
        400: OpenApiResponse(response=ErrorResponseSerializer, description="Email and message are required"),
        502: OpenApiResponse(response=ErrorResponseSerializer, description="Message could not be stored"),
    },
    tags=["Storefront - Contact"],
)
@api_view(["POST"])
def send_message(request):
    ctx = get_context(request)
    serializer = ContactRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    result = ctx.messages.send(
        data["email"], data["message"], developer_id=data["developer_id"] or None, identity=ctx.gate.identity
    )
    if not result.ok:
        return error_response(ctx, result, notify=True)

    ctx.notifications.success("Message sent!")
    return storefront_response(ctx, {"sent": True}, status.HTTP_201_CREATED)


def _history(ctx):
    return [message.to_dict() for message in ctx.chat.history]


@extend_schema(
    operation_id="chat_conversation",
    summary="AI assistant conversation",
    description="""
    - `GET` returns the conversation, starting with the assistant's greeting
    - `POST` sends `message` and returns the updated conversation
    - `DELETE` starts over
    """,
    request=ChatRequestSerializer,
    responses={
        400: OpenApiResponse(response=ErrorResponseSerializer, description="Empty message"),
        502: OpenApiResponse(response=ErrorResponseSerializer, description="Assistant request failed"),
        503: OpenApiResponse(response=ErrorResponseSerializer, description="Assistant not configured"),
    },
    tags=["Storefront - Chat"],
)
@api_view(["GET", "POST", "DELETE"])
def chat(request):
    ctx = get_context(request)
    if request.method == "DELETE":
        ctx.chat.reset()
    elif request.method == "POST":
        serializer = ChatRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = ctx.chat.send(serializer.validated_data["message"])
        if not result.ok:
            response = error_response(ctx, result)
            response.data["messages"] = _history(ctx)
            return response
        return storefront_response(ctx, {"reply": result.value.to_dict(), "messages": _history(ctx)})

    return storefront_response(ctx, {"messages": _history(ctx)})
