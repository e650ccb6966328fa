"""
AI consultant chat.

The conversation lives in the browser session and always starts with the
consultant's greeting, which is shown but never sent to the provider. A failed
exchange leaves the conversation exactly as it was before the user's message.
"""

from typing import List, MutableMapping

from django.conf import settings

from infrastructure.chat import ChatMessage, ChatProviderException, ChatProviderInterface, ChatRole

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

CHAT_SESSION_KEY = "chat"

GREETING = "Hello! I am the OWSCORP AI consultant. How can I help you find the perfect digital solution today?"

SYSTEM_INSTRUCTION = (
    "You are an expert consultant for a digital marketplace called OWSCORP. Your role is to be a friendly "
    "and helpful AI assistant. You will answer questions about services, pricing, and general inquiries "
    "related to the platform. Be concise and professional."
)


class ChatService(BaseService):
    def __init__(self, provider: ChatProviderInterface, session: MutableMapping):
        super().__init__()
        self.provider = provider
        self.session = session

    @property
    def history(self) -> List[ChatMessage]:
        stored = self.session.get(CHAT_SESSION_KEY)
        if not stored:
            return [ChatMessage(ChatRole.MODEL, GREETING)]
        try:
            return [ChatMessage.from_dict(item) for item in stored]
        except (KeyError, TypeError, ValueError):
            self.logger.warning("Discarding malformed chat history")
            return [ChatMessage(ChatRole.MODEL, GREETING)]

    def _store(self, messages: List[ChatMessage]) -> None:
        limit = settings.CHAT_HISTORY_LIMIT
        greeting, rest = messages[0], messages[1:]
        # signed-cookie sessions are size limited
        self.session[CHAT_SESSION_KEY] = [m.to_dict() for m in [greeting] + rest[-limit:]]

    def reset(self) -> None:
        self.session.pop(CHAT_SESSION_KEY, None)

    @BaseService.log_performance
    def send(self, text: str) -> ServiceResult[ChatMessage]:
        if not (text or "").strip():
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please enter a message.")
        if not self.provider.is_configured:
            return service_err(
                ErrorCodes.CHAT_UNAVAILABLE, "API_KEY is not configured. The AI assistant is currently unavailable."
            )

        before = self.history
        conversation = before + [ChatMessage(ChatRole.USER, text.strip())]
        try:
            reply = self.provider.generate(conversation[1:], SYSTEM_INSTRUCTION)
        except ChatProviderException as e:
            self.logger.warning(f"Chat request failed: {e}")
            return service_err(ErrorCodes.CHAT_ERROR, f"Sorry, I encountered an error. Please try again. {e}")

        answer = ChatMessage(ChatRole.MODEL, reply)
        self._store(conversation + [answer])
        return service_ok(answer)
