"""
Mock Chat Provider
==================

Canned implementation of ChatProviderInterface for testing.
"""

import logging
from typing import List, Optional

from .interface import ChatMessage, ChatProviderException, ChatProviderInterface

logger = logging.getLogger(__name__)


class MockChatProvider(ChatProviderInterface):
    """Replies with queued answers (or an echo) and records every request."""

    def __init__(self, configured: bool = True):
        self.configured = configured
        self.replies: List[str] = []
        self.requests: List[List[ChatMessage]] = []
        self.error: Optional[str] = None

    @property
    def is_configured(self) -> bool:
        return self.configured

    def generate(self, history: List[ChatMessage], system_instruction: str) -> str:
        self.requests.append(list(history))
        if self.error:
            raise ChatProviderException(self.error)
        if self.replies:
            return self.replies.pop(0)
        logger.info("[MOCK CHAT] Echoing last user message")
        return f"You said: {history[-1].text}"
