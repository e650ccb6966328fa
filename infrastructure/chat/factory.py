"""
Chat Factory
============

Factory pattern for creating chat provider instances.
"""

import logging
from typing import Literal, Optional

from django.conf import settings

from .gemini_provider import GeminiChatProvider
from .interface import ChatProviderInterface
from .mock_service import MockChatProvider

logger = logging.getLogger(__name__)

ChatBackend = Literal["gemini", "mock"]


class ChatFactory:
    """Factory for creating the chat completion backend."""

    @staticmethod
    def create(backend: Optional[ChatBackend] = None) -> ChatProviderInterface:
        """
        Create a chat provider instance.

        Args:
            backend: 'gemini' or 'mock'
                    If None, reads from settings.INFRASTRUCTURE['CHAT_BACKEND']

        Raises:
            ValueError: If backend type is invalid
        """
        backend_type = backend or settings.INFRASTRUCTURE.get("CHAT_BACKEND", "gemini")
        logger.info(f"Creating chat backend: {backend_type}")

        if backend_type == "gemini":
            return GeminiChatProvider()
        elif backend_type == "mock":
            return MockChatProvider()
        else:
            raise ValueError(f"Invalid chat backend: {backend_type}. Must be 'gemini' or 'mock'")
