"""
Chat Abstraction Layer
======================

Provides a unified interface for AI chat completion (Gemini, mock).
"""

from .factory import ChatFactory
from .gemini_provider import GeminiChatProvider
from .interface import ChatMessage, ChatProviderException, ChatProviderInterface, ChatRole
from .mock_service import MockChatProvider

__all__ = [
    "ChatProviderInterface",
    "ChatMessage",
    "ChatRole",
    "ChatProviderException",
    "GeminiChatProvider",
    "MockChatProvider",
    "ChatFactory",
]
