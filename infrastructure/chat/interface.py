"""
Chat Provider Interface
=======================

Abstract base class defining the contract for AI chat completion.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List


class ChatRole(str, Enum):
    """Author of a chat message."""

    USER = "user"
    MODEL = "model"


@dataclass(frozen=True)
class ChatMessage:
    """
    A single turn of a conversation.

    Attributes:
        role: Who wrote the message
        text: Message body
    """

    role: ChatRole
    text: str

    def to_dict(self):
        return {"role": self.role.value, "text": self.text}

    @classmethod
    def from_dict(cls, data) -> "ChatMessage":
        return cls(role=ChatRole(data["role"]), text=str(data["text"]))


class ChatProviderInterface(ABC):
    """
    Abstract interface for chat completion providers.

    Concrete implementations must provide:
        - GeminiChatProvider: Hosted generateContent API
        - MockChatProvider: Canned replies for testing
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether credentials are available to reach the provider."""
        pass

    @abstractmethod
    def generate(self, history: List[ChatMessage], system_instruction: str) -> str:
        """
        Produce the model's reply to a conversation.

        Args:
            history: Conversation so far, ending with the user's message
            system_instruction: Persona and rules for the model

        Returns:
            Reply text

        Raises:
            ChatProviderException: If the provider fails or returns no text
        """
        pass


class ChatProviderException(Exception):
    """Base exception for chat provider operations."""

    pass
