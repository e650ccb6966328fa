"""
Gemini Chat Provider
====================

Concrete implementation of ChatProviderInterface using the generateContent REST API.
"""

import logging
from typing import List, Optional

import requests
from django.conf import settings

from .interface import ChatMessage, ChatProviderException, ChatProviderInterface

logger = logging.getLogger(__name__)

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"


class GeminiChatProvider(ChatProviderInterface):
    """
    Gemini chat completion.

    Configuration (in settings.py):
        GEMINI_API_KEY: API key (empty disables the provider)
        GEMINI_MODEL: Model name
        CHAT_MAX_OUTPUT_TOKENS: Reply length cap
    """

    def __init__(self, api_key: Optional[str] = None, http: Optional[requests.Session] = None):
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.model = getattr(settings, "GEMINI_MODEL", "gemini-2.5-flash")
        self.max_output_tokens = getattr(settings, "CHAT_MAX_OUTPUT_TOKENS", 500)
        self.timeout = settings.REMOTE_CALL_TIMEOUT_SECONDS
        self.http = http or requests.Session()

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def generate(self, history: List[ChatMessage], system_instruction: str) -> str:
        if not self.is_configured:
            raise ChatProviderException("Gemini API key is missing")

        payload = {
            "contents": [{"role": m.role.value, "parts": [{"text": m.text}]} for m in history],
            "systemInstruction": {"parts": {"text": system_instruction}},
            "generationConfig": {"maxOutputTokens": self.max_output_tokens},
        }
        try:
            response = self.http.post(
                f"{GEMINI_API_BASE}/{self.model}:generateContent",
                params={"key": self.api_key},
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Chat request failed: {str(e)}")
            raise ChatProviderException(str(e)) from e

        try:
            data = response.json()
        except ValueError:
            data = {}

        if not response.ok:
            message = (data.get("error") or {}).get("message") if isinstance(data, dict) else None
            raise ChatProviderException(message or f"API request failed with status {response.status_code}")

        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            text = None
        if not text:
            raise ChatProviderException("Received an empty or invalid response from the AI.")

        logger.debug(f"Chat reply received ({len(text)} chars)")
        return text
