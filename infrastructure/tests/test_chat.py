"""
Chat Infrastructure Tests
==========================

Unit tests for the Gemini chat provider.
"""

from unittest.mock import MagicMock

import requests
from django.test import SimpleTestCase, override_settings

from infrastructure.chat import (
    ChatFactory,
    ChatMessage,
    ChatProviderException,
    ChatRole,
    GeminiChatProvider,
    MockChatProvider,
)


def http_response(status_code=200, payload=None):
    response = MagicMock()
    response.ok = status_code < 400
    response.status_code = status_code
    response.json.return_value = payload if payload is not None else {}
    return response


HISTORY = [ChatMessage(ChatRole.USER, "Do you build mobile apps?")]


@override_settings(GEMINI_MODEL="gemini-test", CHAT_MAX_OUTPUT_TOKENS=123)
class GeminiChatProviderTest(SimpleTestCase):
    def setUp(self):
        self.http = MagicMock()
        self.provider = GeminiChatProvider(api_key="key-1", http=self.http)

    def test_generate(self):
        self.http.post.return_value = http_response(
            200, {"candidates": [{"content": {"parts": [{"text": "Yes, we do."}]}}]}
        )

        reply = self.provider.generate(HISTORY, "Be helpful.")

        self.assertEqual(reply, "Yes, we do.")
        args, kwargs = self.http.post.call_args
        self.assertTrue(args[0].endswith("/gemini-test:generateContent"))
        self.assertEqual(kwargs["params"], {"key": "key-1"})
        self.assertEqual(kwargs["json"]["contents"], [{"role": "user", "parts": [{"text": "Do you build mobile apps?"}]}])
        self.assertEqual(kwargs["json"]["generationConfig"], {"maxOutputTokens": 123})
        self.assertEqual(kwargs["json"]["systemInstruction"], {"parts": {"text": "Be helpful."}})

    def test_api_error_message(self):
        self.http.post.return_value = http_response(400, {"error": {"message": "API key not valid"}})

        with self.assertRaises(ChatProviderException) as ctx:
            self.provider.generate(HISTORY, "")

        self.assertEqual(str(ctx.exception), "API key not valid")

    def test_api_error_without_body(self):
        response = http_response(500)
        response.json.side_effect = ValueError("not json")
        self.http.post.return_value = response

        with self.assertRaises(ChatProviderException) as ctx:
            self.provider.generate(HISTORY, "")

        self.assertEqual(str(ctx.exception), "API request failed with status 500")

    def test_empty_reply(self):
        self.http.post.return_value = http_response(200, {"candidates": []})

        with self.assertRaises(ChatProviderException) as ctx:
            self.provider.generate(HISTORY, "")

        self.assertEqual(str(ctx.exception), "Received an empty or invalid response from the AI.")

    def test_network_error(self):
        self.http.post.side_effect = requests.Timeout("timed out")

        with self.assertRaises(ChatProviderException):
            self.provider.generate(HISTORY, "")

    def test_missing_key(self):
        provider = GeminiChatProvider(api_key="", http=self.http)

        self.assertFalse(provider.is_configured)
        with self.assertRaises(ChatProviderException):
            provider.generate(HISTORY, "")
        self.http.post.assert_not_called()


class ChatFactoryTest(SimpleTestCase):
    def test_create_mock(self):
        self.assertIsInstance(ChatFactory.create("mock"), MockChatProvider)

    def test_create_invalid(self):
        with self.assertRaises(ValueError):
            ChatFactory.create("openai")
