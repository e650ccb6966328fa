"""
Auth Infrastructure Tests
==========================

Unit tests for the hosted auth adapter and its in-memory mock.
"""

from unittest.mock import MagicMock

import requests
from django.test import SimpleTestCase, override_settings

from infrastructure.auth import (
    AuthEvent,
    AuthException,
    Identity,
    MockAuthService,
    MockUserDirectory,
    Role,
    SupabaseAuthService,
)

USER_PAYLOAD = {
    "id": "user-1",
    "email": "dev@example.com",
    "user_metadata": {"full_name": "Dev Eloper", "user_type": "developer"},
}


def http_response(status_code=200, payload=None):
    response = MagicMock()
    response.ok = status_code < 400
    response.status_code = status_code
    response.json.return_value = payload if payload is not None else {}
    response.text = ""
    return response


class IdentityTest(SimpleTestCase):
    def test_role_from_metadata(self):
        seller = Identity("u-1", "a@example.com", "tok", metadata={"user_type": "developer"})
        buyer = Identity("u-2", "b@example.com", "tok", metadata={"user_type": "customer"})
        unknown = Identity("u-3", "c@example.com", "tok")

        self.assertIs(seller.role, Role.SELLER)
        self.assertIs(buyer.role, Role.BUYER)
        self.assertIs(unknown.role, Role.BUYER)

    def test_metadata_is_read_only(self):
        identity = Identity("u-1", "a@example.com", "tok", metadata={"full_name": "A"})

        with self.assertRaises(TypeError):
            identity.metadata["full_name"] = "B"

    def test_display_name_falls_back_to_email(self):
        self.assertEqual(Identity("u-1", "a@example.com", "tok").display_name, "a@example.com")


@override_settings(SUPABASE_URL="https://project.supabase.test", SUPABASE_ANON_KEY="anon")
class SupabaseAuthServiceTest(SimpleTestCase):
    """Test SupabaseAuthService against a stubbed HTTP session."""

    def setUp(self):
        self.http = MagicMock()
        self.auth = SupabaseAuthService(http=self.http)
        self.events = []
        self.auth.on_session_change(lambda event, identity: self.events.append((event, identity)))

    def test_sign_in_emits_signed_in(self):
        self.http.request.return_value = http_response(
            200, {"access_token": "at", "refresh_token": "rt", "user": USER_PAYLOAD}
        )

        identity = self.auth.sign_in_with_password("dev@example.com", "pw")

        self.assertEqual(identity.user_id, "user-1")
        self.assertIs(identity.role, Role.SELLER)
        self.assertEqual(self.events, [(AuthEvent.SIGNED_IN, identity)])
        args, kwargs = self.http.request.call_args
        self.assertEqual(args, ("POST", "https://project.supabase.test/auth/v1/token?grant_type=password"))
        self.assertEqual(kwargs["headers"]["apikey"], "anon")

    def test_sign_in_rejected(self):
        self.http.request.return_value = http_response(
            400, {"error": "invalid_grant", "error_description": "Invalid login credentials"}
        )

        with self.assertRaises(AuthException) as ctx:
            self.auth.sign_in_with_password("dev@example.com", "wrong")

        self.assertEqual(str(ctx.exception), "Invalid login credentials")
        self.assertEqual(self.events, [])

    def test_get_session(self):
        self.http.request.return_value = http_response(200, USER_PAYLOAD)

        identity = self.auth.get_session("at")

        self.assertEqual(identity.email, "dev@example.com")
        self.assertEqual(identity.access_token, "at")

    def test_get_session_malformed_body(self):
        response = http_response(200)
        response.json.side_effect = ValueError("Expecting value: line 1 column 1")
        self.http.request.return_value = response

        with self.assertRaises(AuthException):
            self.auth.get_session("at")

    def test_sign_in_reply_without_user(self):
        self.http.request.return_value = http_response(200, {"access_token": "at"})

        with self.assertRaises(AuthException):
            self.auth.sign_in_with_password("dev@example.com", "pw")

        self.assertEqual(self.events, [])

    def test_get_session_without_token(self):
        self.assertIsNone(self.auth.get_session(None))
        self.http.request.assert_not_called()

    def test_expired_token_is_anonymous(self):
        self.http.request.return_value = http_response(401, {"msg": "JWT expired"})
        self.assertIsNone(self.auth.get_session("expired"))

    def test_service_down(self):
        self.http.request.side_effect = requests.ConnectionError("refused")

        with self.assertRaises(AuthException):
            self.auth.get_session("at")

    def test_sign_out_always_emits(self):
        self.http.request.side_effect = requests.ConnectionError("refused")
        identity = Identity("user-1", "dev@example.com", "at")

        with self.assertRaises(AuthException):
            self.auth.sign_out(identity)

        self.assertEqual(self.events, [(AuthEvent.SIGNED_OUT, None)])

    def test_reset_password_redirect(self):
        self.http.request.return_value = http_response(200)

        self.auth.reset_password_for_email("dev@example.com", redirect_to="https://shop.test/reset")

        args, kwargs = self.http.request.call_args
        self.assertIn("/recover?redirect_to=https%3A%2F%2Fshop.test%2Freset", args[1])
        self.assertEqual(kwargs["json"], {"email": "dev@example.com"})

    def test_oauth_url(self):
        url = self.auth.oauth_url("github", redirect_to="https://shop.test/")

        self.assertTrue(url.startswith("https://project.supabase.test/auth/v1/authorize?provider=github"))
        self.assertIn("redirect_to=", url)

    def test_oauth_unknown_provider(self):
        with self.assertRaises(AuthException):
            self.auth.oauth_url("myspace")

    def test_unsubscribe(self):
        auth = SupabaseAuthService(http=self.http)
        events = []
        unsubscribe = auth.on_session_change(lambda event, identity: events.append(event))
        unsubscribe()
        self.http.request.return_value = http_response(200)

        auth.sign_out(Identity("user-1", "dev@example.com", "at"))

        self.assertEqual(events, [])


class MockAuthServiceTest(SimpleTestCase):
    def setUp(self):
        self.directory = MockUserDirectory()
        self.directory.add_account("Buyer@Example.com", "pw", {"full_name": "Bea"})
        self.auth = MockAuthService(self.directory)

    def test_sign_in_is_case_insensitive(self):
        identity = self.auth.sign_in_with_password("buyer@example.com", "pw")
        self.assertEqual(self.auth.get_session(identity.access_token).full_name, "Bea")

    def test_wrong_password(self):
        with self.assertRaises(AuthException):
            self.auth.sign_in_with_password("buyer@example.com", "nope")

    def test_new_accounts_need_confirmation(self):
        self.auth.sign_up("new@example.com", "pw", {"user_type": "developer"})

        with self.assertRaises(AuthException) as ctx:
            self.auth.sign_in_with_password("new@example.com", "pw")

        self.assertEqual(str(ctx.exception), "Email not confirmed")

    def test_duplicate_sign_up(self):
        with self.assertRaises(AuthException):
            self.auth.sign_up("buyer@example.com", "pw", {})

    def test_sign_out_revokes_token(self):
        identity = self.auth.sign_in_with_password("buyer@example.com", "pw")

        self.auth.sign_out(identity)

        self.assertIsNone(self.auth.get_session(identity.access_token))

    def test_unavailable(self):
        identity = self.auth.sign_in_with_password("buyer@example.com", "pw")
        self.directory.unavailable = True

        with self.assertRaises(AuthException):
            self.auth.get_session(identity.access_token)
