"""
Service Container Tests
========================

Unit tests for dependency injection container.
"""

from django.test import SimpleTestCase, override_settings

from infrastructure.auth import MockAuthService, SupabaseAuthService
from infrastructure.chat import GeminiChatProvider, MockChatProvider
from infrastructure.container import InFlightRegistry, ServiceContainer
from infrastructure.data import MockDataService, SupabaseDataService
from infrastructure.storage import MockStorageAdapter, SupabaseStorageAdapter


@override_settings(
    INFRASTRUCTURE={
        "AUTH_BACKEND": "supabase",
        "DATA_BACKEND": "supabase",
        "STORAGE_BACKEND": "supabase",
        "CHAT_BACKEND": "gemini",
    }
)
class ServiceContainerTest(SimpleTestCase):
    """Test ServiceContainer implementation."""

    def test_containers_are_independent(self):
        """Each container owns its own adapters."""
        first = ServiceContainer()
        second = ServiceContainer()

        self.assertIsNot(first, second)
        self.assertIsNot(first.data(), second.data())

    def test_backends_from_settings(self):
        """Without overrides the hosted adapters are built."""
        container = ServiceContainer()

        self.assertIsInstance(container.auth(), SupabaseAuthService)
        self.assertIsInstance(container.data(), SupabaseDataService)
        self.assertIsInstance(container.storage(), SupabaseStorageAdapter)
        self.assertIsInstance(container.chat(), GeminiChatProvider)

    def test_overrides_win_over_settings(self):
        container = ServiceContainer({"DATA_BACKEND": "mock"})

        self.assertIsInstance(container.data(), MockDataService)
        self.assertIsInstance(container.storage(), SupabaseStorageAdapter)

    def test_stateless_adapters_are_cached(self):
        container = ServiceContainer()

        self.assertIs(container.data(), container.data())
        self.assertIs(container.storage(), container.storage())
        self.assertIs(container.chat(), container.chat())

    def test_auth_is_new_per_call(self):
        """Auth services carry listeners, so they are never shared."""
        container = ServiceContainer()
        self.assertIsNot(container.auth(), container.auth())

    def test_configure_for_testing(self):
        container = ServiceContainer()
        hosted = container.data()

        container.configure_for_testing()

        self.assertIsInstance(container.auth(), MockAuthService)
        self.assertIsInstance(container.data(), MockDataService)
        self.assertIsInstance(container.storage(), MockStorageAdapter)
        self.assertIsInstance(container.chat(), MockChatProvider)
        self.assertIsNot(container.data(), hosted)

    def test_mock_auth_instances_share_accounts(self):
        """A token issued through one instance resolves through another."""
        container = ServiceContainer()
        container.configure_for_testing()
        container.user_directory().add_account("a@example.com", "pw")

        identity = container.auth().sign_in_with_password("a@example.com", "pw")

        self.assertEqual(container.auth().get_session(identity.access_token).email, "a@example.com")

    def test_reset(self):
        container = ServiceContainer({"DATA_BACKEND": "mock"})
        data = container.data()
        container.checkouts_in_flight.acquire("user-1")

        container.reset()

        self.assertIsNot(container.data(), data)
        self.assertNotIn("user-1", container.checkouts_in_flight)

    @override_settings(INFRASTRUCTURE={"DATA_BACKEND": "sqlite"})
    def test_invalid_backend(self):
        with self.assertRaises(ValueError):
            ServiceContainer().data()


class InFlightRegistryTest(SimpleTestCase):
    def test_acquire_is_exclusive(self):
        registry = InFlightRegistry()

        self.assertTrue(registry.acquire("user-1"))
        self.assertFalse(registry.acquire("user-1"))
        self.assertTrue(registry.acquire("user-2"))

        registry.release("user-1")
        self.assertTrue(registry.acquire("user-1"))

    def test_release_unknown_key(self):
        InFlightRegistry().release("nobody")
