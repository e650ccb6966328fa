"""
Auth Service Factory
====================

Factory pattern for creating auth service instances based on configuration.
"""

import logging
from typing import Literal, Optional

from django.conf import settings

from .interface import AuthServiceInterface
from .mock_service import MockAuthService, MockUserDirectory
from .supabase_auth import SupabaseAuthService

logger = logging.getLogger(__name__)

AuthBackend = Literal["supabase", "mock"]


class AuthFactory:
    """
    Factory for creating auth service instances.

    Usage:
        # In settings.py
        INFRASTRUCTURE = {"AUTH_BACKEND": "supabase"}

        # In your code
        auth = AuthFactory.create()
    """

    @staticmethod
    def create(
        backend: Optional[AuthBackend] = None, directory: Optional[MockUserDirectory] = None
    ) -> AuthServiceInterface:
        """
        Create an auth service instance.

        Args:
            backend: Auth backend type ('supabase' or 'mock')
                    If None, reads from settings.INFRASTRUCTURE['AUTH_BACKEND']
            directory: Account registry shared by mock instances

        Returns:
            AuthServiceInterface implementation

        Raises:
            ValueError: If backend type is invalid
        """
        backend_type = backend or settings.INFRASTRUCTURE.get("AUTH_BACKEND", "supabase")

        logger.debug(f"Creating auth service: {backend_type}")

        if backend_type == "supabase":
            return SupabaseAuthService()
        elif backend_type == "mock":
            return MockAuthService(directory)
        else:
            raise ValueError(f"Invalid auth backend: {backend_type}. Must be 'supabase' or 'mock'")
