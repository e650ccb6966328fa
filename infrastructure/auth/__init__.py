"""
Auth Abstraction Layer
======================

Provides a unified interface for the hosted authentication service.
"""

from .factory import AuthFactory
from .interface import AuthEvent, AuthException, AuthServiceInterface, Identity, Role
from .mock_service import MockAuthService, MockUserDirectory
from .supabase_auth import SupabaseAuthService

__all__ = [
    "AuthServiceInterface",
    "AuthEvent",
    "AuthException",
    "Identity",
    "Role",
    "SupabaseAuthService",
    "MockAuthService",
    "MockUserDirectory",
    "AuthFactory",
]
