"""
Auth Service Interface
======================

Abstract base class defining the contract for the hosted authentication service.
Sessions are opaque to the rest of the storefront: callers receive an Identity
(or None for anonymous visitors) and never inspect tokens themselves.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional


class Role(str, Enum):
    """Mutually exclusive storefront roles derived from an identity."""

    BUYER = "buyer"
    SELLER = "seller"


class AuthEvent(str, Enum):
    """Session change events emitted by the auth service."""

    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"


@dataclass(frozen=True)
class Identity:
    """
    Authenticated session handle.

    Attributes:
        user_id: Remote user identifier
        email: Account email address
        access_token: Bearer token for remote calls made on behalf of the user
        refresh_token: Token used by the auth service to renew the session
        metadata: Read-only user metadata (full_name, user_type)
    """

    user_id: str
    email: str
    access_token: str
    refresh_token: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def role(self) -> Role:
        if self.metadata.get("user_type") == "developer":
            return Role.SELLER
        return Role.BUYER

    @property
    def full_name(self) -> str:
        return self.metadata.get("full_name") or ""

    @property
    def display_name(self) -> str:
        return self.full_name or self.email

    def to_session(self) -> Dict[str, Any]:
        """Serialize for the browser session (JSON compatible)."""
        return {
            "user_id": self.user_id,
            "email": self.email,
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "metadata": dict(self.metadata),
        }


SessionListener = Callable[[AuthEvent, Optional[Identity]], None]


class AuthServiceInterface(ABC):
    """
    Abstract interface for authentication operations.

    Concrete implementations:
        - SupabaseAuthService: Hosted auth over the GoTrue REST API
        - MockAuthService: In-memory accounts for tests and local development

    Instances keep their own listener list, so one instance should serve a single
    browser session (one request context).
    """

    def __init__(self):
        self._listeners: List[SessionListener] = []

    @abstractmethod
    def get_session(self, access_token: Optional[str]) -> Optional[Identity]:
        """
        Resolve the session for an access token.

        Args:
            access_token: Token stored for the browser session (None if anonymous)

        Returns:
            Identity for a valid token, None otherwise

        Raises:
            AuthException: If the auth service cannot be reached
        """
        pass

    @abstractmethod
    def sign_in_with_password(self, email: str, password: str) -> Identity:
        """
        Sign in with email and password.

        Emits SIGNED_IN to session listeners on success.

        Raises:
            AuthException: On invalid credentials or remote failure
        """
        pass

    @abstractmethod
    def sign_up(self, email: str, password: str, metadata: Dict[str, Any]) -> None:
        """
        Register a new account. The account must be confirmed by email before
        it can sign in.

        Raises:
            AuthException: If registration fails
        """
        pass

    @abstractmethod
    def reset_password_for_email(self, email: str, redirect_to: Optional[str] = None) -> None:
        """
        Send a password reset link.

        Raises:
            AuthException: If the request fails
        """
        pass

    @abstractmethod
    def sign_out(self, identity: Identity) -> None:
        """
        End the remote session. Emits SIGNED_OUT to session listeners even when
        the remote call fails, after which the failure is raised.

        Raises:
            AuthException: If the remote sign-out fails
        """
        pass

    @abstractmethod
    def oauth_url(self, provider: str, redirect_to: Optional[str] = None) -> str:
        """
        Build the authorize URL for a third party provider.

        Raises:
            AuthException: If the provider is not supported
        """
        pass

    def on_session_change(self, callback: SessionListener) -> Callable[[], None]:
        """
        Register a listener for sign-in/sign-out completion.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _emit(self, event: AuthEvent, identity: Optional[Identity]) -> None:
        for listener in list(self._listeners):
            listener(event, identity)


class AuthException(Exception):
    """Base exception for authentication operations."""

    pass
