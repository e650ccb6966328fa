"""
Mock Auth Service
=================

Mock implementation of AuthServiceInterface for testing.
Accounts and sessions live in a MockUserDirectory shared across instances.
"""

import logging
import secrets
import threading
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from utils.logging_utils import mask_value

from .interface import AuthEvent, AuthException, AuthServiceInterface, Identity

logger = logging.getLogger(__name__)


@dataclass
class MockAccount:
    user_id: str
    email: str
    password: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    confirmed: bool = True


class MockUserDirectory:
    """
    In-memory account and token registry.

    One directory is shared by every MockAuthService created by the same container,
    so a token issued in one request resolves in the next.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.accounts: Dict[str, MockAccount] = {}
        self.tokens: Dict[str, str] = {}
        self.password_resets: List[str] = []
        self.unavailable = False

    def add_account(
        self, email: str, password: str, metadata: Optional[Dict[str, Any]] = None, confirmed: bool = True
    ) -> MockAccount:
        with self._lock:
            account = MockAccount(
                user_id=str(uuid.uuid4()),
                email=email,
                password=password,
                metadata=dict(metadata or {}),
                confirmed=confirmed,
            )
            self.accounts[email.lower()] = account
            return account

    def issue_token(self, account: MockAccount) -> str:
        token = secrets.token_hex(16)
        with self._lock:
            self.tokens[token] = account.email.lower()
        return token

    def revoke_token(self, token: str) -> None:
        with self._lock:
            self.tokens.pop(token, None)

    def account_for_token(self, token: str) -> Optional[MockAccount]:
        with self._lock:
            email = self.tokens.get(token)
            return self.accounts.get(email) if email else None


class MockAuthService(AuthServiceInterface):
    """
    Mock auth service for testing and development.

    Set ``directory.unavailable = True`` to simulate the auth service being down.
    """

    def __init__(self, directory: Optional[MockUserDirectory] = None):
        super().__init__()
        self.directory = directory or MockUserDirectory()

    def _check_available(self):
        if self.directory.unavailable:
            raise AuthException("Auth service unavailable")

    def _identity(self, account: MockAccount, token: str) -> Identity:
        return Identity(
            user_id=account.user_id,
            email=account.email,
            access_token=token,
            refresh_token=f"refresh-{token}",
            metadata=account.metadata,
        )

    def get_session(self, access_token: Optional[str]) -> Optional[Identity]:
        if not access_token:
            return None
        self._check_available()
        account = self.directory.account_for_token(access_token)
        if account is None:
            return None
        return self._identity(account, access_token)

    def sign_in_with_password(self, email: str, password: str) -> Identity:
        self._check_available()
        account = self.directory.accounts.get(email.lower())
        if account is None or account.password != password:
            raise AuthException("Invalid login credentials")
        if not account.confirmed:
            raise AuthException("Email not confirmed")

        identity = self._identity(account, self.directory.issue_token(account))
        logger.info(f"[MOCK AUTH] Signed in {mask_value(email)}")
        self._emit(AuthEvent.SIGNED_IN, identity)
        return identity

    def sign_up(self, email: str, password: str, metadata: Dict[str, Any]) -> None:
        self._check_available()
        if email.lower() in self.directory.accounts:
            raise AuthException("User already registered")
        self.directory.add_account(email, password, metadata, confirmed=False)
        logger.info(f"[MOCK AUTH] Registered {mask_value(email)}")

    def reset_password_for_email(self, email: str, redirect_to: Optional[str] = None) -> None:
        self._check_available()
        self.directory.password_resets.append(email)

    def sign_out(self, identity: Identity) -> None:
        try:
            self._check_available()
            self.directory.revoke_token(identity.access_token)
        finally:
            self._emit(AuthEvent.SIGNED_OUT, None)

    def oauth_url(self, provider: str, redirect_to: Optional[str] = None) -> str:
        if provider not in ("google", "github"):
            raise AuthException(f"Unsupported provider: {provider}")
        return f"https://mock-auth.local/authorize?provider={provider}"
