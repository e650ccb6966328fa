"""
Session gate: the authenticated-identity lifecycle of one browser session.

    Resolving -> Anonymous | Authenticated
    Anonymous -> Authenticated   (sign-in)
    Authenticated -> Anonymous   (sign-out)

The gate is the only owner of the current Identity. Failure to resolve the
initial session leaves the visitor anonymous; it is never fatal.
"""

import logging
from enum import Enum
from typing import Callable, MutableMapping, Optional

from infrastructure.auth import AuthEvent, AuthException, AuthServiceInterface, Identity, Role
from storefront.infra.observability.metrics import session_resolutions_total

logger = logging.getLogger(__name__)

AUTH_SESSION_KEY = "auth"


class SessionState(str, Enum):
    RESOLVING = "resolving"
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class SessionGate:
    def __init__(self, auth: AuthServiceInterface, session: MutableMapping):
        self._auth = auth
        self._session = session
        self._state = SessionState.RESOLVING
        self._identity: Optional[Identity] = None
        self._unsubscribe_auth: Optional[Callable[[], None]] = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def identity(self) -> Optional[Identity]:
        return self._identity

    @property
    def role(self) -> Optional[Role]:
        """Role of the signed-in identity; None unless authenticated."""
        if self._state is SessionState.AUTHENTICATED and self._identity is not None:
            return self._identity.role
        return None

    @property
    def is_resolving(self) -> bool:
        return self._state is SessionState.RESOLVING

    @property
    def is_authenticated(self) -> bool:
        return self._state is SessionState.AUTHENTICATED

    def resolve(self) -> SessionState:
        """
        Resolve the initial session from the tokens stored in the browser session
        and start listening for sign-in/sign-out. Only the first call does work.
        """
        if self._state is not SessionState.RESOLVING:
            return self._state

        stored = self._session.get(AUTH_SESSION_KEY) or {}
        access_token = stored.get("access_token") if isinstance(stored, dict) else None
        identity = None
        try:
            identity = self._auth.get_session(access_token)
            if identity is None and access_token:
                logger.info("Stored session is no longer valid; continuing as anonymous")
                self._session.pop(AUTH_SESSION_KEY, None)
        except AuthException as e:
            logger.warning(f"Session resolution failed, continuing as anonymous: {e}")

        self._unsubscribe_auth = self._auth.on_session_change(self._on_auth_event)
        self._enter(identity)
        session_resolutions_total.labels(state=self._state.value).inc()
        return self._state

    def close(self) -> None:
        """Release the auth subscription."""
        if self._unsubscribe_auth is not None:
            self._unsubscribe_auth()
            self._unsubscribe_auth = None

    def _on_auth_event(self, event: AuthEvent, identity: Optional[Identity]) -> None:
        if event is AuthEvent.SIGNED_IN and identity is not None:
            self._session[AUTH_SESSION_KEY] = {
                "access_token": identity.access_token,
                "refresh_token": identity.refresh_token,
            }
            self._enter(identity)
        elif event is AuthEvent.SIGNED_OUT:
            self._session.pop(AUTH_SESSION_KEY, None)
            self._enter(None)

    def _enter(self, identity: Optional[Identity]) -> None:
        self._identity = identity
        self._state = SessionState.AUTHENTICATED if identity is not None else SessionState.ANONYMOUS
