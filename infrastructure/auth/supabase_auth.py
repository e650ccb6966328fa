"""
Supabase Auth Service
=====================

Concrete implementation of AuthServiceInterface over the hosted GoTrue REST API.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import requests
from django.conf import settings

from utils.logging_utils import mask_value

from ..http import error_message
from .interface import AuthEvent, AuthException, AuthServiceInterface, Identity

logger = logging.getLogger(__name__)

SUPPORTED_OAUTH_PROVIDERS = ("google", "github")


class SupabaseAuthService(AuthServiceInterface):
    """
    Hosted authentication using Supabase GoTrue.

    Configuration (in settings.py):
        SUPABASE_URL: Project URL
        SUPABASE_ANON_KEY: Public anon key sent as the ``apikey`` header
        REMOTE_CALL_TIMEOUT_SECONDS: Timeout applied to every request
    """

    def __init__(self, http: Optional[requests.Session] = None):
        super().__init__()
        self.base_url = settings.SUPABASE_URL.rstrip("/") + "/auth/v1"
        self.anon_key = settings.SUPABASE_ANON_KEY
        self.timeout = settings.REMOTE_CALL_TIMEOUT_SECONDS
        self.http = http or requests.Session()

    def _headers(self, access_token: Optional[str] = None) -> Dict[str, str]:
        return {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {access_token or self.anon_key}",
            "Content-Type": "application/json",
        }

    def _request(self, method: str, path: str, access_token: Optional[str] = None, **kwargs) -> requests.Response:
        try:
            return self.http.request(
                method,
                f"{self.base_url}{path}",
                headers=self._headers(access_token),
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            logger.error(f"Auth service request failed: {method} {path}. Error: {str(e)}")
            raise AuthException(f"Auth service unavailable: {str(e)}") from e

    @staticmethod
    def _json(response: requests.Response) -> Dict[str, Any]:
        try:
            payload = response.json()
        except ValueError as e:
            raise AuthException(f"Malformed auth service response: {str(e)}") from e
        if not isinstance(payload, dict):
            raise AuthException("Malformed auth service response")
        return payload

    @staticmethod
    def _identity_from_payload(user: Any, access_token: Any, refresh_token: str = "") -> Identity:
        if not isinstance(user, dict) or not user.get("id") or not isinstance(access_token, str):
            raise AuthException("Malformed auth service response: missing user or token")
        return Identity(
            user_id=str(user["id"]),
            email=user.get("email") or "",
            access_token=access_token,
            refresh_token=refresh_token or "",
            metadata=user.get("user_metadata") or {},
        )

    def get_session(self, access_token: Optional[str]) -> Optional[Identity]:
        if not access_token:
            return None

        response = self._request("GET", "/user", access_token=access_token)
        if response.status_code in (401, 403):
            logger.info("Stored access token rejected by auth service")
            return None
        if not response.ok:
            raise AuthException(error_message(response))

        return self._identity_from_payload(self._json(response), access_token)

    def sign_in_with_password(self, email: str, password: str) -> Identity:
        response = self._request(
            "POST", "/token?grant_type=password", json={"email": email, "password": password}
        )
        if not response.ok:
            logger.warning(f"Sign in failed for {mask_value(email)}: {response.status_code}")
            raise AuthException(error_message(response))

        payload = self._json(response)
        identity = self._identity_from_payload(
            payload.get("user"), payload.get("access_token"), payload.get("refresh_token") or ""
        )
        logger.info(f"Signed in {mask_value(email)}")
        self._emit(AuthEvent.SIGNED_IN, identity)
        return identity

    def sign_up(self, email: str, password: str, metadata: Dict[str, Any]) -> None:
        response = self._request("POST", "/signup", json={"email": email, "password": password, "data": metadata})
        if not response.ok:
            raise AuthException(error_message(response))
        logger.info(f"Registered {mask_value(email)}")

    def reset_password_for_email(self, email: str, redirect_to: Optional[str] = None) -> None:
        path = "/recover"
        if redirect_to:
            path = f"{path}?{urlencode({'redirect_to': redirect_to})}"
        response = self._request("POST", path, json={"email": email})
        if not response.ok:
            raise AuthException(error_message(response))

    def sign_out(self, identity: Identity) -> None:
        try:
            response = self._request("POST", "/logout", access_token=identity.access_token)
            if not response.ok and response.status_code != 401:
                raise AuthException(error_message(response))
        finally:
            self._emit(AuthEvent.SIGNED_OUT, None)

    def oauth_url(self, provider: str, redirect_to: Optional[str] = None) -> str:
        if provider not in SUPPORTED_OAUTH_PROVIDERS:
            raise AuthException(f"Unsupported provider: {provider}")
        params = {"provider": provider}
        if redirect_to:
            params["redirect_to"] = redirect_to
        return f"{self.base_url}/authorize?{urlencode(params)}"
