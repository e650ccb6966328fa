"""
Account commands behind the auth page: sign-in, sign-up, password reset,
third-party sign-in and sign-out.

Successful sign-in and sign-out reach the session gate through the auth
service's session-change events; this service only reports outcomes and
requests the follow-up page.
"""

from typing import Optional

from infrastructure.auth import AuthException, AuthServiceInterface, Identity
from storefront.domain.navigation import HomePage
from storefront.session.gate import SessionGate
from storefront.session.navigator import Navigator, dashboard_for
from storefront.session.notifications import NotificationChannel
from utils.logging_utils import mask_value

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

USER_TYPES = ("customer", "developer")
OAUTH_PROVIDERS = ("google", "github")


class AccountService(BaseService):
    def __init__(
        self,
        auth: AuthServiceInterface,
        gate: SessionGate,
        notifications: NotificationChannel,
        navigator: Navigator,
    ):
        super().__init__()
        self.auth = auth
        self.gate = gate
        self.notifications = notifications
        self.navigator = navigator

    @BaseService.log_performance
    def sign_in(self, email: str, password: str) -> ServiceResult[Identity]:
        if not (email or "").strip() or not password:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please enter your email and password.")
        try:
            identity = self.auth.sign_in_with_password(email.strip(), password)
        except AuthException as e:
            self.logger.info(f"Sign-in rejected for {mask_value(email)}: {e}")
            self.notifications.error(str(e))
            return service_err(ErrorCodes.AUTH_ERROR, str(e))

        self.notifications.success(f"Welcome back, {identity.display_name}!")
        self.navigator.navigate(dashboard_for(identity.role))
        return service_ok(identity)

    @BaseService.log_performance
    def sign_up(self, full_name: str, email: str, password: str, user_type: str) -> ServiceResult[str]:
        if not (full_name or "").strip() or not (email or "").strip() or not password:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please fill in all fields.")
        if user_type not in USER_TYPES:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please choose an account type.")
        try:
            self.auth.sign_up(email.strip(), password, {"full_name": full_name.strip(), "user_type": user_type})
        except AuthException as e:
            self.notifications.error(str(e))
            return service_err(ErrorCodes.AUTH_ERROR, str(e))

        message = "Registration successful! Please check your email to confirm your account."
        self.notifications.success(message)
        return service_ok(message)

    @BaseService.log_performance
    def reset_password(self, email: str, redirect_to: Optional[str] = None) -> ServiceResult[str]:
        if not (email or "").strip():
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please enter your email address.")
        try:
            self.auth.reset_password_for_email(email.strip(), redirect_to)
        except AuthException as e:
            self.notifications.error(str(e))
            return service_err(ErrorCodes.AUTH_ERROR, str(e))

        message = "Password reset link has been sent to your email."
        self.notifications.success(message)
        return service_ok(message)

    def oauth_url(self, provider: str, redirect_to: Optional[str] = None) -> ServiceResult[str]:
        if provider not in OAUTH_PROVIDERS:
            return service_err(ErrorCodes.VALIDATION_ERROR, f"Unsupported provider: {provider}")
        try:
            return service_ok(self.auth.oauth_url(provider, redirect_to))
        except AuthException as e:
            return service_err(ErrorCodes.AUTH_ERROR, str(e))

    @BaseService.log_performance
    def sign_out(self) -> ServiceResult[None]:
        """Sign out; the visitor ends up anonymous even when the remote call fails."""
        identity = self.gate.identity
        self.navigator.navigate(HomePage())
        if identity is None:
            return service_ok(None)
        try:
            self.auth.sign_out(identity)
        except AuthException as e:
            self.logger.warning(f"Remote sign-out failed: {e}")
            self.notifications.error(f"Sign out failed: {e}")
            return service_err(ErrorCodes.AUTH_ERROR, str(e))

        self.notifications.success("You have been signed out.")
        return service_ok(None)
