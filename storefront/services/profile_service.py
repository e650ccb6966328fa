"""Developer profiles: public bio and the seller's own settings form."""

from typing import Any, Dict, Optional

from infrastructure.auth import Identity, Role
from infrastructure.data import DataServiceException, DataServiceInterface
from utils.logging_utils import sanitize_payload

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

DEFAULT_BIO = "This developer has not added a bio yet."

# Form field -> ``profiles`` column
PROFILE_FIELDS = {
    "full_name": "full_name",
    "company_name": "company_name",
    "email": "email",
    "mobile_no": "mobile_no",
    "address": "address",
    "pan_no": "pan_no",
    "aadhaar_no": "aadhaar_no",
    "qualification": "qualification",
    "description": "description",
}


class ProfileService(BaseService):
    def __init__(self, data: DataServiceInterface):
        super().__init__()
        self.data = data

    @BaseService.log_performance
    def fetch_profile(self, user_id: str) -> ServiceResult[Optional[Dict[str, Any]]]:
        try:
            rows = self.data.select("profiles", filters={"id": user_id})
        except DataServiceException as e:
            return service_err(ErrorCodes.REMOTE_READ_ERROR, str(e))
        return service_ok(rows[0] if rows else None)

    def bio(self, user_id: str) -> str:
        """Public bio, or the placeholder when the profile is missing or unreadable."""
        result = self.fetch_profile(user_id)
        profile = result.value if result.ok else None
        return (profile or {}).get("description") or DEFAULT_BIO

    def settings_form(self, identity: Identity) -> Dict[str, str]:
        """Current settings, prefilled from the account when no profile row exists."""
        result = self.fetch_profile(identity.user_id)
        profile = (result.value if result.ok else None) or {}
        form = {field: profile.get(column) or "" for field, column in PROFILE_FIELDS.items()}
        form["full_name"] = form["full_name"] or identity.full_name
        form["email"] = form["email"] or identity.email
        return form

    @BaseService.log_performance
    def update_settings(self, identity: Optional[Identity], form: Dict[str, Any]) -> ServiceResult[Dict[str, Any]]:
        if identity is None:
            return service_err(ErrorCodes.NOT_AUTHENTICATED, "Please sign in to update your profile.")
        if identity.role is not Role.SELLER:
            return service_err(ErrorCodes.PERMISSION_DENIED, "Only developers have a public profile.")
        if not (form.get("full_name") or "").strip() or not (form.get("email") or "").strip():
            return service_err(ErrorCodes.VALIDATION_ERROR, "Full name and email are required.")

        row = {column: (form.get(field) or "").strip() for field, column in PROFILE_FIELDS.items()}
        row.update(id=identity.user_id, user_type="developer")
        self.logger.info(f"Updating profile {sanitize_payload(row, ('id', 'email', 'full_name'))}")
        try:
            stored = self.data.upsert("profiles", [row], access_token=identity.access_token)
        except DataServiceException as e:
            return service_err(ErrorCodes.REMOTE_WRITE_ERROR, str(e))
        return service_ok(stored[0] if stored else row)
