from typing import Any, Dict, Optional

from infrastructure.auth import Identity
from infrastructure.data import DataServiceException, DataServiceInterface
from utils.logging_utils import sanitize_payload

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


class MessageService(BaseService):
    """Contact messages to a developer, or to support when no developer is given."""

    def __init__(self, data: DataServiceInterface):
        super().__init__()
        self.data = data

    @BaseService.log_performance
    def send(
        self,
        email: str,
        content: str,
        developer_id: Optional[str] = None,
        identity: Optional[Identity] = None,
    ) -> ServiceResult[Dict[str, Any]]:
        if not (email or "").strip() or not (content or "").strip():
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please fill in both your email and a message.")

        row = {
            "sender_email": email.strip(),
            "content": content.strip(),
            "recipient_developer_id": developer_id or None,
            "sender_user_id": identity.user_id if identity else None,
        }
        self.logger.info(
            f"Sending message {sanitize_payload(row, ('sender_email', 'recipient_developer_id', 'sender_user_id'))}"
        )
        try:
            stored = self.data.insert(
                "messages", [row], access_token=identity.access_token if identity else None
            )
        except DataServiceException as e:
            return service_err(ErrorCodes.REMOTE_WRITE_ERROR, f"Error: {e}")
        return service_ok(stored[0] if stored else row)
