"""Create and update service listings for sellers."""

import uuid
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from infrastructure.auth import Identity, Role
from infrastructure.data import DataServiceException, DataServiceInterface
from infrastructure.storage import StorageException, StorageInterface
from storefront.domain.records import CATEGORY_NAMES, Service

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


class ListingService(BaseService):
    def __init__(self, data: DataServiceInterface, storage: StorageInterface):
        super().__init__()
        self.data = data
        self.storage = storage

    def _validate(self, payload: Dict[str, Any]) -> ServiceResult[Dict[str, Any]]:
        title = (payload.get("title") or "").strip()
        if not title:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please enter a title.")
        try:
            price = Decimal(str(payload.get("price")))
        except (InvalidOperation, ValueError):
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please enter a valid price.")
        if not price.is_finite() or price < 0:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please enter a valid price.")
        category = payload.get("category")
        if category not in CATEGORY_NAMES:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please choose a category.")
        return service_ok(
            {
                "title": title,
                "price": str(price.quantize(Decimal("0.01"))),
                "category": category,
                "description": (payload.get("description") or "").strip(),
            }
        )

    def _upload_images(self, identity: Identity, images: List[Any]) -> List[str]:
        urls = []
        for image in images:
            name = getattr(image, "name", "image")
            content_type = getattr(image, "content_type", None) or "application/octet-stream"
            stored = self.storage.upload(
                image, f"{identity.user_id}/{uuid.uuid4().hex}-{name}", content_type, access_token=identity.access_token
            )
            urls.append(stored.url)
        return urls

    @BaseService.log_performance
    def save_listing(
        self,
        identity: Optional[Identity],
        payload: Dict[str, Any],
        service_id: Optional[str] = None,
        images: Optional[List[Any]] = None,
    ) -> ServiceResult[Service]:
        """
        Create a listing, or update ``service_id`` when given. Only the owning
        seller may update a listing; anything else reads as not found.
        """
        if identity is None:
            return service_err(ErrorCodes.NOT_AUTHENTICATED, "Please sign in to manage your services.")
        if identity.role is not Role.SELLER:
            return service_err(ErrorCodes.PERMISSION_DENIED, "Only developers can publish services.")

        validated = self._validate(payload)
        if not validated.ok:
            return validated
        values = validated.value
        owner_filter = {"id": service_id, "developer_id": identity.user_id}

        try:
            if service_id:
                existing = self.data.select("services", filters=owner_filter, access_token=identity.access_token)
                if not existing:
                    return service_err(ErrorCodes.SERVICE_NOT_FOUND, f"Service with ID {service_id} not found.")

            if images:
                urls = self._upload_images(identity, images)
                values.update(image_url=urls[0], image_urls=urls)

            if service_id:
                rows = self.data.update("services", values, owner_filter, access_token=identity.access_token)
            else:
                values.update(
                    developer=identity.display_name,
                    developer_id=identity.user_id,
                    developer_verified=False,
                    rating=0,
                )
                rows = self.data.insert("services", [values], access_token=identity.access_token)
        except StorageException as e:
            return service_err(ErrorCodes.REMOTE_WRITE_ERROR, f"Image upload failed: {e}")
        except DataServiceException as e:
            return service_err(ErrorCodes.REMOTE_WRITE_ERROR, str(e))

        row = rows[0] if rows else {"id": service_id or "", **values}
        return service_ok(Service.from_row(row))
