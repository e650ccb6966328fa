"""
Customer and developer dashboards.

Purchase history is read from ``orders`` with the purchased service embedded.
Developer dashboards list the developer's own services, delete them (images
first, then the row) and summarise sales from the bundled sales dataset.
"""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from infrastructure.auth import Identity
from infrastructure.data import DataServiceException, DataServiceInterface
from infrastructure.storage import StorageException, StorageInterface
from storefront.domain.records import Service
from storefront.domain.sample_data import CATEGORY_SALES_DATA, DEMO_DEVELOPER_ID, SALES_DATA

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


@dataclass(frozen=True)
class DeletedService:
    title: str
    image_warning: Optional[str] = None


class DashboardService(BaseService):
    def __init__(self, data: DataServiceInterface, storage: StorageInterface):
        super().__init__()
        self.data = data
        self.storage = storage

    @BaseService.log_performance
    def purchased_services(self, identity: Identity) -> ServiceResult[List[Service]]:
        """
        Services bought by ``identity``, one entry per service. Orders whose
        service has since been deleted are skipped.
        """
        try:
            rows = self.data.select(
                "orders",
                columns="id, services(*)",
                filters={"user_id": identity.user_id},
                access_token=identity.access_token,
            )
        except DataServiceException as e:
            return service_err(ErrorCodes.REMOTE_READ_ERROR, str(e))

        unique: "OrderedDict[str, Service]" = OrderedDict()
        for row in rows:
            service_row = row.get("services")
            if not service_row:
                continue
            service = Service.from_row(service_row)
            unique.setdefault(service.id, service)
        return service_ok(list(unique.values()))

    @BaseService.log_performance
    def developer_services(self, identity: Identity) -> ServiceResult[List[Service]]:
        try:
            rows = self.data.select(
                "services", filters={"developer_id": identity.user_id}, access_token=identity.access_token
            )
        except DataServiceException as e:
            return service_err(ErrorCodes.REMOTE_READ_ERROR, str(e))
        return service_ok([Service.from_row(row) for row in rows])

    @BaseService.log_performance
    def delete_service(self, identity: Identity, service_id: str) -> ServiceResult[DeletedService]:
        """
        Delete one of the developer's services. Image removal failures are
        reported but do not stop the row deletion.
        """
        owner_filter = {"id": service_id, "developer_id": identity.user_id}
        try:
            rows = self.data.select("services", filters=owner_filter, access_token=identity.access_token)
        except DataServiceException as e:
            return service_err(ErrorCodes.REMOTE_READ_ERROR, str(e))
        if not rows:
            return service_err(ErrorCodes.SERVICE_NOT_FOUND, f"Service {service_id} does not exist")
        service = Service.from_row(rows[0])

        image_warning = None
        paths = [p for p in (self.storage.path_from_url(url) for url in service.all_image_urls()) if p]
        if paths:
            try:
                self.storage.remove(paths, access_token=identity.access_token)
            except StorageException as e:
                self.logger.warning(f"Image cleanup failed for service {service_id}: {e}")
                image_warning = f"Could not delete associated images: {e}"

        try:
            self.data.delete("services", owner_filter, access_token=identity.access_token)
        except DataServiceException as e:
            return service_err(ErrorCodes.REMOTE_WRITE_ERROR, str(e))

        self.logger.info(f"Deleted service {service_id} ({len(paths)} image(s))")
        return service_ok(DeletedService(title=service.title, image_warning=image_warning))

    def analytics(self, developer_id: str, services: List[Service]) -> Dict[str, Any]:
        """
        Sales summary from the bundled sales dataset. Developers without sales
        figures see the demo developer's numbers.
        """
        monthly = [s for s in SALES_DATA if s["developer_id"] == developer_id]
        by_category = [s for s in CATEGORY_SALES_DATA if s["developer_id"] == developer_id]
        demo = not monthly and not by_category
        if demo:
            monthly = [s for s in SALES_DATA if s["developer_id"] == DEMO_DEVELOPER_ID]
            by_category = [s for s in CATEGORY_SALES_DATA if s["developer_id"] == DEMO_DEVELOPER_ID]

        ratings = [s.rating for s in services if s.rating]
        return {
            "demo": demo,
            "total_revenue": sum(s["revenue"] for s in monthly),
            "monthly_revenue": [{"month": s["date"], "revenue": s["revenue"]} for s in monthly],
            "revenue_by_category": [{"category": s["category"], "revenue": s["revenue"]} for s in by_category],
            "listed_services": len(services),
            "average_rating": round(sum(ratings) / len(ratings), 1) if ratings else 0,
        }
