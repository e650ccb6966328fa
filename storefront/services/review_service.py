"""
Developer reviews.

A signed-in visitor may review a developer once their purchase history holds
one of that developer's services. Developers cannot review themselves.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from django.conf import settings

from infrastructure.auth import Identity
from infrastructure.data import DataServiceException, DataServiceInterface
from storefront.domain.records import Review

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from .catalog_service import PageOf, paginate
from .dashboard_service import DashboardService


def average_rating(reviews: List[Review]) -> float:
    if not reviews:
        return 0
    return round(sum(r.rating for r in reviews) / len(reviews), 1)


def newest_first(reviews: List[Review]) -> List[Review]:
    return sorted(reviews, key=lambda r: r.date, reverse=True)


class ReviewService(BaseService):
    def __init__(self, data: DataServiceInterface, dashboard: DashboardService, per_page: Optional[int] = None):
        super().__init__()
        self.data = data
        self.dashboard = dashboard
        self.per_page = per_page or settings.REVIEWS_PER_PAGE

    @BaseService.log_performance
    def fetch_reviews(self, developer_id: str) -> ServiceResult[List[Review]]:
        try:
            rows = self.data.select("reviews", filters={"developer_id": developer_id}, order="date.desc")
        except DataServiceException as e:
            return service_err(ErrorCodes.REMOTE_READ_ERROR, str(e))
        return service_ok(newest_first([Review.from_row(row) for row in rows]))

    def page(self, reviews: List[Review], page: Any = 1) -> PageOf:
        return paginate(reviews, page, self.per_page)

    @BaseService.log_performance
    def can_review(self, identity: Optional[Identity], developer_id: str) -> ServiceResult[bool]:
        if identity is None or identity.user_id == developer_id:
            return service_ok(False)
        history = self.dashboard.purchased_services(identity)
        if not history.ok:
            return history
        return service_ok(any(service.developer_id == developer_id for service in history.value))

    @BaseService.log_performance
    def submit_review(
        self, identity: Optional[Identity], developer_id: str, rating: Any, comment: str
    ) -> ServiceResult[Review]:
        if identity is None:
            return service_err(ErrorCodes.NOT_AUTHENTICATED, "Please sign in to leave a review.")
        if isinstance(rating, bool) or not isinstance(rating, int) or not 1 <= rating <= 5:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please select a rating.")
        if not (comment or "").strip():
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please enter a comment.")

        eligible = self.can_review(identity, developer_id)
        if not eligible.ok:
            return service_err(ErrorCodes.REMOTE_READ_ERROR, "Could not verify your purchase history.")
        if not eligible.value:
            return service_err(
                ErrorCodes.REVIEW_NOT_ALLOWED, "You can only review developers whose services you have purchased."
            )

        row = {
            "developer_id": developer_id,
            "reviewer_id": identity.user_id,
            "reviewer_name": identity.full_name or "Anonymous User",
            "rating": rating,
            "comment": comment.strip(),
            "date": datetime.now(timezone.utc).isoformat(),
        }
        try:
            created = self.data.insert("reviews", [row], access_token=identity.access_token)
        except DataServiceException as e:
            self.logger.warning(f"Review submission failed for developer {developer_id}: {e}")
            return service_err(ErrorCodes.REMOTE_WRITE_ERROR, "Failed to submit review. Please try again.")

        return service_ok(Review.from_row(created[0] if created else {"id": "", **row}))
