"""
Sample-data fallback policy for remote reads.

Services return a failed ServiceResult when a read fails; the views decide to
show the bundled sample data instead and tell the visitor.
"""

import logging
from typing import List, Optional, Tuple

from storefront.domain.records import Review, Service
from storefront.domain.sample_data import SAMPLE_REVIEWS, SAMPLE_SERVICES
from storefront.infra.observability.metrics import remote_read_fallbacks_total
from storefront.services import ServiceResult
from storefront.session.notifications import NotificationChannel

logger = logging.getLogger(__name__)

SERVICES_FALLBACK_MESSAGE = "Could not load services, showing sample data."
REVIEWS_FALLBACK_MESSAGE = "Could not load reviews, showing sample reviews."


def sample_services(developer_id: Optional[str] = None) -> List[Service]:
    return [
        Service.from_row(row) for row in SAMPLE_SERVICES if developer_id is None or row["developer_id"] == developer_id
    ]


def sample_reviews(developer_id: str) -> List[Review]:
    rows = [row for row in SAMPLE_REVIEWS if row["developer_id"] == developer_id]
    return sorted((Review.from_row(row) for row in rows), key=lambda r: r.date, reverse=True)


def services_or_sample(
    result: ServiceResult[List[Service]],
    notifications: NotificationChannel,
    developer_id: Optional[str] = None,
    message: str = SERVICES_FALLBACK_MESSAGE,
) -> Tuple[List[Service], bool]:
    """Return ``(services, used_sample)``."""
    if result.ok:
        return result.value, False
    logger.warning(f"Falling back to sample services: {result.error_detail}")
    remote_read_fallbacks_total.labels(collection="services").inc()
    notifications.error(message)
    return sample_services(developer_id), True


def reviews_or_sample(
    result: ServiceResult[List[Review]], notifications: NotificationChannel, developer_id: str
) -> Tuple[List[Review], bool]:
    if result.ok:
        return result.value, False
    logger.warning(f"Falling back to sample reviews: {result.error_detail}")
    remote_read_fallbacks_total.labels(collection="reviews").inc()
    notifications.error(REVIEWS_FALLBACK_MESSAGE)
    return sample_reviews(developer_id), True
