"""
Catalog browsing: remote reads of the ``services`` collection plus the pure
search, filter, directory and pagination helpers applied to the result.

Remote reads return a ServiceResult; falling back to the bundled sample data
is the caller's decision.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional, Sequence

from django.conf import settings
from django.core.paginator import Paginator

from infrastructure.data import DataServiceException, DataServiceInterface
from storefront.domain.records import DeveloperSummary, Service

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


@dataclass
class ServiceFilters:
    """
    Sidebar filters. Unparseable prices and a zero rating are ignored; an empty
    category list means every category.
    """

    price_min: Optional[Decimal] = None
    price_max: Optional[Decimal] = None
    categories: List[str] = field(default_factory=list)
    rating: float = 0

    @staticmethod
    def _parse_price(value: Any) -> Optional[Decimal]:
        if value is None or value == "":
            return None
        try:
            price = Decimal(str(value))
        except (InvalidOperation, ValueError):
            return None
        return price if price.is_finite() else None

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "ServiceFilters":
        categories = params.get("categories") or []
        if isinstance(categories, str):
            categories = [c for c in categories.split(",") if c]
        try:
            rating = float(params.get("rating") or 0)
        except (TypeError, ValueError):
            rating = 0
        return cls(
            price_min=cls._parse_price(params.get("price_min")),
            price_max=cls._parse_price(params.get("price_max")),
            categories=list(categories),
            rating=rating,
        )

    def matches(self, service: Service) -> bool:
        if self.price_min is not None and service.price < self.price_min:
            return False
        if self.price_max is not None and service.price > self.price_max:
            return False
        if self.categories and service.category not in self.categories:
            return False
        if self.rating > 0 and service.rating < self.rating:
            return False
        return True


@dataclass(frozen=True)
class PageOf:
    items: List[Any]
    page: int
    num_pages: int
    count: int
    has_next: bool
    has_previous: bool


def paginate(items: Sequence[Any], page: Any, per_page: int) -> PageOf:
    """Slice ``items`` into a page; out-of-range or invalid page numbers are clamped."""
    paginator = Paginator(list(items), per_page)
    current = paginator.get_page(page)
    return PageOf(
        items=list(current.object_list),
        page=current.number,
        num_pages=paginator.num_pages,
        count=paginator.count,
        has_next=current.has_next(),
        has_previous=current.has_previous(),
    )


def search_services(services: Iterable[Service], query: str = "", filters: Optional[ServiceFilters] = None):
    """Case-insensitive match on title, description or developer, then the sidebar filters."""
    needle = (query or "").strip().lower()
    filters = filters or ServiceFilters()
    return [
        s
        for s in services
        if (
            not needle
            or needle in s.title.lower()
            or needle in s.description.lower()
            or needle in s.developer.lower()
        )
        and filters.matches(s)
    ]


def services_in_category(services: Iterable[Service], category: str, filters: Optional[ServiceFilters] = None):
    filters = filters or ServiceFilters()
    return [s for s in services if s.category == category and filters.matches(s)]


def developer_directory(services: Iterable[Service]) -> List[DeveloperSummary]:
    """One entry per developer, in order of first appearance."""
    developers: Dict[str, Dict[str, Any]] = {}
    for service in services:
        entry = developers.setdefault(
            service.developer_id,
            {"name": service.developer, "verified": service.developer_verified, "count": 0, "categories": []},
        )
        entry["count"] += 1
        if service.category not in entry["categories"]:
            entry["categories"].append(service.category)
    return [
        DeveloperSummary(
            developer_id=developer_id,
            name=entry["name"],
            verified=entry["verified"],
            service_count=entry["count"],
            categories=tuple(entry["categories"]),
        )
        for developer_id, entry in developers.items()
    ]


def price_range(services: Sequence[Service]) -> str:
    """``$min`` when every price is equal, ``$min - $max`` otherwise, empty without services."""
    if not services:
        return ""
    prices = [s.price for s in services]
    low, high = min(prices), max(prices)
    if low == high:
        return f"${low:.2f}"
    return f"${low:.2f} - ${high:.2f}"


class CatalogService(BaseService):
    def __init__(self, data: DataServiceInterface, per_page: Optional[int] = None):
        super().__init__()
        self.data = data
        self.per_page = per_page or settings.SERVICES_PER_PAGE

    @BaseService.log_performance
    def fetch_services(self, developer_id: Optional[str] = None) -> ServiceResult[List[Service]]:
        """Read ``services`` (optionally one developer's)."""
        filters = {"developer_id": developer_id} if developer_id else None
        try:
            rows = self.data.select("services", filters=filters)
        except DataServiceException as e:
            return service_err(ErrorCodes.REMOTE_READ_ERROR, str(e))
        return service_ok([Service.from_row(row) for row in rows])

    @BaseService.log_performance
    def get_service(self, service_id: str) -> ServiceResult[Service]:
        try:
            rows = self.data.select("services", filters={"id": service_id})
        except DataServiceException as e:
            return service_err(ErrorCodes.REMOTE_READ_ERROR, str(e))
        if not rows:
            return service_err(ErrorCodes.SERVICE_NOT_FOUND, f"Service {service_id} does not exist")
        return service_ok(Service.from_row(rows[0]))

    def page(self, services: Sequence[Service], page: Any = 1) -> PageOf:
        return paginate(services, page, self.per_page)
