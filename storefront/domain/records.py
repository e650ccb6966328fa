"""Catalog records as read from the remote row store (snake_case columns)."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from .cart import AddItem, to_money

CATEGORY_NAMES = ("Web Application", "Mobile App", "Desktop Software", "Agentic AI")


@dataclass(frozen=True)
class Service:
    id: str
    title: str
    category: str
    developer: str
    developer_id: str
    price: Decimal
    rating: float = 0.0
    developer_verified: bool = False
    image_url: str = ""
    description: str = ""
    image_urls: Tuple[str, ...] = ()

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Service":
        image_urls = row.get("image_urls") or ()
        return cls(
            id=str(row["id"]),
            title=row.get("title") or "",
            category=row.get("category") or "",
            developer=row.get("developer") or "",
            developer_id=str(row.get("developer_id") or ""),
            price=to_money(row.get("price") or 0),
            rating=float(row.get("rating") or 0),
            developer_verified=bool(row.get("developer_verified")),
            image_url=row.get("image_url") or "",
            description=row.get("description") or "",
            image_urls=tuple(image_urls),
        )

    def to_add_item(self) -> AddItem:
        return AddItem(item_id=self.id, title=self.title, unit_price=self.price, seller_ref=self.developer_id)

    def all_image_urls(self) -> List[str]:
        urls = [self.image_url] if self.image_url else []
        return urls + [url for url in self.image_urls if url and url not in urls]


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    description: str


@dataclass(frozen=True)
class Review:
    id: str
    developer_id: str
    reviewer_name: str
    rating: int
    comment: str
    date: str
    reviewer_id: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Review":
        return cls(
            id=str(row["id"]),
            developer_id=str(row.get("developer_id") or ""),
            reviewer_name=row.get("reviewer_name") or "Anonymous User",
            rating=int(row.get("rating") or 0),
            comment=row.get("comment") or "",
            date=str(row.get("date") or row.get("created_at") or ""),
            reviewer_id=row.get("reviewer_id"),
        )


@dataclass(frozen=True)
class DeveloperSummary:
    developer_id: str
    name: str
    verified: bool
    service_count: int
    categories: Tuple[str, ...] = field(default_factory=tuple)
