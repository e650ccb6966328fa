"""
Storefront pages as a closed set of typed records.

Every page is a frozen dataclass with a fixed ``name`` and its own typed
parameters; ``Page`` is the union of all of them. ``page_from_dict`` is the only
way untyped input (an API payload) becomes a page, and it rejects unknown names
and unexpected parameters.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Type, Union

AUTH_FORMS = ("login", "signup")


def _require_text(page, *fields):
    for name in fields:
        value = getattr(page, name)
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{page.name}: '{name}' is required")


@dataclass(frozen=True)
class LoadingPage:
    name: ClassVar[str] = "loading"


@dataclass(frozen=True)
class HomePage:
    name: ClassVar[str] = "home"


@dataclass(frozen=True)
class AboutPage:
    name: ClassVar[str] = "about"


@dataclass(frozen=True)
class AuthPage:
    name: ClassVar[str] = "auth"
    initial_form: str = "login"

    def __post_init__(self):
        if self.initial_form not in AUTH_FORMS:
            raise ValueError(f"auth: initial_form must be one of {AUTH_FORMS}")


@dataclass(frozen=True)
class SearchPage:
    name: ClassVar[str] = "search"
    query: str = ""


@dataclass(frozen=True)
class CartPage:
    name: ClassVar[str] = "cart"


@dataclass(frozen=True)
class CategoriesListPage:
    name: ClassVar[str] = "categories-list"


@dataclass(frozen=True)
class CategoryPage:
    name: ClassVar[str] = "category"
    category_name: str = ""

    def __post_init__(self):
        _require_text(self, "category_name")


@dataclass(frozen=True)
class DevelopersListPage:
    name: ClassVar[str] = "developers-list"


@dataclass(frozen=True)
class DeveloperProfilePage:
    name: ClassVar[str] = "developer"
    developer_id: str = ""
    developer_name: str = ""

    def __post_init__(self):
        _require_text(self, "developer_id")


@dataclass(frozen=True)
class ContactPage:
    name: ClassVar[str] = "contact"
    developer_id: Optional[str] = None
    developer_name: Optional[str] = None


@dataclass(frozen=True)
class ChatPage:
    name: ClassVar[str] = "chat"


@dataclass(frozen=True)
class CustomerDashboardPage:
    name: ClassVar[str] = "customer-dashboard"


@dataclass(frozen=True)
class DeveloperDashboardPage:
    name: ClassVar[str] = "developer-dashboard"


@dataclass(frozen=True)
class DeveloperSettingsPage:
    name: ClassVar[str] = "developer-settings"


@dataclass(frozen=True)
class ServiceManagementPage:
    name: ClassVar[str] = "service-management"
    service_id: Optional[str] = None


Page = Union[
    LoadingPage,
    HomePage,
    AboutPage,
    AuthPage,
    SearchPage,
    CartPage,
    CategoriesListPage,
    CategoryPage,
    DevelopersListPage,
    DeveloperProfilePage,
    ContactPage,
    ChatPage,
    CustomerDashboardPage,
    DeveloperDashboardPage,
    DeveloperSettingsPage,
    ServiceManagementPage,
]

PAGES: Dict[str, Type] = {page_type.name: page_type for page_type in Page.__args__}

# Pages that need a signed-in identity
SIGNED_IN_PAGES = (CustomerDashboardPage, DeveloperDashboardPage, DeveloperSettingsPage, ServiceManagementPage)

# Pages restricted to sellers
SELLER_PAGES = (DeveloperDashboardPage, DeveloperSettingsPage, ServiceManagementPage)


def page_to_dict(page: Page) -> Dict[str, Any]:
    return {"page": page.name, "params": dataclasses.asdict(page)}


def page_from_dict(data: Dict[str, Any]) -> Page:
    """
    Build a page from ``{"page": name, "params": {...}}``.

    Raises:
        ValueError: Unknown page, unexpected parameter or invalid parameter value
    """
    if not isinstance(data, dict):
        raise ValueError("page must be an object")
    name = data.get("page")
    page_type = PAGES.get(name)
    if page_type is None:
        raise ValueError(f"Unknown page: {name!r}")

    params = data.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{name}: params must be an object")
    allowed = {f.name for f in dataclasses.fields(page_type)}
    unexpected = set(params) - allowed
    if unexpected:
        raise ValueError(f"{name}: unexpected parameters {sorted(unexpected)}")
    for key, value in params.items():
        if value is not None and not isinstance(value, str):
            raise ValueError(f"{name}: '{key}' must be a string")
    return page_type(**params)
