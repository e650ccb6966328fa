"""
Navigator: the single ``navigate(page)`` entry point used by every command.

The requested page is remembered in the browser session; the page actually
shown is decided by the session gate:

- while the gate is resolving, only the loading page is shown
- the auth page is skipped for signed-in visitors
- dashboards need a signed-in identity, seller pages need the seller role
"""

import logging
from typing import MutableMapping

from infrastructure.auth import Role
from storefront.domain.navigation import (
    SELLER_PAGES,
    SIGNED_IN_PAGES,
    AuthPage,
    CustomerDashboardPage,
    DeveloperDashboardPage,
    HomePage,
    LoadingPage,
    Page,
    page_from_dict,
    page_to_dict,
)

from .gate import SessionGate

logger = logging.getLogger(__name__)

VIEW_SESSION_KEY = "view"


def dashboard_for(role: Role) -> Page:
    """Post-login landing page for a role."""
    if role is Role.SELLER:
        return DeveloperDashboardPage()
    return CustomerDashboardPage()


class Navigator:
    def __init__(self, gate: SessionGate, session: MutableMapping):
        self.gate = gate
        self.session = session

    @property
    def requested(self) -> Page:
        raw = self.session.get(VIEW_SESSION_KEY)
        if not raw:
            return HomePage()
        try:
            return page_from_dict(raw)
        except (ValueError, TypeError) as e:
            logger.warning(f"Discarding stored page: {e}")
            return HomePage()

    @property
    def current(self) -> Page:
        return self.guard(self.requested)

    def navigate(self, page: Page) -> Page:
        """Request a view change and return the page that will be shown."""
        self.session[VIEW_SESSION_KEY] = page_to_dict(page)
        shown = self.guard(page)
        logger.debug(f"Navigate to {page.name} (showing {shown.name})")
        return shown

    def guard(self, page: Page) -> Page:
        if self.gate.is_resolving:
            return LoadingPage()

        role = self.gate.role
        if isinstance(page, AuthPage):
            return HomePage() if role is not None else page
        if isinstance(page, SIGNED_IN_PAGES) and role is None:
            return AuthPage(initial_form="login")
        if isinstance(page, SELLER_PAGES) and role is not Role.SELLER:
            return dashboard_for(role)
        return page
