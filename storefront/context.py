"""
Per-request application context.

Everything a view needs (cart, session gate, notification channel, navigator,
checkout and the feature services) is built here for one browser session and
passed explicitly; nothing is held in module globals.
"""

import logging
from functools import cached_property
from typing import MutableMapping

from infrastructure.auth import AuthServiceInterface
from infrastructure.container import ServiceContainer

from .services import (
    AccountService,
    CartService,
    CatalogService,
    ChatService,
    CheckoutOrchestrator,
    DashboardService,
    ListingService,
    MessageService,
    ProfileService,
    ReviewService,
)
from .session import CartStore, Navigator, NotificationChannel, SessionGate

logger = logging.getLogger(__name__)


class AppContext:
    def __init__(self, container: ServiceContainer, session: MutableMapping, auth: AuthServiceInterface = None):
        self.container = container
        self.session = session
        self.auth = auth or container.auth()
        self.notifications = NotificationChannel(session)
        self.gate = SessionGate(self.auth, session)
        self.navigator = Navigator(self.gate, session)
        self.cart = CartService(CartStore(session), self.notifications)
        self.checkout = CheckoutOrchestrator(
            cart=self.cart,
            data=container.data(),
            notifications=self.notifications,
            navigator=self.navigator,
            in_flight=container.checkouts_in_flight,
        )

    @classmethod
    def build(cls, container: ServiceContainer, session: MutableMapping) -> "AppContext":
        """Create the context and resolve the initial session."""
        context = cls(container, session)
        context.gate.resolve()
        return context

    def purchase(self):
        return self.checkout.purchase(self.cart.state, self.gate.identity)

    @cached_property
    def catalog(self) -> CatalogService:
        return CatalogService(self.container.data())

    @cached_property
    def dashboard(self) -> DashboardService:
        return DashboardService(self.container.data(), self.container.storage())

    @cached_property
    def reviews(self) -> ReviewService:
        return ReviewService(self.container.data(), self.dashboard)

    @cached_property
    def listings(self) -> ListingService:
        return ListingService(self.container.data(), self.container.storage())

    @cached_property
    def profiles(self) -> ProfileService:
        return ProfileService(self.container.data())

    @cached_property
    def messages(self) -> MessageService:
        return MessageService(self.container.data())

    @cached_property
    def account(self) -> AccountService:
        return AccountService(self.auth, self.gate, self.notifications, self.navigator)

    @cached_property
    def chat(self) -> ChatService:
        return ChatService(self.container.chat(), self.session)

    def close(self) -> None:
        self.gate.close()
