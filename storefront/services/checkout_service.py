"""
Checkout: turns the cart into ``orders`` rows in a single batch insert.

Outcomes:
    - no identity: NotAuthenticated, redirect to sign-in, no remote call
    - empty cart: validation error, no remote call
    - a checkout already running for the identity: CheckoutInProgress, no remote call
    - remote success: cart cleared, success notification, redirect to the buyer dashboard
    - remote failure: cart untouched, error notification, no redirect

There is no automatic retry.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import List, Optional, Tuple

from infrastructure.auth import Identity
from infrastructure.container import InFlightRegistry
from infrastructure.data import DataServiceException, DataServiceInterface
from storefront.domain.cart import CartState, Clear
from storefront.domain.navigation import AuthPage, CustomerDashboardPage, Page
from storefront.infra.observability.metrics import checkouts_total
from storefront.session.navigator import Navigator
from storefront.session.notifications import NotificationChannel

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from .cart_service import CartService


class PurchaseError(str, Enum):
    NOT_AUTHENTICATED = ErrorCodes.NOT_AUTHENTICATED
    CART_EMPTY = ErrorCodes.CART_EMPTY
    CHECKOUT_IN_PROGRESS = ErrorCodes.CHECKOUT_IN_PROGRESS
    REMOTE_WRITE_ERROR = ErrorCodes.REMOTE_WRITE_ERROR


@dataclass(frozen=True)
class PurchaseConfirmation:
    order_ids: Tuple[str, ...]
    item_count: int
    total: Decimal
    redirect: Page


def order_rows(state: CartState, identity: Identity) -> List[dict]:
    """One order row per cart line, priced at the price captured in the cart."""
    return [
        {
            "user_id": identity.user_id,
            "service_id": line.item_id,
            "quantity": line.quantity,
            "price_at_purchase": str(line.unit_price),
        }
        for line in state.lines
    ]


class CheckoutOrchestrator(BaseService):
    def __init__(
        self,
        cart: CartService,
        data: DataServiceInterface,
        notifications: NotificationChannel,
        navigator: Navigator,
        in_flight: InFlightRegistry,
    ):
        super().__init__()
        self.cart = cart
        self.data = data
        self.notifications = notifications
        self.navigator = navigator
        self.in_flight = in_flight

    @BaseService.log_performance
    def purchase(self, state: CartState, identity: Optional[Identity]) -> ServiceResult[PurchaseConfirmation]:
        if identity is None:
            checkouts_total.labels(status="not_authenticated").inc()
            self.notifications.error("Please sign in to complete your purchase.")
            self.navigator.navigate(AuthPage(initial_form="login"))
            return service_err(PurchaseError.NOT_AUTHENTICATED.value, "Sign in to complete your purchase.")

        if state.is_empty:
            checkouts_total.labels(status="cart_empty").inc()
            return service_err(PurchaseError.CART_EMPTY.value, "Your cart is empty.")

        if not self.in_flight.acquire(identity.user_id):
            checkouts_total.labels(status="in_progress").inc()
            return service_err(PurchaseError.CHECKOUT_IN_PROGRESS.value, "A checkout is already in progress.")

        try:
            rows = order_rows(state, identity)
            try:
                created = self.data.insert("orders", rows, access_token=identity.access_token)
            except DataServiceException as e:
                self.logger.warning(f"Order submission failed for {len(rows)} line(s): {e}")
                checkouts_total.labels(status="failed").inc()
                self.notifications.error(f"Checkout failed: {e}")
                return service_err(PurchaseError.REMOTE_WRITE_ERROR.value, str(e))
        finally:
            self.in_flight.release(identity.user_id)

        self.cart.dispatch(Clear())
        self.notifications.success("Purchase successful! Your services are now in your dashboard.")
        redirect = CustomerDashboardPage()
        self.navigator.navigate(redirect)
        checkouts_total.labels(status="succeeded").inc()
        self.logger.info(f"Checkout completed: {len(rows)} order line(s), total {state.subtotal}")

        return service_ok(
            PurchaseConfirmation(
                order_ids=tuple(str(row.get("id", "")) for row in created or []),
                item_count=state.item_count,
                total=state.subtotal,
                redirect=redirect,
            )
        )
