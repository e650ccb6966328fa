"""
Cart command handlers.

Each command runs three explicit steps: the pure transition (``reduce``), a
full-state save to the cart store, then a notification describing the change.
"""

from storefront.domain.cart import AddItem, CartAction, CartState, Clear, RemoveItem, SetQuantity, reduce
from storefront.domain.records import Service
from storefront.infra.observability.metrics import cart_mutations_total
from storefront.session.cart_store import CartStore
from storefront.session.notifications import NotificationChannel

from .base import BaseService


class CartService(BaseService):
    """
    Owns the in-memory cart for one request context.

    The cart is loaded from the store once, on construction.
    """

    def __init__(self, store: CartStore, notifications: NotificationChannel):
        super().__init__()
        self.store = store
        self.notifications = notifications
        self._state = store.load()

    @property
    def state(self) -> CartState:
        return self._state

    def dispatch(self, action: CartAction) -> CartState:
        """Transition and persist, without notifying."""
        self._state = reduce(self._state, action)
        self.store.save(self._state)
        cart_mutations_total.labels(action=type(action).__name__).inc()
        return self._state

    def add_item(self, service: Service) -> CartState:
        state = self.dispatch(service.to_add_item())
        self.notifications.success(f"'{service.title}' added to cart!")
        return state

    def add(self, action: AddItem) -> CartState:
        state = self.dispatch(action)
        self.notifications.success(f"'{action.title}' added to cart!")
        return state

    def remove_item(self, item_id: str) -> CartState:
        line = self._state.find(item_id)
        state = self.dispatch(RemoveItem(item_id))
        if line is not None:
            self.notifications.success(f"'{line.title}' removed from cart.")
        return state

    def set_quantity(self, item_id: str, quantity: int) -> CartState:
        if quantity <= 0:
            return self.remove_item(item_id)

        line = self._state.find(item_id)
        state = self.dispatch(SetQuantity(item_id, quantity))
        if line is not None and line.quantity != quantity:
            self.notifications.success(f"Quantity of '{line.title}' updated to {quantity}.")
        return state

    def clear(self) -> CartState:
        had_items = not self._state.is_empty
        state = self.dispatch(Clear())
        if had_items:
            self.notifications.success("Cart cleared.")
        return state
