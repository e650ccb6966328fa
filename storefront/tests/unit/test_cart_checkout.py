import threading
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from infrastructure.container import InFlightRegistry
from infrastructure.data import DataServiceException, MockDataService
from storefront.domain.cart import AddItem, CartState
from storefront.domain.navigation import AuthPage, CustomerDashboardPage
from storefront.services import CartService, CheckoutOrchestrator, ErrorCodes
from storefront.session import CartStore, NotificationChannel, NotificationKind
from storefront.tests.factories import CartLineFactory, IdentityFactory, ServiceFactory


@pytest.fixture
def session():
    return {}


@pytest.fixture
def notifications(session):
    return NotificationChannel(session, ttl_seconds=60)


@pytest.fixture
def cart(session, notifications):
    return CartService(CartStore(session), notifications)


@pytest.fixture
def navigator():
    return MagicMock()


@pytest.fixture
def data():
    return MockDataService()


@pytest.fixture
def orchestrator(cart, data, notifications, navigator):
    return CheckoutOrchestrator(cart, data, notifications, navigator, InFlightRegistry())


def fill(cart, quantity=3, price="10.00"):
    cart.add(AddItem(item_id="svc-9", title="Support Bot", unit_price=Decimal(price)))
    if quantity > 1:
        cart.set_quantity("svc-9", quantity)
    return cart.state


@pytest.mark.unit
class TestCartService:
    def test_every_command_is_persisted(self, session, cart):
        cart.add_item(ServiceFactory(id="svc-1", title="Landing Page Kit", price=Decimal("49.99")))

        reloaded = CartService(CartStore(session), NotificationChannel(session)).state
        assert reloaded == cart.state

    def test_add_notifies(self, cart, notifications):
        cart.add_item(ServiceFactory(title="Landing Page Kit"))
        assert notifications.current.text == "'Landing Page Kit' added to cart!"

    def test_remove_unknown_item_is_silent(self, cart, notifications):
        cart.remove_item("missing")
        assert notifications.current is None

    def test_remove_notifies(self, cart, notifications):
        fill(cart)
        cart.remove_item("svc-9")
        assert cart.state.is_empty
        assert notifications.current.text == "'Support Bot' removed from cart."

    def test_set_quantity_notifies_on_change(self, cart, notifications):
        fill(cart, quantity=1)
        cart.set_quantity("svc-9", 4)
        assert notifications.current.text == "Quantity of 'Support Bot' updated to 4."

    def test_set_quantity_zero_removes(self, cart):
        fill(cart)
        cart.set_quantity("svc-9", 0)
        assert cart.state.is_empty

    def test_clear_empty_cart_is_silent(self, cart, notifications):
        cart.clear()
        assert notifications.current is None

    def test_save_failure_keeps_in_memory_state(self, notifications):
        store = MagicMock()
        store.load.return_value = CartState()
        store.save.return_value = False
        service = CartService(store, notifications)

        service.add(AddItem(item_id="a", title="A", unit_price=Decimal("1.00")))

        assert service.state.item_count == 1


@pytest.mark.unit
class TestCheckout:
    def test_successful_purchase_clears_cart_and_redirects(self, cart, data, orchestrator, notifications, navigator):
        state = fill(cart, quantity=3, price="10.00")
        identity = IdentityFactory()

        result = orchestrator.purchase(state, identity)

        assert result.ok is True
        assert result.value.total == Decimal("30.00")
        assert result.value.item_count == 3
        assert result.value.redirect == CustomerDashboardPage()
        assert cart.state.is_empty
        assert notifications.current.kind is NotificationKind.SUCCESS
        navigator.navigate.assert_called_with(CustomerDashboardPage())

        (order,) = data.rows("orders")
        assert order["user_id"] == identity.user_id
        assert order["service_id"] == "svc-9"
        assert order["quantity"] == 3
        assert order["price_at_purchase"] == "10.00"
        assert result.value.order_ids == (order["id"],)

    def test_one_row_per_line_in_a_single_call(self, cart, data, orchestrator):
        cart.add(AddItem(item_id="a", title="A", unit_price=Decimal("1.00")))
        cart.add(AddItem(item_id="b", title="B", unit_price=Decimal("2.00")))

        orchestrator.purchase(cart.state, IdentityFactory())

        assert data.calls_to("insert", "orders") == 1
        assert [row["service_id"] for row in data.rows("orders")] == ["a", "b"]

    def test_anonymous_purchase_goes_to_sign_in(self, cart, data, orchestrator, navigator, notifications):
        state = fill(cart)

        result = orchestrator.purchase(state, None)

        assert result.ok is False
        assert result.error == ErrorCodes.NOT_AUTHENTICATED
        assert data.calls_to("insert", "orders") == 0
        navigator.navigate.assert_called_with(AuthPage("login"))
        assert notifications.current.kind is NotificationKind.ERROR
        assert cart.state == state

    def test_empty_cart_is_rejected_without_remote_call(self, data, orchestrator):
        result = orchestrator.purchase(CartState(), IdentityFactory())

        assert result.error == ErrorCodes.CART_EMPTY
        assert data.calls == []

    def test_remote_failure_keeps_cart(self, session, cart, data, orchestrator, navigator, notifications):
        state = fill(cart)
        persisted = session["cart"]
        data.failing_writes.add("orders")

        result = orchestrator.purchase(state, IdentityFactory())

        assert result.error == ErrorCodes.REMOTE_WRITE_ERROR
        assert cart.state == state
        assert session["cart"] == persisted
        assert notifications.current.text.startswith("Checkout failed:")
        navigator.navigate.assert_not_called()

    def test_retry_after_failure_is_allowed(self, cart, data, orchestrator):
        state = fill(cart)
        identity = IdentityFactory()
        data.failing_writes.add("orders")
        orchestrator.purchase(state, identity)

        data.failing_writes.clear()
        assert orchestrator.purchase(state, identity).ok is True

    def test_concurrent_checkout_is_rejected(self, cart, notifications, navigator):
        state = fill(cart)
        identity = IdentityFactory()
        entered = threading.Event()
        release = threading.Event()

        data = MagicMock()

        def slow_insert(*args, **kwargs):
            entered.set()
            release.wait(5)
            return [{"id": "order-1"}]

        data.insert.side_effect = slow_insert
        orchestrator = CheckoutOrchestrator(cart, data, notifications, navigator, InFlightRegistry())
        results = []
        worker = threading.Thread(target=lambda: results.append(orchestrator.purchase(state, identity)))
        worker.start()
        entered.wait(5)

        second = orchestrator.purchase(state, identity)
        release.set()
        worker.join(5)

        assert second.error == ErrorCodes.CHECKOUT_IN_PROGRESS
        assert results[0].ok is True
        assert data.insert.call_count == 1

    def test_data_exception_message_is_reported(self, cart, notifications, navigator):
        data = MagicMock()
        data.insert.side_effect = DataServiceException("permission denied for table orders")
        orchestrator = CheckoutOrchestrator(cart, data, notifications, navigator, InFlightRegistry())

        result = orchestrator.purchase(fill(cart), IdentityFactory())

        assert result.error_detail == "permission denied for table orders"
        assert notifications.current.text == "Checkout failed: permission denied for table orders"


@pytest.mark.unit
class TestInFlightRegistry:
    def test_acquire_release(self):
        registry = InFlightRegistry()
        assert registry.acquire("u1") is True
        assert registry.acquire("u1") is False
        assert "u1" in registry
        registry.release("u1")
        assert registry.acquire("u1") is True
