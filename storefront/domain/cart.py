"""
Cart state and its pure transition function.

``reduce(state, action)`` is the only way a CartState changes. It performs no I/O:
persistence and notifications are the job of the cart command handlers in
``storefront.services.cart_service``.
"""

from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

TWO_PLACES = Decimal("0.01")


def to_money(value: Any) -> Decimal:
    """Coerce a price to a Decimal. Floats go through ``str`` to avoid binary noise."""
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, bool):
        raise ValueError("price must be a number")
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"invalid price: {value!r}") from e
    else:
        raise ValueError(f"invalid price: {value!r}")
    if not amount.is_finite():
        raise ValueError(f"invalid price: {value!r}")
    return amount


@dataclass(frozen=True)
class CartLine:
    """
    One catalog item in the cart.

    ``unit_price`` is the price captured when the item was first added; it is not
    refreshed from the catalog afterwards.
    """

    item_id: str
    title: str
    unit_price: Decimal
    quantity: int = 1
    seller_ref: str = ""

    def __post_init__(self):
        if not self.item_id:
            raise ValueError("item_id is required")
        price = to_money(self.unit_price)
        if price < 0:
            raise ValueError("unit_price must be >= 0")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError("quantity must be an integer >= 1")
        object.__setattr__(self, "unit_price", price)

    @property
    def line_total(self) -> Decimal:
        return (self.unit_price * self.quantity).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)

    def to_dict(self) -> Dict[str, Any]:
        """Canonical persisted form."""
        return {
            "itemId": self.item_id,
            "title": self.title,
            "unitPrice": str(self.unit_price),
            "quantity": self.quantity,
            "sellerRef": self.seller_ref,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartLine":
        """
        Raises:
            ValueError: If a field is missing or breaks a line invariant
        """
        try:
            return cls(
                item_id=str(data["itemId"]),
                title=str(data["title"]),
                unit_price=to_money(data["unitPrice"]),
                quantity=data["quantity"],
                seller_ref=str(data.get("sellerRef") or ""),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"malformed cart line: {e}") from e


@dataclass(frozen=True)
class CartState:
    """Ordered cart lines, in the order items were first added."""

    lines: Tuple[CartLine, ...] = ()

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def subtotal(self) -> Decimal:
        total = sum((line.unit_price * line.quantity for line in self.lines), Decimal("0"))
        return total.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def find(self, item_id: str) -> Optional[CartLine]:
        return next((line for line in self.lines if line.item_id == item_id), None)

    def to_list(self) -> List[Dict[str, Any]]:
        return [line.to_dict() for line in self.lines]

    @classmethod
    def from_list(cls, items: Iterable[Dict[str, Any]]) -> "CartState":
        """
        Rebuild a cart from its canonical form. Duplicate ids are merged into the
        first occurrence so the unique-line invariant survives hand-edited data.

        Raises:
            ValueError: If the payload is not a list of valid lines
        """
        if not isinstance(items, list):
            raise ValueError("cart payload must be a list")
        state = cls()
        for raw in items:
            if not isinstance(raw, dict):
                raise ValueError("cart line must be an object")
            line = CartLine.from_dict(raw)
            existing = state.find(line.item_id)
            if existing is None:
                state = cls(state.lines + (line,))
            else:
                state = _replace_line(state, replace(existing, quantity=existing.quantity + line.quantity))
        return state


# Actions


@dataclass(frozen=True)
class AddItem:
    item_id: str
    title: str
    unit_price: Decimal
    seller_ref: str = ""


@dataclass(frozen=True)
class RemoveItem:
    item_id: str


@dataclass(frozen=True)
class SetQuantity:
    item_id: str
    quantity: int


@dataclass(frozen=True)
class Clear:
    pass


CartAction = Union[AddItem, RemoveItem, SetQuantity, Clear]


def _replace_line(state: CartState, new_line: CartLine) -> CartState:
    return CartState(tuple(new_line if line.item_id == new_line.item_id else line for line in state.lines))


def _without(state: CartState, item_id: str) -> CartState:
    return CartState(tuple(line for line in state.lines if line.item_id != item_id))


def reduce(state: CartState, action: CartAction) -> CartState:
    """
    Apply one action to a cart and return the new cart.

    - AddItem: existing line gets quantity + 1 (price and title kept); otherwise a
      new line with quantity 1 is appended.
    - RemoveItem: drops the line; unknown ids are a no-op.
    - SetQuantity: ``quantity <= 0`` removes the line, otherwise replaces the
      quantity; unknown ids are a no-op.
    - Clear: empties the cart.

    Raises:
        TypeError: For an unknown action type
    """
    if isinstance(action, AddItem):
        existing = state.find(action.item_id)
        if existing is not None:
            return _replace_line(state, replace(existing, quantity=existing.quantity + 1))
        line = CartLine(
            item_id=action.item_id,
            title=action.title,
            unit_price=action.unit_price,
            quantity=1,
            seller_ref=action.seller_ref,
        )
        return CartState(state.lines + (line,))

    if isinstance(action, RemoveItem):
        if state.find(action.item_id) is None:
            return state
        return _without(state, action.item_id)

    if isinstance(action, SetQuantity):
        existing = state.find(action.item_id)
        if existing is None:
            return state
        if action.quantity <= 0:
            return _without(state, action.item_id)
        return _replace_line(state, replace(existing, quantity=int(action.quantity)))

    if isinstance(action, Clear):
        return CartState()

    raise TypeError(f"Unknown cart action: {action!r}")
