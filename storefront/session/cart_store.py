"""
Cart persistence.

The cart is kept in the browser session (signed-cookie backend) under one key
holding the canonical JSON list ``[{itemId, title, unitPrice, quantity, sellerRef}]``.
Loading never raises and saving is best-effort.
"""

import json
import logging
from typing import MutableMapping

from storefront.domain.cart import CartState

logger = logging.getLogger(__name__)

CART_SESSION_KEY = "cart"


class CartStore:
    def __init__(self, session: MutableMapping, key: str = CART_SESSION_KEY):
        self.session = session
        self.key = key

    def load(self) -> CartState:
        """Return the persisted cart, or an empty cart when nothing usable is stored."""
        try:
            raw = self.session.get(self.key)
        except Exception as e:
            logger.warning(f"Could not read persisted cart: {e}")
            return CartState()

        if raw is None:
            return CartState()

        try:
            payload = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
            return CartState.from_list(payload)
        except (ValueError, TypeError) as e:
            logger.warning(f"Discarding malformed persisted cart: {e}")
            return CartState()

    def save(self, state: CartState) -> bool:
        """
        Persist the full cart. Failures are logged and reported through the
        return value; they never propagate.
        """
        try:
            self.session[self.key] = json.dumps(state.to_list())
        except Exception as e:
            logger.error(f"Failed to persist cart ({state.item_count} items): {e}")
            return False
        return True
