"""
Cart state for one customer, bound to at most one shop at a time.

Every mutation builds the new cart, writes it through to the store under
``cart`` and ``currentShop``, and only then replaces the in-memory cart. A
failed write leaves the in-memory cart as it was.
Rejections come back as a ``CartResult`` instead of an exception so the caller
can show the reason.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pydantic import ValidationError

from storefront.config import CURRENCY
from storefront.db.store import KeyValueStore
from storefront.schemas.models import CartLine, CartState, FoodItem
from storefront.utils.common import _coerce_record_list, money

log = logging.getLogger(__name__)

CART_KEY = "cart"
CURRENT_SHOP_KEY = "currentShop"

DIFFERENT_SHOP = "different_shop"
NOT_IN_CART = "not_in_cart"

DIFFERENT_SHOP_MSG = (
    "You already have items from a different shop. "
    "Clear your cart first to add from this shop."
)


@dataclass(frozen=True)
class CartResult:
    ok: bool
    message: str = ""
    reason: Optional[str] = None


class CartGuard:
    def __init__(self, store: KeyValueStore):
        self.store = store
        self._lines: Dict[str, CartLine] = {}
        self._shop_id: Optional[str] = None
        self._load()

    # ------------------------------------------------------------------
    # reads
    # ------------------------------------------------------------------

    @property
    def lines(self) -> List[CartLine]:
        return [ln.model_copy() for ln in self._lines.values()]

    @property
    def current_shop(self) -> Optional[str]:
        return self._shop_id

    @property
    def total_items(self) -> int:
        return sum(ln.quantity for ln in self._lines.values())

    @property
    def subtotal(self) -> float:
        return money(sum(ln.price * ln.quantity for ln in self._lines.values()))

    def snapshot(self) -> CartState:
        return CartState(
            lines=self.lines,
            current_shop=self._shop_id,
            total_items=self.total_items,
            subtotal=self.subtotal,
            currency=CURRENCY,
        )

    # ------------------------------------------------------------------
    # mutations
    # ------------------------------------------------------------------

    def add(self, item: FoodItem, shop_id: str) -> CartResult:
        if self._lines and self._shop_id != shop_id:
            log.info("rejected %s from shop %s: cart bound to %s", item.id, shop_id, self._shop_id)
            return CartResult(ok=False, message=DIFFERENT_SHOP_MSG, reason=DIFFERENT_SHOP)

        lines = self._copy_lines()
        existing = lines.get(item.id)
        if existing is not None:
            existing.quantity += 1
        else:
            # only the FoodItem fields: ``item`` may itself be a CartLine
            data = {name: getattr(item, name) for name in FoodItem.model_fields}
            data["shop_id"] = shop_id
            lines[item.id] = CartLine(**data, quantity=1)
        self._commit(lines, shop_id)
        return CartResult(ok=True, message=f"Added {item.name} to your cart.")

    def remove(self, item_id: str) -> CartResult:
        if item_id not in self._lines:
            return CartResult(ok=False, message="Item is not in the cart.", reason=NOT_IN_CART)
        lines = self._copy_lines()
        del lines[item_id]
        self._commit(lines, self._shop_id if lines else None)
        return CartResult(ok=True, message="Item removed from cart.")

    def update_quantity(self, item_id: str, quantity: int) -> CartResult:
        if quantity <= 0:
            return self.remove(item_id)
        if item_id not in self._lines:
            return CartResult(ok=False, message="Item is not in the cart.", reason=NOT_IN_CART)
        lines = self._copy_lines()
        lines[item_id].quantity = quantity
        self._commit(lines, self._shop_id)
        return CartResult(ok=True, message="Quantity updated.")

    def clear(self) -> CartResult:
        self._commit({}, None)
        return CartResult(ok=True, message="Cart cleared successfully.")

    # ------------------------------------------------------------------
    # persistence
    # ------------------------------------------------------------------

    def _copy_lines(self) -> Dict[str, CartLine]:
        return {k: ln.model_copy() for k, ln in self._lines.items()}

    def _commit(self, lines: Dict[str, CartLine], shop_id: Optional[str]) -> None:
        """Write ``lines``/``shop_id`` to the store, then make them current."""
        self.store.set(CART_KEY, [ln.model_dump() for ln in lines.values()])
        if shop_id:
            self.store.set(CURRENT_SHOP_KEY, shop_id)
        else:
            self.store.delete(CURRENT_SHOP_KEY)
        self._lines = lines
        self._shop_id = shop_id

    def _load(self) -> None:
        stored_shop = self.store.get(CURRENT_SHOP_KEY)
        repaired = False
        for raw in _coerce_record_list(self.store.get(CART_KEY)):
            try:
                ln = CartLine(**raw)
            except ValidationError as e:
                log.warning("dropping unreadable cart line %r: %s", raw.get("id"), e)
                repaired = True
                continue
            if ln.id in self._lines:
                self._lines[ln.id].quantity += ln.quantity
                repaired = True
            else:
                self._lines[ln.id] = ln

        if not self._lines:
            self._shop_id = None
            repaired = repaired or stored_shop is not None
        else:
            # keep the stored binding; without one, the first line decides
            self._shop_id = stored_shop or next(iter(self._lines.values())).shop_id
            foreign = [k for k, ln in self._lines.items() if ln.shop_id != self._shop_id]
            if foreign:
                log.warning("dropped %d cart lines from shops other than %s", len(foreign), self._shop_id)
                for k in foreign:
                    del self._lines[k]
                repaired = True
            if not self._lines:
                self._shop_id = None
            repaired = repaired or stored_shop != self._shop_id

        if repaired:
            self._commit(self._lines, self._shop_id)
