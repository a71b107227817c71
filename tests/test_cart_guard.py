import pytest

from storefront.db.store import MemoryStore
from storefront.schemas.models import FoodItem
from storefront.services.cart_guard import (
    CART_KEY, CURRENT_SHOP_KEY, DIFFERENT_SHOP, NOT_IN_CART, CartGuard,
)


def _item(iid, shop_id, price=10.0):
    return FoodItem(id=iid, name=iid.title(), price=price, category="Pizza", shop_id=shop_id)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def cart(store):
    return CartGuard(store)


def test_first_add_binds_shop(cart, store):
    res = cart.add(_item("a", "shop1"), "shop1")
    assert res.ok
    assert cart.current_shop == "shop1"
    assert [(ln.id, ln.quantity) for ln in cart.lines] == [("a", 1)]
    assert store.get(CURRENT_SHOP_KEY) == "shop1"
    assert store.get(CART_KEY)[0]["quantity"] == 1


def test_same_item_increments(cart):
    item = _item("a", "shop1")
    cart.add(item, "shop1")
    cart.add(item, "shop1")
    assert len(cart.lines) == 1
    assert cart.lines[0].quantity == 2


def test_other_shop_is_rejected_without_changes(cart, store):
    cart.add(_item("a", "shop1"), "shop1")
    cart.add(_item("a", "shop1"), "shop1")
    before = store.get(CART_KEY)

    res = cart.add(_item("b", "shop2"), "shop2")
    assert not res.ok
    assert res.reason == DIFFERENT_SHOP
    assert "different shop" in res.message
    assert cart.current_shop == "shop1"
    assert [(ln.id, ln.quantity) for ln in cart.lines] == [("a", 2)]
    assert store.get(CART_KEY) == before


def test_removing_last_line_unbinds(cart, store):
    cart.add(_item("a", "shop1"), "shop1")
    assert cart.remove("a").ok
    assert cart.lines == []
    assert cart.current_shop is None
    assert store.get(CURRENT_SHOP_KEY) is None

    assert cart.add(_item("c", "shop3"), "shop3").ok
    assert cart.current_shop == "shop3"


def test_remove_keeps_binding_while_lines_remain(cart):
    cart.add(_item("a", "shop1"), "shop1")
    cart.add(_item("b", "shop1"), "shop1")
    cart.remove("a")
    assert cart.current_shop == "shop1"
    assert [ln.id for ln in cart.lines] == ["b"]


def test_remove_unknown_item(cart):
    res = cart.remove("nope")
    assert not res.ok
    assert res.reason == NOT_IN_CART


@pytest.mark.parametrize("qty", [0, -2])
def test_non_positive_quantity_removes(store, qty):
    a = CartGuard(MemoryStore())
    b = CartGuard(store)
    for c in (a, b):
        c.add(_item("a", "shop1"), "shop1")
    a.update_quantity("a", qty)
    b.remove("a")
    assert a.lines == b.lines == []
    assert a.current_shop is None and b.current_shop is None


def test_update_quantity_sets_value(cart, store):
    cart.add(_item("a", "shop1", price=2.5), "shop1")
    assert cart.update_quantity("a", 4).ok
    assert cart.lines[0].quantity == 4
    assert store.get(CART_KEY)[0]["quantity"] == 4
    assert cart.total_items == 4
    assert cart.subtotal == 10.0


def test_update_quantity_unknown_item(cart):
    assert cart.update_quantity("ghost", 3).reason == NOT_IN_CART


def test_clear(cart, store):
    cart.add(_item("a", "shop1"), "shop1")
    cart.clear()
    assert cart.lines == []
    assert cart.current_shop is None
    assert store.get(CART_KEY) == []
    assert store.get(CURRENT_SHOP_KEY) is None


def test_totals_follow_lines(cart):
    cart.add(_item("a", "shop1", price=8.99), "shop1")
    cart.add(_item("a", "shop1", price=8.99), "shop1")
    cart.add(_item("b", "shop1", price=9.99), "shop1")
    assert cart.total_items == 3
    assert cart.subtotal == 27.97
    cart.update_quantity("b", 3)
    assert cart.total_items == 5
    assert cart.subtotal == 47.95
    snap = cart.snapshot()
    assert snap.total_items == 5
    assert snap.subtotal == 47.95


def test_lines_are_copies(cart):
    cart.add(_item("a", "shop1"), "shop1")
    cart.lines[0].quantity = 99
    assert cart.total_items == 1


def test_line_takes_the_bound_shop(cart):
    cart.add(_item("a", ""), "shop1")
    assert cart.lines[0].shop_id == "shop1"


def test_state_survives_restart(store):
    first = CartGuard(store)
    first.add(_item("a", "shop1"), "shop1")
    first.add(_item("a", "shop1"), "shop1")

    second = CartGuard(store)
    assert second.current_shop == "shop1"
    assert [(ln.id, ln.quantity) for ln in second.lines] == [("a", 2)]


def test_load_drops_lines_from_other_shops():
    store = MemoryStore({
        CART_KEY: [
            {"id": "a", "name": "A", "price": 1, "shop_id": "shop1", "quantity": 1},
            {"id": "b", "name": "B", "price": 1, "shop_id": "shop2", "quantity": 1},
            {"id": "c", "name": "C", "price": 1, "shop_id": "shop1", "quantity": 0},
        ],
        CURRENT_SHOP_KEY: "shop1",
    })
    cart = CartGuard(store)
    assert [ln.id for ln in cart.lines] == ["a"]
    assert [ln["id"] for ln in store.get(CART_KEY)] == ["a"]


def test_load_binds_from_lines_when_shop_missing():
    store = MemoryStore({CART_KEY: '[{"id": "a", "price": 3, "shop_id": "shop7", "quantity": 2}]'})
    cart = CartGuard(store)
    assert cart.current_shop == "shop7"
    assert store.get(CURRENT_SHOP_KEY) == "shop7"
    assert cart.total_items == 2


def test_load_clears_stale_binding():
    store = MemoryStore({CART_KEY: [], CURRENT_SHOP_KEY: "shop1"})
    cart = CartGuard(store)
    assert cart.current_shop is None
    assert store.get(CURRENT_SHOP_KEY) is None


def test_cart_line_can_be_added_back(cart):
    other = CartGuard(MemoryStore())
    other.add(_item("a", "shop1"), "shop1")
    other.update_quantity("a", 3)

    assert cart.add(other.lines[0], "shop1").ok
    assert [(ln.id, ln.quantity) for ln in cart.lines] == [("a", 1)]


class FailingStore(MemoryStore):
    def __init__(self):
        super().__init__()
        self.broken = False

    def set(self, key, value):
        if self.broken:
            raise ConnectionError("store unavailable")
        super().set(key, value)


def test_failed_write_leaves_cart_unchanged():
    store = FailingStore()
    cart = CartGuard(store)
    cart.add(_item("a", "shop1"), "shop1")
    store.broken = True

    with pytest.raises(ConnectionError):
        cart.add(_item("a", "shop1"), "shop1")
    with pytest.raises(ConnectionError):
        cart.clear()
    assert [(ln.id, ln.quantity) for ln in cart.lines] == [("a", 1)]
    assert cart.current_shop == "shop1"

    store.broken = False
    cart.add(_item("a", "shop1"), "shop1")
    assert cart.lines[0].quantity == 2
    assert store.get(CART_KEY)[0]["quantity"] == 2
