"""Client-side catalogs: shops created by owners on this device, and the built-in set."""
from typing import Any, Dict, List, Optional

from storefront.data import DEFAULT_MENU, DEFAULT_SHOPS
from storefront.db.store import KeyValueStore
from storefront.schemas.models import FoodItem, Offer, Shop, ShopOrigin
from storefront.services.normalizer import (
    normalize_item, normalize_offer, normalize_shop, record_id,
)
from storefront.utils.common import _coerce_record_list

SHOPS_KEY = "shops"
FOOD_ITEMS_KEY = "foodItems"
OFFERS_KEY = "promotionalOffers"


def _find(records: List[Dict[str, Any]], shop_id: str) -> Optional[Dict[str, Any]]:
    return next((r for r in records if record_id(r) == shop_id), None)


class LocalCatalog:
    def __init__(self, store: KeyValueStore, default_shops=None, default_menu=None):
        self.store = store
        self.default_shops = DEFAULT_SHOPS if default_shops is None else default_shops
        self.default_menu = DEFAULT_MENU if default_menu is None else default_menu

    def _user_shop_records(self) -> List[Dict[str, Any]]:
        return _coerce_record_list(self.store.get(SHOPS_KEY))

    def find_user_shop(self, shop_id: str) -> Optional[Shop]:
        raw = _find(self._user_shop_records(), shop_id)
        return normalize_shop(raw, ShopOrigin.LOCAL) if raw else None

    def find_default_shop(self, shop_id: str) -> Optional[Shop]:
        raw = _find(self.default_shops, shop_id)
        return normalize_shop(raw, ShopOrigin.LOCAL) if raw else None

    def all_shops(self) -> List[Shop]:
        """Built-in shops followed by user-created ones."""
        out = []
        for raw in list(self.default_shops) + self._user_shop_records():
            shop = normalize_shop(raw, ShopOrigin.LOCAL)
            if shop:
                out.append(shop)
        return out

    def menu_for(self, shop: Shop) -> List[FoodItem]:
        """Built-in entries in the shop's categories, then items the owner added locally."""
        cats = set(shop.categories)
        items: List[FoodItem] = []
        for raw in self.default_menu:
            if raw.get("category") in cats:
                it = normalize_item(raw, shop_id=shop.id)
                if it:
                    items.append(it.model_copy(update={"shop_id": shop.id}))
        for raw in _coerce_record_list(self.store.get(FOOD_ITEMS_KEY)):
            it = normalize_item(raw)
            if it and it.shop_id == shop.id:
                items.append(it)
        return items

    def offers_for(self, shop_id: str) -> List[Offer]:
        out = []
        for raw in _coerce_record_list(self.store.get(OFFERS_KEY)):
            offer = normalize_offer(raw)
            if offer and offer.shop_id == shop_id:
                out.append(offer)
        return out
