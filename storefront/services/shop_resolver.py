"""
Shop lookup across every place a shop can live.

Sources are tried strictly in order, one at a time, and the first one that
produces the shop wins:

1. remote listing (GET /shops), scanned for a matching id
2. remote single lookup (GET /shops/{id})
3. shops created locally by owners (store key ``shops``)
4. built-in shops

A source that errors or finds nothing is a miss and the next one runs. Remote
menus are best effort: if the food-item call fails the shop still resolves,
with an empty menu. Nothing raised by a source leaves ``resolve``.
"""
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple, Union

from storefront.schemas.models import FoodItem, ResolvedShop, Shop, ShopOrigin
from storefront.services.catalog import LocalCatalog
from storefront.services.normalizer import normalize_item, normalize_shop
from storefront.services.shop_client import NotFoundError, ShopApiClient, ShopApiError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceResult:
    source: str
    shop: Optional[Shop] = None
    menu: List[FoodItem] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def matched(self) -> bool:
        return self.shop is not None


@dataclass(frozen=True)
class NotFound:
    shop_id: str
    tried: Tuple[str, ...] = ()


Source = Callable[[str], Awaitable[SourceResult]]


async def first_match(sources: Sequence[Tuple[str, Source]], shop_id: str) -> Tuple[Optional[SourceResult], List[str]]:
    """Await ``sources`` in order; return the first matched result and the names tried."""
    tried: List[str] = []
    for name, source in sources:
        tried.append(name)
        try:
            result = await source(shop_id)
        except Exception:
            log.exception("source %s crashed resolving shop %s", name, shop_id)
            continue
        if result.matched:
            log.info("shop %s resolved from %s", shop_id, name)
            return result, tried
        if result.error:
            log.warning("source %s missed shop %s: %s", name, shop_id, result.error)
        else:
            log.debug("source %s has no shop %s", name, shop_id)
    return None, tried


class ShopResolver:
    def __init__(self, api: ShopApiClient, catalog: LocalCatalog):
        self.api = api
        self.catalog = catalog
        self.sources: List[Tuple[str, Source]] = [
            ("remote-listing", self._from_listing),
            ("remote-lookup", self._from_lookup),
            ("local-shops", self._from_user_catalog),
            ("builtin-shops", self._from_default_catalog),
        ]

    async def resolve(self, shop_id: str) -> Union[ResolvedShop, NotFound]:
        result, tried = await first_match(self.sources, shop_id)
        if result is None:
            log.info("shop %s not found after %s", shop_id, ", ".join(tried))
            return NotFound(shop_id=shop_id, tried=tuple(tried))

        shop = result.shop
        return ResolvedShop(
            shop=shop,
            menu=result.menu,
            active_category=shop.categories[0] if shop.categories else None,
            offers=self.catalog.offers_for(shop.id),
        )

    async def _remote_menu(self, shop_id: str) -> List[FoodItem]:
        try:
            raws = await self.api.get_menu_items(shop_id)
        except ShopApiError as e:
            log.warning("menu for shop %s unavailable, serving empty menu: %s", shop_id, e)
            return []
        items = []
        for raw in raws:
            it = normalize_item(raw, shop_id=shop_id)
            if it:
                items.append(it)
        return items

    async def _from_listing(self, shop_id: str) -> SourceResult:
        name = "remote-listing"
        try:
            raws = await self.api.list_shops()
        except ShopApiError as e:
            return SourceResult(name, error=str(e))
        for raw in raws:
            shop = normalize_shop(raw, ShopOrigin.REMOTE)
            if shop and shop.id == shop_id:
                return SourceResult(name, shop=shop, menu=await self._remote_menu(shop.id))
        return SourceResult(name)

    async def _from_lookup(self, shop_id: str) -> SourceResult:
        name = "remote-lookup"
        try:
            raw = await self.api.get_shop_by_id(shop_id)
        except NotFoundError:
            return SourceResult(name)
        except ShopApiError as e:
            return SourceResult(name, error=str(e))
        shop = normalize_shop(raw, ShopOrigin.REMOTE)
        if shop is None:
            return SourceResult(name, error="record has no identifier")
        return SourceResult(name, shop=shop, menu=await self._remote_menu(shop.id))

    async def _from_user_catalog(self, shop_id: str) -> SourceResult:
        shop = self.catalog.find_user_shop(shop_id)
        if shop is None:
            return SourceResult("local-shops")
        return SourceResult("local-shops", shop=shop, menu=self.catalog.menu_for(shop))

    async def _from_default_catalog(self, shop_id: str) -> SourceResult:
        shop = self.catalog.find_default_shop(shop_id)
        if shop is None:
            return SourceResult("builtin-shops")
        return SourceResult("builtin-shops", shop=shop, menu=self.catalog.menu_for(shop))
