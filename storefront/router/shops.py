from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from storefront.router.deps import get_catalog, get_resolver
from storefront.schemas.models import FoodItem, ResolvedShop, Shop, ShopView
from storefront.services.catalog import LocalCatalog
from storefront.services.category_matcher import select
from storefront.services.shop_resolver import NotFound, ShopResolver

router = APIRouter(prefix="/shops", tags=["shops"])


async def _resolve_or_404(resolver: ShopResolver, shop_id: str) -> ResolvedShop:
    result = await resolver.resolve(shop_id)
    if isinstance(result, NotFound):
        raise HTTPException(status_code=404, detail="Shop not found")
    return result


@router.get("", response_model=List[Shop])
def local_shops(catalog: LocalCatalog = Depends(get_catalog)):
    """Shops available without the remote API (built-in + created on this device)."""
    return catalog.all_shops()


@router.get("/{shop_id}", response_model=ShopView)
async def shop_details(
    shop_id: str,
    category: Optional[str] = None,
    resolver: ShopResolver = Depends(get_resolver),
):
    """
    Shop page data:
    - resolves the shop across remote and local sources
    - active category is ?category= or the shop's first category
    - items are the menu filtered by the active category
    """
    resolved = await _resolve_or_404(resolver, shop_id)
    active = category or resolved.active_category
    return ShopView(
        shop=resolved.shop,
        active_category=active,
        items=select(resolved.menu, active),
        offers=resolved.offers,
    )


@router.get("/{shop_id}/menu", response_model=List[FoodItem])
async def shop_menu(
    shop_id: str,
    category: Optional[str] = None,
    resolver: ShopResolver = Depends(get_resolver),
):
    resolved = await _resolve_or_404(resolver, shop_id)
    return select(resolved.menu, category or resolved.active_category)
