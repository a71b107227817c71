"""
Single boundary between loosely shaped source records and the canonical models.

Remote records carry Mongo-style ``_id`` keys and camelCase fields; local
records use ``id`` and may be partially filled. Everything that reaches the
resolver, the matcher or the cart goes through here first.
"""
from enum import Enum
from typing import Any, Dict, Optional

from storefront.schemas.models import FoodItem, Offer, OfferKind, Shop, ShopOrigin
from storefront.utils.common import first_present

_OFFER_KINDS = {k.value.lower(): k for k in OfferKind}
_OFFER_KINDS.update({
    "buyonegetone": OfferKind.BOGO,
    "buy_one_get_one": OfferKind.BOGO,
    "free_delivery": OfferKind.FREE_DELIVERY,
    "freedelivery": OfferKind.FREE_DELIVERY,
})


def record_id(raw: Dict[str, Any]) -> Optional[str]:
    """Primary identifier ``_id``, else ``id``; None when neither is usable."""
    val = first_present(raw, "_id", "id")
    if isinstance(val, dict):
        # extended JSON: {"$oid": "..."}
        val = val.get("$oid")
    if val is None:
        return None
    val = str(val).strip()
    return val or None


def _text(raw: Dict[str, Any], *keys: str) -> str:
    val = first_present(raw, *keys)
    if isinstance(val, Enum):
        val = val.value
    return "" if val is None else str(val)


def _number(raw: Dict[str, Any], *keys: str) -> float:
    val = first_present(raw, *keys)
    try:
        num = float(val)
    except (TypeError, ValueError):
        return 0.0
    if num != num or num < 0:  # NaN or negative
        return 0.0
    return num


def normalize_item(raw: Dict[str, Any], shop_id: Optional[str] = None) -> Optional[FoodItem]:
    """Raw menu record -> FoodItem. ``shop_id`` fills in records that lack one."""
    if not isinstance(raw, dict):
        return None
    iid = record_id(raw)
    if not iid:
        return None
    owner = first_present(raw, "shop_id", "shopId")
    if isinstance(owner, dict):
        owner = record_id(owner)
    return FoodItem(
        id=iid,
        name=_text(raw, "name"),
        description=_text(raw, "description"),
        price=_number(raw, "price"),
        image_url=_text(raw, "image_url", "image"),
        category=_text(raw, "category"),
        shop_id=str(owner) if owner else (shop_id or ""),
    )


def normalize_shop(raw: Dict[str, Any], origin: ShopOrigin) -> Optional[Shop]:
    if not isinstance(raw, dict):
        return None
    sid = record_id(raw)
    if not sid:
        return None
    cats = raw.get("categories") or []
    if isinstance(cats, str):
        cats = [c.strip() for c in cats.split(",")]
    return Shop(
        id=sid,
        name=_text(raw, "name"),
        description=_text(raw, "description"),
        logo_url=_text(raw, "logo_url", "logo"),
        categories=[str(c) for c in cats if c],
        status=_text(raw, "status") or None,
        origin=origin,
    )


def normalize_offer(raw: Dict[str, Any]) -> Optional[Offer]:
    if not isinstance(raw, dict):
        return None
    oid = record_id(raw)
    if not oid:
        return None
    kind = _text(raw, "kind", "type").replace("-", "").lower()
    return Offer(
        id=oid,
        title=_text(raw, "title"),
        description=_text(raw, "description"),
        kind=_OFFER_KINDS.get(kind, OfferKind.PERCENTAGE),
        value=_number(raw, "value"),
        minimum_order=_number(raw, "minimum_order", "minimumOrder"),
        code=_text(raw, "code"),
        expiry_date=_text(raw, "expiry_date", "expiryDate"),
        shop_id=_text(raw, "shop_id", "shopId"),
    )
