from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, validator

# ---------------------------------------------------------------------
# CANONICAL MODELS
# ---------------------------------------------------------------------

class ShopOrigin(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"


class OfferKind(str, Enum):
    PERCENTAGE = "percentage"
    BOGO = "bogo"
    FREE_DELIVERY = "freeDelivery"


class Shop(BaseModel):
    """A shop after normalization; categories keep their listing order."""
    id: str
    name: str = ""
    description: str = ""
    logo_url: str = ""
    categories: List[str] = Field(default_factory=list)
    status: Optional[str] = None
    origin: ShopOrigin = ShopOrigin.REMOTE


class FoodItem(BaseModel):
    """Single menu entry belonging to one shop."""
    id: str
    name: str = ""
    description: str = ""
    price: float = Field(0.0, ge=0)
    image_url: str = ""
    category: str = ""
    shop_id: str = ""

    class Config:
        extra = "ignore"

    @validator("description", "image_url", "category", "shop_id", pre=True)
    def v_text(cls, v):
        return "" if v is None else v


class CartLine(FoodItem):
    quantity: int = Field(1, ge=1)


class CartState(BaseModel):
    lines: List[CartLine] = Field(default_factory=list)
    current_shop: Optional[str] = None
    total_items: int = 0
    subtotal: float = 0.0
    currency: str = "INR"


class Offer(BaseModel):
    """Promotion attached to a shop. Read-only for the storefront."""
    id: str
    title: str = ""
    description: str = ""
    kind: OfferKind = OfferKind.PERCENTAGE
    value: float = 0.0
    minimum_order: float = 0.0
    code: str = ""
    expiry_date: str = ""
    shop_id: str = ""

    def headline(self) -> str:
        if self.kind == OfferKind.PERCENTAGE:
            return f"{self.value:g}% OFF"
        if self.kind == OfferKind.BOGO:
            return "Buy 1 Get 1 Free"
        return "Free Delivery"


class ResolvedShop(BaseModel):
    shop: Shop
    menu: List[FoodItem] = Field(default_factory=list)
    active_category: Optional[str] = None
    offers: List[Offer] = Field(default_factory=list)


# ---------------------------------------------------------------------
# REQUEST / RESPONSE BODIES
# ---------------------------------------------------------------------

class ShopView(BaseModel):
    """Response for GET /shops/{shop_id}."""
    shop: Shop
    active_category: Optional[str] = None
    items: List[FoodItem] = Field(default_factory=list)
    offers: List[Offer] = Field(default_factory=list)


class AddToCartReq(BaseModel):
    item: FoodItem
    shop_id: str


class UpdateQuantityReq(BaseModel):
    quantity: int
