from fastapi import APIRouter, Depends, HTTPException

from storefront.router.deps import get_cart
from storefront.schemas.models import AddToCartReq, CartState, UpdateQuantityReq
from storefront.services.cart_guard import DIFFERENT_SHOP, CartGuard, CartResult

router = APIRouter(prefix="/cart", tags=["cart"])


def _checked(cart: CartGuard, result: CartResult) -> CartState:
    if not result.ok:
        status = 409 if result.reason == DIFFERENT_SHOP else 404
        raise HTTPException(status_code=status, detail=result.message)
    return cart.snapshot()


@router.get("", response_model=CartState)
def view_cart(cart: CartGuard = Depends(get_cart)):
    return cart.snapshot()


@router.post("/items", response_model=CartState)
def add_item(req: AddToCartReq, cart: CartGuard = Depends(get_cart)):
    """Adds one unit. 409 when the cart already holds another shop's items."""
    return _checked(cart, cart.add(req.item, req.shop_id))


@router.patch("/items/{item_id}", response_model=CartState)
def update_item(item_id: str, req: UpdateQuantityReq, cart: CartGuard = Depends(get_cart)):
    """Quantity 0 or less removes the line."""
    return _checked(cart, cart.update_quantity(item_id, req.quantity))


@router.delete("/items/{item_id}", response_model=CartState)
def remove_item(item_id: str, cart: CartGuard = Depends(get_cart)):
    return _checked(cart, cart.remove(item_id))


@router.delete("", response_model=CartState)
def clear_cart(cart: CartGuard = Depends(get_cart)):
    return _checked(cart, cart.clear())
