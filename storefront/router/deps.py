from fastapi import Request

from storefront.services.cart_guard import CartGuard
from storefront.services.catalog import LocalCatalog
from storefront.services.shop_resolver import ShopResolver


def get_resolver(request: Request) -> ShopResolver:
    return request.app.state.resolver


def get_catalog(request: Request) -> LocalCatalog:
    return request.app.state.catalog


def get_cart(request: Request) -> CartGuard:
    return request.app.state.cart
