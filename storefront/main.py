from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from storefront.db.store import KeyValueStore, build_store
from storefront.log import setup_logging
from storefront.router import cart, shops
from storefront.services.cart_guard import CartGuard
from storefront.services.catalog import LocalCatalog
from storefront.services.shop_client import ShopApiClient
from storefront.services.shop_resolver import ShopResolver


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield
    await app.state.api.aclose()


def create_app(store: Optional[KeyValueStore] = None, api: Optional[ShopApiClient] = None) -> FastAPI:
    app = FastAPI(title="Storefront", version="1.0", lifespan=lifespan)

    store = store if store is not None else build_store()
    api = api if api is not None else ShopApiClient()
    catalog = LocalCatalog(store)

    app.state.store = store
    app.state.api = api
    app.state.catalog = catalog
    app.state.resolver = ShopResolver(api, catalog)
    app.state.cart = CartGuard(store)

    app.include_router(shops.router)
    app.include_router(cart.router)

    @app.get("/health", tags=["health"])
    def health():
        return {"status": "ok"}

    return app


app = create_app()
