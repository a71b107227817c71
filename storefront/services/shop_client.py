"""Async client for the remote shop API (listing, single lookup, food items)."""
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from storefront.config import SHOP_API_URL, SHOP_API_TIMEOUT

log = logging.getLogger(__name__)


class ShopApiError(Exception):
    """Transport, HTTP or payload failure talking to the shop API."""


class NotFoundError(ShopApiError):
    pass


class ShopApiClient:
    def __init__(
        self,
        base_url: str = SHOP_API_URL,
        timeout: float = SHOP_API_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "ShopApiClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str) -> Any:
        log.debug("GET %s", path)
        try:
            resp = await self._client.get(path)
        except httpx.HTTPError as e:
            raise ShopApiError(f"GET {path} failed: {e}") from e

        if resp.status_code == 404:
            raise NotFoundError(f"GET {path}: not found")
        if resp.is_error:
            detail = _error_message(resp)
            raise ShopApiError(f"GET {path}: HTTP {resp.status_code} {detail}".rstrip())
        try:
            return resp.json()
        except ValueError as e:
            raise ShopApiError(f"GET {path}: invalid JSON body") from e

    async def list_shops(self) -> List[Dict[str, Any]]:
        data = await self._get("/shops")
        if not isinstance(data, list):
            raise ShopApiError("GET /shops: expected a list")
        return data

    async def get_shop_by_id(self, shop_id: str) -> Dict[str, Any]:
        data = await self._get(f"/shops/{_segment(shop_id)}")
        if not isinstance(data, dict):
            raise ShopApiError(f"GET /shops/{shop_id}: expected an object")
        return data

    async def get_menu_items(self, shop_id: str) -> List[Dict[str, Any]]:
        data = await self._get(f"/shops/{_segment(shop_id)}/food-items")
        if not isinstance(data, list):
            raise ShopApiError(f"GET /shops/{shop_id}/food-items: expected a list")
        return data


def _segment(value: str) -> str:
    # ids go into the path as a single segment
    return quote(str(value), safe="")


def _error_message(resp: httpx.Response) -> str:
    # the API answers errors with {"message": "..."}
    try:
        body = resp.json()
    except ValueError:
        return ""
    if isinstance(body, dict):
        return str(body.get("message") or "")
    return ""
