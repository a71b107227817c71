import asyncio

import httpx
import pytest

from storefront.services.shop_client import NotFoundError, ShopApiClient, ShopApiError


def _client(handler):
    return ShopApiClient(base_url="http://api.test", transport=httpx.MockTransport(handler))


def test_list_shops():
    def handler(request):
        assert request.url.path == "/shops"
        return httpx.Response(200, json=[{"_id": "s1", "name": "One"}])

    async def go():
        async with _client(handler) as api:
            return await api.list_shops()

    assert asyncio.run(go()) == [{"_id": "s1", "name": "One"}]


def test_get_shop_by_id_404_is_not_found():
    def handler(request):
        return httpx.Response(404, json={"message": "Shop not found"})

    async def go():
        async with _client(handler) as api:
            await api.get_shop_by_id("missing")

    with pytest.raises(NotFoundError):
        asyncio.run(go())


def test_server_error_carries_message():
    def handler(request):
        return httpx.Response(500, json={"message": "db down"})

    async def go():
        async with _client(handler) as api:
            await api.get_menu_items("s1")

    with pytest.raises(ShopApiError, match="db down"):
        asyncio.run(go())


def test_transport_error_is_wrapped():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    async def go():
        async with _client(handler) as api:
            await api.list_shops()

    with pytest.raises(ShopApiError):
        asyncio.run(go())


def test_unexpected_payload_shape():
    def handler(request):
        return httpx.Response(200, json={"shops": []})

    async def go():
        async with _client(handler) as api:
            await api.list_shops()

    with pytest.raises(ShopApiError, match="expected a list"):
        asyncio.run(go())


def test_invalid_json():
    def handler(request):
        return httpx.Response(200, text="<html>")

    async def go():
        async with _client(handler) as api:
            await api.get_shop_by_id("s1")

    with pytest.raises(ShopApiError, match="invalid JSON"):
        asyncio.run(go())


def test_menu_items_path():
    seen = []

    def handler(request):
        seen.append(request.url.path)
        return httpx.Response(200, json=[])

    async def go():
        async with _client(handler) as api:
            return await api.get_menu_items("abc")

    assert asyncio.run(go()) == []
    assert seen == ["/shops/abc/food-items"]


def test_shop_id_is_escaped_as_one_path_segment():
    seen = []

    def handler(request):
        seen.append(request.url.raw_path)
        if request.url.raw_path.endswith(b"/food-items"):
            return httpx.Response(200, json=[])
        return httpx.Response(200, json={"_id": "a/b?c#d"})

    async def go():
        async with _client(handler) as api:
            await api.get_shop_by_id("a/b?c#d")
            await api.get_menu_items("a/b?c#d")

    asyncio.run(go())
    assert seen[0] == b"/shops/a%2Fb%3Fc%23d"
    assert seen[1] == b"/shops/a%2Fb%3Fc%23d/food-items"
