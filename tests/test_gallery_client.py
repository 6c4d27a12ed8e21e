"""Tests for the httpx gallery client."""

import asyncio

import httpx

from photo_wall.adapters.gallery_client import HttpxGalleryClient


def test_fetch_rotation_sends_offset() -> None:
    seen: list[httpx.URL] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, json={"photos": ["/photos/a.jpg"], "total": 9})

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxGalleryClient(base_url="http://wall", http_client=async_client)

    result = asyncio.run(client.fetch_rotation(offset=8))

    assert seen[0].path == "/api/photos-order"
    assert seen[0].params["offset"] == "8"
    assert result.photos == ["/photos/a.jpg"]
    assert result.total == 9
    assert result.batch_index is None


def test_fetch_batch_reads_batch_index() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/photos"
        return httpx.Response(
            200, json={"batchIndex": 2, "photos": ["/photos/b.jpg"], "total": 48}
        )

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxGalleryClient(base_url="http://wall", http_client=async_client)

    result = asyncio.run(client.fetch_batch())

    assert result.batch_index == 2
    assert result.total == 48


def test_fetch_shuffle_raises_on_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/photos-shuffle"
        return httpx.Response(503)

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxGalleryClient(base_url="http://wall", http_client=async_client)

    try:
        asyncio.run(client.fetch_shuffle())
    except httpx.HTTPStatusError as exc:
        assert exc.response.status_code == 503
    else:
        raise AssertionError("Expected HTTPStatusError")


def test_create_strips_trailing_slash() -> None:
    client = HttpxGalleryClient.create("http://wall/")

    assert client.base_url == "http://wall"
    asyncio.run(client.close())
