"""HTTP client for display integrations polling the photo wall API.

``photo_wall.smoke`` drives it against a running server; display screens use
the same calls on their poll timer.
"""

from dataclasses import dataclass
from typing import Protocol

import httpx

from photo_wall.domain.photos import SelectionResult


class GalleryClient(Protocol):
    """Interface for fetching photo selections from a photo wall server."""

    async def fetch_shuffle(self) -> SelectionResult:
        """Fetch a random selection of photos."""

    async def fetch_rotation(self, offset: int = 0) -> SelectionResult:
        """Fetch the newest-first window starting at an offset."""

    async def fetch_batch(self) -> SelectionResult:
        """Fetch the latest complete batch of photos."""


@dataclass
class HttpxGalleryClient(GalleryClient):
    """HTTPX-backed photo wall client."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxGalleryClient":
        """Create a gallery client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def fetch_shuffle(self) -> SelectionResult:
        """Fetch a random selection of photos."""
        payload = await self._get("/api/photos-shuffle")
        return _to_result(payload)

    async def fetch_rotation(self, offset: int = 0) -> SelectionResult:
        """Fetch the newest-first window starting at ``offset``."""
        payload = await self._get("/api/photos-order", params={"offset": offset})
        return _to_result(payload)

    async def fetch_batch(self) -> SelectionResult:
        """Fetch the latest complete batch of photos."""
        payload = await self._get("/api/photos")
        return _to_result(payload)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _get(
        self, path: str, params: dict[str, object] | None = None
    ) -> dict[str, object]:
        response = await self.http_client.get(
            f"{self.base_url}{path}", params=params, timeout=10
        )
        response.raise_for_status()
        return response.json()


def _to_result(payload: dict[str, object]) -> SelectionResult:
    photos = payload.get("photos", [])
    batch_index = payload.get("batchIndex")
    return SelectionResult(
        photos=[str(url) for url in photos] if isinstance(photos, list) else [],
        total=int(payload.get("total", 0)),
        batch_index=int(batch_index) if batch_index is not None else None,
    )
