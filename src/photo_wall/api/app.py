"""FastAPI application factory."""

import logging
import re
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from photo_wall.api.models import BatchResponse, PhotosResponse
from photo_wall.app_logging import configure_logging
from photo_wall.containers import AppContainer

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/photos")
    async def photo_batch(request: Request) -> BatchResponse:
        """Return the latest complete batch of photos by creation time."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.gallery_service.batch()
        return BatchResponse.from_result(result)

    @app.get("/api/photos-order")
    async def photo_rotation(
        request: Request, offset: str | None = None
    ) -> PhotosResponse:
        """Return a newest-first window of photos starting at ``offset``."""
        state_container: AppContainer = request.app.state.container
        parsed = parse_offset(offset)
        if parsed is None:
            logger.warning("Ignoring unparseable offset %r", offset)
            parsed = 0
        result = await state_container.gallery_service.rotation(parsed)
        return PhotosResponse.from_result(result)

    @app.get("/api/photos-shuffle")
    async def photo_shuffle(request: Request) -> PhotosResponse:
        """Return a random selection of photos."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.gallery_service.shuffle()
        return PhotosResponse.from_result(result)

    settings = container.settings
    if settings.serve_photos:
        if not settings.photos_dir.is_dir():
            logger.warning(
                "Photo directory %s does not exist yet", settings.photos_dir
            )
        app.mount(
            settings.photos_url_prefix,
            StaticFiles(directory=settings.photos_dir, check_dir=False),
            name="photos",
        )

    return app


def parse_offset(raw: str | None) -> int | None:
    """Parse the leading integer of a query value; ``"12abc"`` gives 12.

    A missing value is 0. ``None`` is returned when no integer can be read,
    including values too long for ``int`` to convert.
    """
    if raw is None or raw == "":
        return 0
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None
