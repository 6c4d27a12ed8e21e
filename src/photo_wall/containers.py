"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from photo_wall.adapters.local_directory import LocalDirectoryReader
from photo_wall.config import Settings
from photo_wall.services.gallery import GalleryService
from photo_wall.services.scanner import DirectoryScanner


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    gallery_service: GalleryService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    gallery_config = resolved_settings.gallery_config()
    scanner = DirectoryScanner(config=gallery_config, reader=LocalDirectoryReader())
    gallery_service = GalleryService(scanner=scanner, config=gallery_config)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        gallery_service=gallery_service,
        close_resources=close_resources,
    )
