"""Shared test fixtures."""

import random
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from photo_wall.adapters.local_directory import DirectoryReader
from photo_wall.config import GalleryConfig, Settings
from photo_wall.containers import AppContainer
from photo_wall.domain.photos import FileStat, PhotoRecord
from photo_wall.services.gallery import GalleryService
from photo_wall.services.scanner import DirectoryScanner

NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=UTC)


@dataclass
class InMemoryDirectoryReader(DirectoryReader):
    """In-memory directory reader for tests."""

    entries: dict[str, FileStat] = field(default_factory=dict)
    list_error: OSError | None = None
    stat_error: OSError | None = None
    stat_calls: list[str] = field(default_factory=list)

    async def list_names(self, directory: Path) -> list[str]:
        if self.list_error is not None:
            raise self.list_error
        return list(self.entries)

    async def stat(self, directory: Path, name: str) -> FileStat:
        self.stat_calls.append(name)
        if self.stat_error is not None:
            raise self.stat_error
        return self.entries[name]

    def add(
        self,
        name: str,
        age: timedelta = timedelta(minutes=1),
        created_at: datetime | None = None,
        *,
        is_file: bool = True,
    ) -> FileStat:
        modified_at = NOW - age
        entry = FileStat(
            name=name,
            modified_at=modified_at,
            created_at=created_at or modified_at,
            is_file=is_file,
        )
        self.entries[name] = entry
        return entry


def make_record(
    name: str,
    modified_at: datetime | None = None,
    created_at: datetime | None = None,
) -> PhotoRecord:
    """Build a photo record with the default URL prefix."""
    modified = modified_at or NOW
    return PhotoRecord(
        name=name,
        url=f"/photos/{name}",
        modified_at=modified,
        created_at=created_at or modified,
    )


@pytest.fixture
def gallery_config() -> GalleryConfig:
    return GalleryConfig(photos_dir=Path("photos"))


@pytest.fixture
def directory_reader() -> InMemoryDirectoryReader:
    return InMemoryDirectoryReader()


@pytest.fixture
def scanner(
    gallery_config: GalleryConfig, directory_reader: InMemoryDirectoryReader
) -> DirectoryScanner:
    return DirectoryScanner(
        config=gallery_config, reader=directory_reader, clock=lambda: NOW
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(photos_dir=tmp_path, serve_photos=False)


@pytest.fixture
def container(
    settings: Settings,
    gallery_config: GalleryConfig,
    scanner: DirectoryScanner,
) -> AppContainer:
    gallery_service = GalleryService(
        scanner=scanner, config=gallery_config, rng=random.Random(7)
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        gallery_service=gallery_service,
        close_resources=close_resources,
    )
