"""Directory scanning for settled image files."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import PurePath

from photo_wall.adapters.local_directory import DirectoryReader
from photo_wall.config import GalleryConfig
from photo_wall.domain.photos import FileStat, PhotoRecord

_logger = logging.getLogger(__name__)


class ScanError(RuntimeError):
    """Raised when the photo directory cannot be listed or stat'ed."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class DirectoryScanner:
    """Produces the photo records currently on disk.

    Nothing is cached: every call lists the directory again. Entries are
    kept only when their extension is recognized and they have not been
    written to for at least the settle threshold, so uploads that are still
    being written are never served.
    """

    config: GalleryConfig
    reader: DirectoryReader
    clock: Callable[[], datetime] = field(default=_utc_now)

    async def scan(self) -> list[PhotoRecord]:
        """Return records in listing order; callers sort as they need."""
        directory = self.config.photos_dir
        try:
            names = await self.reader.list_names(directory)
        except OSError as exc:
            raise ScanError(f"Cannot list photo directory {directory}") from exc

        candidates = [name for name in names if self.is_image(name)]
        try:
            stats = await asyncio.gather(
                *(self.reader.stat(directory, name) for name in candidates)
            )
        except OSError as exc:
            raise ScanError(f"Cannot stat files in {directory}") from exc

        now = self.clock()
        records = [
            self._to_record(entry)
            for entry in stats
            if entry.is_file and self.is_settled(entry, now)
        ]
        _logger.debug(
            "Scanned %s: entries=%s images=%s settled=%s",
            directory,
            len(names),
            len(candidates),
            len(records),
        )
        return records

    def is_image(self, name: str) -> bool:
        """Return whether a file name carries a recognized image extension."""
        return PurePath(name).suffix.lower() in self.config.extensions

    def is_settled(self, entry: FileStat, now: datetime) -> bool:
        """Return whether a file has gone unmodified for the settle threshold."""
        return now - entry.modified_at >= self.config.settle_threshold

    def _to_record(self, entry: FileStat) -> PhotoRecord:
        return PhotoRecord(
            name=entry.name,
            url=self.config.photo_url(entry.name),
            modified_at=entry.modified_at,
            created_at=entry.created_at,
        )
