"""Local filesystem access for the photo directory."""

import asyncio
import os
import stat
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol

from photo_wall.domain.photos import FileStat


class DirectoryReader(Protocol):
    """Interface for listing a directory and reading entry metadata."""

    async def list_names(self, directory: Path) -> list[str]:
        """Return the entry names of a directory."""

    async def stat(self, directory: Path, name: str) -> FileStat:
        """Return metadata for a single directory entry."""


@dataclass
class LocalDirectoryReader(DirectoryReader):
    """Directory reader backed by blocking ``os`` calls run in worker threads."""

    async def list_names(self, directory: Path) -> list[str]:
        """List a directory without blocking the event loop."""
        return await asyncio.to_thread(os.listdir, directory)

    async def stat(self, directory: Path, name: str) -> FileStat:
        """Stat a directory entry without blocking the event loop."""
        result = await asyncio.to_thread(os.stat, directory / name)
        # Linux does not report a birth time through os.stat.
        created = getattr(result, "st_birthtime", result.st_ctime)
        return FileStat(
            name=name,
            modified_at=datetime.fromtimestamp(result.st_mtime, tz=UTC),
            created_at=datetime.fromtimestamp(created, tz=UTC),
            is_file=stat.S_ISREG(result.st_mode),
        )
