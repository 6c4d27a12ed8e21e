"""Gallery service combining directory scans with selection policies."""

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from photo_wall.config import GalleryConfig
from photo_wall.domain.photos import PhotoRecord, SelectionResult
from photo_wall.services.scanner import DirectoryScanner, ScanError
from photo_wall.services.selection import (
    select_batch,
    select_rotation,
    select_shuffle,
)

_logger = logging.getLogger(__name__)


@dataclass
class GalleryService:
    """Application service answering display polls.

    A failed scan is reported to the display client exactly like an empty
    directory: the client keeps polling and shows its waiting state.
    """

    scanner: DirectoryScanner
    config: GalleryConfig
    rng: random.Random = field(default_factory=random.Random)

    async def shuffle(self) -> SelectionResult:
        """Return a random selection of photos."""
        return await self._select(
            "shuffle", lambda records: select_shuffle(records, self.config, self.rng)
        )

    async def rotation(self, offset: int = 0) -> SelectionResult:
        """Return the newest-first window starting at an offset."""
        return await self._select(
            "rotation",
            lambda records: select_rotation(records, offset, self.config),
        )

    async def batch(self) -> SelectionResult:
        """Return the latest complete creation-time batch."""
        return await self._select(
            "batch", lambda records: select_batch(records, self.config)
        )

    async def _select(
        self,
        policy: str,
        choose: Callable[[list[PhotoRecord]], SelectionResult],
    ) -> SelectionResult:
        try:
            records = await self.scanner.scan()
        except ScanError:
            _logger.exception("Error reading photos for %s", policy)
            return SelectionResult(photos=[], total=0, batch_index=None)

        result = choose(records)
        _logger.debug(
            "Selected photos: policy=%s total=%s returned=%s",
            policy,
            result.total,
            len(result.photos),
        )
        return result
