"""Selection policies that decide which photos a display poll receives."""

import random

from photo_wall.config import GalleryConfig
from photo_wall.domain.photos import PhotoRecord, SelectionResult


def select_shuffle(
    records: list[PhotoRecord], config: GalleryConfig, rng: random.Random
) -> SelectionResult:
    """Return a random ``shuffle_size`` photos once enough photos exist."""
    total = len(records)
    if total < config.shuffle_size:
        return SelectionResult(photos=[], total=total)

    shuffled = list(records)
    rng.shuffle(shuffled)
    return SelectionResult(
        photos=[record.url for record in shuffled[: config.shuffle_size]],
        total=total,
    )


def select_rotation(
    records: list[PhotoRecord], offset: int, config: GalleryConfig
) -> SelectionResult:
    """Return a newest-first window starting at ``offset``, wrapping around.

    Photos with the same modification time are ordered by name. The window
    index is ``(offset + i) % total``; Python's modulo with a positive
    divisor is always in ``[0, total)``, so negative offsets count back from
    the oldest photo (``-1`` selects the same window as ``total - 1``).
    """
    total = len(records)
    if total < config.rotation_size:
        return SelectionResult(photos=[], total=total)

    ordered = sort_newest_first(records)
    photos = [
        ordered[(offset + step) % total].url for step in range(config.rotation_size)
    ]
    return SelectionResult(photos=photos, total=total)


def select_batch(records: list[PhotoRecord], config: GalleryConfig) -> SelectionResult:
    """Return the latest complete batch of the creation-time timeline.

    Batch 0 covers the first ``batch_size`` photos, batch 1 the next, and so
    on. A partially filled batch is never shown: the visible batch only
    changes when the total crosses a multiple of ``batch_size``.
    """
    total = len(records)
    if total < config.batch_size:
        return SelectionResult(photos=[], total=total, batch_index=None)

    timeline = sort_oldest_created_first(records)
    batch_index = total // config.batch_size - 1
    start = batch_index * config.batch_size
    end = start + config.batch_size
    return SelectionResult(
        photos=[record.url for record in timeline[start:end]],
        total=total,
        batch_index=batch_index,
    )


def sort_newest_first(records: list[PhotoRecord]) -> list[PhotoRecord]:
    """Sort by modification time descending, then by name."""
    by_name = sorted(records, key=lambda record: record.name)
    return sorted(by_name, key=lambda record: record.modified_at, reverse=True)


def sort_oldest_created_first(records: list[PhotoRecord]) -> list[PhotoRecord]:
    """Sort by creation time ascending, then by name."""
    return sorted(records, key=lambda record: (record.created_at, record.name))
