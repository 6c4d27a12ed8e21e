"""Domain models for gallery photos."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class FileStat:
    """Metadata for a single directory entry."""

    name: str
    modified_at: datetime
    created_at: datetime
    is_file: bool = True


@dataclass(frozen=True)
class PhotoRecord:
    """A settled image file eligible for display."""

    name: str
    url: str
    modified_at: datetime
    created_at: datetime


@dataclass(frozen=True)
class SelectionResult:
    """Photos picked by a selection policy for one display poll."""

    photos: list[str] = field(default_factory=list)
    total: int = 0
    batch_index: int | None = None
