"""Application configuration."""

import os
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp"})


@dataclass(frozen=True)
class GalleryConfig:
    """Fixed parameters for scanning the photo directory and selecting photos."""

    photos_dir: Path = Path("public/photos")
    url_prefix: str = "/photos"
    extensions: frozenset[str] = field(default=IMAGE_EXTENSIONS)
    settle_threshold: timedelta = timedelta(milliseconds=2000)
    shuffle_size: int = 16
    rotation_size: int = 8
    batch_size: int = 16

    def photo_url(self, name: str) -> str:
        """Return the public URL for a photo file name."""
        return f"{self.url_prefix.rstrip('/')}/{name}"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    photos_dir: Path = Path("public/photos")
    photos_url_prefix: str = "/photos"
    serve_photos: bool = True
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def gallery_config(self) -> GalleryConfig:
        """Build the gallery configuration for these settings."""
        return GalleryConfig(
            photos_dir=self.photos_dir,
            url_prefix=self.photos_url_prefix,
        )
