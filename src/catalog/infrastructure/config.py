"""Runtime settings, read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
PROJECT_ROOT = Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    db_path: Path
    image_dir: Path
    image_base_url: str = "/images"

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> Settings:
        """Build settings from ``CATALOG_*`` variables.

        CATALOG_DATA_DIR        base directory (default: <project root>/data)
        CATALOG_DB_PATH         SQLite file (default: <data dir>/catalog.sqlite3)
        CATALOG_IMAGE_DIR       image directory (default: <data dir>/images)
        CATALOG_IMAGE_BASE_URL  URL prefix for stored images (default: /images)
        """
        env = os.environ if environ is None else environ

        data_dir = Path(env.get("CATALOG_DATA_DIR") or PROJECT_ROOT / "data")
        db_path = Path(env.get("CATALOG_DB_PATH") or data_dir / "catalog.sqlite3")
        image_dir = Path(env.get("CATALOG_IMAGE_DIR") or data_dir / "images")
        base_url = (env.get("CATALOG_IMAGE_BASE_URL") or "/images").rstrip("/")

        return Settings(
            data_dir=data_dir,
            db_path=db_path,
            image_dir=image_dir,
            image_base_url=base_url or "/images",
        )
