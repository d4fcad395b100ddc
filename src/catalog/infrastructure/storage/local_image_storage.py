"""Filesystem-backed implementation of ImageStorage.

Images are written under a single directory with a generated name
(uuid + the caller's extension) and addressed as ``<base_url>/<name>``.
Only the last path component of a URL is ever used to locate a file.
"""

from __future__ import annotations

import logging
import shutil
import uuid
from pathlib import Path, PurePosixPath
from typing import BinaryIO

from catalog.domain.exceptions import NotFoundError, StorageError
from catalog.domain.storage.image_storage import ImageStorage

logger = logging.getLogger(__name__)


class LocalImageStorage(ImageStorage):

    def __init__(self, storage_dir: Path, base_url: str = "/images") -> None:
        self._storage_dir = Path(storage_dir)
        self._base_url = base_url.rstrip("/")
        if not self._storage_dir.exists():
            logger.info("Creating image directory %s", self._storage_dir)
            self._storage_dir.mkdir(parents=True, exist_ok=True)

    # --- ImageStorage interface -----------------------------------------------

    def upload(self, stream: BinaryIO, filename: str, content_type: str) -> str:
        stored_name = f"{uuid.uuid4().hex}{PurePosixPath(filename).suffix.lower()}"
        file_path = self._storage_dir / stored_name
        logger.debug("Saving %s (%s) to %s", filename, content_type, file_path)

        try:
            with file_path.open("wb") as out:
                shutil.copyfileobj(stream, out)
        except OSError as exc:
            file_path.unlink(missing_ok=True)
            raise StorageError(f"Failed to store image {filename!r}: {exc}") from exc

        return f"{self._base_url}/{stored_name}"

    def delete(self, url: str) -> bool:
        file_path = self._resolve(url)
        try:
            if file_path is None or not file_path.is_file():
                logger.info("Image %r not found, nothing to delete", url)
                return False
            file_path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise StorageError(f"Failed to delete image {url!r}: {exc}") from exc

        logger.debug("Deleted %s", file_path)
        return True

    def get(self, url: str) -> BinaryIO:
        file_path = self._resolve(url)
        try:
            if file_path is None or not file_path.is_file():
                raise NotFoundError(f"Image not found: {url!r}")
            return file_path.open("rb")
        except FileNotFoundError as exc:
            raise NotFoundError(f"Image not found: {url!r}") from exc
        except OSError as exc:
            raise StorageError(f"Failed to read image {url!r}: {exc}") from exc

    # --- Internal helpers -----------------------------------------------------

    def _resolve(self, url: str) -> Path | None:
        name = PurePosixPath(url or "").name
        if not name or name in (".", ".."):
            return None
        return self._storage_dir / name
