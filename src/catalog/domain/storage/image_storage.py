"""Abstract blob store for product images.

Images are addressed by the URL the store returns from ``upload``.
Implementations must never derive the stored path from the caller's
file name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO


class ImageStorage(ABC):

    @abstractmethod
    def upload(self, stream: BinaryIO, filename: str, content_type: str) -> str:
        """Store the bytes of *stream* and return the URL addressing them.

        Raises StorageError on I/O failure.
        """

    @abstractmethod
    def delete(self, url: str) -> bool:
        """Remove the image at *url*; return False if it did not exist."""

    @abstractmethod
    def get(self, url: str) -> BinaryIO:
        """Open the image at *url* for reading.

        Raises NotFoundError if there is no such image.
        """
