"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import BinaryIO

from catalog.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal to avoid floating-point rounding errors in prices.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Price must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Price must be a finite number, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(f"Price cannot be negative, got {self.amount}")

    # --- Comparison -----------------------------------------------------------

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        # Two places minimum; extra precision is shown, never rounded away
        normalized = self.amount.normalize()
        if normalized.as_tuple().exponent >= -2:
            return f"${self.amount:.2f}"
        return f"${normalized:f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: Money | str | float | int | Decimal | None) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, Money):
            return amount
        if amount is None or isinstance(amount, bool):
            raise ValidationError(f"Invalid price: {amount!r}")
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid price: {amount!r}") from exc


ALLOWED_IMAGE_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png", "image/gif"})
MAX_IMAGE_BYTES = 5 * 1024 * 1024


@dataclass(frozen=True)
class ImageUpload:
    """An image payload that passed the upload rules.

    Only JPEG, PNG and GIF are accepted, and the file must be non-empty
    and at most 5 MiB.
    """

    filename: str
    content_type: str
    data: bytes

    def __post_init__(self) -> None:
        if not self.filename or not self.filename.strip():
            raise ValidationError("Image file name is required")
        if (self.content_type or "").strip().lower() not in ALLOWED_IMAGE_TYPES:
            raise ValidationError(
                f"Unsupported image type {self.content_type!r}. Use JPEG, PNG or GIF"
            )
        if not self.data:
            raise ValidationError("Image file is empty")
        if len(self.data) > MAX_IMAGE_BYTES:
            raise ValidationError("Image file too large. Maximum size is 5 MiB")

    @property
    def size(self) -> int:
        return len(self.data)

    @staticmethod
    def read(stream: BinaryIO, filename: str, content_type: str) -> ImageUpload:
        """Read and validate an upload from a binary stream.

        Reads at most one byte past the limit so oversize files are
        rejected without being loaded whole.
        """
        data = stream.read(MAX_IMAGE_BYTES + 1)
        return ImageUpload(
            filename=filename,
            content_type=(content_type or "").strip().lower(),
            data=data or b"",
        )
