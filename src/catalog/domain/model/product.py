"""Product aggregate.

A product is the single aggregate of the catalog. Its descriptive fields
(name, description, price, category) change through ``update()``; its
status changes only through ``activate()`` / ``deactivate()``. Soft
deletion is a storage concern and is not a status value.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Money


class ProductStatus(Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


# ---------------------------------------------------------------------------
# Field limits
# ---------------------------------------------------------------------------
MAX_NAME_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 1000
MAX_CATEGORY_LENGTH = 100


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _require_text(value: str | None, label: str, max_length: int) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Product {label} cannot be empty")
    value = value.strip()
    if len(value) > max_length:
        raise ValidationError(
            f"Product {label} must be at most {max_length} characters"
        )
    return value


class Product:
    """Aggregate root for catalog products.

    Use the ``Product.create()`` factory for new products; it enforces
    all invariants. The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted products without re-validating.

    Attributes are read-only; the only mutations are the named operations
    below.
    """

    def __init__(
        self,
        id: str,
        name: str,
        description: str,
        price: Money,
        category: str,
        status: ProductStatus = ProductStatus.ACTIVE,
        image_url: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        deleted_at: datetime | None = None,
    ) -> None:
        now = _utcnow()
        self._id = id
        self._name = name
        self._description = description
        self._price = price
        self._category = category
        self._status = status
        self._image_url = image_url
        self._created_at = created_at or now
        self._updated_at = updated_at or self._created_at
        self._deleted_at = deleted_at

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        description: str,
        price: Money | str | int | float,
        category: str,
    ) -> Product:
        """Create a new active product, enforcing all invariants."""
        name, description, money, category = Product._validate(
            name, description, price, category
        )
        return Product(
            id=uuid.uuid4().hex,
            name=name,
            description=description,
            price=money,
            category=category,
        )

    # --- Mutations ------------------------------------------------------------

    def update(
        self,
        name: str,
        description: str,
        price: Money | str | int | float,
        category: str,
    ) -> None:
        """Replace the descriptive fields.

        All fields are validated before any of them is assigned, so a
        failed update leaves the product untouched.
        """
        name, description, money, category = self._validate(
            name, description, price, category
        )
        self._name = name
        self._description = description
        self._price = money
        self._category = category
        self._touch()

    def set_image_url(self, image_url: str | None) -> None:
        self._image_url = image_url
        self._touch()

    def activate(self) -> None:
        """Transition to ACTIVE. Calling it on an active product is a no-op."""
        self._status = ProductStatus.ACTIVE
        self._touch()

    def deactivate(self) -> None:
        """Transition to INACTIVE. Calling it on an inactive product is a no-op."""
        self._status = ProductStatus.INACTIVE
        self._touch()

    # --- Read-only view -------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def price(self) -> Money:
        return self._price

    @property
    def category(self) -> str:
        return self._category

    @property
    def status(self) -> ProductStatus:
        return self._status

    @property
    def image_url(self) -> str | None:
        return self._image_url

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def deleted_at(self) -> datetime | None:
        return self._deleted_at

    @property
    def is_active(self) -> bool:
        return self._status == ProductStatus.ACTIVE

    @property
    def is_deleted(self) -> bool:
        return self._deleted_at is not None

    # --- Identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Product(id={self._id!r}, name={self._name!r}, "
            f"price={self._price}, status={self._status.value})"
        )

    # --- Internal helpers -----------------------------------------------------

    def _touch(self) -> None:
        # updated_at never moves backwards, even if the clock does
        self._updated_at = max(_utcnow(), self._updated_at)

    @staticmethod
    def _validate(
        name: str,
        description: str,
        price: Money | str | int | float,
        category: str,
    ) -> tuple[str, str, Money, str]:
        return (
            _require_text(name, "name", MAX_NAME_LENGTH),
            _require_text(description, "description", MAX_DESCRIPTION_LENGTH),
            Money.of(price),
            _require_text(category, "category", MAX_CATEGORY_LENGTH),
        )
