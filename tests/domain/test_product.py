"""Unit tests for the Product aggregate and its invariants."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import Money


def _make_product(**overrides) -> Product:
    """Helper to build a valid product."""
    fields = {
        "name": "Headphones",
        "description": "Over-ear, noise cancelling",
        "price": "99.90",
        "category": "Electronics",
    }
    fields.update(overrides)
    return Product.create(**fields)


class TestProductCreation:

    def test_happy_path(self):
        product = _make_product()
        assert product.name == "Headphones"
        assert product.description == "Over-ear, noise cancelling"
        assert product.price == Money.of("99.90")
        assert product.category == "Electronics"
        assert product.status == ProductStatus.ACTIVE
        assert product.image_url is None
        assert product.deleted_at is None

    def test_id_is_assigned(self):
        a = _make_product()
        b = _make_product()
        assert a.id
        assert a.id != b.id

    def test_timestamps_are_set(self):
        product = _make_product()
        assert product.created_at.tzinfo is not None
        assert product.updated_at == product.created_at

    def test_fields_are_trimmed(self):
        product = _make_product(name="  Mouse  ", category=" Electronics ")
        assert product.name == "Mouse"
        assert product.category == "Electronics"

    def test_zero_price_accepted(self):
        product = _make_product(price=0)
        assert product.price.amount == Decimal("0")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _make_product(price="-0.01")

    def test_non_numeric_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid price"):
            _make_product(price="cheap")

    def test_missing_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid price"):
            _make_product(price=None)

    @pytest.mark.parametrize("field", ["name", "description", "category"])
    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_blank_text_rejected(self, field, value):
        with pytest.raises(ValidationError, match=f"{field} cannot be empty"):
            _make_product(**{field: value})

    @pytest.mark.parametrize(
        "field, limit",
        [("name", 200), ("description", 1000), ("category", 100)],
    )
    def test_length_limits(self, field, limit):
        assert getattr(_make_product(**{field: "x" * limit}), field) == "x" * limit
        with pytest.raises(ValidationError, match=f"at most {limit} characters"):
            _make_product(**{field: "x" * (limit + 1)})

    def test_attributes_are_read_only(self):
        product = _make_product()
        with pytest.raises(AttributeError):
            product.name = "Other"


class TestProductUpdate:

    def test_update_replaces_fields(self):
        product = _make_product()
        product.update("Speakers", "Bookshelf pair", "150", "Audio")
        assert product.name == "Speakers"
        assert product.description == "Bookshelf pair"
        assert product.price == Money.of("150")
        assert product.category == "Audio"

    def test_update_keeps_identity_and_creation_time(self):
        product = _make_product()
        original_id, created_at, updated_at = product.id, product.created_at, product.updated_at
        product.update("Speakers", "Bookshelf pair", "150", "Audio")
        assert product.id == original_id
        assert product.created_at == created_at
        assert product.updated_at >= updated_at

    def test_update_does_not_change_status(self):
        product = _make_product()
        product.deactivate()
        product.update("Speakers", "Bookshelf pair", "150", "Audio")
        assert product.status == ProductStatus.INACTIVE

    def test_invalid_update_leaves_product_untouched(self):
        product = _make_product()
        with pytest.raises(ValidationError):
            product.update("Speakers", "Bookshelf pair", "-1", "Audio")
        assert product.name == "Headphones"
        assert product.price == Money.of("99.90")

    def test_updated_at_never_moves_backwards(self):
        future = datetime.now(timezone.utc) + timedelta(hours=1)
        product = Product(
            id="p1",
            name="Lamp",
            description="Desk lamp",
            price=Money.of("20"),
            category="Home",
            created_at=future,
            updated_at=future,
        )
        product.update("Lamp", "Desk lamp", "25", "Home")
        assert product.updated_at == future


class TestProductImage:

    def test_set_image_url(self):
        product = _make_product()
        before = product.updated_at
        product.set_image_url("/images/abc.png")
        assert product.image_url == "/images/abc.png"
        assert product.updated_at >= before

    def test_clear_image_url(self):
        product = _make_product()
        product.set_image_url("/images/abc.png")
        product.set_image_url(None)
        assert product.image_url is None


class TestProductStatusTransitions:

    def test_deactivate(self):
        product = _make_product()
        product.deactivate()
        assert product.status == ProductStatus.INACTIVE
        assert not product.is_active

    def test_activate_after_deactivate(self):
        product = _make_product()
        product.deactivate()
        product.activate()
        assert product.status == ProductStatus.ACTIVE

    def test_activate_is_idempotent(self):
        product = _make_product()
        product.activate()
        product.activate()
        assert product.status == ProductStatus.ACTIVE

    def test_deactivate_is_idempotent(self):
        product = _make_product()
        product.deactivate()
        product.deactivate()
        assert product.status == ProductStatus.INACTIVE

    def test_transition_refreshes_updated_at(self):
        product = _make_product()
        before = product.updated_at
        product.deactivate()
        assert product.updated_at >= before


class TestProductIdentity:

    def test_equality_by_id(self):
        product = _make_product()
        twin = Product(
            id=product.id,
            name="Different",
            description="Different",
            price=Money.of("1"),
            category="Other",
        )
        assert product == twin
        assert hash(product) == hash(twin)

    def test_reconstituted_product_keeps_deleted_at(self):
        deleted = datetime(2024, 1, 1, tzinfo=timezone.utc)
        product = Product(
            id="p1",
            name="Lamp",
            description="Desk lamp",
            price=Money.of("20"),
            category="Home",
            deleted_at=deleted,
        )
        assert product.is_deleted
        assert product.deleted_at == deleted
