"""SQLite-backed implementation of ProductRepository.

Every read carries ``deleted_at IS NULL`` unless the caller asks for
deleted rows explicitly. Prices are stored as decimal text so no
precision is lost; price bounds are checked on the loaded Decimals.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.query import Page, ProductFilter, validate_page_request
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

_COLUMNS = (
    "id",
    "name",
    "description",
    "price",
    "category",
    "status",
    "image_url",
    "created_at",
    "updated_at",
    "deleted_at",
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS products (
    id          TEXT PRIMARY KEY,
    name        TEXT NOT NULL CHECK (length(name) <= 200),
    description TEXT NOT NULL CHECK (length(description) <= 1000),
    price       TEXT NOT NULL,
    category    TEXT NOT NULL CHECK (length(category) <= 100),
    status      TEXT NOT NULL,
    image_url   TEXT CHECK (image_url IS NULL OR length(image_url) <= 500),
    created_at  TEXT NOT NULL,
    updated_at  TEXT NOT NULL,
    deleted_at  TEXT
);
CREATE INDEX IF NOT EXISTS ix_products_category ON products (category);
CREATE INDEX IF NOT EXISTS ix_products_status ON products (status);
CREATE INDEX IF NOT EXISTS ix_products_price ON products (price);
CREATE INDEX IF NOT EXISTS ix_products_deleted_at ON products (deleted_at);
"""

_NOT_DELETED = "deleted_at IS NULL"


class SqliteProductRepository(ProductRepository):

    def __init__(self, db_path: Path) -> None:
        self._db_path = Path(db_path)
        self._ensure_schema()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str, include_deleted: bool = False) -> Product | None:
        sql = f"SELECT {self._columns_sql()} FROM products WHERE id = ?"
        if not include_deleted:
            sql += f" AND {_NOT_DELETED}"
        conn = self._get_connection()
        try:
            row = conn.execute(sql, [product_id]).fetchone()
        finally:
            conn.close()
        return self._to_domain(row) if row else None

    def list_all(self, include_deleted: bool = False) -> list[Product]:
        sql = f"SELECT {self._columns_sql()} FROM products"
        if not include_deleted:
            sql += f" WHERE {_NOT_DELETED}"
        sql += " ORDER BY rowid"
        return self._query(sql, [])

    def get_filtered(self, criteria: ProductFilter) -> list[Product]:
        where, params = self._build_where_clause(criteria)
        sql = f"SELECT {self._columns_sql()} FROM products WHERE {where} ORDER BY rowid"
        # Price bounds are applied on the Decimal values, not in SQL
        return [p for p in self._query(sql, params) if criteria.matches(p)]

    def get_paged(self, page_number: int, page_size: int) -> Page:
        validate_page_request(page_number, page_size)
        offset = (page_number - 1) * page_size
        conn = self._get_connection()
        try:
            total = conn.execute(
                f"SELECT COUNT(*) FROM products WHERE {_NOT_DELETED}"
            ).fetchone()[0]
            rows = conn.execute(
                f"SELECT {self._columns_sql()} FROM products WHERE {_NOT_DELETED} "
                "ORDER BY rowid LIMIT ? OFFSET ?",
                [page_size, offset],
            ).fetchall()
        finally:
            conn.close()
        return Page(
            items=[self._to_domain(r) for r in rows],
            total_count=total,
            page_number=page_number,
            page_size=page_size,
        )

    def add(self, product: Product) -> Product:
        placeholders = ", ".join("?" for _ in _COLUMNS)
        with self._transaction() as conn:
            conn.execute(
                f"INSERT INTO products ({self._columns_sql()}) VALUES ({placeholders})",
                self._to_row(product),
            )
        logger.debug("Inserted product %s into %s", product.id, self._db_path)
        return product

    def update(self, product: Product) -> None:
        assignments = ", ".join(f"{c} = ?" for c in _COLUMNS[1:])
        row = self._to_row(product)
        with self._transaction() as conn:
            conn.execute(
                f"UPDATE products SET {assignments} WHERE id = ?",
                [*row[1:], row[0]],
            )

    def delete(self, product_id: str) -> None:
        now = datetime.now(timezone.utc).isoformat()
        with self._transaction() as conn:
            conn.execute(
                f"UPDATE products SET deleted_at = ?, updated_at = ? "
                f"WHERE id = ? AND {_NOT_DELETED}",
                [now, now, product_id],
            )

    def exists(self, product_id: str) -> bool:
        conn = self._get_connection()
        try:
            row = conn.execute(
                f"SELECT 1 FROM products WHERE id = ? AND {_NOT_DELETED}",
                [product_id],
            ).fetchone()
        finally:
            conn.close()
        return row is not None

    # --- Query helpers --------------------------------------------------------

    @staticmethod
    def _build_where_clause(criteria: ProductFilter) -> tuple[str, list]:
        parts = [_NOT_DELETED]
        params: list = []
        if criteria.category:
            parts.append("py_casefold(category) = py_casefold(?)")
            params.append(criteria.category)
        if criteria.status is not None:
            parts.append("status = ?")
            params.append(criteria.status.value)
        return " AND ".join(parts), params

    def _query(self, sql: str, params: list) -> list[Product]:
        conn = self._get_connection()
        try:
            rows = conn.execute(sql, params).fetchall()
        finally:
            conn.close()
        return [self._to_domain(r) for r in rows]

    @staticmethod
    def _columns_sql() -> str:
        return ", ".join(_COLUMNS)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(product: Product) -> list:
        return [
            product.id,
            product.name,
            product.description,
            str(product.price.amount),
            product.category,
            product.status.value,
            product.image_url,
            product.created_at.isoformat(),
            product.updated_at.isoformat(),
            product.deleted_at.isoformat() if product.deleted_at else None,
        ]

    @staticmethod
    def _to_domain(row: sqlite3.Row) -> Product:
        deleted_at = row["deleted_at"]
        return Product(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            price=Money(Decimal(row["price"])),
            category=row["category"],
            status=ProductStatus(row["status"]),
            image_url=row["image_url"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
            deleted_at=datetime.fromisoformat(deleted_at) if deleted_at else None,
        )

    # --- Connection helpers ---------------------------------------------------

    def _get_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        # SQLite lower() only folds ASCII
        conn.create_function("py_casefold", 1, str.casefold, deterministic=True)
        return conn

    def _transaction(self) -> _Transaction:
        return _Transaction(self._get_connection())

    def _ensure_schema(self) -> None:
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = self._get_connection()
        try:
            conn.executescript(_SCHEMA)
        finally:
            conn.close()


class _Transaction:
    """Commit on success, roll back on error, always close."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def __enter__(self) -> sqlite3.Connection:
        return self._conn

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if exc_type is None:
                self._conn.commit()
            else:
                self._conn.rollback()
        finally:
            self._conn.close()
