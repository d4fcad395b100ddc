"""CLI commands for the Product aggregate."""

from __future__ import annotations

import mimetypes
import shutil
from decimal import Decimal, InvalidOperation
from pathlib import Path

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.change_product_status import (
    ActivateProductHandler,
    DeactivateProductHandler,
)
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import ProductDTO, ProductSpec
from catalog.application.get_product_image import GetProductImageHandler
from catalog.application.list_products import ListProductsHandler
from catalog.application.list_products_page import ListProductsPageHandler
from catalog.application.search_products import SearchProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.application.upload_product_image import UploadProductImageHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import ProductStatus
from catalog.domain.model.query import ProductFilter
from catalog.infrastructure.bootstrap import image_storage, product_repository


def _parse_price(value: str | None, option: str) -> Decimal | None:
    if value is None:
        return None
    try:
        price = Decimal(value)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid price '{value}'.", param_hint=option)
    if not price.is_finite():
        raise click.BadParameter(f"Invalid price '{value}'.", param_hint=option)
    return price


def _print_table(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<32}  {'Name':<24} {'Category':<16} {'Price':>10}  Status")
    click.echo("-" * 96)
    for p in products:
        click.echo(
            f"{p.id:<32}  {p.name[:24]:<24} {p.category[:16]:<16} {p.price:>10}  {p.status}"
        )


def _display_product(dto: ProductDTO) -> None:
    """Shared formatting for displaying a single product."""
    click.echo(f"Product {dto.id}  (status={dto.status})")
    click.echo(f"Name:        {dto.name}")
    click.echo(f"Category:    {dto.category}")
    click.echo(f"Price:       {dto.price}")
    click.echo(f"Description: {dto.description}")
    click.echo(f"Image:       {dto.image_url or '-'}")
    click.echo(f"Created:     {dto.created_at}")
    click.echo(f"Updated:     {dto.updated_at}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", required=True, help="Product category.")
def product_add(name: str, description: str, price: str, category: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(ProductSpec(name, description, price, category))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' added at {dto.price}")


@click.command("list")
@click.option("--category", default=None, help="Only this category (case-insensitive).")
@click.option("--min-price", default=None, help="Minimum price, inclusive.")
@click.option("--max-price", default=None, help="Maximum price, inclusive.")
@click.option(
    "--status",
    type=click.Choice([s.value for s in ProductStatus], case_sensitive=False),
    default=None,
    help="Only products in this status.",
)
def product_list(
    category: str | None,
    min_price: str | None,
    max_price: str | None,
    status: str | None,
) -> None:
    """List products, optionally filtered."""
    criteria = ProductFilter(
        category=category,
        min_price=_parse_price(min_price, "--min-price"),
        max_price=_parse_price(max_price, "--max-price"),
        status=ProductStatus(status.capitalize()) if status else None,
    )
    handler = ListProductsHandler(product_repo=product_repository())
    _print_table(handler.handle(criteria))


@click.command("page")
@click.option("--page", "page_number", type=int, default=1, show_default=True, help="Page number (1-based).")
@click.option("--size", "page_size", type=int, default=10, show_default=True, help="Products per page.")
def product_page(page_number: int, page_size: int) -> None:
    """List one page of products."""
    handler = ListProductsPageHandler(product_repo=product_repository())

    try:
        page = handler.handle(page_number=page_number, page_size=page_size)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _print_table(page.items)
    click.echo(
        f"Page {page.page_number} of {page.total_pages}  "
        f"({page.total_count} products total)"
    )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a single product."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("search")
@click.argument("term")
def product_search(term: str) -> None:
    """Find products whose name, description or category contains TERM."""
    handler = SearchProductsHandler(product_repo=product_repository())
    _print_table(handler.handle(term))


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 29.99).")
@click.option("--category", required=True, help="Product category.")
def product_update(
    product_id: str,
    name: str,
    description: str,
    price: str,
    category: str,
) -> None:
    """Replace a product's name, description, price and category."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id, ProductSpec(name, description, price, category))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Delete a product and its image."""
    handler = DeleteProductHandler(
        product_repo=product_repository(),
        image_storage=image_storage(),
    )

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted")


@click.command("activate")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_activate(product_id: str) -> None:
    """Mark a product as active."""
    handler = ActivateProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} is now {dto.status}")


@click.command("deactivate")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_deactivate(product_id: str) -> None:
    """Mark a product as inactive."""
    handler = DeactivateProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} is now {dto.status}")


@click.command("upload-image")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option(
    "--file",
    "image_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Image file (JPEG, PNG or GIF, at most 5 MiB).",
)
@click.option("--content-type", default=None, help="MIME type (guessed from the file name if omitted).")
def product_upload_image(product_id: str, image_path: Path, content_type: str | None) -> None:
    """Attach an image to a product, replacing any existing one."""
    if content_type is None:
        content_type, _ = mimetypes.guess_type(image_path.name)

    handler = UploadProductImageHandler(
        product_repo=product_repository(),
        image_storage=image_storage(),
    )

    try:
        with image_path.open("rb") as stream:
            dto = handler.handle(
                product_id,
                stream,
                filename=image_path.name,
                content_type=content_type or "application/octet-stream",
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} image stored at {dto.image_url}")


@click.command("export-image")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option(
    "--output",
    required=True,
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Where to write the image.",
)
def product_export_image(product_id: str, output: Path) -> None:
    """Copy a product's stored image to a local file."""
    handler = GetProductImageHandler(
        product_repo=product_repository(),
        image_storage=image_storage(),
    )

    try:
        stream = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    with stream, output.open("wb") as out:
        shutil.copyfileobj(stream, out)

    click.echo(f"Image of product {product_id} written to {output}")
