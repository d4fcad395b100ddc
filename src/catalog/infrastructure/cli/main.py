import logging

import click

from catalog.infrastructure.cli.product_commands import (
    product_activate,
    product_add,
    product_deactivate,
    product_delete,
    product_export_image,
    product_list,
    product_page,
    product_search,
    product_show,
    product_update,
    product_upload_image,
)


@click.group()
@click.option("-v", "--verbose", count=True, help="Log more (-v info, -vv debug).")
def cli(verbose: int) -> None:
    """Product Catalog"""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_activate)
product.add_command(product_add)
product.add_command(product_deactivate)
product.add_command(product_delete)
product.add_command(product_export_image)
product.add_command(product_list)
product.add_command(product_page)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_update)
product.add_command(product_upload_image)
