"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from ordersvc.application.add_product import AddProductHandler
from ordersvc.application.delete_product import DeleteProductHandler
from ordersvc.application.dto import ProductDTO
from ordersvc.application.seed import SeedCatalogHandler
from ordersvc.application.show_product import ShowProductHandler
from ordersvc.application.update_product import UpdateProductHandler
from ordersvc.domain.exceptions import DomainException
from ordersvc.infrastructure.bootstrap import product_repository


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id} '{dto.name}'")
    if dto.description:
        click.echo(f"  {dto.description}")
    click.echo(f"  Price: {dto.price}  In stock: {dto.quantity}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--description", default="", help="Free-text description.")
def product_add(name: str, price: str, quantity: int, description: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(
            name=name, price=price, quantity=quantity, description=description
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' added at {dto.price} ({dto.quantity} in stock)")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ShowProductHandler(product_repo=product_repository()).list()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 46)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10} {p.quantity:>7}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show one product."""
    try:
        dto = ShowProductHandler(product_repo=product_repository()).get(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--description", default="", help="Free-text description.")
def product_update(
    product_id: str, name: str, price: str, quantity: int, description: str
) -> None:
    """Replace a product's details."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(
            product_id=product_id,
            name=name,
            price=price,
            quantity=quantity,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    try:
        DeleteProductHandler(product_repo=product_repository()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")


@click.command("seed")
def product_seed() -> None:
    """Load the demo catalog into an empty store."""
    created = SeedCatalogHandler(product_repo=product_repository()).handle()
    click.echo(f"Seeded {created} products.")
