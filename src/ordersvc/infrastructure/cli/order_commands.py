"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from ordersvc.application.create_order import CreateOrderHandler
from ordersvc.application.dto import OrderDTO, OrderItemSpec
from ordersvc.application.list_orders import ListOrdersHandler
from ordersvc.application.seed import SeedOrdersHandler
from ordersvc.application.show_order import ShowOrderHandler
from ordersvc.domain.exceptions import DomainException
from ordersvc.infrastructure.bootstrap import inventory_lookup, order_repository


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'P1:3,P2:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        product_id = product_id.strip()
        if not product_id:
            raise click.BadParameter("Product ID is required")
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        if qty < 1:
            raise click.BadParameter(
                f"Quantity must be at least 1 for product '{product_id}'."
            )
        specs.append(OrderItemSpec(product_id=product_id, quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:    {dto.user_id}")
    click.echo(f"Created: {dto.order_date}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<20} {item.quantity:>5} {item.price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total_amount:>20}")


@click.command("create")
@click.option("--user", "user_id", required=True, help="Owning user id.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_create(user_id: str, items: str) -> None:
    """Place a new order, validating every item against inventory."""
    if not user_id.strip():
        raise click.BadParameter("User id is required", param_hint="--user")
    specs = _parse_items(items)

    inventory = inventory_lookup()
    handler = CreateOrderHandler(order_repo=order_repository(), inventory=inventory)

    try:
        dto = handler.handle(user_id=user_id, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    finally:
        inventory.close()

    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", default=None, help="Only orders of this user.")
def order_list(user_id: str | None) -> None:
    """List orders, all of them or one user's."""
    dtos = ListOrdersHandler(order_repo=order_repository()).handle(user_id)

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<38} {'User':<20} {'Status':<10} {'Items':>5} {'Total':>12}")
    click.echo("-" * 89)
    for dto in dtos:
        click.echo(
            f"{dto.id:<38} {dto.user_id:<20} {dto.status:<10} "
            f"{len(dto.items):>5} {dto.total_amount:>12}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("seed")
@click.option("--count", default=10, show_default=True, type=click.IntRange(min=1))
def order_seed(count: int) -> None:
    """Place random demo orders if there are none yet."""
    inventory = inventory_lookup()
    try:
        created = SeedOrdersHandler(order_repository(), inventory).handle(count)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    finally:
        inventory.close()
    click.echo(f"Seeded {created} orders.")
