import click

from ordersvc.infrastructure.bootstrap import settings
from ordersvc.infrastructure.cli.order_commands import (
    order_create,
    order_list,
    order_seed,
    order_show,
)
from ordersvc.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_seed,
    product_show,
    product_update,
)
from ordersvc.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override ORDERSVC_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """ordersvc: orders validated against a remote inventory"""
    configure_logging(log_level or settings().log_level)


@cli.group()
def order() -> None:
    """Place and inspect orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_seed)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_seed)
product.add_command(product_show)
product.add_command(product_update)
