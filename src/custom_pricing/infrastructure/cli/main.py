import click

from custom_pricing.infrastructure.bootstrap import configure_logging
from custom_pricing.infrastructure.cli.cart_commands import cart_add, cart_remove, cart_show
from custom_pricing.infrastructure.cli.product_commands import (
    product_add,
    product_configure,
    product_list,
    product_options_form,
    product_price_input,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
def cli(verbose: bool) -> None:
    """Customer Pricing: shopper-chosen prices with a minimum"""
    configure_logging(verbose)


@cli.group()
def product() -> None:
    """Manage products and their pricing options."""


@cli.group()
def cart() -> None:
    """Manage shopping carts."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_configure)
product.add_command(product_list)
product.add_command(product_options_form)
product.add_command(product_price_input)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_show)
