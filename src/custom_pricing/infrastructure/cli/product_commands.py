"""CLI commands for products and their pricing options."""

from __future__ import annotations

import click

from custom_pricing.application.add_product import AddProductHandler
from custom_pricing.application.configure_pricing import (
    SavePricingOptionsHandler,
    ShowPricingOptionsHandler,
)
from custom_pricing.application.render_price_input import RenderPriceInputHandler
from custom_pricing.domain.exceptions import DomainException
from custom_pricing.domain.model.pricing_config import (
    ALLOW_CUSTOMER_PRICE_KEY,
    FLAG_ON,
    MINIMUM_PRICE_KEY,
    ProductPricingConfig,
)
from custom_pricing.domain.model.product import ProductStatus
from custom_pricing.infrastructure.bootstrap import (
    plugin_manager,
    product_repository,
    settings,
    shop_currency,
)
from custom_pricing.infrastructure.web.rendering import (
    render_price_input,
    render_pricing_options,
)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", default=None, help="Catalog price (e.g. 15.00); omit for none.")
@click.option(
    "--status",
    type=click.Choice([s.value for s in ProductStatus]),
    default=ProductStatus.PUBLISH.value,
    show_default=True,
    help="Publication status.",
)
def product_add(name: str, price: str | None, status: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(), currency=settings().currency
    )

    try:
        product = handler.handle(name=name, price=price, status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    price_text = shop_currency().format_price(product.price) if product.price is not None else "no price"
    click.echo(f"Product #{product.id} '{product.name}' added at {price_text}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    currency = shop_currency()
    products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Status':<8} {'Customer price':<16}")
    click.echo("-" * 64)
    for p in products:
        config = ProductPricingConfig.from_meta(
            p.get_meta(ALLOW_CUSTOMER_PRICE_KEY),
            p.get_meta(MINIMUM_PRICE_KEY),
            currency.currency,
        )
        price = currency.format_price(p.price) if p.price is not None else "-"
        if not config.allow_customer_price:
            custom = "no"
        elif config.minimum_price is None:
            custom = "yes"
        else:
            custom = f"min {currency.format_price(config.minimum_price)}"
        click.echo(f"{p.id:<6} {p.name:<20} {price:>10} {p.status.value:<8} {custom:<16}")


@click.command("configure")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option(
    "--allow/--no-allow",
    default=False,
    help="Let customers set the price.",
)
@click.option("--minimum", default="", help="Minimum customer price; empty for none.")
def product_configure(product_id: str, allow: bool, minimum: str) -> None:
    """Save the customer pricing options of a product."""
    # Unchecked checkboxes are omitted from submitted forms.
    form = {MINIMUM_PRICE_KEY: minimum}
    if allow:
        form[ALLOW_CUSTOMER_PRICE_KEY] = FLAG_ON

    handler = SavePricingOptionsHandler(
        product_repo=product_repository(), pm=plugin_manager()
    )

    try:
        handler.handle(product_id, form)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} pricing options saved.")


@click.command("options-form")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_options_form(product_id: str) -> None:
    """Print the admin pricing options HTML of a product."""
    handler = ShowPricingOptionsHandler(
        product_repo=product_repository(), pm=plugin_manager()
    )

    try:
        view = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if view is not None:
        click.echo(render_pricing_options(view))


@click.command("price-input")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_price_input(product_id: str) -> None:
    """Print the product page price input HTML, if the product has one."""
    handler = RenderPriceInputHandler(
        product_repo=product_repository(), pm=plugin_manager()
    )

    try:
        view = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    html = render_price_input(view)
    if html:
        click.echo(html)
