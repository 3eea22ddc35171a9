"""CLI commands for shopping carts."""

from __future__ import annotations

import click

from custom_pricing.application.add_to_cart import AddToCartHandler
from custom_pricing.application.dto import Actor, CartDTO, RequestContext
from custom_pricing.application.remove_from_cart import RemoveFromCartHandler
from custom_pricing.application.show_cart import ShowCartHandler
from custom_pricing.domain.exceptions import DomainException
from custom_pricing.domain.model.cart import CUSTOM_PRICE_KEY
from custom_pricing.infrastructure.bootstrap import (
    cart_repository,
    notice_queue,
    permission_checker,
    plugin_manager,
    product_repository,
    shop_currency,
)

_session_option = click.option(
    "--session", "session_id", default="default", show_default=True, help="Cart session ID."
)


def _request(role: str | None, price: str | None = None) -> RequestContext:
    form = {CUSTOM_PRICE_KEY: price} if price is not None else {}
    actor = Actor(id=role, roles=frozenset({role})) if role else None
    return RequestContext(form=form, actor=actor)


def _display_cart(dto: CartDTO) -> None:
    if not dto.lines:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Key':<10} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*59}")
    for line in dto.lines:
        click.echo(
            f"  {line.key[:8]:<10} {line.product_name:<20} {line.quantity:>5} "
            f"{line.price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*59}")
    click.echo(f"  {'Subtotal':<38} {dto.subtotal:>20}")


@click.command("add")
@_session_option
@click.option("--product-id", required=True, help="Product ID.")
@click.option("--qty", "quantity", default=1, show_default=True, type=int, help="Quantity.")
@click.option("--price", default=None, help="Customer-chosen price.")
@click.option("--role", default=None, help="Role of the acting user, e.g. shop_manager.")
def cart_add(
    session_id: str,
    product_id: str,
    quantity: int,
    price: str | None,
    role: str | None,
) -> None:
    """Add a product to a cart."""
    notices = notice_queue()
    handler = AddToCartHandler(
        product_repo=product_repository(),
        cart_repo=cart_repository(),
        pm=plugin_manager(),
        notices=notices,
        permissions=permission_checker(),
    )

    try:
        line = handler.handle(session_id, product_id, quantity, _request(role, price))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if line is None:
        raise click.ClickException("; ".join(notices.drain()) or "Could not add to cart")

    click.echo(f"Added to cart '{session_id}' (line {line.key[:8]}, qty {line.quantity}).")


@click.command("show")
@_session_option
@click.option("--role", default=None, help="Role of the acting user.")
def cart_show(session_id: str, role: str | None) -> None:
    """Show a cart with its totals."""
    handler = ShowCartHandler(
        product_repo=product_repository(),
        cart_repo=cart_repository(),
        pm=plugin_manager(),
        currency=shop_currency(),
    )

    try:
        dto = handler.handle(session_id, _request(role))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("remove")
@_session_option
@click.option("--key", "line_key", required=True, help="Cart line key (or its prefix).")
def cart_remove(session_id: str, line_key: str) -> None:
    """Remove a line from a cart."""
    cart = cart_repository().get(session_id)
    matches = [line.key for line in cart.lines if line.key.startswith(line_key)]
    if len(matches) != 1:
        raise click.ClickException(f"No unique cart line matches '{line_key}'")

    handler = RemoveFromCartHandler(cart_repo=cart_repository())
    try:
        handler.handle(session_id, matches[0])
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Removed line {matches[0][:8]} from cart '{session_id}'.")
