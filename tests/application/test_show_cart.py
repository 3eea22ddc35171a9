"""Integration tests for the ShowCart use case.

Uses in-memory fake repositories, no file I/O.
"""

from custom_pricing.application.add_to_cart import AddToCartHandler
from custom_pricing.application.dto import RequestContext
from custom_pricing.application.show_cart import ShowCartHandler
from custom_pricing.domain.model.cart import CUSTOM_PRICE_KEY, Cart, CartLine
from custom_pricing.domain.model.pricing_config import (
    ALLOW_CUSTOMER_PRICE_KEY,
    MINIMUM_PRICE_KEY,
)
from custom_pricing.domain.model.product import Product
from custom_pricing.domain.model.value_objects import Money, Quantity
from custom_pricing.infrastructure.currency import ShopCurrency
from tests.fakes import (
    FakeCartRepository,
    FakeNoticeChannel,
    FakePermissionChecker,
    FakeProductRepository,
    make_plugin_manager,
)


def _setup():
    products = [
        Product(
            id="1",
            name="Donation",
            meta={ALLOW_CUSTOMER_PRICE_KEY: "yes", MINIMUM_PRICE_KEY: "5.00"},
        ),
        Product(id="2", name="Widget", price=Money.of("15.00")),
    ]
    product_repo = FakeProductRepository(products)
    cart_repo = FakeCartRepository()
    notices = FakeNoticeChannel()
    permissions = FakePermissionChecker()
    pm = make_plugin_manager(product_repo, notices, permissions)
    add = AddToCartHandler(product_repo, cart_repo, pm, notices, permissions)
    show = ShowCartHandler(product_repo, cart_repo, pm, ShopCurrency("USD", "$"))
    return add, show, product_repo, cart_repo


def _request(price: str | None = None, **flags) -> RequestContext:
    form = {CUSTOM_PRICE_KEY: price} if price is not None else {}
    return RequestContext(form=form, **flags)


class TestShowCart:

    def test_custom_price_applied_and_displayed(self):
        add, show, _, _ = _setup()
        add.handle("s1", "1", 1, _request("10.00"))
        dto = show.handle("s1", _request())
        (line,) = dto.lines
        assert line.product_name == "Donation"
        assert line.price == "$10.00"
        assert line.line_total == "$10.00"
        assert dto.subtotal == "$10.00"

    def test_mixed_cart_subtotal(self):
        add, show, _, _ = _setup()
        add.handle("s1", "1", 2, _request("7.50"))
        add.handle("s1", "2", 1, _request())
        dto = show.handle("s1", _request())
        assert [line.price for line in dto.lines] == ["$7.50", "$15.00"]
        assert dto.subtotal == "$30.00"

    def test_showing_twice_gives_same_totals(self):
        add, show, _, _ = _setup()
        add.handle("s1", "1", 1, _request("12"))
        assert show.handle("s1", _request()) == show.handle("s1", _request())

    def test_admin_view_uses_catalog_prices(self):
        add, show, _, _ = _setup()
        add.handle("s1", "1", 1, _request("10.00"))
        dto = show.handle("s1", _request(is_admin=True))
        assert dto.subtotal == "$0.00"

    def test_admin_ajax_refresh_uses_custom_prices(self):
        add, show, _, _ = _setup()
        add.handle("s1", "1", 1, _request("10.00"))
        dto = show.handle("s1", _request(is_admin=True, is_ajax=True))
        assert dto.subtotal == "$10.00"

    def test_stray_price_on_fixed_price_product_ignored(self):
        add, show, _, _ = _setup()
        add.handle("s1", "2", 1, _request("0.01"))
        dto = show.handle("s1", _request())
        assert dto.lines[0].price == "$15.00"
        assert dto.subtotal == "$15.00"

    def test_flag_turned_off_after_capture(self):
        add, show, product_repo, _ = _setup()
        add.handle("s1", "1", 1, _request("10.00"))
        product_repo.set_meta("1", ALLOW_CUSTOMER_PRICE_KEY, "no")
        dto = show.handle("s1", _request())
        assert dto.lines[0].price == "$0.00"

    def test_overflowing_price_never_reaches_totals(self):
        add, show, _, _ = _setup()
        assert add.handle("s1", "1", 1, _request("1e1000000")) is None
        add.handle("s1", "2", 1, _request())
        dto = show.handle("s1", _request())
        assert [line.product_name for line in dto.lines] == ["Widget"]
        assert dto.subtotal == "$15.00"

    def test_orphaned_line_dropped(self):
        _, show, _, cart_repo = _setup()
        cart = Cart("s1", lines=[CartLine(Cart.line_key("9"), "9", Quantity(1))])
        cart_repo.save(cart)
        dto = show.handle("s1", _request())
        assert dto.lines == []
        assert cart_repo.get("s1").is_empty

    def test_empty_cart(self):
        _, show, _, _ = _setup()
        dto = show.handle("nobody", _request())
        assert dto.lines == []
        assert dto.subtotal == "$0.00"
