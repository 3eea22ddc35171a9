"""HTML fragments for the admin product form and the product page.

Every interpolated value goes through ``Markup.format`` so it is escaped.
"""

from __future__ import annotations

from markupsafe import Markup

from custom_pricing.application.dto import PriceInputView, PricingOptionsView
from custom_pricing.domain.model.cart import CUSTOM_PRICE_KEY
from custom_pricing.domain.model.pricing_config import (
    ALLOW_CUSTOMER_PRICE_KEY,
    FLAG_ON,
    MINIMUM_PRICE_KEY,
)

_RULE = Markup('<hr style="border-top-color: #ffffff; border-bottom-color: #eeeeee;"/>')

_OPTIONS_TEMPLATE = Markup(
    "{rule}\n"
    '<p class="form-field {flag_id}_field">\n'
    '  <label for="{flag_id}">Allow customer to set product price?</label>\n'
    '  <input type="checkbox" class="checkbox" id="{flag_id}" name="{flag_id}"'
    ' value="{flag_on}"{checked}/>\n'
    '  <span class="description">If enabled, customers will be able to set a'
    " custom price before adding product to cart.</span>\n"
    "</p>\n"
    '<p class="form-field {minimum_id}_field">\n'
    '  <label for="{minimum_id}">Minimum price ({symbol})</label>\n'
    '  <input type="text" class="short wc_input_price" id="{minimum_id}"'
    ' name="{minimum_id}" value="{minimum}"{disabled}/>\n'
    "</p>\n"
    "<script>\n"
    "  document.getElementById('{flag_id}').addEventListener('change', function(event) {{\n"
    "    document.getElementById('{minimum_id}').disabled = !event.target.checked;\n"
    "  }});\n"
    "</script>"
)

_PRICE_INPUT_TEMPLATE = Markup(
    '<div class="wcp-custom-price">\n'
    '  <label for="{name}">Price ({symbol})</label>\n'
    '  <input type="number" min="{minimum}" value="{minimum}" id="{name}" name="{name}"/>\n'
    "</div>"
)


def render_pricing_options(view: PricingOptionsView) -> Markup:
    """Admin fields: the customer-price checkbox and the minimum price."""
    return _OPTIONS_TEMPLATE.format(
        rule=_RULE,
        flag_id=ALLOW_CUSTOMER_PRICE_KEY,
        flag_on=FLAG_ON,
        checked=Markup(' checked="checked"') if view.allow_customer_price else "",
        minimum_id=MINIMUM_PRICE_KEY,
        symbol=view.currency_symbol,
        minimum=view.minimum_price,
        disabled=Markup(' disabled="disabled"') if view.minimum_disabled else "",
    )


def render_price_input(view: PriceInputView | None) -> Markup:
    """Product page price input; empty for products with fixed prices."""
    if view is None:
        return Markup("")
    return _PRICE_INPUT_TEMPLATE.format(
        name=CUSTOM_PRICE_KEY,
        symbol=view.currency_symbol,
        minimum=view.minimum_price,
    )
