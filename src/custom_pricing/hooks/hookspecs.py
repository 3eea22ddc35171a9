"""Hookspecs for the storefront lifecycle events.

The host fires these events; extensions implement them with ``hookimpl``.
Filter-style events are first-result specs: the host passes in its own
value and falls back to it when no implementation returns anything.
"""

import pluggy

PROJECT_NAME = "custom_pricing"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


@hookspec(firstresult=True)
def on_configuration_render(product_id):
    """
    Build the admin pricing options for a product.

    Args:
    product_id (str): the product being edited

    Returns:
    - PricingOptionsView|None
    """


@hookspec
def on_configuration_save(product_id, form):
    """
    Persist the admin pricing options submitted for a product.

    Args:
    product_id (str): the product being saved
    form (Mapping[str, str]): the submitted admin form fields
    """


@hookspec(firstresult=True)
def on_price_input_render(product):
    """
    Build the storefront price input shown before the add-to-cart button.

    Args:
    product (Product): the product on the page

    Returns:
    - PriceInputView|None; None renders nothing
    """


@hookspec(firstresult=True)
def on_add_to_cart_validate(valid, product_id, quantity, request):
    """
    Validate an add-to-cart request before the cart is touched.

    Args:
    valid (bool): verdict of earlier validators
    product_id (str): the product being added
    quantity (int): the requested quantity
    request (RequestContext): the current request

    Returns:
    - bool; False blocks the add-to-cart
    """


@hookspec(firstresult=True)
def on_cart_line_create(line_data, request):
    """
    Fill the custom data of a cart line that is being created.

    Args:
    line_data (dict): the line's custom data so far
    request (RequestContext): the current request

    Returns:
    - dict: the custom data to store on the line
    """


@hookspec
def on_totals_recompute(cart, request):
    """
    Adjust effective line prices before cart totals are computed.

    Args:
    cart (Cart): the cart, with each line at its catalog price
    request (RequestContext): the current request
    """


@hookspec(firstresult=True)
def on_purchasability_check(purchasable, product, actor):
    """
    Decide whether a product may be added to the cart.

    Args:
    purchasable (bool): the host's default verdict
    product (Product|None): the product, None if it does not exist
    actor (Actor|None): the current user

    Returns:
    - bool
    """


@hookspec(firstresult=True)
def on_cart_line_format_price(price, line):
    """
    Format the unit price shown for a cart line.

    Args:
    price (str): the host's formatted unit price
    line (CartLine): the cart line

    Returns:
    - str
    """
