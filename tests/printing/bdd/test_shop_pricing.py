"""BDD tests for shop price publishing."""

import pytest
from printing.shared.options import PRICE_SHEET_FIELDS
from printing.shop.activity import SetShopActivity
from printing.shop.pricing import SetShopPrices, get_prices
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from pytest_bdd import given, parsers, scenarios, then, when

scenarios("features/shop_pricing.feature")


def _publish(shop_username, **prices):
    catalog = {field: 1.0 for field in PRICE_SHEET_FIELDS}
    catalog.update(prices)
    current_domain.process(SetShopPrices(shop_username=shop_username, **catalog), asynchronous=False)


@when(parsers.cfparse("the shop publishes A4 grayscale at {a4:f} and binding at {binding:f}"))
def publish_prices(a4, binding):
    _publish("campus-prints", a4_grayscale=a4, binding_cost=binding)


@given("the shop has published its prices")
def published_prices():
    _publish("campus-prints")


@when("the shop is deactivated")
def deactivate_shop():
    current_domain.process(SetShopActivity(shop_username="campus-prints", active=False), asynchronous=False)


@then(parsers.cfparse('the A4 grayscale price of "{shop}" is {price:f}'))
def a4_price(shop, price):
    assert get_prices(shop)["a4_grayscale"] == price


@then(parsers.cfparse('the binding cost of "{shop}" is {price:f}'))
def binding_cost(shop, price):
    assert get_prices(shop)["binding_cost"] == price


@then(parsers.cfparse('looking up the prices of "{shop}" fails with not found'))
def prices_not_found(shop):
    with pytest.raises(ObjectNotFoundError):
        get_prices(shop)
