"""Application tests for shop registration, price publishing and the activity flag."""

import pytest
from printing.shared.options import PRICE_SHEET_FIELDS
from printing.shop.activity import SetShopActivity, get_activity
from printing.shop.discovery import list_active_shops
from printing.shop.pricing import SetShopPrices, get_prices
from printing.shop.registration import RegisterShop
from printing.shop.shop import Shop
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

PRICES = {
    "a1_grayscale": 40.0,
    "a1_color": 80.0,
    "a2_grayscale": 30.0,
    "a2_color": 60.0,
    "a3_grayscale": 10.0,
    "a3_color": 20.0,
    "a4_grayscale": 2.0,
    "a4_color": 10.0,
    "a5_grayscale": 1.5,
    "a5_color": 8.0,
    "a6_grayscale": 1.0,
    "a6_color": 5.0,
    "binding_cost": 25.0,
}


def _register_shop(username="campus-prints", **extra):
    current_domain.process(
        RegisterShop(username=username, email=f"{username}@shops.example", **extra),
        asynchronous=False,
    )


def _set_activity(username, active):
    current_domain.process(SetShopActivity(shop_username=username, active=active), asynchronous=False)


class TestRegisterShop:
    def test_shop_stored_active(self):
        _register_shop(description="Next to the library")
        shop = current_domain.repository_for(Shop).get("campus-prints")
        assert shop.active is True
        assert shop.description == "Next to the library"

    def test_duplicate_username_rejected(self):
        _register_shop()
        with pytest.raises(ValidationError):
            _register_shop()


class TestPrices:
    def test_published_prices_are_returned(self):
        _register_shop()
        current_domain.process(SetShopPrices(shop_username="campus-prints", **PRICES), asynchronous=False)

        assert get_prices("campus-prints") == PRICES

    def test_republishing_replaces_every_price(self):
        _register_shop()
        current_domain.process(SetShopPrices(shop_username="campus-prints", **PRICES), asynchronous=False)
        cheaper = {field: value / 2 for field, value in PRICES.items()}
        current_domain.process(SetShopPrices(shop_username="campus-prints", **cheaper), asynchronous=False)

        assert get_prices("campus-prints") == cheaper

    def test_unpublished_catalog_reads_as_zero(self):
        _register_shop()
        assert get_prices("campus-prints") == {field: 0.0 for field in PRICE_SHEET_FIELDS}

    def test_partial_catalog_rejected(self):
        partial = dict(PRICES)
        partial.pop("binding_cost")
        with pytest.raises(ValidationError) as exc:
            SetShopPrices(shop_username="campus-prints", **partial)
        assert "binding_cost" in exc.value.messages

    def test_prices_for_missing_shop(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(SetShopPrices(shop_username="nowhere", **PRICES), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            get_prices("nowhere")

    def test_inactive_shop_prices_not_found(self):
        _register_shop("inactiveShop")
        current_domain.process(SetShopPrices(shop_username="inactiveShop", **PRICES), asynchronous=False)
        _set_activity("inactiveShop", False)

        with pytest.raises(ObjectNotFoundError):
            get_prices("inactiveShop")


class TestActivity:
    def test_toggle_activity(self):
        _register_shop()
        _set_activity("campus-prints", False)
        assert get_activity("campus-prints") is False

        _set_activity("campus-prints", True)
        assert get_activity("campus-prints") is True

    def test_activity_of_missing_shop(self):
        with pytest.raises(ObjectNotFoundError):
            get_activity("nowhere")
        with pytest.raises(ObjectNotFoundError):
            _set_activity("nowhere", True)

    def test_inactive_shops_are_not_listed(self):
        _register_shop("b-prints")
        _register_shop("a-prints")
        _register_shop("closed-prints")
        _set_activity("closed-prints", False)

        assert [shop.username for shop in list_active_shops()] == ["a-prints", "b-prints"]
