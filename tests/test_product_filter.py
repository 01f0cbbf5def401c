import uuid
from decimal import Decimal

import pytest

from app.domain.models.product import Product
from app.domain.services.product_svc import matches_filter


def _product(name, price):
    return Product(product_id=uuid.uuid4(), product_name=name, retail_price=Decimal(price))


@pytest.mark.parametrize("filter_text", [None, ""])
def test_empty_filter_matches_everything(filter_text):
    assert matches_filter(_product("Anything", "0"), filter_text)


def test_name_prefix_ignores_case():
    assert matches_filter(_product("Widget", "1"), "WID")
    assert not matches_filter(_product("Gadget", "1"), "wid")


def test_name_must_start_with_filter():
    assert not matches_filter(_product("Blue Widget", "1"), "wid")


def test_price_prefix_is_a_string_match():
    assert matches_filter(_product("Widget", "19.99"), "19.9")
    assert not matches_filter(_product("Gadget", "119.99"), "19.9")


def test_price_prefix_is_not_a_numeric_comparison():
    # 19.90 == 19.9 numerically, yet the listed text "19.9" does not start with "19.90"
    assert matches_filter(_product("Widget", "19.90"), "19.9")
    assert not matches_filter(_product("Widget", "19.9"), "19.90")
    assert not matches_filter(_product("Widget", "5"), "5.00")


def test_non_numeric_filter_never_matches_on_price():
    assert not matches_filter(_product("Widget", "19.99"), "19.9x")


def test_numeric_filter_can_still_match_a_name():
    assert matches_filter(_product("2024 Edition", "5"), "2024")


def test_integer_price_matches_its_float_form():
    assert matches_filter(_product("Gadget", "20"), "20.0")
    assert matches_filter(_product("Gadget", "20.00"), "20.0")


def test_null_columns_never_match_a_filter():
    blank = Product(product_id=uuid.uuid4(), product_name=None, retail_price=None)

    assert matches_filter(blank, None)
    assert not matches_filter(blank, "wid")
    assert not matches_filter(blank, "2")
