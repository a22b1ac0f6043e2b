"""Tests for the produce field validators."""

from decimal import Decimal

import pytest

from src.models.produce import ProducePayload
from src.services.validation import (
    InvalidFieldError,
    build_produce,
    normalize_code,
    parse_price,
    validate_code,
    validate_name,
    validate_price,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("price", [12.12, 1, 0.1, "12.12", "12.120", "1", "0.01", Decimal("3.50")])
def test_valid_prices(price):
    assert validate_price(price)


@pytest.mark.parametrize(
    "price",
    [
        12.123,
        12.111,
        0,
        0.0,
        -1,
        -12.11,
        -12.111,
        "12.123",
        "abc",
        "",
        "NaN",
        "inf",
        "100000000000000000000000000.001",
        True,
    ],
)
def test_invalid_prices(price):
    assert not validate_price(price)


def test_float_prices_do_not_suffer_binary_rounding():
    # 0.29 * 100 is 28.999999999999996 in binary floating point
    assert validate_price(0.29)
    assert parse_price(0.29) == Decimal("0.29")
    assert parse_price(19.99) == Decimal("19.99")


def test_parse_price_quantizes_to_cents():
    assert parse_price(1) == Decimal("1.00")
    assert str(parse_price("12.1")) == "12.10"
    assert parse_price(" 4.20 ") == Decimal("4.20")


def test_parse_price_accepts_large_whole_amounts():
    assert parse_price("100000000000000000000000000") == Decimal(
        "100000000000000000000000000.00"
    )
    assert str(parse_price("1e30")) == "1" + "0" * 30 + ".00"


def test_parse_price_reports_field():
    with pytest.raises(InvalidFieldError) as excinfo:
        parse_price("12.123")
    assert excinfo.value.field == "price"
    assert str(excinfo.value) == "invalid price"


def test_name_rules():
    assert validate_name("apple")
    assert validate_name("Apple2")
    assert not validate_name("---")
    assert not validate_name("")
    assert not validate_name("apple---")
    assert not validate_name("--apple")


def test_code_rules():
    assert validate_code("YRT6-72AS-K736-L4AR")
    assert validate_code("yrt6-72as-k736-l4ar")
    assert not validate_code("")
    assert not validate_code("YRT6-72AS*-K736-L4AR")
    assert not validate_code("YRT6-72AS-K736-L4ARa")
    assert not validate_code("72AS-K736-L4AR")
    assert not validate_code("xYRT6-72AS-K736-L4AR")
    assert not validate_code("YRT6-72AS-K736-L4AR\n")


def test_normalize_code_folds_case():
    assert normalize_code("YRT6-72AS-K736-L4AR") == "yrt6-72as-k736-l4ar"


def test_build_produce_normalizes_fields():
    payload = ProducePayload(code="YRT6-72AS-K736-L4AR", name="Apple", price="12.12")

    produce = build_produce(payload)

    assert produce.code == "yrt6-72as-k736-l4ar"
    assert produce.name == "apple"
    assert produce.price == Decimal("12.12")


@pytest.mark.parametrize(
    ("payload", "field"),
    [
        ({"code": "YRT6-72AS-K736-L4AR", "name": "apple--", "price": "12.12"}, "name"),
        ({"code": "YRT6-72AS-K736-L4eee", "name": "apple", "price": "12.12"}, "code"),
        ({"code": "YRT6-72AS-K736-L4AR", "name": "apple", "price": "12.123"}, "price"),
        # name is checked before code
        ({"code": "bad", "name": "", "price": "12.123"}, "name"),
    ],
)
def test_build_produce_reports_first_invalid_field(payload, field):
    with pytest.raises(InvalidFieldError) as excinfo:
        build_produce(ProducePayload(**payload))
    assert excinfo.value.field == field
