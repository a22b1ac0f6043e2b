"""Field checks applied to produce entries before they reach the registry."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation, localcontext

from src.models.produce import Produce, ProducePayload

NAME_PATTERN = re.compile(r"[0-9A-Za-z]+")
CODE_PATTERN = re.compile(r"([0-9A-Za-z]{4}-){3}[0-9A-Za-z]{4}")

CENT = Decimal("0.01")

BAD_NAME = "invalid name"
BAD_CODE = "invalid code"
BAD_PRICE = "invalid price"


class InvalidFieldError(ValueError):
    """Raised when a produce field fails its format rule."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


def normalize_code(code: str) -> str:
    """Fold a produce code to the case used for storage and comparison."""

    return code.lower()


def validate_name(name: str) -> bool:
    return isinstance(name, str) and NAME_PATTERN.fullmatch(name) is not None


def validate_code(code: str) -> bool:
    """Return True when ``code`` is exactly four hyphen separated groups of four."""

    return isinstance(code, str) and CODE_PATTERN.fullmatch(code) is not None


def parse_price(value: str | float | int | Decimal) -> Decimal:
    """Convert an incoming price into a ``Decimal`` with two fractional digits.

    Floats go through their shortest decimal representation, so ``12.12``
    is read as exactly twelve dollars twelve rather than its binary
    approximation.

    Raises:
        InvalidFieldError: If the value is not a strictly positive amount
            expressible in whole cents.
    """

    if isinstance(value, bool):
        raise InvalidFieldError("price", BAD_PRICE)

    try:
        if isinstance(value, float):
            amount = Decimal(repr(value))
        elif isinstance(value, Decimal):
            amount = value
        else:
            amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise InvalidFieldError("price", BAD_PRICE) from exc

    if not amount.is_finite() or amount <= 0:
        raise InvalidFieldError("price", BAD_PRICE)

    try:
        with localcontext() as ctx:
            # every integer digit plus two for the cents
            ctx.prec = max(ctx.prec, amount.adjusted() + 3)
            cents = amount.quantize(CENT)
    except InvalidOperation as exc:
        raise InvalidFieldError("price", BAD_PRICE) from exc

    if cents != amount:
        raise InvalidFieldError("price", BAD_PRICE)

    return cents


def validate_price(value: str | float | int | Decimal) -> bool:
    try:
        parse_price(value)
    except InvalidFieldError:
        return False
    return True


def build_produce(payload: ProducePayload) -> Produce:
    """Check every field of ``payload`` and return the normalized record.

    Fields are checked in name, code, price order and the first failure
    is reported.
    """

    if not validate_name(payload.name):
        raise InvalidFieldError("name", BAD_NAME)
    if not validate_code(payload.code):
        raise InvalidFieldError("code", BAD_CODE)

    price = parse_price(payload.price)
    return Produce(code=payload.code, name=payload.name, price=price)
