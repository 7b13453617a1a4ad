# dishgen/application/pricing.py
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

from dishgen.domain.entities import DishIngredient

_ZERO = Decimal("0")


def to_price(value: Any) -> Decimal:
    """Coerce a stored price into a Decimal without passing through binary floats."""
    if isinstance(value, Decimal):
        price = value
    elif hasattr(value, "to_decimal"):  # bson Decimal128
        price = value.to_decimal()
    elif isinstance(value, bool):
        raise ValueError(f"Invalid price: {value!r}")
    elif isinstance(value, (int, str)):
        try:
            price = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"Invalid price: {value!r}") from e
    elif isinstance(value, float):
        # repr() is the shortest string that round-trips: 0.1 -> "0.1"
        price = Decimal(repr(value))
    else:
        raise ValueError(f"Invalid price: {value!r}")

    if not price.is_finite() or price < _ZERO:
        raise ValueError(f"Invalid price: {value!r}")
    return price


def total_price(ingredients: Iterable[DishIngredient]) -> Decimal:
    total = _ZERO
    for ingredient in ingredients:
        total += ingredient.price
    return total
