from __future__ import annotations

from decimal import Decimal

import pytest

from dishgen.application.recipe import recipe_positions
from dishgen.application.supply import build_supply
from dishgen.domain.entities import Ingredient, IngredientType
from dishgen.domain.errors import InsufficientIngredients

TYPES = {
    "A": IngredientType(id=1, code="A", title="Bread"),
    "B": IngredientType(id=2, code="B", title="Filling"),
    "C": IngredientType(id=3, code="C", title="Sauce"),
}
SUPPLY = {
    1: [Ingredient(id=10, title="a1", price=Decimal("1"), type_id=1)],
    2: [
        Ingredient(id=20, title="b1", price=Decimal("2"), type_id=2),
        Ingredient(id=21, title="b2", price=Decimal("3"), type_id=2),
    ],
    3: [],
}


class _Fetcher:
    def __init__(self):
        self.calls = []

    def __call__(self, type_id):
        self.calls.append(type_id)
        return list(SUPPLY[type_id])


def test_supply_for_recipe_types():
    fetch = _Fetcher()
    supply = build_supply(recipe_positions("ABB"), TYPES, fetch)
    assert [i.id for i in supply["A"]] == [10]
    assert [i.id for i in supply["B"]] == [20, 21]
    # types absent from the recipe are never fetched
    assert fetch.calls == [1, 2]
    assert "C" not in supply


def test_more_positions_than_ingredients_rejected():
    with pytest.raises(InsufficientIngredients) as exc:
        build_supply(recipe_positions("AA"), TYPES, _Fetcher())
    assert exc.value.code == "A"
    assert exc.value.required == 2
    assert exc.value.available == 1


def test_empty_type_rejected():
    with pytest.raises(InsufficientIngredients) as exc:
        build_supply(recipe_positions("C"), TYPES, _Fetcher())
    assert exc.value.code == "C"
    assert exc.value.available == 0


def test_first_short_type_in_catalog_order_reported():
    with pytest.raises(InsufficientIngredients) as exc:
        build_supply(recipe_positions("CBBBAA"), TYPES, _Fetcher())
    assert exc.value.code == "A"


def test_exact_supply_is_enough():
    supply = build_supply(recipe_positions("BB"), TYPES, _Fetcher())
    assert len(supply["B"]) == 2
