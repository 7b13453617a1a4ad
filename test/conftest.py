from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Tuple

import pytest

from dishgen.domain.entities import Ingredient, IngredientType
from dishgen.infrastructure.memory_repositories import InMemoryCatalog


def make_catalog(spec: Dict[str, List[Tuple[int, str, str]]]) -> InMemoryCatalog:
    """{code: [(ingredient_id, title, price), ...]} -> catalog; type ids follow insertion order."""
    types: List[IngredientType] = []
    ingredients: List[Ingredient] = []
    for type_id, (code, items) in enumerate(spec.items(), start=100):
        types.append(IngredientType(id=type_id, code=code, title=f"type-{code}"))
        for ing_id, title, price in items:
            ingredients.append(Ingredient(id=ing_id, title=title, price=Decimal(price), type_id=type_id))
    return InMemoryCatalog(types, ingredients)


@pytest.fixture
def catalog_ab() -> InMemoryCatalog:
    return make_catalog({
        "A": [(1, "a1", "1.00"), (2, "a2", "2.00")],
        "B": [(3, "b1", "3.00")],
    })


@pytest.fixture
def pizza_catalog() -> InMemoryCatalog:
    return make_catalog({
        "d": [(1, "Thin crust", "100.00"), (2, "Thick crust", "120.50")],
        "c": [(3, "Mozzarella", "80.10"), (4, "Cheddar", "70.20"), (5, "Parmesan", "95.30")],
        "i": [(6, "Tomato", "20.00"), (7, "Mushroom", "35.40"), (8, "Ham", "60.00"), (9, "Olives", "0.10")],
    })
