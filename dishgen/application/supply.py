# dishgen/application/supply.py
from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, Dict, Hashable, List, Sequence

from dishgen.domain.entities import Ingredient, IngredientType
from dishgen.domain.errors import InsufficientIngredients

log = logging.getLogger("app.supply")

FetchIngredients = Callable[[Hashable], List[Ingredient]]


def build_supply(
    positions: Sequence[str],
    types_by_code: Dict[str, IngredientType],
    fetch_by_type_id: FetchIngredients,
) -> Dict[str, List[Ingredient]]:
    """
    Fetch the ingredients of every type the recipe uses and check that each type
    has at least as many ingredients as the recipe has positions of that type.

    Types are visited in catalog order, so the first short type in that order is
    the one reported. Passing this check does not guarantee a dish exists.
    """
    required = Counter(positions)
    supply: Dict[str, List[Ingredient]] = {}

    for code, ingredient_type in types_by_code.items():
        if code not in required:
            continue
        ingredients = list(fetch_by_type_id(ingredient_type.id))
        if required[code] > len(ingredients):
            log.info(
                "Type %s: recipe needs %d, supply has %d", code, required[code], len(ingredients)
            )
            raise InsufficientIngredients(code, required[code], len(ingredients))
        supply[code] = ingredients

    return supply
