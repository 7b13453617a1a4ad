# dishgen/application/recipe.py
from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from dishgen.domain.entities import IngredientType
from dishgen.domain.errors import InvalidRecipeCode

log = logging.getLogger("app.recipe")


def recipe_positions(recipe: str) -> List[str]:
    """One type code per character."""
    return list(recipe)


def resolve_types(recipe: str, available_types: Iterable[IngredientType]) -> Dict[str, IngredientType]:
    """
    Map each catalog code to its type and check that the recipe only uses known codes.
    Unknown codes are reported once each, in order of first appearance.
    """
    types_by_code: Dict[str, IngredientType] = {t.code: t for t in available_types}

    unknown = [c for c in recipe_positions(recipe) if c not in types_by_code]
    if unknown:
        unknown = list(dict.fromkeys(unknown))
        log.info("Recipe %r uses unknown codes: %s", recipe, unknown)
        raise InvalidRecipeCode(unknown)

    return types_by_code
