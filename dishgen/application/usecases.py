# =========================
# FILE: dishgen/application/usecases.py
# =========================
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from dishgen.application.combinations import CanonicalDeduplicator, iter_candidates
from dishgen.application.recipe import recipe_positions, resolve_types
from dishgen.application.supply import build_supply
from dishgen.domain.entities import Dish
from dishgen.domain.repositories import IngredientReadRepo, IngredientTypeReadRepo

log = logging.getLogger("app.usecases")


@dataclass(frozen=True)
class GenerateDishes:
    """
    recipe -> every distinct dish that fills each position with an ingredient of
    the required type, never reusing an ingredient, priced exactly.

    Raises InvalidRecipeCode / InsufficientIngredients before any enumeration.
    """
    type_repo: IngredientTypeReadRepo
    ingredient_repo: IngredientReadRepo

    def __call__(self, recipe: str) -> List[Dish]:
        if not recipe or not recipe.strip():
            raise ValueError("recipe is required")

        types_by_code = resolve_types(recipe, self.type_repo.all())
        positions = recipe_positions(recipe)
        supply = build_supply(positions, types_by_code, self.ingredient_repo.by_type_id)

        dedup = CanonicalDeduplicator(len(positions))
        dishes: List[Dish] = []
        candidates = 0
        for candidate in iter_candidates(positions, supply, types_by_code):
            candidates += 1
            dish = dedup.accept(candidate)
            if dish is not None:
                dishes.append(dish)

        log.debug("Recipe %r: %d candidates enumerated", recipe, candidates)
        log.info("Recipe %r: %d dishes", recipe, len(dishes))
        return dishes


@dataclass(frozen=True)
class ListIngredientTypes:
    type_repo: IngredientTypeReadRepo

    def __call__(self) -> List[Dict[str, Any]]:
        return [{"id": t.id, "code": t.code, "title": t.title} for t in self.type_repo.all()]
