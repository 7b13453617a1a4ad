# =========================
# FILE: dishgen/application/combinations.py
# Brute-force enumeration: build every per-position choice, filter at the leaves.
# =========================
from __future__ import annotations

import logging
from typing import Dict, Hashable, Iterator, List, Optional, Sequence, Set, Tuple

from dishgen.application.pricing import total_price
from dishgen.domain.entities import Dish, DishIngredient, Ingredient, IngredientType, canonical_key

log = logging.getLogger("app.combinations")

Candidate = Tuple[DishIngredient, ...]


def iter_candidates(
    positions: Sequence[str],
    ingredients_by_code: Dict[str, List[Ingredient]],
    types_by_code: Dict[str, IngredientType],
    index: int = 0,
    partial: Candidate = (),
) -> Iterator[Candidate]:
    """
    Depth-first walk over the Cartesian product of per-position ingredient choices.

    The same ingredient may appear at several positions; nothing is pruned on the
    way down. Order follows the supply lists, so the output is deterministic.
    """
    if index == len(positions):
        yield partial
        return

    code = positions[index]
    type_title = types_by_code[code].title
    for ingredient in ingredients_by_code[code]:
        chosen = DishIngredient(
            type_title=type_title,
            ingredient_title=ingredient.title,
            ingredient_id=ingredient.id,
            price=ingredient.price,
        )
        yield from iter_candidates(
            positions, ingredients_by_code, types_by_code, index + 1, partial + (chosen,)
        )


class CanonicalDeduplicator:
    """Keeps the first candidate seen for each distinct set of ingredient ids."""

    def __init__(self, positions: int) -> None:
        self.positions = positions
        self._seen: Set[Tuple[Hashable, ...]] = set()

    def accept(self, candidate: Sequence[DishIngredient]) -> Optional[Dish]:
        key = canonical_key(candidate)

        # same ingredient used at two positions
        if len(set(key)) < self.positions:
            return None
        if key in self._seen:
            return None

        self._seen.add(key)
        return Dish(ingredients=tuple(candidate), total_price=total_price(candidate))

    @property
    def seen_count(self) -> int:
        return len(self._seen)
