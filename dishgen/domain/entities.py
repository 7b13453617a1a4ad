# dishgen/domain/entities.py
from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Hashable, Sequence, Tuple

@dataclass(frozen=True)
class IngredientType:
    id: Hashable
    code: str
    title: str

@dataclass(frozen=True)
class Ingredient:
    id: Hashable
    title: str
    price: Decimal
    type_id: Hashable | None = None

@dataclass(frozen=True)
class DishIngredient:
    """An ingredient bound to one recipe position."""
    type_title: str
    ingredient_title: str
    ingredient_id: Hashable
    price: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type_title,
            "value": self.ingredient_title,
            "ingredient_id": self.ingredient_id,
            "price": self.price,
        }


def _id_order(v: Hashable) -> Tuple[int, Any]:
    # integer ids first in numeric order, then every other id by its string form
    if isinstance(v, int) and not isinstance(v, bool):
        return (0, v)
    return (1, str(v))


def canonical_key(ingredients: Sequence[DishIngredient]) -> Tuple[Hashable, ...]:
    """Ingredient ids sorted ascending; identical for any ordering of the same set."""
    return tuple(sorted((i.ingredient_id for i in ingredients), key=_id_order))


@dataclass(frozen=True, eq=False)
class Dish:
    ingredients: Tuple[DishIngredient, ...]
    total_price: Decimal

    @property
    def key(self) -> Tuple[Hashable, ...]:
        return canonical_key(self.ingredients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dish):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ingredients": [i.to_dict() for i in self.ingredients],
            "price": self.total_price,
        }
