# =========================
# FILE: dishgen/infrastructure/memory_repositories.py
# In-process catalog: local runs without Mongo, and tests.
# =========================
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Dict, Hashable, Iterable, List

import ujson as json

from dishgen.application.pricing import to_price
from dishgen.domain.entities import Ingredient, IngredientType
from dishgen.domain.repositories import IngredientReadRepo, IngredientTypeReadRepo

log = logging.getLogger("infra.memory_repo")


def _as_id(v: Any) -> Hashable:
    # seed files may spell the same id as 1 or "1"
    if isinstance(v, int) and not isinstance(v, bool):
        return v
    s = str(v).strip()
    return int(s) if s.isdecimal() else s


class InMemoryCatalog(IngredientTypeReadRepo, IngredientReadRepo):
    """Serves both collaborator contracts from lists held in memory; list order is preserved."""

    def __init__(self, types: Iterable[IngredientType], ingredients: Iterable[Ingredient]) -> None:
        self._types: List[IngredientType] = list(types)
        self._by_type: Dict[Hashable, List[Ingredient]] = defaultdict(list)
        for ing in ingredients:
            self._by_type[_as_id(ing.type_id)].append(ing)

    def all(self) -> List[IngredientType]:
        return list(self._types)

    def by_type_id(self, type_id: Hashable) -> List[Ingredient]:
        return list(self._by_type.get(_as_id(type_id), []))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InMemoryCatalog":
        try:
            types = [
                IngredientType(id=_as_id(t["id"]), code=str(t["code"]), title=str(t.get("title") or ""))
                for t in data.get("ingredient_types") or []
            ]
            ingredients = [
                Ingredient(
                    id=_as_id(i["id"]),
                    title=str(i.get("title") or ""),
                    price=to_price(i["price"]),
                    type_id=_as_id(i["type_id"]),
                )
                for i in data.get("ingredients") or []
            ]
        except (AttributeError, KeyError, TypeError) as e:
            raise ValueError(f"Invalid catalog data: {e}") from e
        return cls(types, ingredients)

    @classmethod
    def from_json_file(cls, path: str) -> "InMemoryCatalog":
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        catalog = cls.from_dict(data)
        log.info(
            "InMemoryCatalog loaded %d types, %d ingredients from %s",
            len(catalog._types), sum(len(v) for v in catalog._by_type.values()), path,
        )
        return catalog
