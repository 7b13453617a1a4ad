# dishgen/infrastructure/mongo_repositories.py
from __future__ import annotations
from typing import Any, Dict, Hashable, List
import logging
from pymongo import ASCENDING
from pymongo.collection import Collection
from bson import ObjectId
from dishgen.application.pricing import to_price
from dishgen.domain.entities import Ingredient, IngredientType
from dishgen.domain.repositories import IngredientReadRepo, IngredientTypeReadRepo

log = logging.getLogger("infra.mongo_repo")

def _as_id(v: Any) -> Hashable:
    # ObjectId -> hex string; integer ids stay integers so they sort numerically
    if isinstance(v, int) and not isinstance(v, bool):
        return v
    return str(v)

def _doc_id(doc: Dict[str, Any]) -> Hashable:
    return _as_id(doc["id"] if "id" in doc else doc["_id"])

class MongoIngredientTypeRepository(IngredientTypeReadRepo):
    """
    Read-only ingredient-type catalog backed by MongoDB.
    Documents: {_id, code, title}. Read on every call; the catalog is small.
    """
    def __init__(self, col: Collection) -> None:
        self._col = col

    def _parse_type(self, doc: Dict[str, Any]) -> IngredientType:
        try:
            code = str(doc["code"]).strip()
            if len(code) != 1:
                raise ValueError(f"code must be a single character, got {code!r}")
            return IngredientType(
                id=_doc_id(doc),
                code=code,
                title=(doc.get("title") or "").strip(),
            )
        except Exception as e:
            log.exception("Invalid ingredient type document: %s", doc)
            raise ValueError(f"Invalid ingredient type document: {e}") from e

    def all(self) -> List[IngredientType]:
        items = [self._parse_type(doc) for doc in self._col.find({}).sort("_id", ASCENDING)]
        if not items:
            log.warning("MongoIngredientTypeRepository: ingredient types collection is empty")
        return items

class MongoIngredientRepository(IngredientReadRepo):
    """Documents: {_id, type_id, title, price}; price stored as Decimal128, string or number."""

    def __init__(self, col: Collection) -> None:
        self._col = col

    def _parse_ingredient(self, doc: Dict[str, Any]) -> Ingredient:
        try:
            return Ingredient(
                id=_doc_id(doc),
                title=(doc.get("title") or "").strip(),
                price=to_price(doc["price"]),
                type_id=_as_id(doc["type_id"]),
            )
        except Exception as e:
            log.exception("Invalid ingredient document: %s", doc)
            raise ValueError(f"Invalid ingredient document: {e}") from e

    def by_type_id(self, type_id: Hashable) -> List[Ingredient]:
        # type_id may be stored either as ObjectId or as its string form
        keys: List[Any] = [type_id]
        if isinstance(type_id, str) and ObjectId.is_valid(type_id):
            keys.append(ObjectId(type_id))
        cursor = self._col.find({"type_id": {"$in": keys}}).sort("_id", ASCENDING)
        items = [self._parse_ingredient(doc) for doc in cursor]
        log.debug("Loaded %d ingredients for type %s", len(items), type_id)
        return items
