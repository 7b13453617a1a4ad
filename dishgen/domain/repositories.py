# dishgen/domain/repositories.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Hashable, List

from dishgen.domain.entities import Ingredient, IngredientType


class IngredientTypeReadRepo(ABC):
    @abstractmethod
    def all(self) -> List[IngredientType]:
        """Full ingredient-type catalog."""


class IngredientReadRepo(ABC):
    @abstractmethod
    def by_type_id(self, type_id: Hashable) -> List[Ingredient]:
        """Every available ingredient of one type, in a stable order."""
