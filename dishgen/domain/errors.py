# dishgen/domain/errors.py
from __future__ import annotations
from typing import Iterable, Tuple


class DishGenerationError(ValueError):
    """Recipe rejected before enumeration; the request itself is invalid."""


class InvalidRecipeCode(DishGenerationError):
    def __init__(self, codes: Iterable[str]) -> None:
        self.codes: Tuple[str, ...] = tuple(codes)
        super().__init__(f"Unknown ingredient type codes: {','.join(self.codes)}")


class InsufficientIngredients(DishGenerationError):
    def __init__(self, code: str, required: int, available: int) -> None:
        self.code = code
        self.required = required
        self.available = available
        super().__init__(
            f"Not enough ingredients for type {code}: recipe needs {required}, only {available} available"
        )
