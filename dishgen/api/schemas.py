# =========================
# FILE: dishgen/api/schemas.py
# =========================
from __future__ import annotations

from decimal import Decimal
from typing import List, Union

from pydantic import BaseModel, Field

from dishgen.core.config import MAX_RECIPE_LENGTH


class DishesRequest(BaseModel):
    recipe: str = Field(
        ...,
        min_length=1,
        max_length=MAX_RECIPE_LENGTH,
        description="Ingredient type codes, one character per position",
        examples=["dci"],
    )


class IngredientTypeOut(BaseModel):
    id: Union[int, str]
    code: str
    title: str


class DishIngredientOut(BaseModel):
    type: str
    value: str
    ingredient_id: Union[int, str]
    price: Decimal


class DishOut(BaseModel):
    ingredients: List[DishIngredientOut]
    price: Decimal


class DishesResponse(BaseModel):
    recipe: str
    count: int
    dishes: List[DishOut]
