# dishgen/api/routes.py
from __future__ import annotations

import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, Request

from dishgen.api.schemas import DishesRequest, DishesResponse, IngredientTypeOut
from dishgen.domain.errors import InsufficientIngredients, InvalidRecipeCode

log = logging.getLogger("api.routes")
router = APIRouter()


# -------------------------
# Dependencies via app.state (wired in main.py)
# -------------------------
def get_generate_dishes(request: Request):
    uc = getattr(request.app.state, "generate_dishes", None)
    if uc is None:
        raise RuntimeError("generate_dishes not initialized. Check app startup wiring.")
    return uc


def get_list_ingredient_types(request: Request):
    uc = getattr(request.app.state, "list_ingredient_types", None)
    if uc is None:
        raise RuntimeError("list_ingredient_types not initialized. Check app startup wiring.")
    return uc


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/ingredient-types", response_model=List[IngredientTypeOut])
def ingredient_types(uc=Depends(get_list_ingredient_types)) -> Any:
    try:
        return uc()
    except Exception as e:
        log.exception("Processing /ingredient-types error")
        raise HTTPException(status_code=500, detail=str(e))


# -------------------------
# /dishes (sync: runs in the threadpool, enumeration is CPU-bound)
# -------------------------
@router.post("/dishes", response_model=DishesResponse)
def dishes(req: DishesRequest, uc=Depends(get_generate_dishes)) -> Any:
    recipe = req.recipe.strip()
    if not recipe:
        raise HTTPException(status_code=400, detail="recipe is required")

    try:
        result = uc(recipe)
    except InvalidRecipeCode as e:
        raise HTTPException(
            status_code=400,
            detail={"error": "invalid_recipe_code", "message": str(e), "codes": list(e.codes)},
        )
    except InsufficientIngredients as e:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "insufficient_ingredients",
                "message": str(e),
                "code": e.code,
                "required": e.required,
                "available": e.available,
            },
        )
    except Exception as e:
        log.exception("Processing /dishes error")
        raise HTTPException(status_code=500, detail=str(e))

    return {"recipe": recipe, "count": len(result), "dishes": [d.to_dict() for d in result]}
