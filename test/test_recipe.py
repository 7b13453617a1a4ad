from __future__ import annotations

import pytest

from dishgen.application.recipe import recipe_positions, resolve_types
from dishgen.domain.entities import IngredientType
from dishgen.domain.errors import DishGenerationError, InvalidRecipeCode

TYPES = [
    IngredientType(id=1, code="A", title="Bread"),
    IngredientType(id=2, code="B", title="Filling"),
]


def test_positions_one_code_per_character():
    assert recipe_positions("ABA") == ["A", "B", "A"]


def test_resolve_maps_every_catalog_code():
    by_code = resolve_types("AAB", TYPES)
    assert set(by_code) == {"A", "B"}
    assert by_code["B"].title == "Filling"


def test_unknown_code_rejected():
    with pytest.raises(InvalidRecipeCode) as exc:
        resolve_types("AC", TYPES)
    assert exc.value.codes == ("C",)


def test_unknown_codes_deduplicated_in_first_appearance_order():
    with pytest.raises(InvalidRecipeCode) as exc:
        resolve_types("ZAXZBX", TYPES)
    assert exc.value.codes == ("Z", "X")
    assert "Z,X" in str(exc.value)


def test_codes_are_case_sensitive():
    with pytest.raises(InvalidRecipeCode) as exc:
        resolve_types("a", TYPES)
    assert exc.value.codes == ("a",)


def test_invalid_code_is_a_client_error():
    with pytest.raises(ValueError):
        resolve_types("Q", TYPES)
    assert issubclass(InvalidRecipeCode, DishGenerationError)
