# dishgen/core/config.py
from __future__ import annotations
from dataclasses import dataclass
import os
import logging

# Catalog source: "mongo" for the live collections, "memory" for a JSON seed file.
CATALOG_BACKEND: str = os.getenv("CATALOG_BACKEND", "mongo").strip().lower()

# Mongo settings
MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_DB: str = os.getenv("MONGO_DB", "dishes")
MONGO_INGREDIENT_TYPES_COL: str = os.getenv("MONGO_INGREDIENT_TYPES_COL", "ingredient_types")
MONGO_INGREDIENTS_COL: str = os.getenv("MONGO_INGREDIENTS_COL", "ingredients")
MONGO_TIMEOUT_MS: int = int(os.getenv("MONGO_TIMEOUT_MS", "3000"))

# Enumeration cost grows as the product of per-position supplies; the API caps recipe length.
MAX_RECIPE_LENGTH: int = int(os.getenv("MAX_RECIPE_LENGTH", "10"))

API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8081"))

@dataclass(frozen=True)
class Paths:
    ROOT: str = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
    DATA_DIR: str = os.path.join(ROOT, "data")
    CATALOG_SEED: str = os.getenv("CATALOG_SEED_PATH", os.path.join(DATA_DIR, "catalog.json"))

# Global logging (module-level loggers inherit this)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
