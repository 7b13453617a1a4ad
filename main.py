from __future__ import annotations

import logging
import uvicorn
from fastapi import FastAPI
from pymongo import MongoClient
from dotenv import load_dotenv
load_dotenv()
from dishgen.api.routes import router
from dishgen.core.config import (
    Paths, CATALOG_BACKEND, MONGO_URI, MONGO_DB, MONGO_TIMEOUT_MS,
    MONGO_INGREDIENT_TYPES_COL, MONGO_INGREDIENTS_COL, API_HOST, API_PORT,
)

from dishgen.infrastructure.mongo_repositories import MongoIngredientTypeRepository, MongoIngredientRepository
from dishgen.infrastructure.memory_repositories import InMemoryCatalog
from dishgen.application.usecases import GenerateDishes, ListIngredientTypes

log = logging.getLogger("app")
app = FastAPI(title="Dish Generator")
app.include_router(router)

_mongo_client: MongoClient | None = None


@app.on_event("startup")
def on_startup() -> None:
    global _mongo_client

    if CATALOG_BACKEND == "memory":
        catalog = InMemoryCatalog.from_json_file(Paths.CATALOG_SEED)
        type_repo, ingredient_repo = catalog, catalog
    elif CATALOG_BACKEND == "mongo":
        _mongo_client = MongoClient(MONGO_URI, serverSelectionTimeoutMS=MONGO_TIMEOUT_MS)
        db = _mongo_client[MONGO_DB]
        type_repo = MongoIngredientTypeRepository(db[MONGO_INGREDIENT_TYPES_COL])
        ingredient_repo = MongoIngredientRepository(db[MONGO_INGREDIENTS_COL])
    else:
        raise RuntimeError(f"Unknown CATALOG_BACKEND: {CATALOG_BACKEND!r} (expected 'mongo' or 'memory')")

    # DI for routes.py
    app.state.generate_dishes = GenerateDishes(type_repo=type_repo, ingredient_repo=ingredient_repo)
    app.state.list_ingredient_types = ListIngredientTypes(type_repo=type_repo)

    log.info("Startup complete (catalog backend: %s)", CATALOG_BACKEND)


@app.on_event("shutdown")
def on_shutdown() -> None:
    global _mongo_client
    if _mongo_client:
        _mongo_client.close()
        _mongo_client = None


if __name__ == "__main__":
    uvicorn.run("main:app", host=API_HOST, port=API_PORT, reload=False)
