from fastapi import FastAPI

from pathlib import Path
from typing import Optional, Union
import logging

from ekitchen.api.api_ai import RecipeGenerator, router as ai_router
from ekitchen.api.routes import pantry, recipes, shopping
from ekitchen.events.Event_Bus import EventBus, PANTRY_DEPLETED
from ekitchen.infra.paths import DATA_DIR, RECIPES_FILE
from ekitchen.infra.Pantry_Repository import load_kitchen
from ekitchen.infra.Recipe_Repository import reading_from_recipes
from ekitchen.logic.pantry.ledger import PantryLedger
from ekitchen.utilities.config import LOG_LEVEL, PANTRY_MATCH_THRESHOLD

# Logging
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("ekitchen_app")


def _log_depleted(event_name: str, payload):
    ingredient = payload.get("ingredient")
    logger.info("Out of %s; restock %s", getattr(ingredient, "name", "?"), payload.get("restock"))


def create_app(data_dir: Optional[Union[str, Path]] = None,
               generator: Optional[RecipeGenerator] = None,
               event_bus: Optional[EventBus] = None) -> FastAPI:
    """Build the API with its own Kitchen loaded from data_dir."""
    data_dir = Path(data_dir) if data_dir else DATA_DIR
    bus = event_bus if event_bus is not None else EventBus()
    bus.subscribe(PANTRY_DEPLETED, _log_depleted)

    app = FastAPI(title="eKitchen Pantry & Recipe API")
    app.state.data_dir = data_dir
    app.state.kitchen = load_kitchen(data_dir, ledger=PantryLedger(PANTRY_MATCH_THRESHOLD), event_bus=bus)
    app.state.generator = generator if generator is not None else RecipeGenerator()
    app.state.recipes = {r.id: r for r in reading_from_recipes(data_dir / RECIPES_FILE.name)}
    app.state.event_bus = bus

    # Include routers
    app.include_router(pantry.router)
    app.include_router(shopping.router)
    app.include_router(recipes.router)
    app.include_router(ai_router)

    @app.get("/api/health")
    def health():
        return {
            "status": "ok",
            "llm_configured": app.state.generator.configured,
            "pantry_items": len(app.state.kitchen.pantry),
        }

    logger.info("Loaded %s", app.state.kitchen)
    return app


app = create_app()
