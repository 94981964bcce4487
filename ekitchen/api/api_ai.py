import logging
from pathlib import Path
from typing import Any, List, Optional

from openai import OpenAI, OpenAIError
from fastapi import APIRouter, Depends, HTTPException, Body

from ekitchen.api.dependencies import get_data_dir, get_generator, get_kitchen, get_recipe_store
from ekitchen.domain.Kitchen import Kitchen
from ekitchen.domain.Pantry import Pantry
from ekitchen.domain.Recipe import Recipe
from ekitchen.infra.paths import RECIPES_FILE
from ekitchen.infra.Recipe_Repository import save_recipes
from ekitchen.logic.parsing.recipe_text import parse_recipes_from_text
from ekitchen.logic.scaling.quantities import scale_recipe
from ekitchen.utilities.config import (
    LLM_API_KEY, LLM_BASE_URL, LLM_MAX_TOKENS, LLM_MODEL, LLM_TEMPERATURE, LLM_TIMEOUT
)
from ekitchen.utilities.constants import PROMPT_TEMPLATE
from ekitchen.utilities.validators import GenerateRequest

logger = logging.getLogger(__name__)


class RecipeGenerationError(RuntimeError):
    """The language model could not be reached or gave no usable answer."""


# === Helper: Get OpenAI-compatible Client ===
def _get_openai_client() -> Optional[OpenAI]:
    """Return a client for the configured endpoint if an API key is set, otherwise None."""
    if not LLM_API_KEY:
        return None
    return OpenAI(api_key=LLM_API_KEY, base_url=LLM_BASE_URL, timeout=LLM_TIMEOUT)


def build_prompt(ingredient_list: str) -> str:
    return PROMPT_TEMPLATE.format(ingredients=ingredient_list)


class RecipeGenerator:
    """Asks the model for recipes that fit the pantry and parses the answer."""

    def __init__(self, client: Any = None, model: str = LLM_MODEL,
                 max_tokens: int = LLM_MAX_TOKENS, temperature: float = LLM_TEMPERATURE):
        self.client = client if client is not None else _get_openai_client()
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature

    @property
    def configured(self) -> bool:
        return self.client is not None

    def generate_text(self, ingredient_list: str) -> str:
        """Return the raw model answer for the given pantry description."""
        if self.client is None:
            raise RecipeGenerationError("LLM_API_KEY not set - cannot generate recipes.")
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": build_prompt(ingredient_list)}],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except OpenAIError as e:
            logger.exception("Recipe request to %s failed", self.model)
            raise RecipeGenerationError(f"LLM request failed: {e}") from e

        choices = getattr(response, "choices", None) or []
        content = choices[0].message.content if choices else None
        if not content:
            raise RecipeGenerationError("LLM returned no content")
        logger.debug("Generated text: %s...", content[:100])
        return content

    def generate(self, pantry: Pantry) -> List[Recipe]:
        ingredient_list = pantry.describe()
        text = self.generate_text(ingredient_list)
        return parse_recipes_from_text(text, ingredient_list)


# === FastAPI Endpoint ===
router = APIRouter()


@router.post("/api/recipes/generate")
def generate_recipes(payload: Optional[GenerateRequest] = Body(default=None),
                     kitchen: Kitchen = Depends(get_kitchen),
                     generator: RecipeGenerator = Depends(get_generator),
                     store: dict = Depends(get_recipe_store),
                     data_dir: Path = Depends(get_data_dir)):
    servings = payload.servings if payload is not None else GenerateRequest().servings
    if not generator.configured:
        raise HTTPException(status_code=503, detail="Recipe generation is not configured (missing API key)")
    with kitchen.lock:
        pantry_snapshot = Pantry(list(kitchen.pantry.get_items()))
    try:
        recipes = generator.generate(pantry_snapshot)
    except RecipeGenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))

    if not recipes:
        logger.warning("Model answered but no recipes could be parsed")
    with kitchen.lock:
        store.clear()
        store.update({recipe.id: recipe for recipe in recipes})
        save_recipes(recipes, data_dir / RECIPES_FILE.name)
    return {
        "count": len(recipes),
        "servings": servings,
        "recipes": [scale_recipe(recipe, servings).to_dict() for recipe in recipes],
    }
