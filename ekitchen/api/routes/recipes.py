from fastapi import APIRouter, Depends, HTTPException, Request

from ekitchen.api.dependencies import get_kitchen, get_recipe_store, persist
from ekitchen.domain.Kitchen import Kitchen
from ekitchen.domain.Recipe import Recipe
from ekitchen.logic.parsing.recipe_text import parse_recipes_from_text
from ekitchen.logic.scaling.quantities import scale_recipe
from ekitchen.utilities.validators import ParseRequest, RecipeInput, ScaleRequest

router = APIRouter(tags=["recipes"])


def _to_recipe(payload: RecipeInput) -> Recipe:
    return Recipe.from_dict(payload.model_dump())


@router.get("/api/recipes")
def list_recipes(store: dict = Depends(get_recipe_store), kitchen: Kitchen = Depends(get_kitchen)):
    """Recipes from the last generate/parse call."""
    with kitchen.lock:
        recipes = [recipe.to_dict() for recipe in store.values()]
    return {"recipes": recipes, "count": len(recipes)}


@router.post("/api/recipes/parse")
def parse_recipes(payload: ParseRequest, store: dict = Depends(get_recipe_store),
                  kitchen: Kitchen = Depends(get_kitchen)):
    recipes = parse_recipes_from_text(payload.text, payload.fallback)
    with kitchen.lock:
        store.clear()
        store.update({recipe.id: recipe for recipe in recipes})
    return {"recipes": [recipe.to_dict() for recipe in recipes], "count": len(recipes)}


@router.post("/api/recipes/scale")
def scale(payload: ScaleRequest):
    return scale_recipe(_to_recipe(payload.recipe), payload.servings).to_dict()


@router.get("/api/cooking")
def list_cooking(kitchen: Kitchen = Depends(get_kitchen)):
    with kitchen.lock:
        recipes = [recipe.to_dict() for recipe in kitchen.tracker.get_recipes()]
    return {"recipes": recipes, "count": len(recipes)}


@router.post("/api/cooking")
def start_cooking(payload: RecipeInput, kitchen: Kitchen = Depends(get_kitchen)):
    """Mark a recipe (as shown to the user, i.e. already scaled) as being cooked."""
    recipe = _to_recipe(payload)
    with kitchen.lock:
        kitchen.start_cooking(recipe)
    return {"status": "cooking", "id": recipe.id}


@router.delete("/api/cooking/{recipe_id}")
def cancel_cooking(recipe_id: str, kitchen: Kitchen = Depends(get_kitchen)):
    with kitchen.lock:
        kitchen.cancel_cooking(recipe_id)
    return {"status": "cancelled", "id": recipe_id}


@router.post("/api/cooking/{recipe_id}/done")
def done_cooking(recipe_id: str, request: Request, kitchen: Kitchen = Depends(get_kitchen)):
    """Take the recipe's ingredients out of the pantry and stop tracking it."""
    with kitchen.lock:
        recipe = kitchen.tracker.get(recipe_id)
        if recipe is None:
            raise HTTPException(status_code=404, detail="Recipe is not being cooked")
        result = kitchen.done_cooking(recipe)
        persist(request, kitchen)
        response = result.to_dict()
        response["pantry"] = kitchen.pantry.to_dict()
    return response
