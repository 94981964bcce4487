"""Tracks which recipes are currently being cooked."""
from typing import Dict, List
from ekitchen.domain.Recipe import Recipe


class CookingTracker:
    def __init__(self):
        # insertion-ordered: recipes come back in the order cooking started
        self._recipes: Dict[str, Recipe] = {}

    def start(self, recipe: Recipe):
        self._recipes[recipe.id] = recipe

    def complete(self, recipe_id: str):
        '''Stops tracking a recipe (done or cancelled). Unknown ids are ignored.'''
        self._recipes.pop(recipe_id, None)

    def is_cooking(self, recipe_id: str) -> bool:
        return recipe_id in self._recipes

    def get(self, recipe_id: str):
        return self._recipes.get(recipe_id)

    def get_recipes(self) -> List[Recipe]:
        return list(self._recipes.values())

    def __len__(self) -> int:
        return len(self._recipes)
