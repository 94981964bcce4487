import logging
from typing import List, Optional

from ekitchen.domain.Recipe import Recipe
from ekitchen.infra import paths
from ekitchen.infra.Pantry_Repository import PathLike, read_json_list, write_json

logger = logging.getLogger(__name__)


def reading_from_recipes(path: Optional[PathLike] = None) -> List[Recipe]:
    """Read the last generated recipes; bad entries are skipped."""
    recipes = []
    for entry in read_json_list(path or paths.RECIPES_FILE):
        if not isinstance(entry, dict):
            logger.warning(f"Skipping malformed recipe entry: {entry!r}")
            continue
        recipes.append(Recipe.from_dict(entry))
    return recipes


def save_recipes(recipes: List[Recipe], path: Optional[PathLike] = None):
    write_json(path or paths.RECIPES_FILE, [recipe.to_dict() for recipe in recipes])
