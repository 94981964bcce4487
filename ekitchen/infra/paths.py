from ekitchen.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
PANTRY_FILE = DATA_DIR / 'pantry.json'
SHOPPING_LIST_FILE = DATA_DIR / 'shopping_list.json'
RECIPES_FILE = DATA_DIR / 'recipes.json'

__all__ = ['DATA_DIR', 'PANTRY_FILE', 'SHOPPING_LIST_FILE', 'RECIPES_FILE']
