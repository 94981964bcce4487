from typing import Final, Tuple

UNITS: Final[Tuple[str, ...]] = ("kgs", "g", "lbs", "oz", "ml", "L", "pieces", "slices", "cloves")

SERVING_OPTIONS: Final[Tuple[int, ...]] = (1, 2, 3, 4, 5, 6, 7, 8)

DEFAULT_DESCRIPTION: Final[str] = "A delicious recipe using your ingredients."
PLACEHOLDER_TITLE: Final[str] = "Mystery Dish"
MAX_TITLE_WORDS: Final[int] = 5

# Filler the model likes to wrap around dish names
TITLE_PREFIXES: Final[Tuple[str, ...]] = (
    "Recipe for ", "Easy ", "Simple ", "Quick ", "Delicious ", "Homemade ",
)
TITLE_SUFFIXES: Final[Tuple[str, ...]] = (
    " Recipe", " Dish", " (using your ingredients)", " with available ingredients",
)

FALLBACK_SEPARATOR: Final[str] = ", "

PROMPT_TEMPLATE: Final[str] = (
    "What are some recipes I can make with only the following ingredients: {ingredients}. "
    "Follow this format exactly: "
    "Recipe 1: Title, Description, Time, Servings, Ingredients, Instructions ---- "
    "Recipe 2: Title, Description, Time, Servings, Ingredients, Instructions, "
    "and continue that for the rest"
)
