import unittest
from ekitchen.logic.parsing.recipe_text import RecipeTextParser, clean_title, parse_recipes_from_text
from ekitchen.utilities.constants import DEFAULT_DESCRIPTION

PASTA_TEXT = (
    "Recipe 1: Pasta\n"
    "Description: Tasty\n"
    "Time: 20 minutes\n"
    "Servings: 2\n"
    "Ingredients:\n"
    "- 2 cups pasta\n"
    "Instructions:\n"
    "1. Boil pasta"
)

TWO_RECIPES_TEXT = """Here are two ideas for you!

**Recipe 1: Easy Garlic Butter Shrimp Pasta with Lemon Recipe**
Description: A quick dinner.
Served hot.
Time: 25 minutes
Servings: 4
Ingredients:
• 1 lb shrimp
- 2 cloves garlic
Instructions:
3. Cook shrimp.
- Toss with garlic.

----
Recipe 2: Salad
INSTRUCTIONS:
1) Mix everything
"""


class TestRecipeTextParser(unittest.TestCase):

    def setUp(self):
        self.parser = RecipeTextParser()

    def test_single_recipe(self):
        recipes = self.parser.parse(PASTA_TEXT, "")
        self.assertEqual(len(recipes), 1)
        recipe = recipes[0]
        self.assertEqual(recipe.title, "Pasta")
        self.assertEqual(recipe.description, "Tasty")
        self.assertEqual(recipe.time, "20 minutes")
        self.assertEqual(recipe.servings, "2")
        self.assertEqual(recipe.ingredients, ["2 cups pasta"])
        self.assertEqual(recipe.instructions, "1. Boil pasta")
        self.assertEqual(recipe.raw_response, PASTA_TEXT)
        self.assertTrue(recipe.id)

    def test_empty_text(self):
        self.assertEqual(self.parser.parse("", "2.0 pieces Eggs"), [])
        self.assertEqual(self.parser.parse(None, ""), [])

    def test_two_recipes_with_markup(self):
        recipes = self.parser.parse(TWO_RECIPES_TEXT, "2.0 pieces Eggs, 1.0 kgs Flour")
        self.assertEqual([r.title for r in recipes], ["Garlic Butter Shrimp Pasta With", "Salad"])

        shrimp, salad = recipes
        self.assertEqual(shrimp.description, "A quick dinner. Served hot.")
        self.assertEqual(shrimp.time, "25 minutes")
        self.assertEqual(shrimp.servings, "4")
        self.assertEqual(shrimp.ingredients, ["1 lb shrimp", "2 cloves garlic"])
        self.assertEqual(shrimp.instructions, "1. Cook shrimp.\n2. Toss with garlic.")

        self.assertEqual(salad.ingredients, ["2.0 pieces Eggs", "1.0 kgs Flour"])
        self.assertEqual(salad.description, DEFAULT_DESCRIPTION)
        self.assertEqual(salad.instructions, "1. Mix everything")
        self.assertEqual(salad.time, "")

        for recipe in recipes:
            self.assertEqual(recipe.raw_response, TWO_RECIPES_TEXT)
        self.assertNotEqual(shrimp.id, salad.id)

    def test_fallback_as_sequence(self):
        text = "Recipe 1: Toast\nInstructions:\n1. Toast the bread"
        recipes = self.parser.parse(text, ["2 slices bread", "1 tbsp butter"])
        self.assertEqual(recipes[0].ingredients, ["2 slices bread", "1 tbsp butter"])

    def test_recipe_without_instructions_is_dropped(self):
        text = "Recipe 1: Soup\nIngredients:\n- 1 L water\nRecipe 2: Toast\nInstructions:\n- Toast it"
        recipes = self.parser.parse(text, "")
        self.assertEqual([r.title for r in recipes], ["Toast"])

    def test_recipe_without_title_is_dropped(self):
        text = "Recipe 1:\nInstructions:\n1. Stir"
        self.assertEqual(self.parser.parse(text, ""), [])

    def test_title_line_sets_title(self):
        text = "Recipe 1:\nTitle: homemade tomato soup\nInstructions:\n1. Simmer"
        recipes = self.parser.parse(text, "")
        self.assertEqual(recipes[0].title, "Tomato Soup")

    def test_instructions_are_renumbered(self):
        text = "Recipe 1: Rice\nInstructions:\n5. Rinse rice\n2) Boil water\nCook 12 minutes"
        recipes = self.parser.parse(text, "")
        self.assertEqual(recipes[0].instructions, "1. Rinse rice\n2. Boil water\n3. Cook 12 minutes")

    def test_text_before_first_recipe_is_ignored(self):
        text = "Sure! Recipes you can make:\nIngredients:\n- nothing\n" + PASTA_TEXT
        recipes = self.parser.parse(text, "")
        self.assertEqual(len(recipes), 1)
        self.assertEqual(recipes[0].ingredients, ["2 cups pasta"])

    def test_garbage_never_raises(self):
        for text in ["::::", "Recipe", "recipe :\n\n\n", "Instructions:\n1.", "\x00 Recipe 9: X Instructions: 1. y"]:
            result = self.parser.parse(text, "")
            self.assertIsInstance(result, list)

    def test_module_function(self):
        self.assertEqual(len(parse_recipes_from_text(PASTA_TEXT)), 1)


class TestCleanTitle(unittest.TestCase):

    def test_strips_filler(self):
        self.assertEqual(clean_title("**Recipe for quick chicken curry dish**"), "Chicken Curry")
        self.assertEqual(clean_title("Veggie Omelette with available ingredients"), "Veggie Omelette")

    def test_truncates_to_five_words(self):
        self.assertEqual(clean_title("one two three four five six seven"), "One Two Three Four Five")

    def test_empty_becomes_placeholder(self):
        self.assertEqual(clean_title(""), "Mystery Dish")
        self.assertEqual(clean_title("Easy  (using your ingredients)"), "Mystery Dish")

    def test_title_case(self):
        self.assertEqual(clean_title("SPICY chickpea stew"), "Spicy Chickpea Stew")
