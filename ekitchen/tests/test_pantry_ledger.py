import unittest
from ekitchen.domain.Ingredient import Ingredient
from ekitchen.domain.Pantry import Pantry
from ekitchen.domain.Recipe import Recipe
from ekitchen.domain.ShoppingList import ShoppingList
from ekitchen.logic.pantry.ledger import PantryLedger, parse_ingredient_line


def _recipe(*lines):
    return Recipe(title="Test", ingredients=list(lines), instructions="1. Cook")


class TestParseIngredientLine(unittest.TestCase):

    def test_integer(self):
        self.assertEqual(parse_ingredient_line("3 eggs"), (3.0, "eggs"))

    def test_decimal(self):
        self.assertEqual(parse_ingredient_line("0.5 kgs chicken breast"), (0.5, "kgs chicken breast"))

    def test_fraction(self):
        self.assertEqual(parse_ingredient_line("1/2 cup sugar"), (0.5, "cup sugar"))

    def test_whole_and_fraction(self):
        self.assertEqual(parse_ingredient_line("1 1/2 cups milk"), (1.5, "cups milk"))

    def test_quantity_within_first_three_tokens(self):
        self.assertEqual(parse_ingredient_line("Large 2 eggs"), (2.0, "eggs"))
        self.assertEqual(parse_ingredient_line("one two three 4 eggs"), (1.0, "one two three 4 eggs"))

    def test_no_quantity(self):
        self.assertEqual(parse_ingredient_line("Salt to taste"), (1.0, "Salt to taste"))

    def test_zero_denominator_is_not_a_number(self):
        self.assertEqual(parse_ingredient_line("1/0 cup water"), (1.0, "1/0 cup water"))


class TestPantryLedger(unittest.TestCase):

    def setUp(self):
        self.ledger = PantryLedger()

    def test_depleted_item_moves_to_shopping_list(self):
        pantry = Pantry([Ingredient("Eggs", 2, "pieces")])
        pantry_after, shopping = self.ledger.consume(_recipe("3 eggs"), pantry)
        self.assertIs(pantry_after, pantry)
        self.assertEqual(len(pantry), 0)
        self.assertEqual(len(shopping), 1)
        item = shopping.get_items()[0]
        self.assertEqual((item.name, item.quantity, item.unit, item.is_completed), ("Eggs", 2.0, "pieces", False))

    def test_partial_use_keeps_identity(self):
        flour = Ingredient("Flour", 1000, "g")
        pantry = Pantry([flour])
        _, shopping = self.ledger.consume(_recipe("200 g flour"), pantry)
        remaining = pantry.get_items()[0]
        self.assertEqual(remaining.quantity, 800.0)
        self.assertEqual(remaining.id, flour.id)
        self.assertEqual(flour.quantity, 1000.0)  # old record untouched
        self.assertEqual(len(shopping), 0)

    def test_exact_use_depletes(self):
        pantry = Pantry([Ingredient("Milk", 1, "L")])
        _, shopping = self.ledger.consume(_recipe("1 milk"), pantry)
        self.assertEqual(len(pantry), 0)
        self.assertEqual(shopping.get_items()[0].quantity, 1.0)

    def test_fuzzy_name(self):
        pantry = Pantry([Ingredient("Chilli", 3, "pieces")])
        self.ledger.consume(_recipe("1 chili"), pantry)
        self.assertEqual(pantry.get_items()[0].quantity, 2.0)

    def test_threshold_is_configurable(self):
        pantry = Pantry([Ingredient("Chilli", 3, "pieces")])
        PantryLedger(threshold=0.9).consume(_recipe("1 chili"), pantry)
        self.assertEqual(pantry.get_items()[0].quantity, 3.0)

    def test_unmatched_is_ignored(self):
        pantry = Pantry([Ingredient("Eggs", 2, "pieces")])
        result = self.ledger.consume_detailed(_recipe("1 cup sugar"), pantry)
        self.assertEqual(pantry.get_items()[0].quantity, 2.0)
        self.assertEqual(len(result.shopping_list), 0)
        self.assertEqual(result.unmatched, ["1 cup sugar"])

    def test_line_without_item_matches_nothing(self):
        pantry = Pantry([Ingredient("Eggs", 2, "pieces")])
        result = self.ledger.consume_detailed(_recipe("2"), pantry)
        self.assertEqual(result.unmatched, ["2"])
        self.assertEqual(pantry.get_items()[0].quantity, 2.0)

    def test_default_quantity_is_one(self):
        pantry = Pantry([Ingredient("Garlic", 4, "cloves")])
        self.ledger.consume(_recipe("garlic"), pantry)
        self.assertEqual(pantry.get_items()[0].quantity, 3.0)

    def test_merges_into_existing_shopping_entry(self):
        shopping = ShoppingList()
        shopping.add("eggs", 1, "pieces")
        pantry = Pantry([Ingredient("Eggs", 2, "pieces")])
        self.ledger.consume(_recipe("6 eggs"), pantry, shopping)
        self.assertEqual(len(shopping), 1)
        self.assertEqual(shopping.get_items()[0].name, "eggs")
        self.assertEqual(shopping.get_items()[0].quantity, 3.0)

    def test_plain_list_pantry(self):
        items = [Ingredient("Rice", 500, "g"), Ingredient("Eggs", 1, "pieces")]
        self.ledger.consume(_recipe("100 g rice", "2 eggs"), items)
        self.assertEqual([(i.name, i.quantity) for i in items], [("Rice", 400.0)])

    def test_detailed_result(self):
        pantry = Pantry([Ingredient("Rice", 500, "g"), Ingredient("Eggs", 1, "pieces")])
        result = self.ledger.consume_detailed(_recipe("100 g rice", "2 eggs", "1 lemon"), pantry)
        self.assertEqual(result.consumed, [("100 g rice", "Rice", 100.0), ("2 eggs", "Eggs", 1.0)])
        self.assertEqual([i.name for i in result.depleted], ["Eggs"])
        self.assertEqual(result.unmatched, ["1 lemon"])
        data = result.to_dict()
        self.assertEqual(data["shopping_list"][0]["name"], "Eggs")

    def test_quantity_never_negative(self):
        pantry = Pantry([Ingredient("Butter", 50, "g"), Ingredient("Onion", 1, "pieces")])
        self.ledger.consume(_recipe("20 g butter", "20 g butter", "20 g butter"), pantry)
        for ingredient in pantry:
            self.assertGreaterEqual(ingredient.quantity, 0)
        self.assertIsNone(pantry.find_by_name("Butter"))

    def test_blank_pantry_name_matches_nothing(self):
        pantry = Pantry([Ingredient("", 5, "g"), Ingredient("Eggs", 2, "pieces")])
        result = self.ledger.consume_detailed(_recipe("2 eggs", "1 cup sugar"), pantry)
        self.assertEqual(result.consumed, [("2 eggs", "Eggs", 2.0)])
        self.assertEqual(result.unmatched, ["1 cup sugar"])
        self.assertEqual(pantry.get_items()[0].quantity, 5.0)
        self.assertFalse(self.ledger.matches("   ", "eggs"))
