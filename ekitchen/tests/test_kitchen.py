import unittest
from ekitchen.domain.CookingTracker import CookingTracker
from ekitchen.domain.Ingredient import Ingredient
from ekitchen.domain.Kitchen import Kitchen
from ekitchen.domain.Pantry import Pantry
from ekitchen.domain.Recipe import Recipe
from ekitchen.events.Event_Bus import (
    EventBus, PANTRY_CHANGED, PANTRY_DEPLETED, SHOPPING_LIST_CHANGED, COOKING_CHANGED
)


class TestCookingTracker(unittest.TestCase):

    def test_start_and_complete(self):
        tracker = CookingTracker()
        first, second = Recipe(title="A"), Recipe(title="B")
        tracker.start(first)
        tracker.start(second)
        self.assertEqual(tracker.get_recipes(), [first, second])
        self.assertTrue(tracker.is_cooking(first.id))
        tracker.complete(first.id)
        tracker.complete("missing")
        self.assertFalse(tracker.is_cooking(first.id))
        self.assertEqual(len(tracker), 1)


class TestEventBus(unittest.TestCase):

    def test_failing_subscriber_does_not_stop_others(self):
        bus = EventBus()
        seen = []

        def broken(name, payload):
            raise RuntimeError("boom")

        bus.subscribe(PANTRY_CHANGED, broken)
        bus.subscribe(PANTRY_CHANGED, lambda name, payload: seen.append(payload))
        with self.assertLogs("ekitchen.events.Event_Bus", level="ERROR"):
            bus.publish(PANTRY_CHANGED, 1)
        self.assertEqual(seen, [1])

    def test_unsubscribe(self):
        bus = EventBus()
        seen = []
        callback = lambda name, payload: seen.append(name)  # noqa: E731
        bus.subscribe(COOKING_CHANGED, callback)
        bus.unsubscribe(COOKING_CHANGED, callback)
        bus.unsubscribe(COOKING_CHANGED, callback)
        bus.publish(COOKING_CHANGED, None)
        self.assertEqual(seen, [])


class TestKitchen(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.events = []
        for name in (PANTRY_CHANGED, PANTRY_DEPLETED, SHOPPING_LIST_CHANGED, COOKING_CHANGED):
            self.bus.subscribe(name, lambda event, payload: self.events.append((event, payload)))
        self.kitchen = Kitchen(pantry=Pantry([Ingredient("Eggs", 2, "pieces"), Ingredient("Flour", 1000, "g")]),
                               event_bus=self.bus)
        self.recipe = Recipe(title="Pancakes", ingredients=["3 eggs", "200 g flour"], instructions="1. Mix")

    def names(self):
        return [name for name, _ in self.events]

    def test_done_cooking(self):
        self.kitchen.start_cooking(self.recipe)
        result = self.kitchen.done_cooking(self.recipe)

        self.assertFalse(self.kitchen.tracker.is_cooking(self.recipe.id))
        self.assertEqual([(i.name, i.quantity) for i in self.kitchen.pantry], [("Flour", 800.0)])
        self.assertEqual([(i.name, i.quantity) for i in self.kitchen.shopping_list], [("Eggs", 2.0)])
        self.assertEqual([i.name for i in result.depleted], ["Eggs"])

        self.assertEqual(self.names(), [COOKING_CHANGED, PANTRY_DEPLETED, PANTRY_CHANGED,
                                         SHOPPING_LIST_CHANGED, COOKING_CHANGED])
        depleted = dict(self.events)[PANTRY_DEPLETED]
        self.assertEqual(depleted["restock"], 2.0)

    def test_done_cooking_without_bus(self):
        kitchen = Kitchen(pantry=Pantry([Ingredient("Eggs", 6, "pieces")]))
        kitchen.done_cooking(self.recipe)
        self.assertEqual(kitchen.pantry.get_items()[0].quantity, 3.0)

    def test_restock_completed(self):
        milk = self.kitchen.shopping_list.add("Milk", 1, "L")
        self.kitchen.shopping_list.add("eggs", 6, "pieces")
        eggs = self.kitchen.shopping_list.get_items()[1]
        self.kitchen.shopping_list.toggle(eggs.id)

        restocked = self.kitchen.restock_completed()

        self.assertEqual([(i.name, i.quantity) for i in restocked], [("Eggs", 8.0)])
        self.assertEqual([i.id for i in self.kitchen.shopping_list], [milk.id])
        self.assertIn(PANTRY_CHANGED, self.names())

    def test_restock_nothing_ticked(self):
        self.kitchen.shopping_list.add("Milk", 1, "L")
        self.assertEqual(self.kitchen.restock_completed(), [])
        self.assertEqual(self.events, [])
