"""Kitchen: the explicitly owned state of one household.

Bundles the pantry, the shopping list and the set of recipes being cooked.
There is no module-level instance; the app builds one and passes it around.
"""
import logging
from threading import Lock
from typing import List, Optional

from ekitchen.domain.CookingTracker import CookingTracker
from ekitchen.domain.Ingredient import Ingredient
from ekitchen.domain.Pantry import Pantry
from ekitchen.domain.Recipe import Recipe
from ekitchen.domain.ShoppingList import ShoppingList
from ekitchen.events.Event_Bus import (
    EventBus, PANTRY_CHANGED, PANTRY_DEPLETED, SHOPPING_LIST_CHANGED, COOKING_CHANGED
)
from ekitchen.logic.pantry.ledger import ConsumptionResult, PantryLedger

logger = logging.getLogger(__name__)


class Kitchen:
    def __init__(self, pantry: Optional[Pantry] = None, shopping_list: Optional[ShoppingList] = None,
                 tracker: Optional[CookingTracker] = None, ledger: Optional[PantryLedger] = None,
                 event_bus: Optional[EventBus] = None):
        self.pantry = pantry if pantry is not None else Pantry()
        self.shopping_list = shopping_list if shopping_list is not None else ShoppingList()
        self.tracker = tracker if tracker is not None else CookingTracker()
        self.ledger = ledger if ledger is not None else PantryLedger()
        self._event_bus = event_bus
        # Held by callers around mutating calls; the methods below never take it.
        self.lock = Lock()

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus: Optional[EventBus]):
        self._event_bus = bus
        return self

    def _publish(self, event_name: str, payload):
        if self._event_bus is not None:
            self._event_bus.publish(event_name, payload)

    def notify_pantry_changed(self):
        self._publish(PANTRY_CHANGED, {"items": list(self.pantry.get_items())})

    def notify_shopping_list_changed(self):
        self._publish(SHOPPING_LIST_CHANGED, {"items": list(self.shopping_list.get_items())})

    def _notify_cooking_changed(self):
        self._publish(COOKING_CHANGED, {"recipes": self.tracker.get_recipes()})

    # --- Cooking ------------------------------------------------------------
    def start_cooking(self, recipe: Recipe):
        self.tracker.start(recipe)
        self._notify_cooking_changed()

    def cancel_cooking(self, recipe_id: str):
        self.tracker.complete(recipe_id)
        self._notify_cooking_changed()

    def done_cooking(self, recipe: Recipe) -> ConsumptionResult:
        '''
        Consumes the recipe's ingredients from the pantry, moves depleted items
        to the shopping list and stops tracking the recipe.
        '''
        result = self.ledger.consume_detailed(recipe, self.pantry, self.shopping_list)
        self.tracker.complete(recipe.id)
        logger.info("Finished cooking %s: %d ingredient(s) used, %d depleted",
                    recipe.title, len(result.consumed), len(result.depleted))
        for ingredient in result.depleted:
            self._publish(PANTRY_DEPLETED, {"ingredient": ingredient, "restock": ingredient.quantity})
        if result.consumed:
            self.notify_pantry_changed()
        if result.depleted:
            self.notify_shopping_list_changed()
        self._notify_cooking_changed()
        return result

    # --- Shopping ------------------------------------------------------------
    def restock_completed(self) -> List[Ingredient]:
        '''
        Moves every ticked shopping list item into the pantry (merging by name)
        and drops it from the list. Returns the pantry entries that were touched.
        '''
        bought = [item for item in self.shopping_list.get_items() if item.is_completed]
        restocked = [self.pantry.add(item.name, item.quantity, item.unit) for item in bought]
        self.shopping_list.clear_completed()
        if bought:
            self.notify_pantry_changed()
            self.notify_shopping_list_changed()
        return restocked

    def __str__(self) -> str:
        return f"Kitchen({len(self.pantry)} pantry items, {len(self.shopping_list)} to buy, {len(self.tracker)} cooking)"

    __repr__ = __str__
