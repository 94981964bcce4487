"""Simple Event Bus / Observer implementation for kitchen state changes.

Event names used so far:
  pantry.changed -> payload {"items": [Ingredient, ...]}
  pantry.depleted -> payload {"ingredient": Ingredient, "restock": float}
  shopping_list.changed -> payload {"items": [ShoppingListItem, ...]}
  cooking.changed -> payload {"recipes": [Recipe, ...]}

Subscribers are callables taking (event_name, payload). There is no global
instance: whoever renders the state creates a bus and hands it to the Kitchen.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PANTRY_CHANGED = "pantry.changed"
PANTRY_DEPLETED = "pantry.depleted"
SHOPPING_LIST_CHANGED = "shopping_list.changed"
COOKING_CHANGED = "cooking.changed"


class EventBus:
    def __init__(self):
        self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

    def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
        if callback not in self._subscribers[event_name]:
            self._subscribers[event_name].append(callback)

    def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
        try:
            self._subscribers[event_name].remove(callback)
        except (ValueError, KeyError):
            pass

    def publish(self, event_name: str, payload: Any):
        for cb in list(self._subscribers.get(event_name, [])):
            try:
                cb(event_name, payload)
            except Exception:
                # a broken subscriber must not undo a state change that already happened
                logger.exception("Error delivering %s to %r", event_name, cb)


__all__ = [
    'EventBus', 'PANTRY_CHANGED', 'PANTRY_DEPLETED', 'SHOPPING_LIST_CHANGED', 'COOKING_CHANGED'
]
