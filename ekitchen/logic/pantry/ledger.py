"""Pantry ledger: takes a cooked recipe's ingredients out of the pantry.

Recipe ingredient lines are free text written by the model ("1 1/2 cups
milk"), pantry entries are what the user typed ("Milk"). Each line is split
into an amount and an item phrase, matched against the pantry by name
(exact, substring, or close enough by edit distance) and subtracted. Entries
that run out leave the pantry and go on the shopping list with the amount the
user had before cooking.
"""
from __future__ import annotations
import logging
import re
from typing import List, MutableSequence, Optional, Tuple, Union

from ekitchen.domain.Ingredient import Ingredient
from ekitchen.domain.Pantry import Pantry
from ekitchen.domain.Recipe import Recipe
from ekitchen.domain.ShoppingList import ShoppingList
from ekitchen.logic.matching.similarity import similarity
from ekitchen.utilities.config import PANTRY_MATCH_THRESHOLD

logger = logging.getLogger(__name__)

__all__ = ["PantryLedger", "ConsumptionResult", "parse_ingredient_line", "normalize_name"]

_DECIMAL_RE = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")
_MAX_QUANTITY_TOKENS = 3

PantryLike = Union[Pantry, MutableSequence[Ingredient]]


def normalize_name(name: str) -> str:
    return (name or '').strip().lower()


def _number(token: str) -> Optional[float]:
    return float(token) if _DECIMAL_RE.match(token) else None


def _fraction(token: str) -> Optional[float]:
    if "/" not in token:
        return None
    parts = token.split("/")
    if len(parts) != 2:
        return None
    numerator, denominator = _number(parts[0]), _number(parts[1])
    if numerator is None or denominator is None or denominator == 0:
        return None
    return numerator / denominator


def parse_ingredient_line(line: str) -> Tuple[float, str]:
    """Split "1 1/2 cups milk" into (1.5, "cups milk").

    Only the first three space-separated tokens are looked at, so "Salt, to
    taste" or "a pinch of 2 spices" fall back to (1.0, whole line).
    """
    tokens = line.split(" ")
    for i, token in enumerate(tokens[:_MAX_QUANTITY_TOKENS]):
        value = _fraction(token)
        if value is not None:
            return value, " ".join(tokens[i + 1:])
        value = _number(token)
        if value is None:
            continue
        if i + 1 < len(tokens):
            part = _fraction(tokens[i + 1])
            if part is not None:
                return value + part, " ".join(tokens[i + 2:])
        return value, " ".join(tokens[i + 1:])
    return 1.0, line


class ConsumptionResult:
    """What one consume pass did to the pantry and the shopping list."""

    def __init__(self, pantry: PantryLike, shopping_list: ShoppingList):
        self.pantry = pantry
        self.shopping_list = shopping_list
        self.consumed: List[Tuple[str, str, float]] = []  # (recipe line, pantry name, amount)
        self.depleted: List[Ingredient] = []
        self.unmatched: List[str] = []

    def to_dict(self):
        return {
            "consumed": [{"line": line, "name": name, "amount": amount} for line, name, amount in self.consumed],
            "depleted": [ing.to_dict() for ing in self.depleted],
            "unmatched": list(self.unmatched),
            "shopping_list": self.shopping_list.to_dict(),
        }


class PantryLedger:
    def __init__(self, threshold: float = PANTRY_MATCH_THRESHOLD):
        self.threshold = threshold

    def matches(self, pantry_name: str, item: str) -> bool:
        pantry_key, item_key = normalize_name(pantry_name), normalize_name(item)
        if not pantry_key or not item_key:
            return False
        if pantry_key == item_key or item_key in pantry_key or pantry_key in item_key:
            return True
        return similarity(pantry_key, item_key) > self.threshold

    def find_match(self, item: str, items: MutableSequence[Ingredient]) -> Optional[int]:
        '''Index of the first pantry entry matching the item phrase, in pantry order.'''
        for index, ingredient in enumerate(items):
            if self.matches(ingredient.name, item):
                return index
        return None

    def consume_detailed(self, recipe: Recipe, pantry: PantryLike,
                         shopping_list: Optional[ShoppingList] = None) -> ConsumptionResult:
        """Subtract every ingredient line of recipe from pantry (mutated in place).

        Callers sharing a pantry between threads must serialize calls; the
        ledger takes no lock.
        """
        shopping_list = shopping_list if shopping_list is not None else ShoppingList()
        items = pantry.items if isinstance(pantry, Pantry) else pantry
        result = ConsumptionResult(pantry, shopping_list)

        for line in recipe.ingredients:
            quantity, item = parse_ingredient_line(line)
            index = self.find_match(item, items)
            if index is None:
                logger.debug("No pantry entry for %r; skipping", line)
                result.unmatched.append(line)
                continue

            current = items[index]
            remaining = max(0.0, current.quantity - quantity)
            result.consumed.append((line, current.name, current.quantity - remaining))
            if remaining <= 0:
                del items[index]
                shopping_list.add(current.name, current.quantity, current.unit)
                result.depleted.append(current)
                logger.info("%s ran out; added %s %s to the shopping list",
                            current.name, current.quantity, current.unit)
            else:
                items[index] = current.with_quantity(remaining)
                logger.debug("Used %s of %s, %s %s left", quantity, current.name, remaining, current.unit)
        return result

    def consume(self, recipe: Recipe, pantry: PantryLike,
                shopping_list: Optional[ShoppingList] = None) -> Tuple[PantryLike, ShoppingList]:
        result = self.consume_detailed(recipe, pantry, shopping_list)
        return result.pantry, result.shopping_list
