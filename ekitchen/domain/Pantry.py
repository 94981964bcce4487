"""Pantry aggregate: ordered collection of Ingredient items.

Items are treated as values: a quantity change replaces the record at the same
position with a copy that keeps its id.
"""
from typing import Iterator, List, Optional, Union
from ekitchen.domain.Ingredient import Ingredient


class Pantry:
    def __init__(self, items: Optional[List[Ingredient]] = None):
        self.items: List[Ingredient] = list(items) if items else []

    def add(self, name: str, quantity: float, unit: str) -> Ingredient:
        '''
        Adds stock to the pantry. An existing entry with the same name (case-insensitive)
        keeps its name and unit and gets the quantity added; otherwise a new entry is appended.
        '''
        existing = self.find_by_name(name)
        if existing is not None:
            updated = existing.with_quantity(existing.quantity + quantity)
            self.replace(updated)
            return updated
        ingredient = Ingredient(name, quantity, unit)
        self.items.append(ingredient)
        return ingredient

    def add_item(self, item: Ingredient):
        '''
        Appends an item as-is (no merging).
        '''
        self.items.append(item)

    def remove_item(self, item: Union[Ingredient, str]):
        '''
        Removes an item (or the item with the given id) from the pantry.
        '''
        item_id = item.id if isinstance(item, Ingredient) else item
        index = self._index_of(item_id)
        if index is None:
            raise KeyError(f"Ingredient '{item_id}' not found in pantry.")
        del self.items[index]

    def replace(self, item: Ingredient):
        '''
        Puts a new version of an ingredient in place of the record with the same id.
        '''
        index = self._index_of(item.id)
        if index is None:
            raise KeyError(f"Ingredient '{item.id}' not found in pantry.")
        self.items[index] = item

    def update_quantity(self, item_id: str, new_quantity: float) -> Ingredient:
        '''
        Sets the absolute quantity of an ingredient.
        '''
        if new_quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {new_quantity}")
        current = self.get(item_id)
        if current is None:
            raise KeyError(f"Ingredient '{item_id}' not found in pantry.")
        updated = current.with_quantity(new_quantity)
        self.replace(updated)
        return updated

    def get(self, item_id: str) -> Optional[Ingredient]:
        index = self._index_of(item_id)
        return None if index is None else self.items[index]

    def find_by_name(self, name: str) -> Optional[Ingredient]:
        key = name.lower()
        for item in self.items:
            if item.name.lower() == key:
                return item
        return None

    def _index_of(self, item_id: str) -> Optional[int]:
        for i, item in enumerate(self.items):
            if item.id == item_id:
                return i
        return None

    def get_items(self):
        '''
        Returns the list of pantry items.
        '''
        return self.items

    def describe(self) -> str:
        '''
        Renders the stock as "2.0 pieces Eggs, 500.0 g Flour" for the recipe prompt.
        '''
        return ", ".join(f"{item.quantity} {item.unit} {item.name}" for item in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Ingredient]:
        return iter(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def from_dict(self, data):
        '''
        Populates the Pantry object from a list of dictionaries.
        '''
        for item_data in data or []:
            self.add_item(Ingredient.from_dict(item_data))
        return self

    def to_dict(self):
        '''
        Converts the Pantry object to a list of dictionaries.
        '''
        return [item.to_dict() for item in self.items]
