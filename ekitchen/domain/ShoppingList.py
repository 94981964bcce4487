"""ShoppingList aggregate: items to restock, merged by case-insensitive name."""
from uuid import uuid4
from typing import Iterator, List, Optional


class ShoppingListItem:
    def __init__(self, name: str = "", quantity: float = 0.0, unit: str = "",
                 is_completed: bool = False, id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.name = name
        self.quantity = float(quantity)
        self.unit = unit
        self.is_completed = bool(is_completed)

    def copy(self, **changes) -> "ShoppingListItem":
        fields = {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "is_completed": self.is_completed,
            "id": self.id,
        }
        fields.update(changes)
        return ShoppingListItem(**fields)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingListItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        mark = "x" if self.is_completed else " "
        return f"[{mark}] {self.name} - {self.quantity} {self.unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        try:
            quantity = float(d.get("quantity") or 0)
        except (TypeError, ValueError):
            quantity = 0.0
        return ShoppingListItem(
            name=str(d.get("name") or ""),
            quantity=quantity,
            unit=str(d.get("unit") or ""),
            is_completed=bool(d.get("isCompleted", False)),
            id=d.get("id"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "isCompleted": self.is_completed,
        }


class ShoppingList:
    def __init__(self, items: Optional[List[ShoppingListItem]] = None):
        self.items: List[ShoppingListItem] = list(items) if items else []

    def add(self, name: str, quantity: float, unit: str) -> ShoppingListItem:
        '''
        Adds a restock need. Same name (case-insensitive) accumulates quantity
        on the existing entry instead of creating a duplicate.
        '''
        key = name.lower()
        for i, item in enumerate(self.items):
            if item.name.lower() == key:
                merged = item.copy(quantity=item.quantity + quantity)
                self.items[i] = merged
                return merged
        new_item = ShoppingListItem(name, quantity, unit)
        self.items.append(new_item)
        return new_item

    def add_item(self, item: ShoppingListItem):
        self.items.append(item)

    def remove_item(self, item_id: str):
        '''
        Removes the entry with the given id; unknown ids are ignored.
        '''
        self.items = [item for item in self.items if item.id != item_id]

    def toggle(self, item_id: str) -> ShoppingListItem:
        '''
        Flips the completion mark of an entry.
        '''
        for i, item in enumerate(self.items):
            if item.id == item_id:
                toggled = item.copy(is_completed=not item.is_completed)
                self.items[i] = toggled
                return toggled
        raise KeyError(f"Shopping list item '{item_id}' not found.")

    def clear_completed(self) -> int:
        before = len(self.items)
        self.items = [item for item in self.items if not item.is_completed]
        return before - len(self.items)

    def get_items(self):
        return self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ShoppingListItem]:
        return iter(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Shopping List Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def from_dict(self, data):
        for item_data in data or []:
            self.add_item(ShoppingListItem.from_dict(item_data))
        return self

    def to_dict(self):
        return [item.to_dict() for item in self.items]
