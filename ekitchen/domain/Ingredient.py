"""Ingredient domain entity: id, name, quantity and unit of one pantry item."""
from uuid import uuid4
from typing import Optional


class Ingredient:
    def __init__(self, name: str = "", quantity: float = 0.0, unit: str = "", id: Optional[str] = None):
        if quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {quantity}")
        self.id = id or str(uuid4())
        self.name = name
        self.quantity = float(quantity)
        self.unit = unit

    def with_quantity(self, quantity: float) -> "Ingredient":
        '''Returns a copy with the same identity holding the new quantity.'''
        return Ingredient(self.name, quantity, self.unit, id=self.id)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"id", "name", "quantity", "unit"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered.setdefault("name", "")
        filtered.setdefault("unit", "")
        try:
            filtered["quantity"] = max(0.0, float(filtered.get("quantity") or 0))
        except (TypeError, ValueError):
            filtered["quantity"] = 0.0
        return Ingredient(**filtered)

    def to_dict(self):
        '''Converts the Ingredient object to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
        }
