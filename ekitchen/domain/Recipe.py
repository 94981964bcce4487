"""Recipe domain entity: one dish suggested by the language model.

Ingredients stay free-text lines ("2 cups flour"); turning them into
quantities is the job of the scaler and the pantry ledger.
"""
from uuid import uuid4
from typing import List, Optional


class Recipe:
    def __init__(self, title: str = "", description: str = "", time: str = "", servings: str = "",
                 ingredients: Optional[List[str]] = None, instructions: str = "",
                 raw_response: str = "", id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.title = title
        self.description = description
        self.time = time
        self.servings = servings
        self.ingredients = list(ingredients) if ingredients else []
        self.instructions = instructions
        self.raw_response = raw_response

    def copy(self, **changes) -> "Recipe":
        '''Returns a new Recipe with the given fields replaced; the id is kept unless overridden.'''
        fields = {
            "title": self.title,
            "description": self.description,
            "time": self.time,
            "servings": self.servings,
            "ingredients": self.ingredients,
            "instructions": self.instructions,
            "raw_response": self.raw_response,
            "id": self.id,
        }
        fields.update(changes)
        return Recipe(**fields)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{self.title} - {self.time} - {self.servings} servings - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Recipe(
            title=str(d.get("title") or ""),
            description=str(d.get("description") or ""),
            time=str(d.get("time") or ""),
            servings=str(d.get("servings") or ""),
            ingredients=[str(line) for line in d.get("ingredients") or []],
            instructions=str(d.get("instructions") or ""),
            raw_response=str(d.get("rawResponse") or ""),
            id=d.get("id"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "time": self.time,
            "servings": self.servings,
            "ingredients": list(self.ingredients),
            "instructions": self.instructions,
            "rawResponse": self.raw_response,
        }
