"""
Input validation schemas using Pydantic for better data integrity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List

from ekitchen.utilities.constants import SERVING_OPTIONS, UNITS


class IngredientInput(BaseModel):
    """Schema for pantry ingredient input validation."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., gt=0, le=100000)
    unit: str = Field(..., min_length=1, max_length=20)

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace; blank values are rejected."""
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("Value cannot be blank")
        return v

    @field_validator('unit')
    @classmethod
    def validate_unit(cls, v):
        """Only the units offered by the pantry forms."""
        if v not in UNITS:
            raise ValueError(f"Unit must be one of: {', '.join(UNITS)}")
        return v


class ShoppingListItemInput(IngredientInput):
    """Schema for a manually added shopping list item."""


class PantryUpdateInput(BaseModel):
    """Schema for pantry quantity update validation."""
    quantity: float = Field(..., ge=0)


class RecipeInput(BaseModel):
    """Schema for a recipe sent back by the client (e.g. to scale or cook it)."""
    id: str = Field(..., min_length=1)
    title: str = ""
    description: str = ""
    time: str = ""
    servings: str = ""
    ingredients: List[str] = Field(default_factory=list)
    instructions: str = ""
    rawResponse: str = ""


class ParseRequest(BaseModel):
    """Raw model output plus the ingredient list that was sent in the prompt."""
    text: str = ""
    fallback: str = ""


class ScaleRequest(BaseModel):
    recipe: RecipeInput
    servings: int = Field(..., ge=min(SERVING_OPTIONS), le=max(SERVING_OPTIONS))


class GenerateRequest(BaseModel):
    servings: int = Field(2, ge=min(SERVING_OPTIONS), le=max(SERVING_OPTIONS))
