from fastapi import APIRouter, Depends, HTTPException, Request

from ekitchen.api.dependencies import get_kitchen, persist
from ekitchen.domain.Kitchen import Kitchen
from ekitchen.utilities.validators import IngredientInput, PantryUpdateInput

router = APIRouter(prefix="/api/pantry", tags=["pantry"])


@router.get("")
def list_pantry(kitchen: Kitchen = Depends(get_kitchen)):
    with kitchen.lock:
        items = kitchen.pantry.to_dict()
    return {"items": items, "count": len(items)}


@router.post("")
def add_ingredient(payload: IngredientInput, request: Request, kitchen: Kitchen = Depends(get_kitchen)):
    """Add stock; an ingredient with the same name (any case) is topped up instead of duplicated."""
    with kitchen.lock:
        ingredient = kitchen.pantry.add(payload.name, payload.quantity, payload.unit)
        persist(request, kitchen)
        kitchen.notify_pantry_changed()
    return ingredient.to_dict()


@router.put("/{item_id}")
def update_ingredient(item_id: str, payload: PantryUpdateInput, request: Request,
                      kitchen: Kitchen = Depends(get_kitchen)):
    with kitchen.lock:
        try:
            ingredient = kitchen.pantry.update_quantity(item_id, payload.quantity)
        except KeyError:
            raise HTTPException(status_code=404, detail="Ingredient not found")
        persist(request, kitchen)
        kitchen.notify_pantry_changed()
    return ingredient.to_dict()


@router.delete("/{item_id}")
def delete_ingredient(item_id: str, request: Request, kitchen: Kitchen = Depends(get_kitchen)):
    with kitchen.lock:
        try:
            kitchen.pantry.remove_item(item_id)
        except KeyError:
            raise HTTPException(status_code=404, detail="Ingredient not found")
        persist(request, kitchen)
        kitchen.notify_pantry_changed()
    return {"status": "deleted", "id": item_id}
