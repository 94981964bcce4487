from fastapi import APIRouter, Depends, HTTPException, Request

from ekitchen.api.dependencies import get_kitchen, persist
from ekitchen.domain.Kitchen import Kitchen
from ekitchen.utilities.validators import ShoppingListItemInput

router = APIRouter(prefix="/api/shopping-list", tags=["shopping-list"])


@router.get("")
def list_shopping(kitchen: Kitchen = Depends(get_kitchen)):
    with kitchen.lock:
        items = kitchen.shopping_list.to_dict()
    return {"items": items, "count": len(items)}


@router.post("")
def add_shopping_item(payload: ShoppingListItemInput, request: Request, kitchen: Kitchen = Depends(get_kitchen)):
    with kitchen.lock:
        item = kitchen.shopping_list.add(payload.name, payload.quantity, payload.unit)
        persist(request, kitchen)
        kitchen.notify_shopping_list_changed()
    return item.to_dict()


@router.post("/clear-completed")
def clear_completed(request: Request, kitchen: Kitchen = Depends(get_kitchen)):
    with kitchen.lock:
        removed = kitchen.shopping_list.clear_completed()
        persist(request, kitchen)
        kitchen.notify_shopping_list_changed()
    return {"removed": removed}


@router.post("/restock")
def restock_completed(request: Request, kitchen: Kitchen = Depends(get_kitchen)):
    """Move ticked items into the pantry and off the list."""
    with kitchen.lock:
        restocked = kitchen.restock_completed()
        persist(request, kitchen)
    return {"restocked": [ing.to_dict() for ing in restocked], "count": len(restocked)}


@router.post("/{item_id}/toggle")
def toggle_item(item_id: str, request: Request, kitchen: Kitchen = Depends(get_kitchen)):
    with kitchen.lock:
        try:
            item = kitchen.shopping_list.toggle(item_id)
        except KeyError:
            raise HTTPException(status_code=404, detail="Shopping list item not found")
        persist(request, kitchen)
        kitchen.notify_shopping_list_changed()
    return item.to_dict()


@router.delete("/{item_id}")
def delete_item(item_id: str, request: Request, kitchen: Kitchen = Depends(get_kitchen)):
    with kitchen.lock:
        kitchen.shopping_list.remove_item(item_id)
        persist(request, kitchen)
        kitchen.notify_shopping_list_changed()
    return {"status": "deleted", "id": item_id}
