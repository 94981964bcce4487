"""FastAPI dependencies: hand the app-owned state to the route handlers."""
from pathlib import Path

from fastapi import Request

from ekitchen.domain.Kitchen import Kitchen
from ekitchen.infra.Pantry_Repository import save_kitchen


def get_kitchen(request: Request) -> Kitchen:
    return request.app.state.kitchen


def get_generator(request: Request):
    return request.app.state.generator


def get_recipe_store(request: Request) -> dict:
    """Recipes of the last generate/parse call, by id. Read and replace it under kitchen.lock."""
    return request.app.state.recipes


def get_data_dir(request: Request) -> Path:
    return request.app.state.data_dir


def persist(request: Request, kitchen: Kitchen):
    """Write pantry and shopping list back to disk. Call while holding kitchen.lock."""
    save_kitchen(kitchen, request.app.state.data_dir)
