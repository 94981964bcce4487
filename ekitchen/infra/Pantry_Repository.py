"""Pantry and shopping list repository helpers (file persistence)."""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from ekitchen.domain.Kitchen import Kitchen
from ekitchen.domain.Pantry import Pantry
from ekitchen.domain.ShoppingList import ShoppingList
from ekitchen.infra import paths

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_json_list(path: PathLike) -> list:
    """Read a JSON array; a missing or unreadable file yields an empty list."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Data file not found: {path}. Starting empty.")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        return []
    if not isinstance(data, list):
        logger.error(f"Expected a JSON list in {path}, got {type(data).__name__}")
        return []
    return data


def write_json(path: PathLike, data: Any):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def load_pantry(path: Optional[PathLike] = None) -> Pantry:
    return Pantry().from_dict(read_json_list(path or paths.PANTRY_FILE))


def save_pantry(pantry: Pantry, path: Optional[PathLike] = None):
    write_json(path or paths.PANTRY_FILE, pantry.to_dict())


def load_shopping_list(path: Optional[PathLike] = None) -> ShoppingList:
    return ShoppingList().from_dict(read_json_list(path or paths.SHOPPING_LIST_FILE))


def save_shopping_list(shopping_list: ShoppingList, path: Optional[PathLike] = None):
    write_json(path or paths.SHOPPING_LIST_FILE, shopping_list.to_dict())


def load_kitchen(data_dir: Optional[PathLike] = None, **kitchen_kwargs) -> Kitchen:
    """Build a Kitchen from the pantry and shopping list files in data_dir."""
    base = Path(data_dir) if data_dir else None
    pantry = load_pantry(base / paths.PANTRY_FILE.name if base else None)
    shopping_list = load_shopping_list(base / paths.SHOPPING_LIST_FILE.name if base else None)
    return Kitchen(pantry=pantry, shopping_list=shopping_list, **kitchen_kwargs)


def save_kitchen(kitchen: Kitchen, data_dir: Optional[PathLike] = None):
    base = Path(data_dir) if data_dir else None
    save_pantry(kitchen.pantry, base / paths.PANTRY_FILE.name if base else None)
    save_shopping_list(kitchen.shopping_list, base / paths.SHOPPING_LIST_FILE.name if base else None)
