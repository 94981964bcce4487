"""Recipe text parser.

Turns the free-form answer of the language model into Recipe records. The
expected layout is loose:

    Recipe 1: Garlic Pasta
    Description: ...
    Time: 20 minutes
    Servings: 2
    Ingredients:
    - 200 g pasta
    Instructions:
    1. Boil the pasta

Sections may be missing, reordered or wrapped in markdown emphasis. Parsing
never raises: whatever cannot be understood is dropped, and an empty list
means "no recipes found".
"""
from __future__ import annotations
import logging
import re
from typing import List, Optional, Sequence, Union

from ekitchen.domain.Recipe import Recipe
from ekitchen.utilities.constants import (
    DEFAULT_DESCRIPTION, FALLBACK_SEPARATOR, MAX_TITLE_WORDS, PLACEHOLDER_TITLE,
    TITLE_PREFIXES, TITLE_SUFFIXES,
)

logger = logging.getLogger(__name__)

__all__ = ["RecipeTextParser", "parse_recipes_from_text", "clean_title"]

_BULLET_RE = re.compile(r"^[-•\s]+")
_ENUMERATION_RE = re.compile(r"^[0-9]+[.)]\s*")
_WORD_RE = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)?")

# field prefix -> section name; scalar sections keep the rest of the line
_SCALAR_FIELDS = ("title", "description", "time", "servings")
_LIST_FIELDS = ("ingredients", "instructions")


def _capitalize_words(text: str) -> str:
    return _WORD_RE.sub(lambda m: m.group(0).capitalize(), text)


def clean_title(full_title: str) -> str:
    """Strip markup and filler around a dish name, keep 5 words, title-case it."""
    result = full_title.strip().replace("*", "")
    for prefix in TITLE_PREFIXES:
        if result.lower().startswith(prefix.lower()):
            result = result[len(prefix):]
    for suffix in TITLE_SUFFIXES:
        if result.lower().endswith(suffix.lower()):
            result = result[:-len(suffix)]
    words = [w for w in result.split(" ") if w]
    result = _capitalize_words(" ".join(words[:MAX_TITLE_WORDS]))
    return result or PLACEHOLDER_TITLE


def _split_fallback(fallback: Union[str, Sequence[str]]) -> List[str]:
    if isinstance(fallback, str):
        return [part for part in fallback.split(FALLBACK_SEPARATOR) if part]
    return [str(part) for part in fallback or []]


class _RecipeDraft:
    """Accumulators for the recipe currently being read."""

    def __init__(self, title: str = ""):
        self.title = title
        self.description = ""
        self.time = ""
        self.servings = ""
        self.ingredients: List[str] = []
        self.instructions: List[str] = []

    def is_valid(self) -> bool:
        return bool(self.title) and bool(self.instructions)

    def build(self, raw_text: str, fallback_ingredients: List[str]) -> Recipe:
        numbered = "\n".join(f"{i}. {step}" for i, step in enumerate(self.instructions, start=1))
        return Recipe(
            title=clean_title(self.title),
            description=self.description or DEFAULT_DESCRIPTION,
            time=self.time,
            servings=self.servings,
            ingredients=self.ingredients or list(fallback_ingredients),
            instructions=numbered,
            raw_response=raw_text,
        )


class RecipeTextParser:
    """Single-pass, line-oriented state machine over the model output."""

    def parse(self, raw_text: str, fallback_ingredient_list: Union[str, Sequence[str]] = "") -> List[Recipe]:
        """Parse every recipe in raw_text.

        Args:
            raw_text: complete model answer.
            fallback_ingredient_list: ingredient lines used for recipes whose
                ingredient section came back empty, either as a sequence or as
                one ", "-separated string (the pantry description sent in the prompt).

        Returns:
            Recipes in the order they appear; each keeps the whole raw_text.
        """
        raw_text = raw_text or ""
        fallback = _split_fallback(fallback_ingredient_list)
        recipes: List[Recipe] = []
        draft = _RecipeDraft()
        section: Optional[str] = None

        def flush():
            if draft.is_valid():
                recipes.append(draft.build(raw_text, fallback))

        for line in raw_text.splitlines():
            trimmed = line.replace("*", "").strip()
            if not trimmed:
                continue
            lowered = trimmed.lower()

            if lowered.startswith("recipe "):
                flush()
                _, sep, rest = trimmed.partition(":")
                draft = _RecipeDraft(rest.strip() if sep else "")
                section = None
                continue

            header = self._match_header(lowered)
            if header is not None:
                section = header
                if header in _SCALAR_FIELDS:
                    setattr(draft, header, trimmed[len(header) + 1:].strip())
                continue

            if section == "ingredients":
                clean = _BULLET_RE.sub("", trimmed)
                if clean:
                    draft.ingredients.append(clean)
            elif section == "instructions":
                step = _BULLET_RE.sub("", _ENUMERATION_RE.sub("", trimmed))
                if step:
                    draft.instructions.append(step)
            elif section == "description":
                draft.description = f"{draft.description} {trimmed}" if draft.description else trimmed

        flush()

        if raw_text.strip() and not recipes:
            logger.warning("No recipes could be parsed from %d characters of model output", len(raw_text))
        else:
            logger.debug("Parsed %d recipe(s)", len(recipes))
        return recipes

    @staticmethod
    def _match_header(lowered: str) -> Optional[str]:
        for name in _SCALAR_FIELDS + _LIST_FIELDS:
            if lowered.startswith(name + ":"):
                return name
        return None


def parse_recipes_from_text(raw_text: str, fallback_ingredient_list: Union[str, Sequence[str]] = "") -> List[Recipe]:
    return RecipeTextParser().parse(raw_text, fallback_ingredient_list)
