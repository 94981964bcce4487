"""Serving-size scaling for parsed recipes.

Provides scale_recipe(recipe, target_servings) and the helpers it is built
from. Scaling is pure: it returns a new Recipe with the same id and never
touches the input.
"""
from __future__ import annotations
import logging
import math
import re
from typing import Callable, List, Optional
from re import Match, Pattern

from ekitchen.domain.Recipe import Recipe
from ekitchen.utilities.config import DEFAULT_BASE_SERVINGS

logger = logging.getLogger(__name__)

__all__ = [
    "QuantityScaler", "scale_recipe", "baseline_servings", "scale_factor",
    "scale_ingredient_line", "scale_time", "format_quantity", "replace_matches_right_to_left",
]

# mixed number, then simple fraction, then decimal/integer
_NUMBER_RE: Pattern[str] = re.compile(
    r"(?P<whole>\d+)\s+(?P<mnum>\d+)/(?P<mden>\d+)"
    r"|(?P<num>\d+)/(?P<den>\d+)"
    r"|(?P<dec>\d+(?:\.\d+)?)"
)
_DURATION_RE: Pattern[str] = re.compile(r"(\d+(?:\.\d+)?)\s*(minutes|minute|min|hours|hour|hr)", re.IGNORECASE)
_DIGIT_RUNS_RE: Pattern[str] = re.compile(r"\D+")

# (upper bound in minutes, share of the extra batch size added to the cook time)
_TIME_GROWTH = ((15, 0.2), (60, 0.3), (math.inf, 0.4))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def replace_matches_right_to_left(text: str, matches: List[Match[str]],
                                  render: Callable[[Match[str]], Optional[str]]) -> str:
    """Replace regex matches of text, last one first.

    Every match carries offsets into the original text. Working from the end
    keeps the offsets of the matches still to be processed valid even when a
    replacement has a different length. render returning None keeps the match.
    """
    for match in reversed(matches):
        replacement = render(match)
        if replacement is None:
            continue
        text = text[:match.start()] + replacement + text[match.end():]
    return text


def baseline_servings(servings: str, default: int = DEFAULT_BASE_SERVINGS) -> int:
    """First positive integer in a free-text servings field ("Serves 4-6" -> 4)."""
    for run in _DIGIT_RUNS_RE.split(servings or ""):
        if run and int(run) > 0:
            return int(run)
    return default


def scale_factor(recipe: Recipe, target_servings: int, default: int = DEFAULT_BASE_SERVINGS) -> float:
    return target_servings / baseline_servings(recipe.servings, default)


def _number_value(match: Match[str]) -> Optional[float]:
    if match.group("whole") is not None:
        den = int(match.group("mden"))
        if den == 0:
            return None
        return int(match.group("whole")) + int(match.group("mnum")) / den
    if match.group("num") is not None:
        den = int(match.group("den"))
        if den == 0:
            return None
        return int(match.group("num")) / den
    return float(match.group("dec"))


def format_quantity(value: float) -> str:
    """Render a scaled amount the way a cook would write it.

    Whole numbers stay whole, small amounts snap to halves ("1 1/2"), the rest
    gets two decimals without a trailing ".00".
    """
    if float(value).is_integer():
        return str(int(value))
    if value < 10:
        rounded_half = math.floor(value * 2 + 0.5) / 2
        if abs(value - rounded_half) < 0.01:
            whole = int(rounded_half)
            if rounded_half == whole:
                return str(whole)
            return f"{whole} 1/2" if whole else "1/2"
    text = f"{value:.2f}"
    return text[:-3] if text.endswith(".00") else text


def scale_ingredient_line(line: str, factor: float) -> str:
    """Multiply every amount written in an ingredient line by factor."""
    def render(match: Match[str]) -> Optional[str]:
        value = _number_value(match)
        if value is None:
            return None
        return format_quantity(value * factor)

    return replace_matches_right_to_left(line, list(_NUMBER_RE.finditer(line)), render)


def _scale_minutes(minutes: float, factor: float) -> int:
    share = next(share for limit, share in _TIME_GROWTH if minutes <= limit)
    scaled = minutes * (1.0 + (factor - 1.0) * share)
    final = max(_round_half_up(scaled), 1)
    return ((final + 2) // 5) * 5


def scale_time(time_text: str, factor: float) -> str:
    """Scale every "<n> min/hour" in a duration, growing it slower than the batch.

    Unknown formats pass through unchanged; so does anything that fails.
    Fractional hours ("1.5 hours") stay fractional, snapped to half hours.
    """
    def render(match: Match[str]) -> str:
        amount, unit = match.group(1), match.group(2)
        in_hours = unit.lower().startswith("h")
        minutes = _scale_minutes(float(amount) * 60 if in_hours else float(amount), factor)
        if not in_hours:
            value = str(minutes)
        elif "." in amount:
            value = f"{max(1, _round_half_up(minutes / 30)) / 2:g}"
        else:
            value = str(max(1, minutes // 60))
        return f"{value} {unit}"

    try:
        return replace_matches_right_to_left(time_text, list(_DURATION_RE.finditer(time_text)), render)
    except Exception:
        logger.exception("Could not scale cook time %r; keeping it as is", time_text)
        return time_text


class QuantityScaler:
    """Rescales a Recipe for a different number of servings."""

    def __init__(self, default_servings: int = DEFAULT_BASE_SERVINGS):
        self.default_servings = default_servings

    def scale(self, recipe: Recipe, target_servings: int) -> Recipe:
        if isinstance(target_servings, bool) or not isinstance(target_servings, int) or target_servings <= 0:
            raise ValueError(f"Target servings must be a positive integer, got {target_servings!r}")
        factor = scale_factor(recipe, target_servings, self.default_servings)
        return recipe.copy(
            time=scale_time(recipe.time, factor),
            servings=str(target_servings),
            ingredients=[scale_ingredient_line(line, factor) for line in recipe.ingredients],
        )


def scale_recipe(recipe: Recipe, target_servings: int) -> Recipe:
    return QuantityScaler().scale(recipe, target_servings)
