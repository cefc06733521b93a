"""
Purpose: Pick the questions for a new session from the static catalog.
Why: Decouple question logic from the session engine. Enables other banks,
rotation, adaptive difficulty later without touching lifecycle code.

What is inside:
sample(category, count, rng) -> list[str]
pool(category) / categories() for the UI.

Strategies: technical, behavioral, system design.

Testing: Deterministic seeds for reproducible sequences; clamp on big counts.
"""

from __future__ import annotations
import random
from typing import Optional, Union

from ..errors import ValidationError
from ..interfaces import RandomSource
from ..models import Category
from ..prompts import QUESTIONS_BY_CATEGORY


def to_category(value: Union[Category, str]) -> Category:
    """Accept the enum or its stored string value."""
    if isinstance(value, Category):
        return value
    try:
        return Category(str(value).strip())
    except ValueError:
        allowed = ", ".join(c.value for c in Category)
        raise ValidationError(
            f"Unknown category {value!r}. Choose one of: {allowed}."
        ) from None


def categories() -> list[Category]:
    return list(QUESTIONS_BY_CATEGORY)


def pool(category: Union[Category, str]) -> tuple[str, ...]:
    return QUESTIONS_BY_CATEGORY[to_category(category)]


def sample(
    category: Union[Category, str],
    count: int,
    rng: Optional[RandomSource] = None,
) -> list[str]:
    """
    Shuffle-then-take `count` distinct questions. A count larger than the pool
    returns the whole pool (in shuffled order) instead of raising.
    """
    questions = list(pool(category))
    if count <= 0:
        return []
    (rng or random).shuffle(questions)
    return questions[:count]
