"""
Abstractions for pluggable services. Inversion of control—core depends
on interfaces, not concrete services. Enables fakes/mocks and future swaps.
Protocols define what services or components can do,
without saying how they do it.

Common protocols:
- KeyValueStore.get(key) / set(key, value) / delete(key)
- RandomSource.choice(seq) / randint(a, b) / shuffle(seq)
- TemplateFactory.feedback_template(category) & friends
- FeedbackSynthesizer.synthesize(session) -> (Feedback, score)
- InputGuard.validate_role_title(text) / validate_answer(text)

Testing: Use simple fake implementations to test the engine without touching disk.
"""

from __future__ import annotations
from typing import Any, MutableSequence, Optional, Protocol, Sequence, TypeVar
from .models import Category, Feedback, Session

T = TypeVar("T")


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class RandomSource(Protocol):
    """The subset of random.Random the core relies on."""

    def choice(self, seq: Sequence[T]) -> T: ...

    def randint(self, a: int, b: int) -> int: ...

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


class TemplateFactory(Protocol):
    def feedback_template(
        self, category: Category
    ) -> tuple[str, list[str], list[str]]: ...

    def penalty_clause(self) -> str: ...

    def answer_all_item(self) -> str: ...

    def not_answered_note(self) -> str: ...

    def detail_pool(self) -> Sequence[str]: ...


class FeedbackSynthesizer(Protocol):
    """
    Contract for scoring backends. A real evaluator receives the whole session
    (category, role title, questions, answers) and returns feedback with one
    note per question plus an integer score in [0, 100].
    """

    def synthesize(self, session: Session) -> tuple[Feedback, int]: ...


class InputGuard(Protocol):
    def validate_role_title(self, text: str) -> str: ...

    def validate_answer(self, text: str) -> str: ...
