"""Facade over the static catalogs, so synthesizers can take a TemplateFactory."""

from __future__ import annotations
from typing import Sequence

from ..models import Category
from . import feedback as _feedback
from .questions import QUESTIONS_BY_CATEGORY


class DefaultTemplateFactory:
    # FEEDBACK
    def feedback_template(
        self, category: Category
    ) -> tuple[str, list[str], list[str]]:
        """Fresh copies; callers may append/prepend freely."""
        return (
            _feedback.GENERAL_FEEDBACK[category],
            list(_feedback.STRENGTHS[category]),
            list(_feedback.IMPROVEMENTS[category]),
        )

    def penalty_clause(self) -> str:
        return _feedback.PENALTY_CLAUSE

    def answer_all_item(self) -> str:
        return _feedback.ANSWER_ALL_ITEM

    def not_answered_note(self) -> str:
        return _feedback.NOT_ANSWERED_NOTE

    def detail_pool(self) -> Sequence[str]:
        return _feedback.DETAIL_POOL


__all__ = ["DefaultTemplateFactory", "QUESTIONS_BY_CATEGORY"]
