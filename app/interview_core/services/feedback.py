"""
Purpose: Turn a finished session into feedback and a score.
Powers the results view and the dashboard averages.

What is inside:
synthesize(session, rng, templates) -> (Feedback, score)
MockFeedbackSynthesizer: the placeholder backend the engine uses by default.

The mock policy does not read answer content beyond blank/non-blank: the
summary comes from a per-category template, per-question notes are random
picks from a fixed pool and the score is uniform in [60, 100]. Swap in a real
evaluator by implementing interfaces.FeedbackSynthesizer.

Testing: Scripted random source for exact outputs; bounds on blank answers.
"""

from __future__ import annotations
import random
from typing import Optional

from ..interfaces import RandomSource, TemplateFactory
from ..models import Feedback, Session
from ..prompts import DefaultTemplateFactory

MIN_MOCK_SCORE = 60
MAX_MOCK_SCORE = 100


def clamp_score(value: int) -> int:
    """Force a backend's score into [0, 100]."""
    return max(0, min(100, int(value)))


def _is_blank(answer: str) -> bool:
    return not (answer or "").strip()


def synthesize(
    session: Session,
    *,
    rng: RandomSource,
    templates: TemplateFactory,
) -> tuple[Feedback, int]:
    """Return (Feedback, score) for the session. Does not modify the session."""
    has_empty_answers = any(_is_blank(a) for a in session.answers)

    general, strengths, improvements = templates.feedback_template(session.category)
    if has_empty_answers:
        general += templates.penalty_clause()
        improvements.insert(0, templates.answer_all_item())

    pool = list(templates.detail_pool())
    detailed = [
        templates.not_answered_note() if _is_blank(answer) else rng.choice(pool)
        for answer in session.answers
    ]

    feedback = Feedback(
        general_feedback=general,
        strengths=strengths,
        improvements=improvements,
        detailed_feedback=detailed,
    )
    score = clamp_score(rng.randint(MIN_MOCK_SCORE, MAX_MOCK_SCORE))
    return feedback, score


class MockFeedbackSynthesizer:
    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        templates: Optional[TemplateFactory] = None,
    ):
        self.rng: RandomSource = rng or random.Random()
        self.templates: TemplateFactory = templates or DefaultTemplateFactory()

    def synthesize(self, session: Session) -> tuple[Feedback, int]:
        return synthesize(session, rng=self.rng, templates=self.templates)
