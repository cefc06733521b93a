"""
Purpose: Dashboard math over the session collection.
Central progress logic so UI/engine do not duplicate calculations.
"""

from __future__ import annotations
from typing import Iterable, Optional

from ..models import Category, ProgressStats, Session

RECENT_LIMIT = 5

SCORE_LABELS = (
    (90, "Excellent!"),
    (80, "Great job!"),
    (70, "Good work!"),
)


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def compute_stats(
    sessions: Iterable[Session], recent_limit: int = RECENT_LIMIT
) -> ProgressStats:
    sessions = list(sessions)
    completed = [s for s in sessions if s.is_completed]
    total_score = sum(s.score or 0 for s in completed)
    average = _round_half_up(total_score / len(completed)) if completed else 0

    breakdown = {c: 0 for c in Category}
    for s in sessions:
        breakdown[s.category] += 1

    recent = sorted(sessions, key=lambda s: s.started_at, reverse=True)
    return ProgressStats(
        total_interviews=len(sessions),
        completed_interviews=len(completed),
        average_score=average,
        category_breakdown=breakdown,
        recent_activity=recent[: max(0, recent_limit)],
    )


def score_label(score: int) -> str:
    for threshold, label in SCORE_LABELS:
        if score >= threshold:
            return label
    return "Needs improvement"


def duration_minutes(session: Session) -> Optional[int]:
    """Whole minutes from start to end; None while the session is running."""
    if session.ended_at is None:
        return None
    seconds = (session.ended_at - session.started_at).total_seconds()
    return _round_half_up(max(0.0, seconds) / 60)


def first_unanswered(answers: list[str]) -> int:
    """Where a resumed session should pick up; 0 when everything is answered."""
    for idx, answer in enumerate(answers):
        if not (answer or "").strip():
            return idx
    return 0


def format_countdown(seconds: int) -> str:
    """Format remaining seconds as m:ss."""
    seconds = int(max(0, seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"
