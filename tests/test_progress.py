from datetime import datetime, timedelta, timezone

import pytest

from interview_core.models import Category, Feedback, Session, SessionStatus
from interview_core.services.progress import (
    compute_stats,
    duration_minutes,
    first_unanswered,
    format_countdown,
    score_label,
)

T0 = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def make(idx, category, score=None, minutes=None):
    started = T0 + timedelta(days=idx)
    done = score is not None
    return Session(
        id=f"interview_{idx}",
        category=category,
        role_title="Role",
        questions=("q",),
        answers=["a"],
        started_at=started,
        feedback=Feedback(general_feedback="ok", detailed_feedback=["n"]) if done else None,
        score=score,
        ended_at=started + timedelta(minutes=minutes or 0) if done else None,
        status=SessionStatus.COMPLETED if done else SessionStatus.IN_PROGRESS,
    )


def test_empty_collection():
    stats = compute_stats([])
    assert stats.total_interviews == 0
    assert stats.completed_interviews == 0
    assert stats.average_score == 0
    assert stats.category_breakdown == {c: 0 for c in Category}
    assert stats.recent_activity == []


def test_average_counts_only_completed_and_rounds_half_up():
    sessions = [
        make(0, Category.TECHNICAL, score=70),
        make(1, Category.TECHNICAL, score=81),
        make(2, Category.BEHAVIORAL),
    ]
    stats = compute_stats(sessions)
    assert stats.total_interviews == 3
    assert stats.completed_interviews == 2
    assert stats.average_score == 76  # 75.5
    assert stats.category_breakdown[Category.TECHNICAL] == 2
    assert stats.category_breakdown[Category.BEHAVIORAL] == 1
    assert stats.category_breakdown[Category.SYSTEM_DESIGN] == 0


def test_recent_activity_is_newest_first_and_limited():
    sessions = [make(i, Category.SYSTEM_DESIGN) for i in (3, 0, 6, 1, 5, 2, 4)]
    recent = compute_stats(sessions).recent_activity
    assert [s.id for s in recent] == [f"interview_{i}" for i in (6, 5, 4, 3, 2)]
    assert len(compute_stats(sessions, recent_limit=2).recent_activity) == 2


@pytest.mark.parametrize(
    "score,label",
    [
        (100, "Excellent!"),
        (90, "Excellent!"),
        (89, "Great job!"),
        (80, "Great job!"),
        (70, "Good work!"),
        (69, "Needs improvement"),
        (0, "Needs improvement"),
    ],
)
def test_score_label(score, label):
    assert score_label(score) == label


def test_duration_minutes():
    assert duration_minutes(make(0, Category.TECHNICAL)) is None
    assert duration_minutes(make(0, Category.TECHNICAL, score=75, minutes=12)) == 12


def test_first_unanswered():
    assert first_unanswered(["a", " ", "c"]) == 1
    assert first_unanswered(["a", "b"]) == 0
    assert first_unanswered(["", ""]) == 0


@pytest.mark.parametrize("seconds,text", [(180, "3:00"), (65, "1:05"), (9, "0:09"), (-4, "0:00")])
def test_format_countdown(seconds, text):
    assert format_countdown(seconds) == text
