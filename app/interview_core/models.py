"""
Canonical data shapes, shared truth for typing/validation between layers.

Typical contents:
- Category, SessionStatus (str enums, values match the stored JSON).
- Feedback (general, strengths, improvements, per-question notes).
- Session (one practice attempt from creation to completion).
- ProgressStats (dashboard aggregates).

Testing: Trivial; mostly types. Invariant helpers live on Session.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
from enum import Enum
from datetime import datetime


class Category(str, Enum):
    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    SYSTEM_DESIGN = "system_design"

    @property
    def label(self) -> str:
        return {
            Category.TECHNICAL: "Technical Interview",
            Category.BEHAVIORAL: "Behavioral Interview",
            Category.SYSTEM_DESIGN: "System Design Interview",
        }[self]


class SessionStatus(str, Enum):
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


@dataclass
class Feedback:
    general_feedback: str
    strengths: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)
    detailed_feedback: list[str] = field(default_factory=list)


@dataclass
class Session:
    id: str
    category: Category
    role_title: str
    questions: tuple[str, ...]
    answers: list[str]
    started_at: datetime
    feedback: Optional[Feedback] = None
    score: Optional[int] = None
    ended_at: Optional[datetime] = None
    status: SessionStatus = SessionStatus.IN_PROGRESS

    @property
    def is_completed(self) -> bool:
        return self.status == SessionStatus.COMPLETED

    def check_invariants(self) -> None:
        """Raise ValueError if the record breaks a structural invariant."""
        if len(self.answers) != len(self.questions):
            raise ValueError(
                f"Session {self.id}: {len(self.answers)} answers "
                f"for {len(self.questions)} questions."
            )
        finished = (
            self.feedback is not None
            and self.score is not None
            and self.ended_at is not None
        )
        if self.is_completed != finished:
            raise ValueError(
                f"Session {self.id}: status {self.status.value!r} does not match "
                "feedback/score/end time."
            )
        if self.score is not None and not 0 <= self.score <= 100:
            raise ValueError(f"Session {self.id}: score {self.score} out of range.")


@dataclass
class ProgressStats:
    total_interviews: int = 0
    completed_interviews: int = 0
    average_score: int = 0
    category_breakdown: dict[Category, int] = field(
        default_factory=lambda: {c: 0 for c in Category}
    )
    recent_activity: list[Session] = field(default_factory=list)
