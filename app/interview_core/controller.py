"""
Purpose: The single orchestration point for practice sessions. Owns the
session collection and its lifecycle (create, record_answer, complete, delete).
Prevents UI from knowing how questions, feedback or storage work.

Key responsibilities:
- Hold the collection (newest first) and hand out copies, never live objects.
- Sample questions through services.question_bank.
- Validate inputs (services.security via InputGuard).
- Call the FeedbackSynthesizer on completion.
- Write the whole collection to the KeyValueStore after every mutation.
- On a store failure, keep going in memory and report the error once.

Testing: Pure unit tests with fakes: in-memory store, failing store,
scripted random source. Verify state transitions and error kinds.
"""

from __future__ import annotations
import copy
import logging
import random
from datetime import datetime, timezone
from typing import Callable, Optional, Union

from .errors import (
    EvaluationError,
    IndexOutOfRange,
    InvalidStateError,
    NotFoundError,
    PersistenceError,
)
from .interfaces import FeedbackSynthesizer, InputGuard, KeyValueStore, RandomSource
from .logging_config import log_event
from .models import Category, ProgressStats, Session, SessionStatus
from .persistence.session_store import decode_sessions, encode_sessions
from .services import progress, question_bank
from .services.feedback import MockFeedbackSynthesizer, clamp_score
from .services.security import DefaultSecurity

logger = logging.getLogger(__name__)

DEFAULT_STORE_KEY = "interviews"
QUESTIONS_PER_SESSION = 5


def utc_now() -> datetime:
    """Current UTC time truncated to milliseconds, the stored precision."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


class InterviewSessionEngine:
    def __init__(
        self,
        store: KeyValueStore,
        *,
        store_key: str = DEFAULT_STORE_KEY,
        questions_per_session: int = QUESTIONS_PER_SESSION,
        rng: Optional[RandomSource] = None,
        synthesizer: Optional[FeedbackSynthesizer] = None,
        security: Optional[InputGuard] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        if questions_per_session < 1:
            raise ValueError("questions_per_session must be at least 1.")
        self.store: KeyValueStore = store
        self.store_key = store_key
        self.questions_per_session = questions_per_session
        self.rng: RandomSource = rng or random.Random()
        self.synthesizer: FeedbackSynthesizer = synthesizer or MockFeedbackSynthesizer(
            rng=self.rng
        )
        self.security: InputGuard = security or DefaultSecurity()
        self.clock = clock

        self.persistence_degraded: bool = False
        self._pending_error: Optional[PersistenceError] = None
        self._sessions: list[Session] = self._load()

    # ---------------------------
    # Persistence
    # ---------------------------
    def _load(self) -> list[Session]:
        """Read the collection. Absent or corrupt data means an empty start."""
        try:
            raw = self.store.get(self.store_key)
        except ValueError as e:
            # the store could read the value but not decode it
            self._discard_corrupt(e)
            return []
        except Exception as e:
            self._degrade(PersistenceError(f"Could not read saved interviews: {e}"))
            return []

        if raw is None:
            return []

        try:
            sessions = decode_sessions(raw)
        except (ValueError, TypeError) as e:
            self._discard_corrupt(e)
            return []

        logger.info("Loaded %d interview(s) from key %r", len(sessions), self.store_key)
        return sessions

    def _discard_corrupt(self, reason: Exception) -> None:
        logger.warning(
            "Discarding corrupt interview data under key %r: %s", self.store_key, reason
        )
        try:
            self.store.delete(self.store_key)
        except Exception as de:
            self._degrade(
                PersistenceError(f"Could not discard corrupt interview data: {de}")
            )

    def _save(self) -> None:
        """Write-through of the whole collection; skipped once degraded."""
        if self.persistence_degraded:
            return
        try:
            self.store.set(self.store_key, encode_sessions(self._sessions))
        except Exception as e:
            self._degrade(PersistenceError(f"Could not save interviews: {e}"))

    def _degrade(self, error: PersistenceError) -> None:
        logger.error("%s Continuing in memory only.", error)
        self.persistence_degraded = True
        if self._pending_error is None:
            self._pending_error = error

    def take_persistence_error(self) -> Optional[PersistenceError]:
        """Return the storage failure once, then None."""
        error, self._pending_error = self._pending_error, None
        return error

    # ---------------------------
    # Lookups
    # ---------------------------
    def _find(self, session_id: str) -> Optional[Session]:
        return next((s for s in self._sessions if s.id == session_id), None)

    def _require(self, session_id: str) -> Session:
        session = self._find(session_id)
        if session is None:
            raise NotFoundError(session_id)
        return session

    def _require_in_progress(self, session_id: str, action: str) -> Session:
        session = self._require(session_id)
        if session.is_completed:
            raise InvalidStateError(
                f"Interview {session_id!r} is already completed; cannot {action}."
            )
        return session

    def _new_id(self) -> str:
        base = f"interview_{int(self.clock().timestamp() * 1000)}"
        candidate, n = base, 1
        while self._find(candidate) is not None:
            candidate = f"{base}_{n}"
            n += 1
        return candidate

    # ---------------------------
    # Operations
    # ---------------------------
    def create(self, category: Union[Category, str], role_title: str) -> Session:
        """Start a new in-progress session and put it at the front."""
        category = question_bank.to_category(category)
        role_title = self.security.validate_role_title(role_title)

        questions = question_bank.sample(
            category, self.questions_per_session, rng=self.rng
        )
        session = Session(
            id=self._new_id(),
            category=category,
            role_title=role_title,
            questions=tuple(questions),
            answers=[""] * len(questions),
            started_at=self.clock(),
        )
        self._sessions.insert(0, session)
        self._save()

        log_event(
            "engine",
            "session_created",
            session.id,
            category=category.value,
            questions=len(questions),
        )
        return copy.deepcopy(session)

    def record_answer(self, session_id: str, question_index: int, text: str) -> Session:
        """Overwrite one answer. The text is stored as given."""
        session = self._require_in_progress(session_id, "record answers")
        if (
            isinstance(question_index, bool)
            or not isinstance(question_index, int)
            or not 0 <= question_index < len(session.questions)
        ):
            raise IndexOutOfRange(question_index, len(session.questions))
        text = self.security.validate_answer(text)

        session.answers[question_index] = text
        self._save()

        log_event(
            "engine", "answer_recorded", session_id, index=question_index, answer=text
        )
        return copy.deepcopy(session)

    def complete(self, session_id: str) -> Session:
        """Synthesize feedback and score, then close the session for good."""
        session = self._require_in_progress(session_id, "complete it again")

        feedback, score = self.synthesizer.synthesize(copy.deepcopy(session))
        if len(feedback.detailed_feedback) != len(session.questions):
            raise EvaluationError(
                f"Feedback backend returned {len(feedback.detailed_feedback)} notes "
                f"for {len(session.questions)} questions."
            )

        session.feedback = feedback
        session.score = clamp_score(score)
        session.ended_at = self.clock()
        session.status = SessionStatus.COMPLETED
        self._save()

        log_event("engine", "session_completed", session_id, score=session.score)
        return copy.deepcopy(session)

    def get(self, session_id: str) -> Optional[Session]:
        session = self._find(session_id)
        return copy.deepcopy(session) if session is not None else None

    def delete(self, session_id: str) -> bool:
        """Remove regardless of status. Missing ids are not an error."""
        session = self._find(session_id)
        if session is None:
            return False
        self._sessions.remove(session)
        self._save()
        log_event("engine", "session_deleted", session_id)
        return True

    def list(self) -> list[Session]:
        return copy.deepcopy(self._sessions)

    def first_unanswered_index(self, session_id: str) -> int:
        """Where the UI should resume an in-progress session."""
        return progress.first_unanswered(self._require(session_id).answers)

    def stats(self, recent_limit: int = progress.RECENT_LIMIT) -> ProgressStats:
        return progress.compute_stats(self.list(), recent_limit=recent_limit)
