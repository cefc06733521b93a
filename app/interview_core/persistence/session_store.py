"""
Purpose: Session collection storage behind a single string key.
Why: Reopen sessions after a restart, dashboard history.

What is inside:
InMemoryKeyValueStore with get/set/delete (tests, throwaway UI sessions).
JsonFileKeyValueStore: one <key>.json file per key in a directory.
encode_sessions / decode_sessions: the stored JSON shape
(id, category, jobTitle, questions, answers, feedback, score,
startTime, endTime, status).

Testing:
In-memory: simple state tests.
File: tmp_path fixture; round-trip across two store instances.
"""

from __future__ import annotations
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from ..models import Category, Feedback, Session, SessionStatus
from ..utils.json_io import dumps, isoformat_z, parse_timestamp, require_array

_SAFE_KEY = re.compile(r"[^A-Za-z0-9_.-]")


class InMemoryKeyValueStore:
    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileKeyValueStore:
    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{_SAFE_KEY.sub('_', key)}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=path.stem, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            os.replace(tmp, path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


def _feedback_to_dict(fb: Optional[Feedback]) -> Optional[dict]:
    if fb is None:
        return None
    return {
        "generalFeedback": fb.general_feedback,
        "strengths": list(fb.strengths),
        "improvements": list(fb.improvements),
        "detailedFeedback": list(fb.detailed_feedback),
    }


def _feedback_from_dict(data: Any) -> Optional[Feedback]:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError("feedback must be an object or null.")
    return Feedback(
        general_feedback=_require_str(data.get("generalFeedback"), "generalFeedback"),
        strengths=_require_str_list(data.get("strengths"), "strengths"),
        improvements=_require_str_list(data.get("improvements"), "improvements"),
        detailed_feedback=_require_str_list(
            data.get("detailedFeedback"), "detailedFeedback"
        ),
    )


def _require_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string.")
    return value


def _require_str_list(value: Any, name: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{name} must be a list of strings.")
    return list(value)


def session_to_dict(session: Session) -> dict:
    return {
        "id": session.id,
        "category": session.category.value,
        "jobTitle": session.role_title,
        "questions": list(session.questions),
        "answers": list(session.answers),
        "feedback": _feedback_to_dict(session.feedback),
        "score": session.score,
        "startTime": isoformat_z(session.started_at),
        "endTime": isoformat_z(session.ended_at) if session.ended_at else None,
        "status": session.status.value,
    }


def session_from_dict(data: Any) -> Session:
    """Decode one stored record; raises ValueError on any shape problem."""
    if not isinstance(data, dict):
        raise ValueError("session record must be an object.")
    score = data.get("score")
    if score is not None and (isinstance(score, bool) or not isinstance(score, int)):
        raise ValueError("score must be an integer or null.")
    end_time = data.get("endTime")
    session = Session(
        id=_require_str(data.get("id"), "id"),
        category=Category(data.get("category")),
        role_title=_require_str(data.get("jobTitle"), "jobTitle"),
        questions=tuple(_require_str_list(data.get("questions"), "questions")),
        answers=_require_str_list(data.get("answers"), "answers"),
        started_at=parse_timestamp(data.get("startTime")),
        feedback=_feedback_from_dict(data.get("feedback")),
        score=score,
        ended_at=parse_timestamp(end_time) if end_time is not None else None,
        status=SessionStatus(data.get("status")),
    )
    session.check_invariants()
    return session


def encode_sessions(sessions: Iterable[Session]) -> str:
    return dumps([session_to_dict(s) for s in sessions])


def decode_sessions(text: str) -> list[Session]:
    """Strict: any malformed record makes the whole document invalid."""
    records = require_array(text, err="Stored interviews are not a JSON array.")
    return [session_from_dict(r) for r in records]
