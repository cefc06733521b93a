import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest


APP_DIR = Path(__file__).resolve().parents[1] / "app"
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))

from interview_core.controller import InterviewSessionEngine  # noqa: E402
from interview_core.persistence.session_store import InMemoryKeyValueStore  # noqa: E402


class ScriptedRandom:
    """Deterministic stand-in for random.Random.

    choice() walks `choices` (indexes into the given sequence), randint()
    returns the queued scores, shuffle() leaves the order untouched.
    """

    def __init__(self, choices=(), scores=()):
        self.choices = list(choices)
        self.scores = list(scores)

    def choice(self, seq):
        idx = self.choices.pop(0) if self.choices else 0
        return seq[idx]

    def randint(self, a, b):
        return self.scores.pop(0) if self.scores else a

    def shuffle(self, x):
        return None


class FailingStore(InMemoryKeyValueStore):
    def __init__(self, initial=None, fail_get=False, fail_set=True):
        super().__init__(initial)
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.set_calls = 0

    def get(self, key):
        if self.fail_get:
            raise OSError("disk unavailable")
        return super().get(key)

    def set(self, key, value):
        self.set_calls += 1
        if self.fail_set:
            raise OSError("disk full")
        super().set(key, value)


class StepClock:
    """Each call advances by one second from a fixed UTC start."""

    def __init__(self, start=datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def engine(store, clock):
    return InterviewSessionEngine(store, rng=ScriptedRandom(), clock=clock)
