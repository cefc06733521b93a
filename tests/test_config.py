import json
import logging
import os
from pathlib import Path

import pytest

from interview_core.config import load_settings
from interview_core.logging_config import log_event
from interview_core.services.security import DefaultSecurity
from interview_core.errors import ValidationError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "INTERVIEW_STORE_DIR",
        "INTERVIEW_STORE_KEY",
        "INTERVIEW_QUESTIONS_PER_SESSION",
        "INTERVIEW_SECONDS_PER_QUESTION",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings(env_file=None)
    assert settings.store_dir == Path(".interview_data")
    assert settings.store_key == "interviews"
    assert settings.questions_per_session == 5
    assert settings.seconds_per_question == 180
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("INTERVIEW_STORE_DIR", str(tmp_path))
    monkeypatch.setenv("INTERVIEW_QUESTIONS_PER_SESSION", "3")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings(env_file=None)
    assert settings.store_dir == tmp_path
    assert settings.questions_per_session == 3
    assert settings.log_level == "DEBUG"


def test_env_file_is_read(monkeypatch, tmp_path):
    env = tmp_path / ".env"
    env.write_text("INTERVIEW_STORE_KEY=practice\n", encoding="utf-8")
    try:
        assert load_settings(env_file=env).store_key == "practice"
    finally:
        os.environ.pop("INTERVIEW_STORE_KEY", None)


def test_blank_store_key_uses_default(monkeypatch):
    monkeypatch.setenv("INTERVIEW_STORE_KEY", "   ")
    assert load_settings(env_file=None).store_key == "interviews"


@pytest.mark.parametrize("raw", ["five", "0", "-2"])
def test_bad_integers_fall_back(monkeypatch, raw):
    monkeypatch.setenv("INTERVIEW_QUESTIONS_PER_SESSION", raw)
    assert load_settings(env_file=None).questions_per_session == 5


def test_log_event_redacts_answer_text(caplog):
    with caplog.at_level(logging.INFO, logger="interview_core.events"):
        log_event("engine", "answer_recorded", "interview_1", index=0, answer="secret plan")

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["event"] == "answer_recorded"
    assert payload["answer"] == {"redacted": True, "length": 11}
    assert "secret plan" not in caplog.text


def test_security_guard():
    guard = DefaultSecurity()
    assert guard.validate_role_title("  Data\x00 Engineer ") == "Data Engineer"
    with pytest.raises(ValidationError):
        guard.validate_role_title("   ")
    with pytest.raises(ValidationError):
        guard.validate_answer(None)
    assert guard.validate_answer("x" * 9000) == "x" * 9000
    assert guard.validate_answer("  as typed  ") == "  as typed  "
