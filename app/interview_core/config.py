"""
Settings read from the environment, with a project-level .env as a base.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_PATH = _PROJECT_ROOT / ".env"

DEFAULT_STORE_DIR = ".interview_data"
DEFAULT_STORE_KEY = "interviews"
DEFAULT_QUESTIONS_PER_SESSION = 5
DEFAULT_SECONDS_PER_QUESTION = 180  # 3 minutes


@dataclass(frozen=True)
class Settings:
    store_dir: Path
    store_key: str = DEFAULT_STORE_KEY
    questions_per_session: int = DEFAULT_QUESTIONS_PER_SESSION
    seconds_per_question: int = DEFAULT_SECONDS_PER_QUESTION
    log_level: str = "INFO"


def _int_env(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; using %d", name, raw, default)
        return default
    if value < minimum:
        logger.warning("%s=%d is below %d; using %d", name, value, minimum, default)
        return default
    return value


def load_settings(env_file: Path | None = _ENV_PATH) -> Settings:
    """Build Settings from os.environ. Values already set win over the .env file."""
    if env_file is not None:
        load_dotenv(dotenv_path=env_file, override=False)

    return Settings(
        store_dir=Path(os.getenv("INTERVIEW_STORE_DIR") or DEFAULT_STORE_DIR),
        store_key=(os.getenv("INTERVIEW_STORE_KEY") or "").strip() or DEFAULT_STORE_KEY,
        questions_per_session=_int_env(
            "INTERVIEW_QUESTIONS_PER_SESSION", DEFAULT_QUESTIONS_PER_SESSION
        ),
        seconds_per_question=_int_env(
            "INTERVIEW_SECONDS_PER_QUESTION", DEFAULT_SECONDS_PER_QUESTION
        ),
        log_level=str(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    )
