"""
Logging configuration and structured engine events.

Answer text never reaches the logs, only its length.
"""

import json
import logging
import sys
from typing import Any

_event_logger = logging.getLogger("interview_core.events")

_REDACTED_KEYS = {"text", "answer", "answers"}


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(console_handler)

    # Streamlit's file watcher is chatty at INFO
    logging.getLogger("watchdog").setLevel(logging.WARNING)


def _sanitize_value(key: str, value: Any) -> Any:
    if key.lower() in _REDACTED_KEYS:
        if isinstance(value, (list, tuple)):
            return [_sanitize_value(key, v) for v in value]
        return {"redacted": True, "length": len(str(value or ""))}
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, dict):
        return {str(k): _sanitize_value(str(k), v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_sanitize_value(key, item) for item in value]
    return str(value)


def log_event(component: str, event: str, session_id: str, **kwargs) -> None:
    payload = {
        "component": str(component or "engine"),
        "event": str(event or "unknown"),
        "session_id": str(session_id or ""),
    }
    payload.update({str(k): _sanitize_value(str(k), v) for k, v in kwargs.items()})
    _event_logger.info(json.dumps(payload, ensure_ascii=False, default=str))
