"""Utilities for reading and writing the stored JSON documents."""

from __future__ import annotations
import json
from datetime import datetime, timezone
from typing import Any


def dumps(data: Any) -> str:
    """Compact, stable encoding for the key-value store."""
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def require_array(text: str, err: str = "Expected a JSON array.") -> list:
    """Strict: must parse and be an array, else raise ValueError."""
    try:
        data = json.loads(text)
    except (TypeError, RecursionError, json.JSONDecodeError) as exc:
        raise ValueError(f"{err} ({exc})") from exc
    if not isinstance(data, list):
        raise ValueError(err)
    return data


def isoformat_z(ts: datetime) -> str:
    """UTC timestamp with millisecond precision and a trailing Z."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    ts = ts.astimezone(timezone.utc)
    return ts.strftime("%Y-%m-%dT%H:%M:%S.") + f"{ts.microsecond // 1000:03d}Z"


def parse_timestamp(value: str) -> datetime:
    """Accept ...Z or an explicit offset; naive values are read as UTC."""
    if not isinstance(value, str):
        raise ValueError(f"Expected an ISO timestamp, got {value!r}.")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    ts = datetime.fromisoformat(text)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts
