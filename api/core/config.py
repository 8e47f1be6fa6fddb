"""
Environment-driven settings.

Values are read at call time so tests (and operators) can flip them without
re-importing anything.
"""

from __future__ import annotations

import os

DEFAULT_PAGE_LIMIT = 10
DEFAULT_MAX_PAGE_LIMIT = 100
DEFAULT_SEARCH_MIN_LENGTH = 2


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def destructive_endpoints_enabled() -> bool:
    return os.environ.get("ENABLE_DESTRUCTIVE_ENDPOINTS", "").strip().lower() == "true"


def search_min_length() -> int:
    return max(1, env_int("SEARCH_MIN_LENGTH", DEFAULT_SEARCH_MIN_LENGTH))


def max_page_limit() -> int:
    return max(1, env_int("MAX_PAGE_LIMIT", DEFAULT_MAX_PAGE_LIMIT))


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "*")
    origins = [item.strip() for item in raw.split(",") if item.strip()]
    return origins or ["*"]


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
