"""Application configuration. Load from environment."""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_FORM_LENGTH = 5


def get_database_url() -> str:
    """Return DATABASE_URL from environment. Raises if missing."""
    url = os.environ.get("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL environment variable is required")
    return url


def get_form_length() -> int:
    """Number of recent matches in the W/D/L form sequence (FORM_LENGTH, default 5)."""
    raw = os.environ.get("FORM_LENGTH")
    if not raw:
        return DEFAULT_FORM_LENGTH
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"FORM_LENGTH must be an integer, got {raw!r}")
    if value < 0:
        raise RuntimeError(f"FORM_LENGTH must be >= 0, got {value}")
    return value


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()
