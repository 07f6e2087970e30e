"""Settings read from the environment."""

import os
from pathlib import Path

BASE_DIR_ENV = "UCM_CHARMAP_BASE_DIR"
TIMEOUT_ENV = "UCM_CHARMAP_TIMEOUT"

DEFAULT_TIMEOUT = 30.0


def get_base_dir() -> Path:
    """Directory that relative ``file:`` locators resolve against."""
    if env_path := os.environ.get(BASE_DIR_ENV):
        return Path(env_path).expanduser()
    return Path.cwd()


def get_timeout() -> float:
    """Network timeout in seconds for URL mapping sources."""
    value = os.environ.get(TIMEOUT_ENV)
    if not value:
        return DEFAULT_TIMEOUT
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{TIMEOUT_ENV} must be a number, got {value!r}") from None
