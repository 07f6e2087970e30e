"""Encoding definitions and environment settings."""

from ucm_charmap.config.definitions import (
    DEFAULT_ENCODINGS,
    EncodingDefinition,
    load_definitions,
)
from ucm_charmap.config.settings import get_base_dir, get_timeout

__all__ = [
    "DEFAULT_ENCODINGS",
    "EncodingDefinition",
    "load_definitions",
    "get_base_dir",
    "get_timeout",
]
