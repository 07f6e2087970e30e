"""Core data structures for charmap construction."""

from ucm_charmap.core.charmap import Charmap, DecodeEntry, EncodeEntry
from ucm_charmap.core.errors import (
    CharmapError,
    EncodingRangeError,
    FetchError,
    SourceFormatError,
)
from ucm_charmap.core.mapping import RawMapping

__all__ = [
    "Charmap",
    "DecodeEntry",
    "EncodeEntry",
    "RawMapping",
    "CharmapError",
    "SourceFormatError",
    "EncodingRangeError",
    "FetchError",
]
