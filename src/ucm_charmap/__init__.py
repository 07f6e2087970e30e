"""
ucm-charmap: static charmap tables for single-byte encodings

Build decode and encode tables for an 8-bit codepage from a UCM mapping file.

Quick Start:
    >>> import ucm_charmap as ucm
    >>> mapping = ucm.load_mapping("file:ebcdic-k.ucm")
    >>> charmap = ucm.build_charmap(mapping, "EBCDIC-K", replacement=0x3F)
    >>> charmap.decode_byte(0xC1)
    'A'

Features:
    - Tolerant parsing of <Uxxxx> \\xNN |0 mapping lines
    - 256-entry decode table (UTF-8 length plus 3 bytes per byte value)
    - Sorted encode table of packed keys for binary search
    - ASCII-superset detection for fast decoding of 0x00-0x7F
    - Mapping files from disk, file: locators or HTTP(S)
    - Output as Go source, Python source, or JSON
"""

__version__ = "0.1.0"

# Core types
from ucm_charmap.core.charmap import Charmap, DecodeEntry, EncodeEntry
from ucm_charmap.core.mapping import RawMapping
from ucm_charmap.core.errors import (
    CharmapError,
    EncodingRangeError,
    FetchError,
    SourceFormatError,
)

# Parsing and building
from ucm_charmap.codec.ucm_parser import parse_ucm
from ucm_charmap.table.builder import build_charmap

# I/O
from ucm_charmap.io.reader import fetch_mapping, load_mapping
from ucm_charmap.io.writer import save

# Configuration and pipeline
from ucm_charmap.config.definitions import EncodingDefinition
from ucm_charmap.generate import GeneratedCharmap, generate

__all__ = [
    # Version
    "__version__",
    # Core types
    "Charmap",
    "DecodeEntry",
    "EncodeEntry",
    "RawMapping",
    # Errors
    "CharmapError",
    "SourceFormatError",
    "EncodingRangeError",
    "FetchError",
    # Parsing and building
    "parse_ucm",
    "build_charmap",
    # I/O
    "fetch_mapping",
    "load_mapping",
    "save",
    # Pipeline
    "EncodingDefinition",
    "GeneratedCharmap",
    "generate",
]
