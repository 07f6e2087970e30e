"""Mapping file parsing and UTF-8 helpers."""

from ucm_charmap.codec.ucm_parser import UcmParser, parse_ucm
from ucm_charmap.codec.utf8 import encode_char, encoded_length

__all__ = ["UcmParser", "parse_ucm", "encode_char", "encoded_length"]
