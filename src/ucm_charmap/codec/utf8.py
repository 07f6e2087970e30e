"""UTF-8 helpers for building decode entries."""

from ucm_charmap.core.constants import SENTINEL


def is_scalar_value(codepoint: int) -> bool:
    """True for code points that UTF-8 can represent (no surrogates)."""
    return 0 <= codepoint <= 0x10FFFF and not 0xD800 <= codepoint <= 0xDFFF


def encode_char(char: str) -> bytes:
    """
    UTF-8 encode a single character.

    Surrogates have no UTF-8 form and are written as the sentinel,
    the same substitution a UTF-8 encoder makes for invalid runes.
    """
    if not is_scalar_value(ord(char)):
        char = SENTINEL
    return char.encode("utf-8")


def encoded_length(char: str) -> int:
    """Number of UTF-8 bytes needed for ``char`` (1 to 4)."""
    return len(encode_char(char))
