"""Charmap - the finished, statically embeddable lookup tables."""

from bisect import bisect_left
from dataclasses import dataclass

from ucm_charmap.core.constants import (
    KEY_BYTE_SHIFT,
    KEY_CHAR_MASK,
    MAX_ENCODED_LENGTH,
    TABLE_SIZE,
)


@dataclass(frozen=True)
class DecodeEntry:
    """UTF-8 form of one decoded byte: length plus 3 zero-padded bytes."""
    length: int
    data: bytes

    def __post_init__(self) -> None:
        if not 1 <= self.length <= MAX_ENCODED_LENGTH or len(self.data) != MAX_ENCODED_LENGTH:
            raise ValueError(f"invalid decode entry: {self.length}, {self.data!r}")

    @classmethod
    def from_char(cls, char: str) -> "DecodeEntry":
        """Entry for one character; raises ValueError past 3 UTF-8 bytes."""
        from ucm_charmap.codec.utf8 import encode_char
        encoded = encode_char(char)
        return cls(length=len(encoded), data=encoded.ljust(MAX_ENCODED_LENGTH, b"\x00"))

    @property
    def char(self) -> str:
        """The character this entry decodes to."""
        return self.data[:self.length].decode("utf-8")


@dataclass(frozen=True, order=True)
class EncodeEntry:
    """A character and the byte that encodes it."""
    char: str
    byte: int

    @property
    def key(self) -> int:
        """Packed 32-bit form: byte in the top 8 bits, code point below."""
        return self.byte << KEY_BYTE_SHIFT | ord(self.char)


@dataclass(frozen=True)
class Charmap:
    """
    Bidirectional table for one single-byte encoding.

    ``decode`` is indexed by byte value. ``encode`` holds 256 packed keys
    sorted by code point, padded by repeating the last real key; ``entries``
    is the same table without the padding.

    When ``ascii_superset`` is set, bytes below ``low`` (0x80) are identity
    mapped and decoders may skip the table for them.
    """
    name: str
    replacement: int
    low: int
    ascii_superset: bool
    decode: tuple[DecodeEntry, ...]
    encode: tuple[int, ...]
    entries: tuple[EncodeEntry, ...]

    def decode_byte(self, byte: int) -> str:
        """Character for a single byte value."""
        return self.decode[byte].char

    def encode_char(self, char: str) -> int | None:
        """Byte for a character by binary search, or None if unmapped."""
        target = ord(char)
        i = bisect_left(self.encode, target, key=lambda k: k & KEY_CHAR_MASK)
        if i < len(self.encode) and self.encode[i] & KEY_CHAR_MASK == target:
            return self.encode[i] >> KEY_BYTE_SHIFT
        return None

    def encode_char_or_replacement(self, char: str) -> int:
        """Byte for a character, falling back to the replacement byte."""
        byte = self.encode_char(char)
        return self.replacement if byte is None else byte

    @property
    def encoded_count(self) -> int:
        """Number of distinct characters that can be encoded."""
        return len(self.entries)

    @property
    def table_size(self) -> int:
        """Estimated static size: two 256-element 4-byte arrays plus 3 words."""
        return 2 * 4 * TABLE_SIZE + 3 * 8
