"""Build Charmap tables from a RawMapping."""

import logging
from typing import Sequence

from ucm_charmap.codec.utf8 import encoded_length
from ucm_charmap.core.charmap import Charmap, DecodeEntry, EncodeEntry
from ucm_charmap.core.constants import (
    ASCII,
    DEFAULT_REPLACEMENT,
    LOW_ASCII_SUPERSET,
    LOW_FULL_TABLE,
    MAX_ENCODED_LENGTH,
    SENTINEL,
    TABLE_SIZE,
)
from ucm_charmap.core.errors import EncodingRangeError, SourceFormatError
from ucm_charmap.core.mapping import RawMapping

logger = logging.getLogger(__name__)


class TableBuilder:
    """
    Turns a RawMapping into decode and encode tables.

    Example:
        >>> charmap = TableBuilder("EBCDIC-K", replacement=0x3F).build(mapping)
        >>> charmap.decode_byte(0xC1)
        'A'
    """

    def __init__(self, name: str, replacement: int = DEFAULT_REPLACEMENT):
        if not 0 <= replacement < TABLE_SIZE:
            raise ValueError(f"replacement byte out of range: {replacement!r}")
        self.name = name
        self.replacement = replacement

    def build(self, mapping: RawMapping | Sequence[str]) -> Charmap:
        """Build the charmap; nothing is returned if any step fails."""
        if not isinstance(mapping, RawMapping):
            mapping = RawMapping.from_sequence(mapping)

        ascii_superset = self.is_ascii_superset(mapping)
        low = LOW_ASCII_SUPERSET if ascii_superset else LOW_FULL_TABLE
        decode = self.build_decode(mapping)
        entries = self.build_entries(mapping)
        encode = self.pack_encode(entries)

        logger.info(
            "%s: asciiSuperset=%s low=0x%02x, %d encodable characters",
            self.name, ascii_superset, low, len(entries),
        )
        return Charmap(
            name=self.name,
            replacement=self.replacement,
            low=low,
            ascii_superset=ascii_superset,
            decode=decode,
            encode=encode,
            entries=entries,
        )

    @staticmethod
    def is_ascii_superset(mapping: RawMapping) -> bool:
        """True if bytes 0x00-0x7F map to themselves."""
        return mapping.as_text().startswith(ASCII)

    def build_decode(self, mapping: RawMapping) -> tuple[DecodeEntry, ...]:
        """One UTF-8 entry per byte value."""
        decode: list[DecodeEntry] = []
        for byte, char in enumerate(mapping):
            if encoded_length(char) > MAX_ENCODED_LENGTH:
                raise EncodingRangeError(self.name, byte, char)
            decode.append(DecodeEntry.from_char(char))
        return tuple(decode)

    def build_entries(self, mapping: RawMapping) -> tuple[EncodeEntry, ...]:
        """
        Reverse mapping sorted by character.

        When several bytes map to the same character the lowest byte wins.
        Sentinel entries are not encodable.
        """
        back_mapping: dict[str, int] = {}
        for byte, char in enumerate(mapping):
            if char != SENTINEL and char not in back_mapping:
                back_mapping[char] = byte

        if not back_mapping:
            raise SourceFormatError(self.name, 0, "no encodable characters in mapping")

        entries = [EncodeEntry(char=c, byte=b) for c, b in back_mapping.items()]
        entries.sort(key=lambda e: ord(e.char))
        return tuple(entries)

    @staticmethod
    def pack_encode(entries: Sequence[EncodeEntry]) -> tuple[int, ...]:
        """Pack entries (sorted by character) and pad to 256 with the last key."""
        encode = [e.key for e in entries]
        while len(encode) < TABLE_SIZE:
            encode.append(encode[-1])
        return tuple(encode)


def build_charmap(
    mapping: RawMapping | Sequence[str],
    name: str,
    replacement: int = DEFAULT_REPLACEMENT,
) -> Charmap:
    """Build a Charmap from 256 characters indexed by byte value."""
    return TableBuilder(name, replacement).build(mapping)
