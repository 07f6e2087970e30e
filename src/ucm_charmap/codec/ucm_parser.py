"""Parser for UCM-style codepage mapping files.

Only the ``<Uxxxx> \\xNN |0`` lines matter here: every exact (non-fallback)
entry maps one byte value to one Unicode code point. Everything else in the
file (headers, ``CHARMAP`` markers, fallback entries) is ignored.

Example input:
    # comment
    <code_set_name> "ibm-1047"
    CHARMAP
    <U0041> \\xC1 |0
    <U00A0> \\x41 |0
    <U0085> \\x15 |1
    END CHARMAP
"""

import codecs
import logging
import re

from ucm_charmap.codec.utf8 import is_scalar_value
from ucm_charmap.core.constants import MIN_EXPLICIT_MAPPINGS, SENTINEL, TABLE_SIZE
from ucm_charmap.core.errors import SourceFormatError
from ucm_charmap.core.mapping import RawMapping

logger = logging.getLogger(__name__)


class UcmParser:
    """
    Line-oriented parser that accumulates byte to character mappings.

    Later lines for the same byte overwrite earlier ones.
    """

    # <U hex> whitespace \x hex whitespace |0, anything may follow
    ENTRY_PATTERN = re.compile(r'<U([0-9A-Fa-f]+)>\s*\\x([0-9A-Fa-f]+)\s*\|0')

    def __init__(self, locator: str | None = None):
        self.locator = locator
        self._mapping = [SENTINEL] * TABLE_SIZE
        self._defined: set[int] = set()
        self._pending = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self.lines_read = 0
        self.lines_matched = 0

    def feed(self, data: bytes | str) -> None:
        """Process a chunk of mapping text; partial lines are buffered."""
        if isinstance(data, bytes):
            data = self._decoder.decode(data)
        text = self._pending + data
        lines = text.split("\n")
        self._pending = lines.pop()
        for line in lines:
            self.feed_line(line)

    def feed_line(self, line: str) -> None:
        """Process one line of mapping text."""
        self.lines_read += 1
        s = line.strip()
        if not s or s.startswith("#"):
            return

        match = self.ENTRY_PATTERN.match(s)
        if not match:
            return

        codepoint = int(match.group(1), 16)
        byte = int(match.group(2), 16)
        if byte >= TABLE_SIZE:
            logger.debug("skipping line %d: byte 0x%X out of range", self.lines_read, byte)
            return
        if not is_scalar_value(codepoint):
            logger.debug("skipping line %d: U+%04X is not a scalar value", self.lines_read, codepoint)
            return

        if byte in self._defined and self._mapping[byte] != chr(codepoint):
            logger.debug(
                "line %d redefines byte 0x%02X: U+%04X replaces U+%04X",
                self.lines_read, byte, codepoint, ord(self._mapping[byte]),
            )
        self._mapping[byte] = chr(codepoint)
        self._defined.add(byte)
        self.lines_matched += 1

    def result(self) -> RawMapping:
        """
        Finish parsing and return the mapping.

        Raises:
            SourceFormatError: fewer than 128 byte values were defined.
        """
        self._pending += self._decoder.decode(b"", final=True)
        if self._pending:
            self.feed_line(self._pending)
            self._pending = ""

        found = len(self._defined)
        if found < MIN_EXPLICIT_MAPPINGS:
            raise SourceFormatError(self.locator, found)

        logger.debug(
            "%s: %d of %d lines matched, %d bytes defined",
            self.locator or "<input>", self.lines_matched, self.lines_read, found,
        )
        return RawMapping(chars=tuple(self._mapping), explicit=found)


def parse_ucm(data: bytes | str, locator: str | None = None) -> RawMapping:
    """Parse complete mapping text into a RawMapping."""
    parser = UcmParser(locator)
    parser.feed(data)
    return parser.result()
