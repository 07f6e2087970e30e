"""Errors raised while building charmaps.

Every error here is terminal for the build: there is no retry and no
partial output.
"""


class CharmapError(Exception):
    """Base class for all charmap build failures."""


class SourceFormatError(CharmapError):
    """The mapping source did not look like a usable single-byte mapping."""

    def __init__(self, locator: str | None, found: int, message: str | None = None):
        self.locator = locator
        self.found = found
        if message is None:
            message = f"only {found} characters found (wrong page format?)"
        super().__init__(f"{locator or '<input>'}: {message}")


class EncodingRangeError(CharmapError):
    """A mapped character does not fit in a 3-byte UTF-8 decode entry."""

    def __init__(self, name: str, byte: int, char: str):
        self.name = name
        self.byte = byte
        self.char = char
        super().__init__(
            f"{name}: byte 0x{byte:02X} maps to {char!r} (U+{ord(char):04X}), "
            "which is too long for a decode entry"
        )


class FetchError(CharmapError):
    """The mapping source could not be retrieved."""

    def __init__(self, locator: str, reason: str):
        self.locator = locator
        self.reason = reason
        super().__init__(f"{locator!r}: fetch failed: {reason}")
