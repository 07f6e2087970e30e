"""RawMapping - the byte to character array produced by the parser."""

from dataclasses import dataclass
from typing import Iterator, Sequence

from ucm_charmap.core.constants import SENTINEL, TABLE_SIZE


@dataclass(frozen=True)
class RawMapping:
    """
    One character per byte value, indexed 0x00-0xFF.

    Bytes the source never defined hold SENTINEL. ``explicit`` counts the
    distinct byte values that received a mapping; when omitted it is the
    number of non-sentinel entries.
    """
    chars: tuple[str, ...]
    explicit: int | None = None

    def __post_init__(self) -> None:
        if len(self.chars) != TABLE_SIZE:
            raise ValueError(
                f"mapping must have {TABLE_SIZE} entries, got {len(self.chars)}"
            )
        for i, char in enumerate(self.chars):
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"entry 0x{i:02X} is not a single character: {char!r}")
        if self.explicit is None:
            object.__setattr__(self, "explicit", sum(1 for c in self.chars if c != SENTINEL))

    @classmethod
    def from_sequence(cls, chars: Sequence[str] | str) -> "RawMapping":
        """Wrap any 256-element sequence; non-sentinel entries count as explicit."""
        return cls(chars=tuple(chars))

    @classmethod
    def from_dict(cls, mapping: dict[int, str]) -> "RawMapping":
        """Build from a sparse ``{byte: char}`` dict, defaulting the rest."""
        chars = [SENTINEL] * TABLE_SIZE
        for byte, char in mapping.items():
            chars[byte] = char
        return cls(chars=tuple(chars), explicit=len(mapping))

    def __len__(self) -> int:
        return len(self.chars)

    def __getitem__(self, byte: int) -> str:
        return self.chars[byte]

    def __iter__(self) -> Iterator[str]:
        return iter(self.chars)

    def entries(self) -> Iterator[tuple[int, str]]:
        """Yield ``(byte, char)`` pairs for bytes that have a real mapping."""
        for byte, char in enumerate(self.chars):
            if char != SENTINEL:
                yield byte, char

    def as_text(self) -> str:
        """All 256 characters as one string."""
        return "".join(self.chars)
