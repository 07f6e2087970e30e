"""Shared constants for building single-byte charmaps."""

# Number of byte values in a single-byte codepage
TABLE_SIZE = 256

# Placeholder for bytes the mapping source leaves undefined
SENTINEL = "\ufffd"

# Canonical 7-bit ASCII sequence (0x00-0x7F, identity mapped)
ASCII: str = (
    # 0x00-0x1F: Control characters
    "\x00\x01\x02\x03\x04\x05\x06\x07\x08\x09\x0a\x0b\x0c\x0d\x0e\x0f"
    "\x10\x11\x12\x13\x14\x15\x16\x17\x18\x19\x1a\x1b\x1c\x1d\x1e\x1f"
    # 0x20-0x7E: Printable
    ' !"#$%&\'()*+,-./0123456789:;<=>?'
    "@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_"
    "`abcdefghijklmnopqrstuvwxyz{|}~"
    # 0x7F: DEL
    "\x7f"
)

# Minimum distinct bytes a mapping source must define to be trusted
MIN_EXPLICIT_MAPPINGS = 128

# Decode entries hold at most this many UTF-8 bytes (BMP only)
MAX_ENCODED_LENGTH = 3

# Encode keys: byte in the top 8 bits, code point in the low 24
KEY_BYTE_SHIFT = 24
KEY_CHAR_MASK = 0xFFFFFF

# '?' is the customary substitute for unmappable characters
DEFAULT_REPLACEMENT = 0x3F

# Low offsets reported to decoders
LOW_ASCII_SUPERSET = 0x80
LOW_FULL_TABLE = 0x00
