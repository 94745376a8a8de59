"""Hex text representation of raw MIDI messages."""

import re
from collections.abc import Iterable

from remote25sl.exceptions import HexParseError

_SEPARATORS = re.compile(r"[\s,]+")
_HEX_BYTE = re.compile(r"[0-9a-fA-F]{1,2}")


def format_bytes(raw: Iterable) -> str:
    """Render a raw message as hex bytes.

    Values that are not bytes are shown with repr() so malformed input
    stays visible in logs.

    Examples:
        >>> format_bytes([0xB0, 0x0A, 0x40])
        'B0 0A 40'
        >>> format_bytes([0x90, 300])
        '90 300'
    """
    parts = []
    for byte in raw:
        if isinstance(byte, int) and 0 <= byte <= 0xFF:
            parts.append(f"{byte:02X}")
        else:
            parts.append(repr(byte))
    return " ".join(parts)


def parse_hex_message(text: str) -> list[int]:
    """Parse hex text into MIDI bytes.

    Accepts bytes separated by whitespace or commas, each with an optional
    ``0x`` prefix, or one unbroken run of hex digit pairs.

    Args:
        text: Text such as 'B0 0A 40', '0xB0,0x0A,0x40' or 'b00a40'

    Returns:
        List of byte values (0-255)

    Raises:
        HexParseError: If the text is empty or not hex
    """
    stripped = text.strip()
    if not stripped:
        raise HexParseError(text, "no bytes given")

    tokens = [t for t in _SEPARATORS.split(stripped) if t]
    tokens = [t[2:] if t.lower().startswith("0x") else t for t in tokens]

    # A single unbroken run like 'b00a40'
    if len(tokens) == 1 and len(tokens[0]) > 2:
        run = tokens[0]
        if len(run) % 2:
            raise HexParseError(text, "odd number of hex digits")
        tokens = [run[i:i + 2] for i in range(0, len(run), 2)]

    result = []
    for token in tokens:
        if not _HEX_BYTE.fullmatch(token):
            raise HexParseError(text, f"'{token}' is not a hex byte")
        result.append(int(token, 16))
    return result
