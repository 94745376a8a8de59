"""Generic utility modules for remote25sl.

- hexbytes: reading and writing MIDI messages as hex text
"""

from .hexbytes import format_bytes, parse_hex_message

__all__ = ["format_bytes", "parse_hex_message"]
