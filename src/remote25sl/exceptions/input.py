"""Input-related exceptions.

- InputError: Base class for text input that cannot be turned into MIDI bytes
- HexParseError: Text is not a sequence of hex bytes
"""

from .base import Remote25SLError


class InputError(Remote25SLError):
    """User supplied input cannot be used."""
    pass


class HexParseError(InputError):
    """Text could not be parsed as hex MIDI bytes."""

    def __init__(self, text: str, reason: str):
        """
        Initialize hex parse error.

        Args:
            text: The offending input text
            reason: Why it could not be parsed
        """
        super().__init__(
            user_message=f"Cannot read MIDI bytes from '{text}': {reason}",
            technical_message=f"Hex parse error for {text!r}: {reason}",
            recoverable=True,
            recovery_hint=(
                "Write each byte as two hex digits, e.g. 'B0 0A 40', 'b00a40' "
                "or '0xB0,0x0A,0x40'"
            ),
        )
        self.text = text
        self.reason = reason
