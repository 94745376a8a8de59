"""
Exception hierarchy for remote25sl.

```
Remote25SLError (base)
└── InputError
    └── HexParseError
```

Rejected MIDI messages are not exceptions: see `remote25sl.decoder.Rejection`.
These classes cover the outer surfaces, where a failure should reach the
user with a readable message and a recovery hint.
"""

from .base import Remote25SLError
from .handlers import ErrorContext, format_error_for_display
from .input import HexParseError, InputError

__all__ = [
    "ErrorContext",
    "HexParseError",
    "InputError",
    "Remote25SLError",
    "format_error_for_display",
]
