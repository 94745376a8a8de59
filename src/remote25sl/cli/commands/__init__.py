"""CLI commands for remote25sl."""

from .chart import chart
from .decode import decode_command

__all__ = ["chart", "decode_command"]
