"""Command line interface for remote25sl."""

from .main import cli

__all__ = ["cli"]
