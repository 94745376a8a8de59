"""Main entry point for ``python -m remote25sl``."""

from remote25sl.cli import cli

if __name__ == "__main__":
    cli()
