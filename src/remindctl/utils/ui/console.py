"""Console utilities for remindctl."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=8)
def get_console(highlight: bool = False, stderr: bool = False, no_color: bool = False) -> Console:
    """Get a Rich Console; ``stderr=True`` for error messages."""
    return Console(highlight=highlight, stderr=stderr, no_color=no_color)
