"""Utility modules - console output."""

from debug_playground.utils.console import Console, get_console

__all__ = [
    "Console",
    "get_console",
]
