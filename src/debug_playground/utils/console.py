"""Console writer that prints status lines and remembers them."""

import sys
from typing import TextIO


class Console:
    """Writes status lines to a text stream.

    Each line is also kept as a ``(category, content)`` pair so callers can
    read back what the program printed.

    Example:
        console = Console()
        console.print("Sum of numbers: 15")
        console.contents()
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream
        self.lines: list[tuple[str, str]] = []

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys replacement of sys.stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def print(self, message: str) -> None:
        """Write a normal status line."""
        self._write("stdout", message)

    def error(self, message: str) -> None:
        """Write a reported error line (still on the same stream)."""
        self._write("error", message)

    def contents(self, category: str | None = None) -> list[str]:
        """Text of the lines written so far, optionally of one category."""
        return [content for cat, content in self.lines if category is None or cat == category]

    def _write(self, category: str, message: str) -> None:
        self.lines.append((category, message))
        self.stream.write(message + "\n")
        self.stream.flush()


_default_console: Console | None = None


def get_console() -> Console:
    """Return the shared stdout console, creating it on first use."""
    global _default_console
    if _default_console is None:
        _default_console = Console()
    return _default_console
