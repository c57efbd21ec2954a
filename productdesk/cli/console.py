"""
Console Boundary.

Everything the menu and handlers read or print goes through a ConsoleIO,
so navigation and handler output can be driven by a script in tests.
RichConsoleIO is the terminal implementation.
"""

import math
from dataclasses import dataclass
from typing import Protocol

from rich.console import Console

from productdesk.core.exceptions import InputParseError


class ConsoleIO(Protocol):
    """Line-oriented input/output used by the menu loop and handlers."""

    def read(self, prompt: str, password: bool = False) -> str:
        """Show a prompt and block until a line is entered. Raises EOFError at end of input."""
        ...

    def write(self, text: str = "", style: str | None = None) -> None:
        """Print one line."""
        ...


class RichConsoleIO:
    """ConsoleIO backed by a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def read(self, prompt: str, password: bool = False) -> str:
        return self.console.input(prompt, password=password)

    def write(self, text: str = "", style: str | None = None) -> None:
        # backend bodies may contain [brackets]; never treat them as markup
        self.console.print(text, style=style, markup=False, highlight=False)


@dataclass(frozen=True)
class MenuChoice:
    """Result of parsing a menu selection. value is None when the text is not an integer."""

    raw: str
    value: int | None

    @property
    def is_valid(self) -> bool:
        return self.value is not None


def parse_choice(text: str) -> MenuChoice:
    """Parse a menu selection without raising."""
    stripped = text.strip()
    try:
        return MenuChoice(raw=text, value=int(stripped))
    except ValueError:
        return MenuChoice(raw=text, value=None)


def read_int(io: ConsoleIO, prompt: str) -> int:
    """Prompt for an integer field. Raises InputParseError on malformed input."""
    text = io.read(prompt)
    try:
        return int(text.strip())
    except ValueError as e:
        raise InputParseError(text, "number") from e


def read_float(io: ConsoleIO, prompt: str) -> float:
    """Prompt for a decimal field. Raises InputParseError on malformed input."""
    text = io.read(prompt)
    try:
        value = float(text.strip())
    except ValueError as e:
        raise InputParseError(text, "number") from e
    # JSON has no representation for nan or inf
    if not math.isfinite(value):
        raise InputParseError(text, "number")
    return value
