"""Terminal geometry providers used to size the box-plot canvas."""
from __future__ import annotations

from typing import Optional, Protocol

from rich.console import Console


class TerminalGeometry(Protocol):
    def columns(self) -> Optional[int]:
        """Current terminal width in columns, or None when it cannot be determined."""
        ...


class RichTerminalGeometry:
    """Reads the terminal width from a Rich console bound to stdout."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def columns(self) -> Optional[int]:
        if not self._console.is_terminal:
            return None
        return self._console.size.width


class FixedTerminalGeometry:
    def __init__(self, width: Optional[int]) -> None:
        self._width = width

    def columns(self) -> Optional[int]:
        return self._width
