"""Terminal output handle used for prompt rendering and redraws."""

from typing import Optional

from rich.console import Console as RichConsole
from rich.control import Control
from rich.segment import ControlType
from rich.text import Text

from .config import Settings


class Terminal:
    """A console wrapper exposing the few operations prompts need.

    Text passed to ``write`` and ``write_line`` is already rendered and may
    contain escape sequences. Cursor control is only emitted when the
    underlying console is a terminal.

    A terminal has a single owner: only one prompt may use it at a time.
    """

    def __init__(self, console: Optional[RichConsole] = None):
        self._console = console or RichConsole(highlight=False, soft_wrap=True)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Terminal":
        return cls(
            RichConsole(
                color_system=settings.color_system,
                force_terminal=settings.force_terminal,
                highlight=False,
                soft_wrap=True,
            )
        )

    @property
    def console(self) -> RichConsole:
        return self._console

    @property
    def is_terminal(self) -> bool:
        """Check if output is a terminal."""
        return self._console.is_terminal

    def write(self, text: str):
        """Write rendered text without a trailing newline."""
        self._console.print(Text.from_ansi(text), end="", soft_wrap=True)

    def write_line(self, text: str):
        """Write rendered text followed by a newline."""
        self._console.print(Text.from_ansi(text), soft_wrap=True)

    def move_cursor_up(self, lines: int = 1):
        """Move the cursor to the start of the line ``lines`` above."""
        self._console.control(Control(ControlType.CARRIAGE_RETURN, (ControlType.CURSOR_UP, lines)))

    def erase_line(self):
        """Erase the whole line under the cursor."""
        self._console.control(Control((ControlType.ERASE_IN_LINE, 2)))
