"""Abstract base class for interactive prompts."""

from abc import ABC, abstractmethod
from enum import Enum

from ..line_editor import LineSource
from ..output import Terminal


class PromptState(Enum):
    """Lifecycle of a prompt instance."""

    IDLE = "idle"
    AWAITING_INPUT = "awaiting_input"
    FINALIZED = "finalized"
    FAILED = "failed"


class Prompt(ABC):
    """Abstract base class for prompt components.

    A prompt is asked in two steps. ``prompt`` renders the question, reads
    and validates input and returns the answer as display text. ``cleanup``
    then replaces the live input line with a finalized, read-only rendering
    of that answer.
    """

    @abstractmethod
    def prompt(self, line_source: LineSource, terminal: Terminal) -> str:
        """Ask the question and return the accepted answer.

        Args:
            line_source: Line editor to read answers from
            terminal: Terminal that diagnostics are written to

        Returns:
            The answer as display text

        Raises:
            InputIOError: The line source failed before an answer was accepted
            TemplateError: A template could not be rendered
        """
        pass

    @abstractmethod
    def cleanup(self, line_source: LineSource, terminal: Terminal, value: str):
        """Redraw the prompt's input line with the finalized answer.

        Args:
            line_source: Line editor the answer was read from
            terminal: Terminal holding the live prompt line
            value: Answer returned by ``prompt``
        """
        pass
