"""Line sources: where prompts read their answers from."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.history import DummyHistory, FileHistory, History, InMemoryHistory
from prompt_toolkit.key_binding import KeyBindings

from .config import Settings
from .errors import InputFailure, InputIOError

logger = logging.getLogger(__name__)


class LineSource(ABC):
    """Something that can block until the user enters a line.

    A line source holds mutable state (prompt text, history) and must not be
    shared by two prompts at the same time.
    """

    @abstractmethod
    def set_prompt(self, text: str):
        """Set the text shown before the user's input.

        The text is redrawn on every keystroke and must not end with a newline.
        """

    @abstractmethod
    def readline(self) -> str:
        """Block until a line is entered and return it without the newline.

        Raises:
            InputIOError: Input ended, was interrupted, or could not be read.
        """


class PromptToolkitLineEditor(LineSource):
    """Line editor backed by a prompt_toolkit session.

    The session is created on first read so that constructing an editor never
    touches the terminal.
    """

    def __init__(
        self,
        history: Optional[History] = None,
        key_bindings: Optional[KeyBindings] = None,
        session: Optional[PromptSession] = None,
    ):
        self._history = history
        self._key_bindings = key_bindings
        self._session = session
        self._prompt = ""

    @classmethod
    def from_settings(cls, settings: Settings) -> "PromptToolkitLineEditor":
        if not settings.history:
            history: History = DummyHistory()
        elif settings.history_file:
            history = FileHistory(str(settings.history_file))
        else:
            history = InMemoryHistory()
        return cls(history=history)

    @property
    def prompt_text(self) -> str:
        return self._prompt

    @property
    def session(self) -> PromptSession:
        if self._session is None:
            self._session = PromptSession(
                history=self._history if self._history is not None else InMemoryHistory(),
                key_bindings=self._key_bindings,
            )
        return self._session

    def set_prompt(self, text: str):
        self._prompt = text

    def readline(self) -> str:
        try:
            return self.session.prompt(ANSI(self._prompt))
        except EOFError as exc:
            logger.debug("Line editor reached end of input")
            raise InputIOError("Input ended before an answer was given", InputFailure.EOF) from exc
        except KeyboardInterrupt as exc:
            logger.debug("Line editor interrupted")
            raise InputIOError("Prompt interrupted", InputFailure.INTERRUPT) from exc
        except OSError as exc:
            logger.debug("Line editor failed to read input: %s", exc)
            raise InputIOError(f"Cannot read input: {exc}", InputFailure.TRANSPORT) from exc
