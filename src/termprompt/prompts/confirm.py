"""Yes/no confirmation prompt."""

import logging
import re
from typing import Optional

from ..errors import InputIOError, PromptStateError
from ..line_editor import LineSource
from ..models import PromptConfig, TemplateContext
from ..output import Terminal
from ..render import Renderer
from .base import Prompt, PromptState

logger = logging.getLogger(__name__)

# Matched against the whole line; surrounding whitespace is not stripped
YES_RX = re.compile(r"y(?:es)?", re.IGNORECASE)
NO_RX = re.compile(r"n(?:o)?", re.IGNORECASE)


def yes_no(value: bool) -> str:
    """Convert an answer to its display token."""
    return "Yes" if value else "No"


class Confirm(Prompt):
    """A text prompt that accepts yes/no answers.

    An empty line accepts the default. Anything else that is not a yes or a
    no prints a diagnostic and the question is asked again.
    """

    def __init__(self, message: str, default: bool = False, renderer: Optional[Renderer] = None):
        self.config = PromptConfig(message=message, default=default)
        self.renderer = renderer or Renderer()
        self.state = PromptState.IDLE
        self.answer: Optional[str] = None

    @property
    def message(self) -> str:
        return self.config.message

    @property
    def default(self) -> bool:
        return self.config.default

    def reset(self):
        """Return to the idle state so the prompt can be asked again."""
        self.state = PromptState.IDLE
        self.answer = None

    def resolve_answer(self, line_source: LineSource, terminal: Terminal) -> bool:
        """Read lines until one is a valid answer.

        Raises:
            InputIOError: The line source failed. ``default`` is set on the
                error so the caller can fall back to it.
        """
        while True:
            try:
                value = line_source.readline()
            except InputIOError as err:
                logger.debug("No answer to %r (%s)", self.config.message, err.reason.value)
                err.default = self.config.default
                raise

            if YES_RX.fullmatch(value):
                return True
            if NO_RX.fullmatch(value):
                return False
            if value == "":
                return self.config.default

            logger.debug("Rejected answer %r to %r", value, self.config.message)
            terminal.write_line(self.renderer.render_error(value))

    def prompt(self, line_source: LineSource, terminal: Terminal) -> str:
        if self.state is not PromptState.IDLE:
            raise PromptStateError(
                f"Cannot prompt in state '{self.state.value}'; call reset() to ask again"
            )

        try:
            question = self.renderer.render_question(TemplateContext(self.config))
            # The line editor redraws this on every keystroke
            line_source.set_prompt(question)

            self.state = PromptState.AWAITING_INPUT
            answer = self.resolve_answer(line_source, terminal)
        except BaseException:
            self.state = PromptState.FAILED
            raise

        self.state = PromptState.FINALIZED
        self.answer = yes_no(answer)
        logger.debug("Accepted answer %s to %r", self.answer, self.config.message)
        return self.answer

    def cleanup(self, line_source: LineSource, terminal: Terminal, value: str):
        # Replace the live input line with the finalized question
        terminal.move_cursor_up(1)
        terminal.erase_line()

        summary = self.renderer.render_question(TemplateContext(self.config, answer=value))
        terminal.write_line(summary)
        logger.debug("Finalized %r as %s", self.config.message, value)
