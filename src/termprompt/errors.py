"""Exceptions raised by termprompt."""

from enum import Enum
from typing import Optional


class TermPromptError(Exception):
    """Base class for every error raised by this package."""


class TemplateError(TermPromptError):
    """A template could not be rendered.

    Templates are fixed constants, so this always points at a defect in the
    template text or the theme, never at user input.
    """


class InputFailure(Enum):
    """Why the line editor failed to produce a line."""

    EOF = "eof"
    INTERRUPT = "interrupt"
    TRANSPORT = "transport"


class InputIOError(TermPromptError):
    """The line editor could not produce a line.

    The prompt that was waiting for input sets ``default`` to its configured
    default answer before re-raising, so callers can fall back to it.
    """

    def __init__(self, message: str, reason: InputFailure = InputFailure.TRANSPORT):
        super().__init__(message)
        self.reason = reason
        self.default: Optional[bool] = None

    @property
    def interrupted(self) -> bool:
        return self.reason is InputFailure.INTERRUPT


class PromptStateError(TermPromptError):
    """A prompt was used in a state that does not allow it."""
