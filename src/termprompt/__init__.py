"""Interactive terminal prompts with in-place redraw of finalized answers."""

from .errors import (
    InputFailure,
    InputIOError,
    PromptStateError,
    TemplateError,
    TermPromptError,
)
from .line_editor import LineSource, PromptToolkitLineEditor
from .models import PromptConfig, TemplateContext
from .output import Terminal
from .prompts import Confirm, Prompt, PromptState, yes_no
from .render import Renderer
from .survey import Question, ask, ask_one

__all__ = [
    "Confirm",
    "InputFailure",
    "InputIOError",
    "LineSource",
    "Prompt",
    "PromptConfig",
    "PromptState",
    "PromptStateError",
    "PromptToolkitLineEditor",
    "Question",
    "Renderer",
    "TemplateContext",
    "TemplateError",
    "TermPromptError",
    "Terminal",
    "ask",
    "ask_one",
    "yes_no",
]
