"""Helpers shared by command implementations."""

from rich.console import Console

from ..config import Settings
from ..line_editor import LineSource, PromptToolkitLineEditor
from ..output import Terminal
from ..render import Renderer

err_console = Console(stderr=True, highlight=False)

# Exit status for a prompt cancelled with Ctrl-C
EXIT_INTERRUPTED = 130
# Exit status when input ended before an answer was given
EXIT_NO_INPUT = 2
# Exit status for invalid configuration
EXIT_CONFIG_ERROR = 2


def build_collaborators(settings: Settings) -> tuple[Renderer, LineSource, Terminal]:
    """Create the renderer, line editor and terminal a command prompts with."""
    return (
        Renderer.from_settings(settings),
        PromptToolkitLineEditor.from_settings(settings),
        Terminal.from_settings(settings),
    )
