"""Data passed between prompts and the renderer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PromptConfig:
    """Question text and default answer of a confirmation prompt."""

    message: str
    default: bool = False


@dataclass(frozen=True)
class TemplateContext:
    """View of a prompt for a single render call.

    ``answer`` is empty while the prompt is live and holds the finalized
    answer when the prompt is redrawn.
    """

    config: PromptConfig
    answer: str = ""

    @property
    def hint(self) -> str:
        return "(Y/n)" if self.config.default else "(y/N)"
