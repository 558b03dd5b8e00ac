"""Interactive prompt components."""

from .base import Prompt, PromptState
from .confirm import Confirm, yes_no

__all__ = ["Confirm", "Prompt", "PromptState", "yes_no"]
