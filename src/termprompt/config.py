"""Configuration management for termprompt."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

COLOR_MODES = ("auto", "always", "never")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Prompt settings loaded from the environment and an optional .env file."""

    def __init__(self, project_dir: Optional[Path] = None):
        """Initialize settings from .env and the process environment."""
        self.project_dir = project_dir or Path.cwd()

        # Variables already set in the environment take precedence
        load_dotenv(self.project_dir / ".env")

        self.color = os.getenv("TERMPROMPT_COLOR", "auto").lower()
        self.no_color = bool(os.getenv("NO_COLOR"))

        self.history = os.getenv("TERMPROMPT_HISTORY", "true").lower() == "true"
        history_file = os.getenv("TERMPROMPT_HISTORY_FILE")
        self.history_file = Path(history_file).expanduser() if history_file else None

        self.log_level = os.getenv("TERMPROMPT_LOG_LEVEL", "WARNING").upper()

    def validate(self) -> list[str]:
        """Validate configuration values."""
        errors = []

        if self.color not in COLOR_MODES:
            errors.append(
                f"TERMPROMPT_COLOR must be one of {', '.join(COLOR_MODES)} (got '{self.color}')"
            )
        if self.log_level not in LOG_LEVELS:
            errors.append(
                f"TERMPROMPT_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)} "
                f"(got '{self.log_level}')"
            )

        return errors

    @property
    def color_enabled(self) -> bool:
        return not self.no_color and self.color != "never"

    @property
    def color_system(self) -> Optional[str]:
        """Color system argument for rich consoles (None disables styling)."""
        return "auto" if self.color_enabled else None

    @property
    def force_terminal(self) -> Optional[bool]:
        """Force terminal mode when colors are always wanted, else auto-detect."""
        if self.color == "always" and self.color_enabled:
            return True
        return None
