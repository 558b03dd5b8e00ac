"""Template rendering for prompt output.

Templates are rich markup with ``str.format`` fields. Markup tags name styles
from the renderer's theme, fields are filled from the data being rendered.
Field values are escaped first, so user text never turns into styling.
"""

import json
from typing import Any, Mapping, Optional

from rich.console import Console
from rich.errors import MarkupError, MissingStyle
from rich.markup import escape
from rich.text import Text
from rich.theme import Theme

from .config import Settings
from .errors import TemplateError
from .models import TemplateContext

DEFAULT_THEME = Theme(
    {
        "prompt.glyph": "bold bright_green",
        "prompt.message": "bold",
        "prompt.answer": "cyan",
        "prompt.hint": "white",
        "prompt.error": "red",
    }
)

# Question: glyph and message, followed by either the answer or the hint.
# Every field is closed by a tag immediately after it: escaped text may end in
# a backslash, which only collapses back to one when a tag follows.
QUESTION_HEAD = "[prompt.glyph]? [/][prompt.message]{message}[/][prompt.message] [/]"
QUESTION_ANSWER = "[prompt.answer]{answer}[/]"
QUESTION_HINT = "[prompt.hint]{hint}[/][prompt.hint] [/]"

ERROR_TEMPLATE = "[prompt.error]✘ {value} is not a valid answer, please try again.[/]"


def quote(value: str) -> str:
    """Double-quote a string, escaping non-printable characters."""
    return json.dumps(value, ensure_ascii=False)


class Renderer:
    """Renders templates to text with embedded terminal escape sequences.

    Rendering has no side effects: output is captured, never printed.
    """

    def __init__(
        self,
        theme: Optional[Theme] = None,
        color_system: Optional[str] = "auto",
        force_terminal: Optional[bool] = None,
    ):
        self._console = Console(
            theme=theme or DEFAULT_THEME,
            color_system=color_system,
            force_terminal=force_terminal,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Renderer":
        return cls(color_system=settings.color_system, force_terminal=settings.force_terminal)

    def render(self, template: str, fields: Mapping[str, Any]) -> str:
        """Render a template with the given field values.

        Raises:
            TemplateError: The template is malformed, references a missing
                field, or uses a style the theme does not define.
        """
        try:
            markup = template.format_map({key: escape(str(value)) for key, value in fields.items()})
            text = Text.from_markup(markup, emoji=False, end="")
        except (KeyError, IndexError, ValueError, MarkupError) as exc:
            raise TemplateError(f"Cannot render template {template!r}: {exc}") from exc

        for span in text.spans:
            if isinstance(span.style, str):
                try:
                    self._console.get_style(span.style)
                except MissingStyle as exc:
                    raise TemplateError(f"Unknown style '{span.style}' in {template!r}") from exc

        with self._console.capture() as capture:
            self._console.print(text, end="")
        return capture.get()

    def render_question(self, context: TemplateContext) -> str:
        """Render the question line, finalized when the context carries an answer."""
        tail = QUESTION_ANSWER if context.answer else QUESTION_HINT
        return self.render(
            QUESTION_HEAD + tail,
            {"message": context.config.message, "answer": context.answer, "hint": context.hint},
        )

    def render_error(self, value: str) -> str:
        """Render the diagnostic shown for a rejected answer."""
        return self.render(ERROR_TEMPLATE, {"value": quote(value)})
