"""Run prompts against a line editor and collect their answers."""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .line_editor import LineSource, PromptToolkitLineEditor
from .output import Terminal
from .prompts import Prompt

logger = logging.getLogger(__name__)


@dataclass
class Question:
    """A named prompt in a survey."""

    name: str
    prompt: Prompt


def ask_one(
    prompt: Prompt,
    line_source: Optional[LineSource] = None,
    terminal: Optional[Terminal] = None,
) -> str:
    """Ask a single prompt and leave its finalized line on the terminal.

    Errors from the prompt are not caught: an ``InputIOError`` carries the
    prompt's default so the caller can decide whether to use it.
    """
    line_source = line_source or PromptToolkitLineEditor()
    terminal = terminal or Terminal()

    answer = prompt.prompt(line_source, terminal)
    prompt.cleanup(line_source, terminal, answer)
    return answer


def ask(
    questions: Iterable[Question],
    line_source: Optional[LineSource] = None,
    terminal: Optional[Terminal] = None,
) -> dict[str, str]:
    """Ask questions in order and return the answers by question name.

    All questions share one line editor. The first failure stops the survey
    and is raised unchanged.
    """
    questions = list(questions)
    names = [question.name for question in questions]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ValueError(f"Duplicate question names: {', '.join(duplicates)}")

    line_source = line_source or PromptToolkitLineEditor()
    terminal = terminal or Terminal()

    answers = {}
    for question in questions:
        answers[question.name] = ask_one(question.prompt, line_source, terminal)
        logger.debug("Question %s answered (%d/%d)", question.name, len(answers), len(questions))
    return answers
