"""Ask several yes/no questions and report the answers."""

import json
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import Settings
from ..errors import InputIOError
from ..prompts import Confirm
from ..survey import Question, ask
from .common import EXIT_INTERRUPTED, EXIT_NO_INPUT, build_collaborators, err_console

console = Console()


def _parse_question(value: str) -> tuple[str, str]:
    name, sep, message = value.partition("=")
    name, message = name.strip(), message.strip()
    if not sep or not name or not message:
        raise click.BadParameter(f"'{value}' is not in NAME=MESSAGE form", param_hint="--question")
    return name, message


@click.command(name="ask")
@click.option(
    "--question",
    "-q",
    "questions",
    multiple=True,
    required=True,
    metavar="NAME=MESSAGE",
    help="Question to ask (repeatable)",
)
@click.option(
    "--default/--no-default",
    default=False,
    help="Answer used when the user just presses Enter (default: no)",
)
@click.option("--json", "as_json", is_flag=True, help="Print answers as JSON")
@click.pass_obj
def cmd(settings: Settings, questions: tuple[str, ...], default: bool, as_json: bool):
    """Ask yes/no questions in order and print the answers."""
    parsed = [_parse_question(value) for value in questions]
    renderer, line_editor, terminal = build_collaborators(settings)
    survey = [
        Question(name, Confirm(message, default=default, renderer=renderer))
        for name, message in parsed
    ]

    try:
        answers = ask(survey, line_editor, terminal)
    except ValueError as err:
        raise click.BadParameter(str(err), param_hint="--question") from err
    except InputIOError as err:
        if err.interrupted:
            err_console.print("Aborted!")
            sys.exit(EXIT_INTERRUPTED)
        err_console.print(f"[red]✗ {escape(str(err))}[/red]")
        sys.exit(EXIT_NO_INPUT)

    if as_json:
        click.echo(json.dumps(answers, indent=2))
        return

    table = Table(title="Answers")
    table.add_column("Question", style="cyan")
    table.add_column("Answer")
    for question in survey:
        table.add_row(question.prompt.message, answers[question.name])
    console.print(table)
