"""Ask a single yes/no question."""

import sys

import click
from rich.markup import escape

from ..config import Settings
from ..errors import InputIOError
from ..prompts import Confirm, yes_no
from ..survey import ask_one
from .common import EXIT_INTERRUPTED, EXIT_NO_INPUT, build_collaborators, err_console


@click.command(name="confirm")
@click.argument("message")
@click.option(
    "--default/--no-default",
    default=False,
    help="Answer used when the user just presses Enter (default: no)",
)
@click.option(
    "--accept-default-on-eof",
    is_flag=True,
    help="Use the default answer when input ends instead of failing",
)
@click.pass_obj
def cmd(settings: Settings, message: str, default: bool, accept_default_on_eof: bool):
    """Ask a yes/no question.

    MESSAGE: Question to ask

    Exits with status 0 for yes and 1 for no.
    """
    renderer, line_editor, terminal = build_collaborators(settings)
    prompt = Confirm(message, default=default, renderer=renderer)

    try:
        answer = ask_one(prompt, line_editor, terminal)
    except InputIOError as err:
        if err.interrupted:
            err_console.print("Aborted!")
            sys.exit(EXIT_INTERRUPTED)
        if not accept_default_on_eof:
            err_console.print(f"[red]✗ {escape(str(err))}[/red]")
            sys.exit(EXIT_NO_INPUT)
        answer = yes_no(err.default)

    sys.exit(0 if answer == yes_no(True) else 1)
