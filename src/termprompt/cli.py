#!/usr/bin/env python3
"""CLI entry point for termprompt."""

import logging
import sys

import click

from .commands import ask, confirm
from .commands.common import EXIT_CONFIG_ERROR, err_console
from .config import Settings


@click.group()
@click.version_option(package_name="termprompt")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log prompt activity to stderr.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """Interactive yes/no prompts for shell scripts."""
    settings = Settings()

    errors = settings.validate()
    if errors:
        err_console.print("[red]✗ Invalid configuration:[/red]")
        for error in errors:
            err_console.print(f"  • {error}")
        sys.exit(EXIT_CONFIG_ERROR)

    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.obj = settings


# Register commands
main.add_command(confirm.cmd)
main.add_command(ask.cmd)


if __name__ == "__main__":
    sys.exit(main())
