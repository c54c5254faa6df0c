from __future__ import annotations

from pathlib import Path

import typer

from create_release_hub import __version__
from create_release_hub.cli.context import build_context
from create_release_hub.cli.init_guided import run_init
from create_release_hub.cli.prompts import is_interactive_terminal
from create_release_hub.core.errors import ErrorCode
from create_release_hub.core.result import Err
from create_release_hub.output.errors import init_error_exit_code, print_init_error


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))


def init(
    cwd: Path | None = typer.Option(
        None,
        "--cwd",
        help="Project directory (default: current directory)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_show_version,
        is_eager=True,
    ),
) -> None:
    """Create a release-hub.json for this project."""
    ctx = build_context(cwd)

    result = run_init(
        project=ctx.project,
        console=ctx.console,
        interactive=is_interactive_terminal(),
    )
    if isinstance(result, Err):
        print_init_error(result.error, ctx.console)
        raise typer.Exit(code=init_error_exit_code(result.error))
