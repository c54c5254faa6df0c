from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from create_release_hub.core.errors import ErrorCode
from create_release_hub.core.project import ProjectContext
from create_release_hub.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: ProjectContext
    console: ConsoleProtocol


def build_context(cwd: Path | None = None) -> CLIContext:
    console = RichConsole()

    try:
        root = (cwd or Path.cwd()).expanduser().resolve()
    except OSError as e:
        console.error(f"invalid --cwd: {e}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR)) from e

    if not root.is_dir():
        console.error(f"not a directory: {root}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(project=ProjectContext(root=root), console=console)
