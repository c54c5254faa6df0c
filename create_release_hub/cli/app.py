from __future__ import annotations

import typer

from create_release_hub.cli.commands.init_cmd import init


app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
)

# Single command: `create-release-hub [--cwd PATH]` runs it without a subcommand name.
app.command()(init)


def main() -> None:
    app()
