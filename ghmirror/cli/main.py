"""CLI entrypoint that wires the mirror command into a Typer app."""

import typer

from ..commands.mirror.cli import mirror

app = typer.Typer(add_completion=False, help="Mirror all repositories of a GitHub account.")

app.command()(mirror)
