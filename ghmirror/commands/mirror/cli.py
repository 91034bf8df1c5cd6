"""CLI for mirroring every repository of a GitHub account."""

from __future__ import annotations

import os
from pathlib import Path

import typer

from ...config.settings import get_settings
from ...core.errors import MirrorError, error_chain
from ...core.git_client import GitClient
from ...core.github_client import GitHubClient
from ...core.types import AccountSelector, Protocol
from .service import mirror_account


def report_error(err: MirrorError) -> None:
    lines = error_chain(err)
    typer.secho(f"Error: {lines[0]}", fg=typer.colors.RED, err=True)
    for line in lines[1:]:
        typer.secho(f"Caused by: {line}", err=True)


def mirror(
    user: str | None = typer.Argument(None, help="GitHub username"),
    authenticated: bool = typer.Option(
        False, "--authenticated", "-a", help="Mirror the account gh is logged in as"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Print actions without executing"),
    root: str | None = typer.Option(None, "--root", help="Directory holding the mirrors (default: cwd)"),
    https: bool | None = typer.Option(
        None, "--https/--ssh", help="Clone over HTTPS or SSH (default: GHMIRROR_HTTPS, else SSH)"
    ),
):
    """Create a mirror of all repos of a GitHub user."""
    if bool(user) == authenticated:
        raise typer.BadParameter("give exactly one of USER or --authenticated")

    s = get_settings()
    account = AccountSelector.authenticated() if authenticated else AccountSelector.user(user)
    use_https = s.https if https is None else https
    protocol = Protocol.https if use_https else Protocol.ssh
    _root = Path(root or s.root or os.getcwd())

    try:
        summary = mirror_account(
            account,
            _root,
            protocol=protocol,
            dry_run=dry_run,
            gh=GitHubClient(s.gh_bin),
            git=GitClient(s.git_bin),
        )
    except MirrorError as err:
        report_error(err)
        raise typer.Exit(code=1)

    typer.echo(f"Done. {summary}.")
