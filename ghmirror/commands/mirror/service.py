"""Services for the mirror command."""

from __future__ import annotations

import shlex
from collections.abc import Iterable
from pathlib import Path

import typer

from ...core.errors import FilesystemError
from ...core.git_client import GitClient
from ...core.github_client import GitHubClient
from ...core.types import AccountSelector, MirrorAction, MirrorSummary, Protocol, Repository


def classify(repo: Repository, root: Path) -> tuple[MirrorAction, Path]:
    """Decide what to do with ``repo``: an existing directory means update."""
    path = root / repo.name
    if path.is_dir():
        return MirrorAction.update, path
    return MirrorAction.clone, path


def _planned_command(git: GitClient, action: MirrorAction, path: Path, repo: Repository) -> list[str]:
    if action is MirrorAction.update:
        return git.update_command(path)
    return git.clone_command(path, repo.clone_url)


def reconcile(
    repos: Iterable[Repository],
    root: Path,
    *,
    dry_run: bool = False,
    git: GitClient | None = None,
) -> MirrorSummary:
    """Clone or update every repository under ``root``, one at a time.

    Stops at the first failure; already mirrored repositories are picked up
    as updates on the next run.
    """
    git = git or GitClient()
    summary = MirrorSummary()

    for repo in repos:
        action, path = classify(repo, root)
        verb = "updating" if action is MirrorAction.update else "cloning"

        if dry_run:
            typer.echo(f"[dry-run] {repo.name}: {repo.clone_url}", err=True)
            cmd = _planned_command(git, action, path, repo)
            typer.echo(f"[dry-run] {repo.name}: {shlex.join(cmd)}", err=True)
            typer.echo(f"[dry-run] {verb} {repo.name}")
        elif action is MirrorAction.update:
            typer.echo(f"{verb} {repo.name}")
            git.update_mirror(path)
        else:
            typer.echo(f"{verb} {repo.name}")
            git.clone_mirror(path, repo.clone_url)

        summary.record(action)

    return summary


def mirror_account(
    account: AccountSelector,
    root: Path,
    *,
    protocol: Protocol = Protocol.ssh,
    dry_run: bool = False,
    gh: GitHubClient | None = None,
    git: GitClient | None = None,
) -> MirrorSummary:
    """List ``account``'s repositories and mirror them all under ``root``."""
    gh = gh or GitHubClient()
    repos = gh.list_repositories(account, protocol)

    if not dry_run:
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(f"failed to create mirror root {root}") from e

    return reconcile(repos, root, dry_run=dry_run, git=git)
