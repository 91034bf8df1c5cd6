"""
Shared fixtures for the ghmirror test suite.
"""

from pathlib import Path

import pytest

from ghmirror.core.errors import ProcessError
from ghmirror.core.git_client import GitClient
from ghmirror.core.types import Repository


class RecordingGitClient(GitClient):
    """GitClient that records command lines instead of running git.

    A clone creates the bare layout git would leave behind (just ``hooks/``),
    so the real push-guard installation runs on top of it.
    """

    def __init__(self, fail_on: str | None = None):
        super().__init__()
        self.commands: list[list[str]] = []
        self.fail_on = fail_on

    def _run(self, cmd: list[str]) -> None:
        self.commands.append(cmd)
        target = cmd[-1] if cmd[1] == "clone" else cmd[2]
        if self.fail_on and Path(target).name == self.fail_on:
            raise ProcessError(f"Command '{cmd}' returned non-zero exit status 128.", returncode=128)
        if cmd[1] == "clone":
            (Path(target) / "hooks").mkdir(parents=True)


def repo_json(name: str, owner: str = "alice") -> dict:
    """A trimmed-down repository object as returned by the GitHub API."""
    return {
        "id": 1000 + len(name),
        "name": name,
        "full_name": f"{owner}/{name}",
        "private": False,
        "ssh_url": f"git@github.com:{owner}/{name}.git",
        "clone_url": f"https://github.com/{owner}/{name}.git",
        "archived": False,
    }


@pytest.fixture
def fake_git():
    return RecordingGitClient()


@pytest.fixture
def alice_repos():
    return [
        Repository(name="a", clone_url="git@host:alice/a.git"),
        Repository(name="b", clone_url="git@host:alice/b.git"),
    ]
