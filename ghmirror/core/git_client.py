"""Small helpers for running Git commands against bare mirrors."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

from .constants import EXEC_BITS, HOOK_NAME, PUSH_GUARD_SCRIPT, REMOTE_NAME
from .errors import FilesystemError, MirrorError, ProcessError, TransportError


class GitClient:
    def __init__(self, git_bin: str = "git") -> None:
        self.git_bin = git_bin

    # ---------- process helpers ----------
    def _run(self, cmd: list[str]) -> None:
        """Run ``cmd`` with stdout/stderr inherited from ghmirror."""
        try:
            subprocess.check_call(cmd)
        except subprocess.CalledProcessError as e:
            raise ProcessError(f"{e}", returncode=e.returncode) from None
        except OSError as e:
            raise TransportError(f"failed to run {self.git_bin}") from e

    # ---------- command lines ----------
    def clone_command(self, path: Path, url: str) -> list[str]:
        return [self.git_bin, "clone", "--mirror", "--origin", REMOTE_NAME, url, str(path)]

    def update_command(self, path: Path) -> list[str]:
        return [self.git_bin, "-C", str(path), "remote", "update", "--prune"]

    # ---------- mirror ops ----------
    def clone_mirror(self, path: Path, url: str) -> None:
        """Create a bare mirror of ``url`` at ``path`` and forbid pushes to it.

        A mirror whose hook could not be installed is removed again, so the
        next run clones it instead of updating an unprotected copy.
        """
        try:
            self._run(self.clone_command(path, url))
        except MirrorError as err:
            raise err.with_context(f"failed to git clone {url}")
        try:
            self.install_push_guard(path)
        except FilesystemError:
            shutil.rmtree(path, ignore_errors=True)
            raise

    def update_mirror(self, path: Path) -> None:
        try:
            self._run(self.update_command(path))
        except MirrorError as err:
            raise err.with_context(f"failed to git remote update {path}")

    @staticmethod
    def install_push_guard(path: Path) -> Path:
        """Write a pre-receive hook that rejects every push; return its path."""
        hook = Path(path) / "hooks" / HOOK_NAME
        try:
            # an empty git template dir leaves no hooks/ behind
            hook.parent.mkdir(exist_ok=True)
            hook.write_text(PUSH_GUARD_SCRIPT, encoding="utf-8")
        except OSError as e:
            raise FilesystemError(f"failed to write hooks/{HOOK_NAME}") from e

        if os.name == "posix":
            try:
                hook.chmod(hook.stat().st_mode | EXEC_BITS)
            except OSError as e:
                raise FilesystemError(f"failed to set permissions on hooks/{HOOK_NAME}") from e
        return hook
