"""Repository listing through the GitHub CLI (`gh api --paginate`)."""

from __future__ import annotations

import json
import shutil
import subprocess
from collections.abc import Iterator
from typing import Any, NoReturn

from pydantic import BaseModel, TypeAdapter, ValidationError, field_validator

from .errors import MirrorError, ParseError, RemoteError, TransportError
from .types import AccountSelector, Protocol, Repository

_UNSAFE_NAME_CHARS = ("/", "\\", "\0")


class _RepositoryRecord(BaseModel):
    """The subset of GitHub's repository object we care about."""

    name: str
    ssh_url: str | None = None
    clone_url: str | None = None

    @field_validator("name")
    @classmethod
    def _reject_unsafe_name(cls, value: str) -> str:
        # the name becomes a directory under the mirror root
        if value in ("", ".", "..") or any(c in value for c in _UNSAFE_NAME_CHARS):
            raise ValueError(f"unsafe repository name {value!r}")
        return value

    def to_repository(self, protocol: Protocol) -> Repository:
        field = "clone_url" if protocol is Protocol.https else "ssh_url"
        url = getattr(self, field)
        if not url:
            raise ParseError(f"repository {self.name!r} has no {field}")
        return Repository(name=self.name, clone_url=url)


class _ErrorPayload(BaseModel):
    message: str
    documentation_url: str | None = None


_PAGE = TypeAdapter(list[_RepositoryRecord])


def iter_json_documents(text: str) -> Iterator[Any]:
    """Yield each JSON document of a concatenated stream, in order.

    `gh api --paginate` writes one array per page back to back, which is not a
    single JSON document.
    """
    decoder = json.JSONDecoder()
    pos, end = 0, len(text)
    while True:
        while pos < end and text[pos].isspace():
            pos += 1
        if pos >= end:
            return
        doc, pos = decoder.raw_decode(text, pos)
        yield doc


class GitHubClient:
    def __init__(self, gh_bin: str = "gh") -> None:
        self.gh_bin = gh_bin

    # ---------- process helpers ----------
    def _ensure_gh_available(self) -> None:
        if not shutil.which(self.gh_bin):
            raise TransportError(
                f"GitHub CLI {self.gh_bin!r} not found. Install https://cli.github.com/ and run 'gh auth login'."
            )

    def _api(self, endpoint: str) -> subprocess.CompletedProcess[bytes]:
        cmd = [self.gh_bin, "api", "--paginate", endpoint]
        try:
            # stderr is left alone so gh's own diagnostics reach the terminal
            return subprocess.run(cmd, stdout=subprocess.PIPE, check=False)
        except OSError as e:
            raise TransportError(f"failed to run {self.gh_bin} api") from e

    # ---------- decoding ----------
    @staticmethod
    def _raise_remote_error(stdout: bytes) -> NoReturn:
        try:
            payload = _ErrorPayload.model_validate_json(stdout)
        except ValidationError as e:
            raise ParseError("failed to deserialize error") from e
        raise RemoteError(payload.message, payload.documentation_url)

    @staticmethod
    def _decode_pages(stdout: bytes) -> Iterator[list[_RepositoryRecord]]:
        try:
            text = stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError("repository listing is not valid UTF-8") from e
        try:
            for doc in iter_json_documents(text):
                yield _PAGE.validate_python(doc)
        except (json.JSONDecodeError, ValidationError) as e:
            raise ParseError("failed to deserialize repos json") from e

    # ---------- public API ----------
    def list_repositories(
        self,
        account: AccountSelector,
        protocol: Protocol = Protocol.ssh,
    ) -> Iterator[Repository]:
        """Return every repository of ``account``, page order then item order.

        The whole listing is decoded before anything is returned: a bad page
        fails the call instead of yielding a partial listing.
        """
        try:
            self._ensure_gh_available()
            proc = self._api(account.endpoint)
            if proc.returncode != 0:
                self._raise_remote_error(proc.stdout)

            repos: list[Repository] = []
            seen: set[str] = set()
            for page in self._decode_pages(proc.stdout):
                for record in page:
                    if record.name in seen:
                        raise ParseError(f"duplicate repository name {record.name!r} in listing")
                    seen.add(record.name)
                    repos.append(record.to_repository(protocol))
        except MirrorError as err:
            raise err.with_context(f"failed to list repositories for {account}")
        return iter(repos)
