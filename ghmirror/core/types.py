"""Small types and Enums used by ghmirror."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .constants import AUTHENTICATED_REPOS_ENDPOINT, USER_REPOS_ENDPOINT


class Protocol(str, Enum):
    """Transport used for clone URLs."""

    ssh = "ssh"
    https = "https"


class MirrorAction(str, Enum):
    clone = "clone"
    update = "update"


@dataclass(frozen=True)
class AccountSelector:
    """Either an explicit GitHub login or the account behind gh's credentials."""

    login: str | None = None

    @classmethod
    def user(cls, login: str) -> AccountSelector:
        return cls(login=login)

    @classmethod
    def authenticated(cls) -> AccountSelector:
        return cls(login=None)

    @property
    def endpoint(self) -> str:
        if self.login is None:
            return AUTHENTICATED_REPOS_ENDPOINT
        return USER_REPOS_ENDPOINT.format(login=self.login)

    def __str__(self) -> str:
        return "the authenticated user" if self.login is None else f"user {self.login}"


class Repository(BaseModel):
    """One remote repository: local directory name + URL handed to git."""

    model_config = ConfigDict(frozen=True)

    name: str
    clone_url: str


@dataclass
class MirrorSummary:
    cloned: int = 0
    updated: int = 0

    def record(self, action: MirrorAction) -> None:
        if action is MirrorAction.clone:
            self.cloned += 1
        else:
            self.updated += 1

    def __str__(self) -> str:
        return f"cloned={self.cloned}, updated={self.updated}"
