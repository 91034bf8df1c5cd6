from __future__ import annotations

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Application config (env or .env), e.g. GHMIRROR_ROOT=/srv/mirrors."""

    model_config = SettingsConfigDict(env_prefix="GHMIRROR_", env_file=None, extra="ignore")

    gh_bin: str = Field(default="gh")
    git_bin: str = Field(default="git")
    root: str | None = Field(default=None)
    https: bool = Field(default=False)


def get_settings() -> Settings:
    return Settings()
