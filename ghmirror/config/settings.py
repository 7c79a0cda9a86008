from __future__ import annotations

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import API_BASE, DEFAULT_DEST, DEFAULT_GIT_BIN, HTTP_TIMEOUT_SEC

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Application config (env or .env)."""

    model_config = SettingsConfigDict(env_prefix="GHMIRROR_", env_file=None, extra="ignore")

    github_token: str | None = Field(
        default=None, validation_alias=AliasChoices("GITHUB_TOKEN", "GHMIRROR_TOKEN")
    )
    api_base: str = Field(default=API_BASE)
    git_bin: str = Field(default=DEFAULT_GIT_BIN)
    http_timeout: float = Field(default=HTTP_TIMEOUT_SEC)
    default_dest: str = Field(default=DEFAULT_DEST)


def get_settings() -> Settings:
    return Settings()
