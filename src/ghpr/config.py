"""Configuration loader for ghpr."""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator

from ghpr.limits import HTTP_TIMEOUT
from ghpr.paths import ensure_directories, get_config_path

if TYPE_CHECKING:
    from pathlib import Path


DEFAULT_API_URL = "https://api.github.com"


class GitHubConfig(BaseModel):
    """Settings for talking to the GitHub REST API."""

    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="REST API root (set for GitHub Enterprise, e.g. https://ghe.example/api/v3)",
    )
    remote: str = Field(default="origin", description="Git remote that points at GitHub")
    timeout: float = Field(default=HTTP_TIMEOUT, gt=0, description="HTTP timeout in seconds")
    default_base_branch: str | None = Field(
        default=None,
        description="Base branch for new pull requests (None = repository default branch)",
    )

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class UIConfig(BaseModel):
    """UI-related user preferences."""

    show_output_panel: bool = Field(
        default=True, description="Show the github output channel on the main screen"
    )


class GhprConfig(BaseModel):
    """Root configuration model."""

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> GhprConfig:
        """Load configuration from TOML file or use defaults."""
        ensure_directories()
        if config_path is None:
            config_path = get_config_path()

        if config_path.exists():
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)

        return cls()
