"""TUI command."""

from __future__ import annotations

import tomllib
from pathlib import Path

import click
from pydantic import ValidationError

from ghpr.config import GhprConfig
from ghpr.paths import get_config_path


def load_config_or_exit(config_path: Path | None = None) -> GhprConfig:
    """Load config, turning validation errors into a readable CLI failure."""
    path = config_path or get_config_path()
    try:
        return GhprConfig.load(path)
    except (ValidationError, tomllib.TOMLDecodeError) as exc:
        raise click.ClickException(f"Invalid config file {path}:\n{exc}") from exc


@click.command()
@click.argument(
    "path",
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml",
)
def tui(path: Path | None, config_path: Path | None) -> None:
    """Open the pull request TUI for PATH (default: current directory)."""
    from ghpr.ui.app import run

    run(path or Path.cwd(), load_config_or_exit(config_path))
