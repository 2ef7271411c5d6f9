"""Filesystem locations, overridable with GHPR_DATA_DIR and GHPR_CONFIG_DIR."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from platformdirs import user_config_dir, user_data_dir

if TYPE_CHECKING:
    from collections.abc import Callable

APP_NAME = "ghpr"
DATA_DIR_ENV = "GHPR_DATA_DIR"
CONFIG_DIR_ENV = "GHPR_CONFIG_DIR"


def _resolve(env_var: str, platform_default: Callable[[str], str]) -> Path:
    return Path(os.environ.get(env_var) or platform_default(APP_NAME))


def get_data_dir() -> Path:
    """State file and exported debug logs live here."""
    return _resolve(DATA_DIR_ENV, user_data_dir)


def get_config_dir() -> Path:
    return _resolve(CONFIG_DIR_ENV, user_config_dir)


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


def get_state_path() -> Path:
    return get_data_dir() / "state.json"


def get_debug_log_path() -> Path:
    return get_data_dir() / "debug.log"


def ensure_directories() -> None:
    for directory in (get_data_dir(), get_config_dir()):
        directory.mkdir(parents=True, exist_ok=True)
