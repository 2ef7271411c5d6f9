"""Installed version lookup for --version and the first-run token hint."""

from __future__ import annotations

import re
from functools import cache
from importlib import metadata

DIST_NAME = "ghpr"
FALLBACK_VERSION = "dev"

_PRERELEASE = re.compile(r"(dev|rc|a|b)\d*(\+.*)?$", re.IGNORECASE)


@cache
def installed_version() -> str:
    """Version from package metadata; FALLBACK_VERSION when running from a bare checkout."""
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return FALLBACK_VERSION


def is_prerelease(version: str) -> bool:
    """True for versions like ``0.2.0rc1``, ``0.2.0.dev3`` or the bare ``dev`` fallback."""
    return bool(_PRERELEASE.search(version))


__all__ = ["DIST_NAME", "FALLBACK_VERSION", "installed_version", "is_prerelease"]
