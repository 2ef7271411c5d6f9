"""Timeouts, buffer sizes and the debug-build switch."""

from __future__ import annotations

import os

from ghpr.version import installed_version, is_prerelease

# Seconds
HTTP_TIMEOUT = 30.0
GIT_TIMEOUT = 60.0
STATE_LOCK_TIMEOUT = 10.0

MAX_LOG_MESSAGE_LENGTH = 4096
MAX_LOG_LINES = 2000
MAX_OUTPUT_LINES = 1000
PULL_REQUESTS_PER_PAGE = 100


def _debug_enabled() -> bool:
    """GHPR_DEBUG forces the switch either way; otherwise only pre-release builds."""
    flag = os.environ.get("GHPR_DEBUG", "").strip().lower()
    if flag in {"1", "true", "yes"}:
        return True
    if flag in {"0", "false", "no"}:
        return False
    return is_prerelease(installed_version())


DEBUG_BUILD: bool = _debug_enabled()
"""Enables the F12 debug log viewer."""
