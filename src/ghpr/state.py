"""Persisted key/value state that survives restarts (token, notified version)."""

from __future__ import annotations

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Final

import aiofiles
from filelock import FileLock

from ghpr.debug_log import log
from ghpr.limits import STATE_LOCK_TIMEOUT
from ghpr.paths import get_state_path

TOKEN_KEY: Final = "token"
VERSION_KEY: Final = "version-test"


def atomic_write(path: Path, content: str) -> None:
    """Write a private file atomically to avoid partial/corrupt writes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=".tmp_")
    try:
        os.chmod(tmp_path, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        Path(tmp_path).replace(path)
    except Exception:
        Path(tmp_path).unlink(missing_ok=True)
        raise


def _parse_state(content: str, path: Path) -> dict[str, Any]:
    if not content.strip():
        return {}
    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        log.warning("Ignoring unreadable state file", path=str(path))
        return {}
    if not isinstance(data, dict):
        log.warning("Ignoring state file with unexpected shape", path=str(path))
        return {}
    return data


class GlobalState:
    """JSON-backed global state store.

    Reads are served from memory after `load()`. Writes re-read the file under
    a file lock and merge the single key, so two running instances never drop
    each other's keys.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or get_state_path()
        self._lock = FileLock(str(self.path.with_suffix(".lock")), timeout=STATE_LOCK_TIMEOUT)
        self._data: dict[str, Any] = {}

    async def load(self) -> GlobalState:
        """Load persisted values from disk; a missing file yields an empty store."""
        if not self.path.exists():
            self._data = {}
            return self
        async with aiofiles.open(self.path, encoding="utf-8") as f:
            content = await f.read()
        self._data = _parse_state(content, self.path)
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    async def update(self, key: str, value: Any) -> None:
        """Persist a single key. `None` removes the key."""
        await asyncio.to_thread(self._write_key, key, value)
        if value is None:
            self._data.pop(key, None)
        else:
            self._data[key] = value

    def _write_key(self, key: str, value: Any) -> None:
        with self._lock:
            current: dict[str, Any] = {}
            if self.path.exists():
                current = _parse_state(self.path.read_text(encoding="utf-8"), self.path)
            if value is None:
                current.pop(key, None)
            else:
                current[key] = value
            atomic_write(self.path, json.dumps(current, indent=2, sort_keys=True))

    def clear(self) -> bool:
        """Delete the persisted state file. Returns True if a file was removed."""
        with self._lock:
            existed = self.path.exists()
            self.path.unlink(missing_ok=True)
        self._data = {}
        return existed


__all__ = ["TOKEN_KEY", "VERSION_KEY", "GlobalState", "atomic_write"]
