from __future__ import annotations

import time
from typing import Any

_store: dict[str, dict[str, Any]] = {}
_DEFAULT_TTL = 60 * 60 * 24  # 1 day


def _expired(entry: dict[str, Any], ttl: float) -> bool:
    return time.time() - entry["updated_at"] >= ttl


def store_get(key: str, ttl: float = _DEFAULT_TTL) -> Any | None:
    entry = _store.get(key)
    if entry is None:
        return None
    if _expired(entry, ttl):
        del _store[key]
        return None
    return entry["value"]


def store_set(key: str, value: Any) -> None:
    _store[key] = {"value": value, "updated_at": time.time()}


def store_delete(key: str) -> bool:
    return _store.pop(key, None) is not None


def purge_expired(ttl: float = _DEFAULT_TTL) -> int:
    """Drop expired entries and return how many live ones remain."""
    for key in [k for k, entry in _store.items() if _expired(entry, ttl)]:
        del _store[key]
    return len(_store)


def clear_store() -> None:
    _store.clear()
