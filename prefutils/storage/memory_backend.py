"""Simple memory-backed preference store

This store keeps values in a plain dict `{<key>: <value>}` and is the
natural fake for tests.
"""
from __future__ import annotations
from threading import RLock
from typing import Dict, Any, Iterable

from .base import PrefStore


class MemoryPrefStore(PrefStore):
    def __init__(self, initial: Dict[str, Any] | None = None):
        self._lock = RLock()
        self._store: Dict[str, Any] = dict(initial or {})

    def _read(self, key: str) -> Any:
        with self._lock:
            return self._store[key]

    def _write(self, key: str, value: Any) -> None:
        with self._lock:
            self._store[key] = value

    def _remove(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def keys(self) -> Iterable[str]:
        with self._lock:
            return sorted(self._store.keys())

    def delete_all(self) -> None:
        with self._lock:
            self._store.clear()

    def snapshot(self) -> Dict[str, Any]:
        """Return a shallow copy of every stored key and value."""
        with self._lock:
            return dict(self._store)
