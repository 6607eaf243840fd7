"""Preference store interface definitions.

Defines the PrefStore abstract class: a flat mapping of string keys to
scalar values with typed accessors in the style of Unity's PlayerPrefs.
Implementations only provide the raw primitives; the typed getters and
setters are shared.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Iterable


class PrefStore(ABC):
    """Abstract preference store.

    Typed getters return the supplied default when the key is absent or
    holds a value of another type. Typed setters reject values of the wrong
    type with `TypeError`. Booleans are not a native type and must be
    encoded as ints by the caller.
    """

    @abstractmethod
    def _read(self, key: str) -> Any:
        """Return the raw value stored under `key`. Raise `KeyError` if absent."""

    @abstractmethod
    def _write(self, key: str, value: Any) -> None:
        """Store `value` under `key`, replacing any previous value."""

    @abstractmethod
    def _remove(self, key: str) -> None:
        """Remove `key`. Removing an absent key is a no-op."""

    @abstractmethod
    def keys(self) -> Iterable[str]:
        """Return the keys currently held by the store."""

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every key and value from the store."""

    def save(self) -> None:
        """Flush pending writes to durable storage. No-op by default."""

    def _get_typed(self, key: str, expected: type, default: Any) -> Any:
        try:
            value = self._read(key)
        except KeyError:
            return default
        if type(value) is not expected:
            return default
        return value

    def get_int(self, key: str, default: int = 0) -> int:
        return self._get_typed(key, int, default)

    def get_float(self, key: str, default: float = 0.0) -> float:
        return self._get_typed(key, float, default)

    def get_string(self, key: str, default: str = "") -> str:
        return self._get_typed(key, str, default)

    def set_int(self, key: str, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"set_int expects int, got {type(value).__name__}")
        self._write(key, value)

    def set_float(self, key: str, value: float) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"set_float expects float, got {type(value).__name__}")
        self._write(key, float(value))

    def set_string(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"set_string expects str, got {type(value).__name__}")
        self._write(key, value)

    def has_key(self, key: str) -> bool:
        try:
            self._read(key)
        except KeyError:
            return False
        return True

    def delete_key(self, key: str) -> None:
        self._remove(key)
