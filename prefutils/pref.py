"""A single persisted scalar value."""
from __future__ import annotations
from typing import Callable, Generic, TypeVar

T = TypeVar("T", int, float, str, bool)


class Pref(Generic[T]):
    """Persisted scalar cell bound to one key of a preference store.

    The getter receives the key and the default and must return the default
    when the key is absent. Nothing is cached: every read and write goes
    straight to the store.
    """

    def __init__(
        self,
        key: str,
        getter: Callable[[str, T], T],
        setter: Callable[[str, T], None],
        default: T,
    ) -> None:
        self.key = key
        self._getter = getter
        self._setter = setter
        self.default = default

    @property
    def value(self) -> T:
        return self._getter(self.key, self.default)

    @value.setter
    def value(self, new: T) -> None:
        self._setter(self.key, new)

    def __repr__(self) -> str:  # pragma: no cover - convenience
        return f"Pref(key={self.key!r}, value={self.value!r})"
