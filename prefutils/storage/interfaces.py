from typing import Protocol, Iterable, runtime_checkable


@runtime_checkable
class PrefStoreProtocol(Protocol):
    """Preference store protocol mirroring `prefutils.storage.PrefStore`.

    Implementations should follow the semantics documented on the abstract
    base class in `prefutils.storage.base` (defaults for absent keys, no-op
    deletes of absent keys, TypeError from typed setters).
    """

    def get_int(self, key: str, default: int = 0) -> int: ...

    def set_int(self, key: str, value: int) -> None: ...

    def get_float(self, key: str, default: float = 0.0) -> float: ...

    def set_float(self, key: str, value: float) -> None: ...

    def get_string(self, key: str, default: str = "") -> str: ...

    def set_string(self, key: str, value: str) -> None: ...

    def has_key(self, key: str) -> bool: ...

    def delete_key(self, key: str) -> None: ...

    def delete_all(self) -> None: ...

    def keys(self) -> Iterable[str]: ...

    def save(self) -> None: ...
