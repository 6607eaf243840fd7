"""Preference store kept in a single file.

The whole mapping is loaded from the file on first access and written back
through a serializer. Writes are atomic: the payload goes to a temporary
file which is then renamed over the target.
"""
from __future__ import annotations
import logging
import os
from pathlib import Path
from threading import RLock
from typing import Any, Dict, Iterable

from prefutils.errors import PrefStoreError

from .base import PrefStore
from .serializer import JSONSerializer, Serializer

logger = logging.getLogger(__name__)


class FilePrefStore(PrefStore):
    """File-backed preference store.

    Parameters
    - file_path: path of the store file. When it has no suffix, the
      serializer's extension is appended.
    - serializer: converts the mapping to bytes; JSON by default.
    - autosave: when True every mutation is written immediately, otherwise
      changes stay in memory until `save()` is called.
    """

    def __init__(
        self,
        file_path: str | Path,
        serializer: Serializer | None = None,
        autosave: bool = True,
    ) -> None:
        self.serializer = serializer or JSONSerializer()
        self.autosave = autosave
        self.file_path = self._with_extension(Path(file_path))
        self._lock = RLock()
        self._data: Dict[str, Any] = {}
        self._loaded = False
        self._dirty = False

    def _with_extension(self, p: Path) -> Path:
        # An explicit suffix on the configured path is authoritative
        if p.suffix:
            return p
        return p.with_name(p.name + self.serializer.extension)

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        if self.file_path.exists():
            with open(self.file_path, "rb") as f:
                raw = f.read()
            try:
                data = self.serializer.load(raw)
            except PrefStoreError:
                raise
            except Exception as e:
                raise PrefStoreError(f"failed to read preference store {self.file_path}") from e
            if not isinstance(data, dict):
                raise PrefStoreError(f"invalid preference store {self.file_path}: expected mapping")
            self._data = data
            logger.debug("FilePrefStore loaded %s (%d keys)", self.file_path, len(data))
        self._loaded = True

    def _changed(self) -> None:
        self._dirty = True
        if self.autosave:
            self.save()

    def _read(self, key: str) -> Any:
        with self._lock:
            self._ensure_loaded()
            return self._data[key]

    def _write(self, key: str, value: Any) -> None:
        with self._lock:
            self._ensure_loaded()
            self._data[key] = value
            self._changed()

    def _remove(self, key: str) -> None:
        with self._lock:
            self._ensure_loaded()
            if key in self._data:
                del self._data[key]
                self._changed()

    def keys(self) -> Iterable[str]:
        with self._lock:
            self._ensure_loaded()
            return sorted(self._data.keys())

    def delete_all(self) -> None:
        with self._lock:
            self._ensure_loaded()
            self._data.clear()
            self._changed()

    def save(self) -> None:
        with self._lock:
            if not self._dirty:
                return
            path = self.file_path
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(path.suffix + ".tmp")
            payload = self.serializer.dump(self._data)
            with open(tmp, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            tmp.replace(path)
            self._dirty = False
            logger.debug("FilePrefStore saved %s (%d bytes)", path, len(payload))

    def reload(self) -> None:
        """Discard unsaved changes and read the file again on next access."""
        with self._lock:
            self._data = {}
            self._loaded = False
            self._dirty = False
