"""Preference store package for prefutils."""
from __future__ import annotations
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from prefutils.errors import PrefConfigError

from .base import PrefStore
from .file_backend import FilePrefStore
from .memory_backend import MemoryPrefStore
from .serializer import get_serializer

if TYPE_CHECKING:
    from prefutils.config import StoreConfig

logger = logging.getLogger(__name__)

DEFAULT_STORE_PATH = "data/prefs"


def create_store(
    backend: str = "file",
    serializer: str = "json",
    path: str | Path = DEFAULT_STORE_PATH,
    password: str | None = None,
    key: bytes | str | None = None,
    autosave: bool = True,
) -> PrefStore:
    """Build a preference store from plain options.

    `backend` is `memory` or `file`. The serializer options only apply to
    the file backend.
    """
    if backend == "memory":
        return MemoryPrefStore()
    if backend == "file":
        ser = get_serializer(serializer, key=key, password=password)
        store = FilePrefStore(path, serializer=ser, autosave=autosave)
        logger.debug("Created %s file store at %s", serializer, store.file_path)
        return store
    raise PrefConfigError(f"unknown store backend {backend!r}")


def create_store_from_config(cfg: "StoreConfig") -> PrefStore:
    return create_store(
        backend=cfg.backend,
        serializer=cfg.serializer,
        path=cfg.path,
        password=cfg.password,
        key=cfg.key,
        autosave=cfg.autosave,
    )


__all__ = [
    "PrefStore",
    "MemoryPrefStore",
    "FilePrefStore",
    "create_store",
    "create_store_from_config",
]
