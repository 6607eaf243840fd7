"""Persistent scalar preferences and lists over flat key-value stores."""

from .errors import PrefConfigError, PrefListIndexError, PrefStoreError
from .pref import Pref
from .pref_list import PrefList
from .storage import FilePrefStore, MemoryPrefStore, PrefStore, create_store
from .typed import (
    bool_list,
    bool_pref,
    float_list,
    float_pref,
    int_list,
    int_pref,
    string_list,
    string_pref,
)

__all__ = [
    "Pref",
    "PrefList",
    "PrefListIndexError",
    "PrefStoreError",
    "PrefConfigError",
    "PrefStore",
    "MemoryPrefStore",
    "FilePrefStore",
    "create_store",
    "int_list",
    "float_list",
    "string_list",
    "bool_list",
    "int_pref",
    "float_pref",
    "string_pref",
    "bool_pref",
]
