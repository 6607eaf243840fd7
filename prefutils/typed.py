"""Typed constructors binding a preference store into lists and prefs.

Booleans have no native slot in the store and are kept as ints (1/0).
"""
from __future__ import annotations

from prefutils.pref import Pref
from prefutils.pref_list import PrefList
from prefutils.storage.interfaces import PrefStoreProtocol


def _get_bool(store: PrefStoreProtocol, key: str, default: bool = False) -> bool:
    return store.get_int(key, 1 if default else 0) != 0


def _set_bool(store: PrefStoreProtocol, key: str, value: bool) -> None:
    if not isinstance(value, bool):
        raise TypeError(f"bool value expected, got {type(value).__name__}")
    store.set_int(key, 1 if value else 0)


def _make_list(store: PrefStoreProtocol, key: str, getter, setter) -> PrefList:
    return PrefList(key, getter, setter, store.delete_key, store.get_int, store.set_int)


def int_list(store: PrefStoreProtocol, key: str) -> PrefList[int]:
    return _make_list(store, key, store.get_int, store.set_int)


def float_list(store: PrefStoreProtocol, key: str) -> PrefList[float]:
    return _make_list(store, key, store.get_float, store.set_float)


def string_list(store: PrefStoreProtocol, key: str) -> PrefList[str]:
    return _make_list(store, key, store.get_string, store.set_string)


def bool_list(store: PrefStoreProtocol, key: str) -> PrefList[bool]:
    return _make_list(
        store,
        key,
        lambda k: _get_bool(store, k),
        lambda k, v: _set_bool(store, k, v),
    )


def int_pref(store: PrefStoreProtocol, key: str, default: int = 0) -> Pref[int]:
    return Pref(key, store.get_int, store.set_int, default)


def float_pref(store: PrefStoreProtocol, key: str, default: float = 0.0) -> Pref[float]:
    return Pref(key, store.get_float, store.set_float, default)


def string_pref(store: PrefStoreProtocol, key: str, default: str = "") -> Pref[str]:
    return Pref(key, store.get_string, store.set_string, default)


def bool_pref(store: PrefStoreProtocol, key: str, default: bool = False) -> Pref[bool]:
    return Pref(
        key,
        lambda k, d: _get_bool(store, k, d),
        lambda k, v: _set_bool(store, k, v),
        default,
    )


LIST_FACTORIES = {
    "int": int_list,
    "float": float_list,
    "string": string_list,
    "bool": bool_list,
}
