"""Command line access to a preference store.

Provides inspection and editing of single keys and of PrefLists stored in
the store configured by the prefutils YAML config. Exit codes: 0 on
success, 1 when a key or index is not found, 2 on usage or configuration
errors.
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import Any, Iterable, Optional

from prefutils.config import load_config
from prefutils.errors import PrefConfigError, PrefListIndexError, PrefStoreError
from prefutils.logging_config import configure_logging
from prefutils.storage import PrefStore, create_store_from_config
from prefutils.typed import LIST_FACTORIES

logger = logging.getLogger(__name__)

VALUE_TYPES = ("int", "float", "string", "bool")
_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def parse_value(raw: str, value_type: str) -> Any:
    """Convert a command line string to the requested value type.

    Raises `ValueError` when `raw` cannot be converted.
    """
    if value_type == "int":
        return int(raw)
    if value_type == "float":
        return float(raw)
    if value_type == "bool":
        lowered = raw.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"invalid bool value: {raw!r}")
    return raw


def _out(line: Any) -> None:
    sys.stdout.write(f"{line}\n")


def cmd_keys(store: PrefStore, args: argparse.Namespace) -> int:
    for key in store.keys():
        _out(key)
    return 0


def cmd_get(store: PrefStore, args: argparse.Namespace) -> int:
    getters = {
        "int": store.get_int,
        "float": store.get_float,
        "string": store.get_string,
        "bool": store.get_int,
    }
    if args.type:
        order = [getters[args.type]]
    else:
        order = [store.get_int, store.get_float, store.get_string]
    for getter in order:
        value = getter(args.key, None)
        if value is not None:
            if args.type == "bool":
                value = "true" if value else "false"
            _out(value)
            return 0
    if store.has_key(args.key):
        sys.stderr.write(f"type mismatch: {args.key} does not hold a {args.type or 'supported'} value\n")
        return 1
    sys.stderr.write(f"key not found: {args.key}\n")
    return 1


def cmd_set(store: PrefStore, args: argparse.Namespace) -> int:
    value = parse_value(args.value, args.type)
    if args.type == "int":
        store.set_int(args.key, value)
    elif args.type == "float":
        store.set_float(args.key, value)
    elif args.type == "bool":
        store.set_int(args.key, 1 if value else 0)
    else:
        store.set_string(args.key, value)
    logger.info("Set %s (%s)", args.key, args.type)
    return 0


def cmd_delete(store: PrefStore, args: argparse.Namespace) -> int:
    store.delete_key(args.key)
    logger.info("Deleted %s", args.key)
    return 0


def cmd_has(store: PrefStore, args: argparse.Namespace) -> int:
    present = store.has_key(args.key)
    _out("true" if present else "false")
    return 0 if present else 1


def _list_for(store: PrefStore, args: argparse.Namespace):
    return LIST_FACTORIES[args.type](store, args.base)


def cmd_list_show(store: PrefStore, args: argparse.Namespace) -> int:
    for value in _list_for(store, args):
        _out(value)
    return 0


def cmd_list_append(store: PrefStore, args: argparse.Namespace) -> int:
    _list_for(store, args).append(parse_value(args.value, args.type))
    return 0


def cmd_list_insert(store: PrefStore, args: argparse.Namespace) -> int:
    _list_for(store, args).insert(args.index, parse_value(args.value, args.type))
    return 0


def cmd_list_remove_at(store: PrefStore, args: argparse.Namespace) -> int:
    _list_for(store, args).remove_at(args.index)
    return 0


def cmd_list_clear(store: PrefStore, args: argparse.Namespace) -> int:
    _list_for(store, args).clear()
    return 0


def get_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="prefutils", description="Inspect and edit a preference store")
    p.add_argument("--config", default=None, help="Path to the prefutils YAML config")
    p.add_argument("--log-level", default=None, help="Override the configured log level")
    sub = p.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("keys", help="List every key in the store")
    sp.set_defaults(func=cmd_keys)

    sp = sub.add_parser("get", help="Print the value of a key")
    sp.add_argument("key")
    sp.add_argument("--type", choices=VALUE_TYPES, default=None)
    sp.set_defaults(func=cmd_get)

    sp = sub.add_parser("set", help="Set the value of a key")
    sp.add_argument("key")
    sp.add_argument("value")
    sp.add_argument("--type", choices=VALUE_TYPES, default="string")
    sp.set_defaults(func=cmd_set)

    sp = sub.add_parser("delete", help="Delete a key")
    sp.add_argument("key")
    sp.set_defaults(func=cmd_delete)

    sp = sub.add_parser("has", help="Check whether a key exists")
    sp.add_argument("key")
    sp.set_defaults(func=cmd_has)

    lp = sub.add_parser("list", help="Operate on a PrefList")
    lsub = lp.add_subparsers(dest="list_command", required=True)

    def _list_cmd(name: str, func, help_text: str, index: bool = False, value: bool = False,
                  typed: bool = True):
        sp = lsub.add_parser(name, help=help_text)
        sp.add_argument("base", help="Base key of the list")
        if index:
            sp.add_argument("index", type=int)
        if value:
            sp.add_argument("value")
        # Items are read and written by type; clear only deletes keys and
        # reads the count, so it does not need one.
        if typed:
            sp.add_argument("--type", choices=VALUE_TYPES, required=True)
        else:
            sp.add_argument("--type", choices=VALUE_TYPES, default="string")
        sp.set_defaults(func=func)

    _list_cmd("show", cmd_list_show, "Print the items of a list")
    _list_cmd("append", cmd_list_append, "Append an item", value=True)
    _list_cmd("insert", cmd_list_insert, "Insert an item before INDEX", index=True, value=True)
    _list_cmd("remove-at", cmd_list_remove_at, "Remove the item at INDEX", index=True)
    _list_cmd("clear", cmd_list_clear, "Remove every item", typed=False)
    return p


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = get_parser().parse_args(list(argv) if argv is not None else None)
    configure_logging(args.config, args.log_level)
    try:
        cfg = load_config(args.config)
        store = create_store_from_config(cfg.store)
        rc = args.func(store, args)
        store.save()
        return rc
    except PrefListIndexError as e:
        logger.warning("Index error: %s", e)
        sys.stderr.write(f"{e}\n")
        return 1
    except PrefConfigError as e:
        logger.error("Configuration error: %s", e)
        sys.stderr.write(f"configuration error: {e}\n")
        return 2
    except PrefStoreError as e:
        logger.error("Store error: %s", e, exc_info=True)
        sys.stderr.write(f"store error: {e}\n")
        return 1
    except ValueError as e:
        logger.warning("Invalid value: %s", e)
        sys.stderr.write(f"{e}\n")
        return 2
