"""Configuration for prefutils.

Configuration lives in a YAML file validated by pydantic models. The file
path is resolved from an explicit argument, then the `PREFUTILS_CONFIG`
environment variable, then `data/config/prefutils.yml`. A missing file
yields the defaults.
"""
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from prefutils.errors import PrefConfigError

logger = logging.getLogger(__name__)

ENV_CONFIG = "PREFUTILS_CONFIG"
DEFAULT_CONFIG_PATH = Path("data/config/prefutils.yml")


class StoreConfig(BaseModel):
    backend: Literal["memory", "file"] = "file"
    path: str = "data/prefs"
    serializer: Literal["json", "yaml", "pickle", "encrypted"] = "json"
    password: Optional[str] = None
    key: Optional[str] = None
    autosave: bool = True


class PrefsConfig(BaseModel):
    log_level: str = "WARNING"
    store: StoreConfig = Field(default_factory=StoreConfig)


def resolve_config_path(config_path: str | Path | None = None) -> Path:
    if config_path:
        return Path(config_path)
    env = os.environ.get(ENV_CONFIG)
    if env:
        return Path(env)
    return DEFAULT_CONFIG_PATH


def load_config(config_path: str | Path | None = None) -> PrefsConfig:
    """Load and validate the configuration file.

    Raises `PrefConfigError` when the file exists but is not a valid
    configuration mapping.
    """
    path = resolve_config_path(config_path)
    if not path.exists():
        logger.debug("No config at %s; using defaults", path)
        return PrefsConfig()
    try:
        with path.open("r", encoding="utf-8") as f:
            data: Any = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise PrefConfigError(f"invalid config {path}: parse error") from e
    if not isinstance(data, dict):
        raise PrefConfigError(f"invalid config {path}: expected mapping")
    try:
        cfg = PrefsConfig.model_validate(data)
    except ValidationError as e:
        raise PrefConfigError(f"invalid config {path}: {e}") from e
    if cfg.store.serializer == "encrypted" and not (cfg.store.password or cfg.store.key):
        raise PrefConfigError("encrypted serializer requires store.password or store.key")
    logger.debug("Loaded config from %s", path)
    return cfg
