from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

import yaml

from prefutils.config import resolve_config_path

DEFAULT_LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s]: %(message)s'


def configure_logging(config_path: Optional[Path] = None, level: Optional[str] = None) -> logging.Logger:
    """Configure root logging for prefutils.

    The level comes from `level` when given, otherwise from `log_level` in
    the YAML config, otherwise WARNING. The config is read directly so
    logging can be set up before the config is validated.
    """
    log_level = logging.WARNING
    name = level
    if name is None:
        cfg_path = resolve_config_path(config_path)
        if cfg_path.exists():
            try:
                with cfg_path.open('r', encoding='utf-8') as _f:
                    _cfg = yaml.safe_load(_f) or {}
                    if isinstance(_cfg, dict):
                        name = _cfg.get('log_level')
            except (OSError, yaml.YAMLError):
                # If config parse fails, fall back to default level
                name = None
    if isinstance(name, str):
        numeric = getattr(logging, name.upper(), None)
        if isinstance(numeric, int):
            log_level = numeric

    # Reconfigure root handlers to use the selected level and format
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=log_level, format=DEFAULT_LOG_FORMAT)
    logger = logging.getLogger('prefutils')
    logger.debug("Log level set to %s", logging.getLevelName(log_level))
    return logger
