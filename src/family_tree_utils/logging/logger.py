"""
Logging setup for family_tree_utils.

One base logger, ``family_tree_utils``, owns two handlers:

* a log file (``logs/family_tree_utils.log`` unless configured otherwise),
  optionally rotating;
* a stderr console handler that stays at WARNING so reports printed on
  stdout are never interleaved with log lines.

Module loggers are plain children of the base logger and only propagate.
``enable_debug`` (``--verbose`` or ``debug: true``) lowers every level.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import List

from family_tree_utils.config import get_config

BASE_LOGGER_NAME = "family_tree_utils"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROTATE_BYTES = 1024 * 1024

_handlers: List[logging.Handler] = []


def _file_handler(level: int) -> logging.Handler | None:
    cfg = get_config()
    log_dir = cfg.logs_dir
    path = log_dir / cfg.logging.get("file", "family_tree_utils.log")

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        if cfg.logging.get("rotate", False):
            handler: logging.Handler = RotatingFileHandler(
                path, maxBytes=ROTATE_BYTES, backupCount=3, encoding="utf-8"
            )
        else:
            handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        # Read-only install location: console logging still works.
        return None

    handler.setLevel(level)
    return handler


def _base_logger() -> logging.Logger:
    base = logging.getLogger(BASE_LOGGER_NAME)
    if _handlers:
        return base

    cfg = get_config()
    level = getattr(logging, str(cfg.logging.get("level", "INFO")).upper(), logging.INFO)

    console = logging.StreamHandler()
    console.setLevel(logging.WARNING)
    _handlers.append(console)

    file_handler = _file_handler(level)
    if file_handler is not None:
        _handlers.append(file_handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _handlers:
        handler.setFormatter(formatter)
        base.addHandler(handler)

    base.setLevel(level)
    base.propagate = False

    if cfg.debug:
        enable_debug()
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``name`` as a child of the shared base logger."""
    base = _base_logger()
    if not name or name == BASE_LOGGER_NAME:
        return base
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def enable_debug() -> None:
    """Lower the base logger and all of its handlers to DEBUG."""
    base = _base_logger()
    base.setLevel(logging.DEBUG)
    for handler in base.handlers:
        handler.setLevel(logging.DEBUG)
