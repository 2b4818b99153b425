"""Mini README: Application-wide logging helpers for Surveyplan.

Structure:
    * configure_root_logger - install the shared stream handler and level.
    * get_logger - factory returning module loggers with baseline setup.

Usage:
    Modules call ``get_logger(__name__)`` at import time. Command line entry
    points call ``configure_root_logger`` with the level taken from settings;
    repeated calls only adjust the level so handlers are
    never duplicated.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_HANDLER: Optional[logging.Handler] = None


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger once and apply ``level`` on every call."""

    global _HANDLER
    root_logger = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root_logger.setLevel(level)
    if _HANDLER is not None:
        return

    _HANDLER = logging.StreamHandler()
    _HANDLER.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(_HANDLER)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if _HANDLER is None:
        configure_root_logger()
    return logging.getLogger(name)
