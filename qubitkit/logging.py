"""Logging helpers for qubitkit.

Loggers live under the ``qubitkit.`` namespace, write to stderr and do not
propagate to the root logger. The library only emits DEBUG records for
collapse and QFT construction and a WARNING for the collapse fallback.
"""

import logging
import sys
from typing import Dict, Optional, Union

_level = logging.WARNING
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: Dict[str, logging.Logger] = {}


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Cached logger named ``qubitkit.<name>``; None gives the package logger."""
    name = name or "qubitkit"
    if name != "qubitkit" and not name.startswith("qubitkit."):
        name = f"qubitkit.{name}"

    logger = _loggers.get(name)
    if logger is None:
        logger = logging.getLogger(name)
        logger.setLevel(_level)
        logger.addHandler(logging.StreamHandler(sys.stderr))
        logger.handlers[-1].setFormatter(logging.Formatter(_FORMAT))
        logger.propagate = False
        _loggers[name] = logger
    return logger


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    format_string: Optional[str] = None,
    stream=None,
) -> None:
    """Point every qubitkit logger at one stream with one level.

    Args:
        level: A ``logging`` level or its name ('DEBUG', 'INFO', ...).
            Loggers created afterwards start at this level too.
        format_string: Record format; None keeps the default.
        stream: Output stream (default: sys.stderr).
    """
    global _level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    _level = level

    formatter = logging.Formatter(format_string or _FORMAT)
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
