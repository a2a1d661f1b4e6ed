"""
Package logging.

Every easycolor logger is a child of the ``easycolor`` logger, which owns the
only handler. That logger does not propagate, so an application that also
configures the root logger sees each record once.

>>> from easycolor.log import get_logger
>>> get_logger("codec").name
'easycolor.codec'
"""
from __future__ import annotations
import logging
from typing import Optional, Union

import colorlog

PACKAGE_LOGGER = "easycolor"
LOG_FORMAT = "%(name)s/%(levelname)-8s | %(message)s"

_handler: Optional[logging.Handler] = None


def _build_handler(use_color: bool) -> logging.Handler:
    handler = colorlog.StreamHandler()
    if use_color:
        handler.setFormatter(colorlog.ColoredFormatter(
            "%(log_color)s" + LOG_FORMAT + "%(reset)s"))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def configure(use_color: bool = False, level: Union[int, str, None] = None) -> logging.Logger:
    """
    Install the package handler, replacing any previous one.

    Args:
        use_color: Format records through colorlog's ColoredFormatter.
        level: Optional level for the ``easycolor`` logger.

    Returns:
        The ``easycolor`` logger.
    """
    global _handler
    package = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        package.removeHandler(_handler)
    _handler = _build_handler(use_color)
    package.addHandler(_handler)
    package.propagate = False
    if level is not None:
        package.setLevel(level)
    return package


def get_logger(name: str) -> logging.Logger:
    """Return the easycolor logger for ``name``, prefixing the package name if missing."""
    if _handler is None:
        configure()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
