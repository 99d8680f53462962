"""Logging configuration for brain-mode.

:func:`setup_logging` attaches one stderr handler to the ``brainmode``
logger. Loggers of the host application and of other libraries are left
alone, so brain-mode can be embedded without taking over the root logger.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "brainmode"


class _BrainModeHandler(logging.StreamHandler):
    """Marks the handler installed by :func:`setup_logging`."""


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the ``brainmode`` logger.

    Only warnings and above are shown by default. In verbose mode debug
    records are included, with timestamps and source locations. Calling
    this again replaces the handler installed by the previous call.

    Args:
        verbose: If ``True``, log at ``DEBUG`` with a detailed format.

    Returns:
        The configured ``brainmode`` logger.
    """
    if verbose:
        level = logging.DEBUG
        fmt = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d  %(message)s"
        datefmt = "%H:%M:%S"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"
        datefmt = None

    handler = _BrainModeHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))

    package_logger = logging.getLogger(LOGGER_NAME)
    for old in [h for h in package_logger.handlers if isinstance(h, _BrainModeHandler)]:
        package_logger.removeHandler(old)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    package_logger.debug("Logging initialised (level=%s)", logging.getLevelName(level))
    return package_logger
