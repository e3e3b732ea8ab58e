"""Logging setup shared by all modules."""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

_configured = False


def setup_logger(name: str = "charades", level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the ``charades`` namespace.

    The first call installs a stderr handler on the package root logger.
    The level comes from ``level``, then the ``CHARADES_LOG_LEVEL``
    environment variable, then WARNING.

    Args:
        name: Logger name (usually ``__name__``)
        level: Optional level name such as "debug" or "INFO"

    Returns:
        Configured logger
    """
    global _configured

    root = logging.getLogger("charades")
    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(os.environ.get("CHARADES_LOG_LEVEL", "WARNING").upper())
        _configured = True

    if level:
        root.setLevel(level.upper())

    if name == "charades" or name.startswith("charades."):
        return logging.getLogger(name)
    return root.getChild(name)
