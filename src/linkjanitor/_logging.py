"""Logging configuration for linkjanitor.

Modules log through ``logging.getLogger(__name__)``. The level comes from
the LINKJANITOR_LOG_LEVEL environment variable, then from the ``[logging]``
config section, and defaults to WARNING.
"""

import logging
import os
import sys


def configure_logging(level_name: str | None = None) -> None:
    """Configure the package logger. Subsequent calls are no-ops."""
    root_logger = logging.getLogger("linkjanitor")
    if root_logger.handlers:
        return

    level_name = os.environ.get("LINKJANITOR_LOG_LEVEL") or level_name or "WARNING"
    level = getattr(logging, level_name.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt="[%(levelname)s] %(name)s: %(message)s"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    root_logger.propagate = False
