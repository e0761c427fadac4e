"""Logging setup using loguru.

Library modules log diagnostics with ``from loguru import logger``; the
CLI calls ``configure_logging`` once to pick the level. Flows keep using
``print`` for progress (Prefect routes it via ``log_prints=True``).
"""

from __future__ import annotations

import logging
import sys

from loguru import logger

_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | {name} - {message}"


def configure_logging(level: str = "INFO") -> None:
    """Send loguru output to stderr at ``level`` and quiet chatty HTTP loggers."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=_FORMAT)

    for name in ("urllib3", "requests"):
        logging.getLogger(name).setLevel(logging.WARNING)
