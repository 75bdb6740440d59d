"""Logging setup for command-line use."""
from __future__ import annotations

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "RESULTBRIDGE_LOG_LEVEL"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a rich handler to the ``resultbridge`` logger (idempotent)."""

    level = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    logger = logging.getLogger("resultbridge")
    logger.setLevel(level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
    return logger
