from __future__ import annotations

import logging

from rich.logging import RichHandler

from resultbridge.log import LOG_LEVEL_ENV, setup_logging


def test_setup_logging_uses_env_level_and_is_idempotent(monkeypatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "info")
    logger = setup_logging()
    setup_logging()
    assert logger.name == "resultbridge"
    assert logger.level == logging.INFO
    assert sum(isinstance(handler, RichHandler) for handler in logger.handlers) == 1


def test_explicit_level_wins_over_env(monkeypatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
    assert setup_logging("debug").level == logging.DEBUG
