"""
This module configures the logger shared by the combat model.
"""

import logging
import time
from pathlib import Path
from typing import Optional

from src.combat.config.combat_config import CombatConfig

LOGGER_NAME = "combat_logger"


def get_combat_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def setup_combat_logger(
    config: CombatConfig, battle_name: Optional[str] = None
) -> logging.Logger:
    """
    Configures the combat logger according to `config`.

    When logging is disabled the logger is silenced with a NullHandler.
    Otherwise it writes plain messages to a timestamped file in
    `config.log_dir`.
    """
    logger = get_combat_logger()

    if not config.enable_logging:
        _close_handlers(logger)
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)
        return logger

    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    sanitized_name = "".join(
        c for c in (battle_name or "battle") if c.isalnum() or c in " _"
    ).rstrip()
    timestamp = int(time.time())
    log_filepath = log_dir / f"{sanitized_name.replace(' ', '_')}_{timestamp}.log"

    logger.setLevel(config.log_level)
    logger.propagate = False

    _close_handlers(logger)

    file_handler = logging.FileHandler(log_filepath, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(file_handler)

    return logger
