"""Application logger writing to a rotating file in platformdirs user_log_dir.

Nothing is logged to the terminal; stdout belongs to command output. Set
``REMINDCTL_LOG_LEVEL`` (e.g. ``WARNING``) to change verbosity.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "remindctl"
_LOG_FILE = "remindctl.log"
_LEVEL_ENV = "REMINDCTL_LOG_LEVEL"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _configure() -> logging.Logger:
    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger = logging.getLogger(_APP_NAME)
    level_name = os.environ.get(_LEVEL_ENV, "DEBUG").upper()
    logger.setLevel(getattr(logging, level_name, logging.DEBUG))
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or its ``name`` child.

    The file handler is attached on first call.
    """
    global _logger
    if _logger is None:
        _logger = _configure()
    return _logger.getChild(name) if name else _logger


def reset_logger() -> None:
    """Detach handlers so the next ``get_logger`` call reconfigures."""
    global _logger
    logger = logging.getLogger(_APP_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    _logger = None
