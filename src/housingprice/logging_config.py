"""
Logging Setup

All modules log through children of the ``housingprice`` logger, which
writes to stdout and, when ``HOUSINGPRICE_LOG_FILE`` is set, to a file.

    from housingprice.logging_config import get_logger

    logger = get_logger(__name__)
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from housingprice.config import get_config

PACKAGE_LOGGER = "housingprice"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers held at WARNING so request lines don't drown training output
QUIET_LOGGERS = ("werkzeug", "flask_cors")

_configured = False


def _build_handlers(level: int, log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    force: bool = False,
) -> None:
    """Attach handlers to the package logger.

    Args:
        level: Level name; falls back to ``HOUSINGPRICE_LOG_LEVEL``.
        log_file: Extra log file; falls back to ``HOUSINGPRICE_LOG_FILE``.
        force: Replace handlers even when logging is already set up.
    """
    global _configured

    if _configured and not force:
        return

    settings = get_config().logging
    numeric_level = getattr(logging, (level or settings.level).upper(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)
    package_logger.handlers.clear()
    for handler in _build_handlers(numeric_level, log_file or settings.log_file):
        package_logger.addHandler(handler)
    package_logger.propagate = False

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``housingprice`` namespace, setting up logging on first use."""
    if not _configured:
        setup_logging()

    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def reset_logging() -> None:
    """Drop package handlers so the next call reconfigures (used by tests)."""
    global _configured
    _configured = False
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()
