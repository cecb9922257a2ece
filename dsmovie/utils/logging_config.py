"""
Logging configuration for DSMovie.

Everything the application logs goes through the ``dsmovie`` logger
hierarchy (modules use ``logging.getLogger(__name__)``), so configuring
that one logger covers the services, repositories and routers without
touching the handlers uvicorn or the test runner install on the root.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

APP_LOGGER = "dsmovie"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    log_dir: str = "logs",
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> logging.Logger:
    """
    Send the application's log records to the console and, optionally, a file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Logging level of the ``dsmovie`` loggers ('DEBUG', 'INFO', ...)
        log_file: Name of a rotating log file inside ``log_dir``; console only if None
        log_dir: Directory for the log file (default: 'logs')
        max_bytes: Maximum size of the log file before rotation (default: 10MB)
        backup_count: Number of rotated files to keep (default: 5)

    Returns:
        The configured ``dsmovie`` logger
    """
    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(level.upper())

    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_path / log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        ))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        app_logger.addHandler(handler)

    # SQL statements only when asked for through DatabaseManager(echo=True)
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)

    if log_file:
        app_logger.info("Logging to file: %s", log_path / log_file)
    return app_logger


def configure_api_logging(debug: bool = False, level: str = "INFO", log_dir: str = "logs"):
    """
    Configure logging for the API process, writing to ``<log_dir>/api.log``.

    Args:
        debug: Enable debug logging, overriding ``level``
        level: Logging level when not in debug mode
        log_dir: Directory for api.log
    """
    return setup_logging(
        level="DEBUG" if debug else level,
        log_file="api.log",
        log_dir=log_dir
    )
