"""
Logging Configuration
Console logging for the service, an optional log file for the
ims_release loggers and SQL statement logging in debug mode
"""

from typing import Optional
import logging
import os
import sys

from ims_release.config import Settings, get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
APP_LOGGER = "ims_release"


def _file_handler(path: str) -> Optional[logging.FileHandler]:
    app_logger = logging.getLogger(APP_LOGGER)
    target = os.path.abspath(path)
    for handler in app_logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
            return None

    directory = os.path.dirname(target)
    if directory:
        os.makedirs(directory, exist_ok=True)
    handler = logging.FileHandler(target, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logging(settings: Optional[Settings] = None):
    """
    Configure application logging

    Sets up:
    - Console handler on stdout at LOG_LEVEL
    - LOG_FILE handler for the ims_release loggers, added once per path
    - SQL statements at INFO when DEBUG is on, warnings only otherwise
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    sql_level = logging.INFO if settings.DEBUG else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(sql_level)

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(log_level)

    if settings.LOG_FILE:
        handler = _file_handler(settings.LOG_FILE)
        if handler:
            app_logger.addHandler(handler)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured at {settings.LOG_LEVEL} level"
        + (f", writing to {settings.LOG_FILE}" if settings.LOG_FILE else "")
    )
