"""
Logging configuration for the Book Manager API.

``setup_logging`` configures the ``book_manager_api`` package logger,
the parent of every module logger in the project (repository, service,
routes, error handlers).  Handlers go on the package logger rather than
the root logger, so the API's records can be sent to their own file
without changing how uvicorn or the test runner log.  Records still
propagate to the root logger.

Handlers are attached at most once per process, so repeated
``create_app`` calls (as in the test suite) do not duplicate output; a
later call only adjusts the level.
"""

import logging
from pathlib import Path
from typing import Optional


PACKAGE_LOGGER = "book_manager_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the package logger and return it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the API's records as well.
        Missing parent directories are created.  If omitted or empty,
        only the console is used.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    # The console handler is only needed when nothing above us prints.
    if not logging.getLogger().handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
