"""
pngsecret logger
Logging setup shared by the command line modules.
"""

import logging
import sys
from functools import wraps
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Callable

from config import LOGGING_SETTINGS

_CONSOLE_HANDLER_NAME = "pngsecret-console"


def setup_logger(name, level=None):
    """
    Create and configure a logger.

    Args:
        name: logger name (normally ``__name__``)
        level: file log level (taken from config when omitted)

    Returns:
        logging.Logger: Logger object
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers twice
    if logger.handlers:
        return logger

    if level is None:
        level = LOGGING_SETTINGS.get("level", "INFO")
    console_level = LOGGING_SETTINGS.get("console_level", "CRITICAL")
    logger.setLevel(logging.DEBUG)

    log_dir = Path(LOGGING_SETTINGS.get("log_dir", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOGGING_SETTINGS.get("log_file", "pngsecret.log")

    # Rotating file handler
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOGGING_SETTINGS.get("max_bytes", 2 * 1024 * 1024),
        backupCount=LOGGING_SETTINGS.get("backup_count", 3),
        encoding="utf-8",
    )
    file_handler.setLevel(getattr(logging, level))

    # stdout carries decoded messages and listings, so diagnostics go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(_CONSOLE_HANDLER_NAME)
    console_handler.setLevel(getattr(logging, console_level))

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def set_console_level(level):
    """Change the console level of every logger created by :func:`setup_logger`."""

    if isinstance(level, str):
        level = getattr(logging, level.upper())

    for logger in list(logging.Logger.manager.loggerDict.values()):
        if not isinstance(logger, logging.Logger):
            continue
        for handler in logger.handlers:
            if handler.get_name() == _CONSOLE_HANDLER_NAME:
                handler.setLevel(level)


def log_operation(arg, operation=None, status="SUCCESS", details=None):
    """Decorator/utility that records the status of an operation.

    Two forms are supported:

    * as a decorator: ``@log_operation("Encode")``
    * as a direct call: ``log_operation(logger, "Encode", status="FAILED")``
    """

    # Decorator usage (argument is the operation name)
    if operation is None and isinstance(arg, str):
        operation_name = arg

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                logger = logging.getLogger(func.__module__)
                logger.info(f"[{operation_name}] Started")
                try:
                    result = func(*args, **kwargs)
                except Exception as exc:
                    logger.error(f"[{operation_name}] FAILED: {exc}", exc_info=True)
                    raise
                logger.info(f"[{operation_name}] Completed")
                return result

            return wrapper

        return decorator

    # Direct usage (first argument is a logger object)
    if operation is not None:
        logger = arg
        msg = f"[{operation}] Status: {status}"
        if details:
            msg += f" | Details: {details}"

        if status and status.upper() == "FAILED":
            logger.error(msg)
        else:
            logger.info(msg)
        return None

    raise TypeError(
        "log_operation must be used as a decorator with an operation name "
        "or called with a logger and an operation name"
    )
