"""
lambdadepot Logging Utilities

This module configures logging for applications using lambdadepot. The
library itself only logs through module loggers under the ``lambdadepot``
namespace and never installs handlers on import; call ``initialize_logger``
(or ``config_parser.configure_from_file``) to route those records somewhere.
"""

import functools
import logging
import os
import time
from datetime import datetime
from typing import Any, Callable, Optional

ROOT_LOGGER_NAME = "lambdadepot"

LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR
}


def resolve_log_level(log_level: str) -> int:
    """
    Map a level name to a logging constant.

    Args:
        log_level (str): "debug", "info", "warning" or "error", any case.

    Returns:
        int: The logging level, INFO for unknown names.
    """
    return LEVEL_MAP.get(log_level.lower(), logging.INFO)


def initialize_logger(log_path: Optional[str] = None, log_level: str = "info") -> logging.Logger:
    """
    Initialize the logging system.

    Args:
        log_path (str, optional): Directory where log files should be stored.
                                  If None, only the console handler is installed.
        log_level (str): Minimum log level to record. Options include:
                         "debug", "info", "warning", "error".

    Returns:
        logging.Logger: The configured ``lambdadepot`` logger.
    """
    level = resolve_log_level(log_level)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Clear existing handlers
    if logger.handlers:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    if log_path:
        os.makedirs(log_path, exist_ok=True)
        log_file = os.path.join(log_path, f"lambdadepot_{datetime.now().strftime('%Y%m%d')}.log")
        file_handler = logging.FileHandler(log_file)
        file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                                           datefmt='%Y-%m-%d %H:%M:%S')
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s',
                                          datefmt='%H:%M:%S')
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    logger.info("Logging system initialized with level: %s", logging.getLevelName(level))

    return logger


def timer(operation_name: str, logger: Optional[logging.Logger] = None) -> Callable:
    """
    Function decorator to time and log the execution of functions.

    Args:
        operation_name (str): Name of the operation to log.
        logger (logging.Logger, optional): Logger to write to. Defaults to
                                           the ``lambdadepot`` logger.

    Returns:
        Callable: Decorator function that times and logs the execution.
    """
    target = logger or logging.getLogger(ROOT_LOGGER_NAME)

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                execution_time = time.perf_counter() - start_time
                target.info("Performance - %s - Time: %.4fs - function: %s",
                            operation_name, execution_time, func.__name__)
        return wrapper
    return decorator
