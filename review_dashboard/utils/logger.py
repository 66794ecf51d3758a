"""Logging configuration for the review dashboard."""

import logging
import time
from functools import wraps
from typing import Optional


DEFAULT_LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logging(log_level: str = 'INFO',
                  log_file: Optional[str] = None,
                  log_format: Optional[str] = None) -> logging.Logger:
    """Set up logging configuration for the dashboard.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path. Console only when None
        log_format: Log message format string

    Returns:
        Configured dashboard logger
    """
    if log_format is None:
        log_format = DEFAULT_LOG_FORMAT

    # Convert string level to logging constant
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    # Clear any existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=handlers
    )

    logger = logging.getLogger('ReviewDashboard')
    logger.info(f"Logging initialized - Level: {log_level}, File: {log_file or 'console only'}")

    return logger


def get_component_logger(component_name: str) -> logging.Logger:
    """Get a logger for a specific component.

    Args:
        component_name: Name of the component (e.g., 'analysis.metrics')

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f'ReviewDashboard.{component_name}')


def log_execution_time(logger: logging.Logger, operation_name: str):
    """Decorator to log execution time of operations.

    Args:
        logger: Logger instance to use
        operation_name: Name of the operation being timed

    Returns:
        Decorator function
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()

            try:
                result = func(*args, **kwargs)
                execution_time = time.time() - start_time
                logger.debug(f"{operation_name} completed in {execution_time:.3f} seconds")
                return result

            except Exception as e:
                execution_time = time.time() - start_time
                logger.error(f"{operation_name} failed after {execution_time:.3f} seconds: {e}")
                raise

        return wrapper
    return decorator
