#!/usr/bin/env python3
"""
Logging utilities for the PED Calculator.

One named logger is shared by every module. main reconfigures it through
LoggingManager.setup_logging (level, optional log file, console stream),
and log_step brackets pipeline steps with start and finish lines.
"""
import logging
import os
import sys
import functools
import time
import traceback
from typing import Dict, Any, Optional, Callable, TypeVar

# Type variables for callable
F = TypeVar('F', bound=Callable[..., Any])

DEFAULT_LOGGER_NAME = 'PED_Calculator'
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class LoggerProvider:
    """
    Provides centralized access to the application logger.

    All components share one logger instance; setup_logging replaces it.
    """
    _logger = None

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """
        Get the application logger instance.

        Returns:
            The application logger
        """
        if cls._logger is None:
            cls._logger = logging.getLogger(DEFAULT_LOGGER_NAME)
            if not cls._logger.handlers:
                handler = logging.StreamHandler(sys.stdout)
                handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
                cls._logger.addHandler(handler)
                cls._logger.setLevel(logging.INFO)

        return cls._logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return LoggerProvider.get_logger()


# Initialize logger for module-level functions to use
logger = get_logger()


def log_step(step_name: str = None) -> Callable[[F], F]:
    """
    Decorator to log the start and end of a step with timing information.

    Can be used with or without a step name:

    @log_step
    def my_func():
        ...

    @log_step("Calculating elasticity")
    def my_func():
        ...

    Args:
        step_name: Optional name of the processing step. If None, function name is used.

    Returns:
        Decorated function that logs step start and end
    """
    def decorator(func: F) -> F:
        name = step_name or func.__name__

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            log = get_logger()

            log.info(f"Starting step: {name}")
            start_time = time.time()

            success = False
            try:
                result = func(*args, **kwargs)
                success = True
            except Exception as e:
                log.error(f"Error in step {name}: {str(e)}")
                raise
            finally:
                elapsed = time.time() - start_time
                status = "completed successfully" if success else "failed"
                log.info(f"Step {name} {status} in {elapsed:.2f} seconds")

            return result

        return wrapper

    # Handle case where decorator is used without arguments: @log_step
    if callable(step_name):
        func, step_name = step_name, None
        return decorator(func)

    return decorator


class LoggingManager:
    """
    Manages logging configuration and provides utility methods for logging.
    """

    @staticmethod
    def setup_logging(
        logger_name: str = DEFAULT_LOGGER_NAME,
        log_level: Any = logging.INFO,
        log_file: Optional[str] = None,
        log_format: str = DEFAULT_LOG_FORMAT,
        stream: Any = None
    ) -> logging.Logger:
        """
        Set up logging configuration.

        Args:
            logger_name: Name of the logger
            log_level: Logging level, as a number or a name such as "DEBUG"
            log_file: Path to log file (if None, logs to console only)
            log_format: Format string for log messages
            stream: Console stream; stdout when None

        Returns:
            Configured logger instance
        """
        log = logging.getLogger(logger_name)
        log.setLevel(log_level)

        # Remove existing handlers
        if log.handlers:
            log.handlers.clear()

        formatter = logging.Formatter(log_format)

        console_handler = logging.StreamHandler(stream or sys.stdout)
        console_handler.setFormatter(formatter)
        log.addHandler(console_handler)

        if log_file:
            os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            log.addHandler(file_handler)

        # Update the main logger in LoggerProvider
        LoggerProvider._logger = log

        return log

    @staticmethod
    def log_error(log: logging.Logger, message: str, exception: Exception) -> None:
        """
        Log a failure as "message: exception", with the traceback at debug level.
        """
        log.error(f"{message}: {exception}")
        if exception.__traceback__ is not None:
            log.debug(''.join(traceback.format_tb(exception.__traceback__)))

    @staticmethod
    def log_dict(log: logging.Logger, title: str, data: Dict[str, Any]) -> None:
        """Log a titled block at info level, one "  key: value" line per entry."""
        lines = "\n".join(f"  {key}: {value}" for key, value in data.items())
        log.info(f"{title}:\n{lines}")
