"""
Utility package for the PED Calculator.

This package provides logging, decorators, file helpers and serialization
used across the project.
"""

from utils.logging_utils import logger, get_logger, LoggingManager, log_step
from utils.file_utils import ensure_dir_exists, save_json
from utils.decorators import timed, log_errors

__all__ = [
    'logger', 'get_logger', 'LoggingManager', 'ensure_dir_exists',
    'save_json', 'log_step', 'timed', 'log_errors'
]
