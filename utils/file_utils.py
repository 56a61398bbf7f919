#!/usr/bin/env python3
"""
File helpers for the PED Calculator outputs and inputs.
"""

import json
from pathlib import Path
from typing import Any, Union

from utils.logging_utils import logger


def ensure_dir_exists(directory: Union[str, Path]) -> None:
    """Create a directory and its parents unless it already exists."""
    if directory:
        Path(directory).mkdir(parents=True, exist_ok=True)
        logger.debug(f"Ensuring directory exists: {directory}")


def save_json(data: Any, filepath: Union[str, Path]) -> None:
    """
    Write already-serializable data as indented UTF-8 JSON.

    Missing parent directories are created first.
    """
    filepath = Path(filepath)
    ensure_dir_exists(filepath.parent)
    filepath.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding='utf-8')
    logger.debug(f"Saved JSON data to {filepath}")


def get_file_extension(filepath: Union[str, Path]) -> str:
    """Lower-case extension of a path, without the dot."""
    return Path(filepath).suffix.lower().lstrip('.')
