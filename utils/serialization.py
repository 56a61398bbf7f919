#!/usr/bin/env python3
"""
Serialization utilities for the PED Calculator.

This module converts results, observations and numpy/pandas values into
plain JSON-compatible structures.
"""

import math
from enum import Enum
from typing import Any

import numpy as np
import pandas as pd

from elasticity.constants import NON_FINITE_JSON_VALUES
from utils.logging_utils import logger


def _serialize_float(value: float) -> Any:
    if math.isfinite(value):
        return value
    return NON_FINITE_JSON_VALUES[repr(value)]


def to_serializable(obj: Any) -> Any:
    """
    Convert object to JSON-serializable format.

    Non-finite floats become the strings "Infinity", "-Infinity" and "NaN".

    Args:
        obj: Object to convert

    Returns:
        JSON-serializable representation of object
    """
    if hasattr(obj, 'to_dict') and not isinstance(obj, (pd.DataFrame, pd.Series)):
        return to_serializable(obj.to_dict())
    elif isinstance(obj, Enum):
        return to_serializable(obj.value)
    elif isinstance(obj, bool) or obj is None or isinstance(obj, str):
        return obj
    elif isinstance(obj, (np.integer, int)):
        return int(obj)
    elif isinstance(obj, (np.floating, float)):
        return _serialize_float(float(obj))
    elif isinstance(obj, (np.ndarray, list, tuple)):
        return [to_serializable(x) for x in obj]
    elif isinstance(obj, dict):
        return {str(k): to_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, pd.DataFrame):
        return to_serializable(obj.to_dict(orient='records'))
    elif isinstance(obj, pd.Series):
        return to_serializable(obj.tolist())
    else:
        logger.warning(f"Serializing object of type {type(obj).__name__} as string")
        return str(obj)
