"""
Input validation for the elasticity calculator.

validate_series checks an observation series before the engine touches it
and returns a ValidationSuccess or ValidationFailure. Nothing is coerced:
text that should be a number has to go through coerce_number first.
"""
import math
import numbers
from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal
from typing import Any, List, Optional, Tuple

from elasticity.constants import (
    INSUFFICIENT_DATA_MESSAGE,
    MIN_OBSERVATIONS,
    PRICE_NOT_FINITE_MESSAGE,
    PRICE_NOT_NUMBER_MESSAGE,
    PRICE_NOT_POSITIVE_MESSAGE,
    QUANTITY_NOT_FINITE_MESSAGE,
    QUANTITY_NOT_NUMBER_MESSAGE,
    QUANTITY_NOT_POSITIVE_MESSAGE,
)
from elasticity.types import Observation, ValidationFailure, ValidationResult, ValidationSuccess

_MISSING = object()


def coerce_number(value: Any) -> Optional[float]:
    """
    Convert user-entered text to a number.

    Numbers pass through unchanged. Text is trimmed; empty or unparsable text
    becomes None so that validation reports it as non-numeric.

    Args:
        value: Raw value from a form field, CLI token or file cell

    Returns:
        The number, or None when the value cannot be read as one
    """
    if value is None:
        return None
    if _is_number(value):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def _split_observation(raw: Any) -> Tuple[Any, Any]:
    """Pull price and quantity out of any supported observation shape."""
    if isinstance(raw, Observation):
        return raw.price, raw.quantity
    if isinstance(raw, Mapping):
        return raw.get("price", _MISSING), raw.get("quantity", _MISSING)
    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)) and len(raw) == 2:
        return raw[0], raw[1]
    return _MISSING, _MISSING


def observation_values(raw: Any) -> Tuple[Any, Any]:
    """
    Return the (price, quantity) of a raw observation without validating them.

    Missing values come back as None.
    """
    price, quantity = _split_observation(raw)
    return (
        None if price is _MISSING else price,
        None if quantity is _MISSING else quantity,
    )


def _check_value(value: Any, not_number: str, not_finite: str, not_positive: str) -> Optional[str]:
    if value is _MISSING or not _is_number(value):
        return not_number
    if isinstance(value, Decimal) and value.is_nan():
        return not_finite
    try:
        number = float(value)
    except OverflowError:
        return not_finite
    if not math.isfinite(number):
        return not_finite
    if value <= 0:
        return not_positive
    return None


def _as_list(series: Any) -> List[Any]:
    if series is None or isinstance(series, (str, bytes, Mapping)):
        return []
    if not isinstance(series, Iterable):
        return []
    return list(series)


def validate_series(series: Any) -> ValidationResult:
    """
    Validate an observation series.

    The series must hold at least two observations and every price and
    quantity must be a finite positive number. All problems are collected
    in order, one message per offending value.

    Args:
        series: Ordered observations; each one an Observation, a mapping
            with 'price' and 'quantity' keys, or a (price, quantity) pair

    Returns:
        ValidationSuccess with typed observations in input order, or
        ValidationFailure with the error messages
    """
    items = _as_list(series)
    errors: List[str] = []

    if len(items) < MIN_OBSERVATIONS:
        errors.append(INSUFFICIENT_DATA_MESSAGE)

    observations = []
    for raw in items:
        price, quantity = _split_observation(raw)
        price_error = _check_value(
            price, PRICE_NOT_NUMBER_MESSAGE, PRICE_NOT_FINITE_MESSAGE, PRICE_NOT_POSITIVE_MESSAGE
        )
        quantity_error = _check_value(
            quantity, QUANTITY_NOT_NUMBER_MESSAGE, QUANTITY_NOT_FINITE_MESSAGE, QUANTITY_NOT_POSITIVE_MESSAGE
        )
        for error in (price_error, quantity_error):
            if error is not None:
                errors.append(error)
        if price_error is None and quantity_error is None:
            observations.append(Observation(price=float(price), quantity=float(quantity)))

    if errors:
        return ValidationFailure(errors=tuple(errors))
    return ValidationSuccess(observations=tuple(observations))
