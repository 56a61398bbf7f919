"""
Human-readable interpretation of elasticity results.

These helpers turn a result into the text a caller shows next to it:
the classification explanation, the formatted coefficient and a note on
which data points the coefficient was computed from.
"""
import math
from typing import Dict, Optional

from elasticity.constants import (
    DEFAULT_DISPLAY_PRECISION,
    FIRST_LAST_BASIS,
    NEGATIVE_INFINITY_SYMBOL,
    NOT_AVAILABLE_SYMBOL,
    PED_TITLE,
    POSITIVE_INFINITY_SYMBOL,
    TWO_POINT_BASIS,
)
from elasticity.types import Classification, ElasticityResult

CLASSIFICATION_DESCRIPTIONS: Dict[Classification, str] = {
    Classification.ELASTIC: (
        "Demand shows significant sensitivity to price changes. Consider strategic "
        "price decreases to potentially boost revenue."
    ),
    Classification.INELASTIC: (
        "Demand demonstrates low sensitivity to price changes. Price increases might "
        "enhance total revenue with minimal impact on quantity sold."
    ),
    Classification.UNIT_ELASTIC: (
        "Quantity demanded changes proportionally to price changes. Revenue is likely "
        "optimized at the current pricing."
    ),
    Classification.PERFECTLY_INELASTIC: (
        "Quantity demanded remains constant irrespective of price adjustments "
        "(theoretical, e.g., life-saving medication)."
    ),
    Classification.PERFECTLY_ELASTIC: (
        "Consumers demand unlimited quantity at a specific price, but none above it "
        "(theoretical market condition)."
    ),
    Classification.INVALID_INPUT: (
        "Calculation requires valid inputs. Ensure prices/quantities are positive and "
        "represent a change between the first and last points."
    ),
}

NO_RESULT_DESCRIPTION = "Input at least two data points to view the elasticity analysis."


def describe_classification(classification: Optional[Classification]) -> str:
    """Return the explanation shown for a classification."""
    if classification is None:
        return NO_RESULT_DESCRIPTION
    return CLASSIFICATION_DESCRIPTIONS.get(classification, NO_RESULT_DESCRIPTION)


def format_elasticity(value: float, precision: int = DEFAULT_DISPLAY_PRECISION) -> str:
    """
    Format an elasticity coefficient for display.

    Args:
        value: Elasticity coefficient
        precision: Decimal places for finite values

    Returns:
        Fixed-precision text, an infinity symbol, or N/A for NaN
    """
    if math.isnan(value):
        return NOT_AVAILABLE_SYMBOL
    if math.isinf(value):
        return POSITIVE_INFINITY_SYMBOL if value > 0 else NEGATIVE_INFINITY_SYMBOL
    return f"{value:.{precision}f}"


def format_percentage(fraction: Optional[float], precision: int = 2) -> str:
    """Format a fractional change (0.2) as a percentage (20.00%)."""
    if fraction is None or math.isnan(fraction):
        return NOT_AVAILABLE_SYMBOL
    if math.isinf(fraction):
        return POSITIVE_INFINITY_SYMBOL
    return f"{fraction * 100:.{precision}f}%"


def describe_basis(point_count: int, result: Optional[ElasticityResult] = None) -> str:
    """
    Describe which data points a result was computed from.

    Args:
        point_count: Number of observations the caller supplied
        result: Result of the calculation, if any

    Returns:
        Title text, with a suffix for valid results
    """
    if result is None or not result.is_valid:
        return PED_TITLE
    if point_count > 2:
        return PED_TITLE + FIRST_LAST_BASIS
    if point_count == 2:
        return PED_TITLE + TWO_POINT_BASIS
    return PED_TITLE


def summarize_result(result: ElasticityResult, precision: int = DEFAULT_DISPLAY_PRECISION) -> str:
    """One-line summary of a result, suitable for a log line or notification."""
    if not result.is_valid:
        return f"Calculation Error: {result.error}"
    return (
        f"Price Elasticity: {format_elasticity(result.elasticity, precision)} "
        f"({result.classification.label})"
    )
