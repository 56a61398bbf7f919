"""
Constants for the PED calculator.

This module centralizes the messages, labels and thresholds used by the
validator, the engine and the interpretation helpers.
"""
from typing import Dict, Tuple

# =======================================================
# Classification thresholds
# =======================================================

# |elasticity| above this value is elastic, below it inelastic
UNIT_ELASTICITY = 1.0

# Number of points the midpoint formula needs
MIN_OBSERVATIONS = 2

# =======================================================
# Validation messages
# =======================================================

INSUFFICIENT_DATA_MESSAGE = "At least two data points are required for calculation"
PRICE_NOT_POSITIVE_MESSAGE = "Price must be positive"
QUANTITY_NOT_POSITIVE_MESSAGE = "Quantity must be positive"
PRICE_NOT_NUMBER_MESSAGE = "Price must be a number"
QUANTITY_NOT_NUMBER_MESSAGE = "Quantity must be a number"
PRICE_NOT_FINITE_MESSAGE = "Price must be a finite number"
QUANTITY_NOT_FINITE_MESSAGE = "Quantity must be a finite number"
ERROR_SEPARATOR = ", "

# =======================================================
# Engine messages
# =======================================================

NO_CHANGE_MESSAGE = "Price and quantity haven't changed between the selected data points."
ZERO_AVERAGE_MESSAGE = "Average price or quantity (for the selected data points) cannot be zero."
INDETERMINATE_MESSAGE = "Elasticity could not be determined for the selected data points."

# =======================================================
# Display
# =======================================================

DEFAULT_DISPLAY_PRECISION = 3
POSITIVE_INFINITY_SYMBOL = "∞"
NEGATIVE_INFINITY_SYMBOL = "-∞"
NOT_AVAILABLE_SYMBOL = "N/A"

# JSON has no literal for non-finite numbers
NON_FINITE_JSON_VALUES: Dict[str, str] = {
    "inf": "Infinity",
    "-inf": "-Infinity",
    "nan": "NaN",
}

PED_TITLE = "Price Elasticity of Demand (PED)"
TWO_POINT_BASIS = " - using the two data points provided"
FIRST_LAST_BASIS = " - using the first and last data points provided"

# Trend labels are read as monthly data up to a year of points
MONTH_NAMES: Tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
