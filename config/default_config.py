#!/usr/bin/env python3
"""
Default configuration for the PED Calculator.
This module contains default values for output, logging, input columns and charts.
"""
import os

# Results and output defaults
DEFAULT_RESULTS_DIR = "results"
DEFAULT_RESULT_FILENAME = "elasticity_result.json"
DEFAULT_TREND_FILENAME = "price_quantity_trend"
DEFAULT_LOG_FILE = os.path.join("logs", "ped_calculator.log")
DEFAULT_LOG_LEVEL = "INFO"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Input file column defaults
DEFAULT_PRICE_COL = "price"
DEFAULT_QUANTITY_COL = "quantity"

# Display defaults
DEFAULT_DISPLAY_PRECISION = 3

# Visualization settings
VISUALIZATION_SETTINGS = {
    "plot_dpi": 100,
    "figsize": (10, 6),
    "style": "whitegrid",
    "save_format": "png",
    "price_color": "steelblue",
    "quantity_color": "darkorange",
    "highlight_color": "crimson",
}
SUPPORTED_CHART_FORMATS = ("png", "svg", "pdf", "jpg")
