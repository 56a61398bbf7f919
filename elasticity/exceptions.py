#!/usr/bin/env python3
"""
Custom exceptions for the PED Calculator.

The elasticity engine itself never raises for bad input; it returns an
invalid result instead. These exceptions cover the surrounding layers:
loading observation files, configuration and chart output.
"""

class PedError(Exception):
    """Base exception class for all PED calculator errors."""
    def __init__(self, message, details=None):
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self):
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


# Data-related errors
class DataError(PedError):
    """Error related to loading or preparing observations."""
    pass


class DataFormatError(DataError):
    """Error related to file format or location."""
    pass


class DataValidationError(DataError):
    """Error related to the content of an observation file."""
    pass


# Configuration-related errors
class ConfigurationError(PedError):
    """Error related to configuration."""
    pass


# Output-related errors
class VisualizationError(PedError):
    """Error related to building or saving a chart."""
    pass

