"""
Price elasticity of demand calculator.

This package validates price/quantity observations, applies the midpoint
(arc) elasticity formula to the first and last of them, and classifies the
resulting coefficient.

Main components:
- engine: calculate_elasticity and classify
- validator: validate_series and coerce_number
- types: observation, result and validation types
- interpretation: display text for results
"""

from elasticity.engine import calculate_elasticity, classify
from elasticity.validator import validate_series, coerce_number
from elasticity.types import (
    Classification,
    ElasticityResult,
    InvalidElasticity,
    Observation,
    ObservationsUsed,
    ValidElasticity,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)
from elasticity.interpretation import (
    describe_basis,
    describe_classification,
    format_elasticity,
    summarize_result,
)

__all__ = [
    'calculate_elasticity',
    'classify',
    'validate_series',
    'coerce_number',
    'Classification',
    'ElasticityResult',
    'InvalidElasticity',
    'Observation',
    'ObservationsUsed',
    'ValidElasticity',
    'ValidationFailure',
    'ValidationResult',
    'ValidationSuccess',
    'describe_basis',
    'describe_classification',
    'format_elasticity',
    'summarize_result',
]
