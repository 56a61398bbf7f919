"""
Midpoint (arc) elasticity engine.

Formula:
    Ed = [(Q2 - Q1) / ((Q2 + Q1) / 2)] / [(P2 - P1) / ((P2 + P1) / 2)]

Only the first and last observations of a series enter the formula; any
points in between are accepted for the caller's trend view and ignored here.
Every failure is returned as an InvalidElasticity, never raised.
"""
import math
from typing import Any

import numpy as np

from utils.logging_utils import logger
from elasticity.constants import (
    INDETERMINATE_MESSAGE,
    NO_CHANGE_MESSAGE,
    UNIT_ELASTICITY,
    ZERO_AVERAGE_MESSAGE,
)
from elasticity.types import (
    Classification,
    ElasticityResult,
    InvalidElasticity,
    Observation,
    ObservationsUsed,
    ValidationFailure,
    ValidElasticity,
)
from elasticity.validator import validate_series


def classify(elasticity: float) -> Classification:
    """
    Classify an elasticity coefficient by its magnitude.

    Args:
        elasticity: Elasticity coefficient, possibly infinite or NaN

    Returns:
        Classification for the coefficient; NaN maps to INVALID_INPUT
    """
    magnitude = abs(elasticity)
    if magnitude > UNIT_ELASTICITY and not math.isinf(magnitude):
        return Classification.ELASTIC
    if 0 < magnitude < UNIT_ELASTICITY:
        return Classification.INELASTIC
    if magnitude == UNIT_ELASTICITY:
        return Classification.UNIT_ELASTIC
    if magnitude == 0:
        return Classification.PERFECTLY_INELASTIC
    if math.isinf(magnitude):
        return Classification.PERFECTLY_ELASTIC
    return Classification.INVALID_INPUT


def _midpoint_elasticity(start: Observation, end: Observation) -> ElasticityResult:
    used = ObservationsUsed(start=start, end=end)

    # float64 keeps IEEE semantics: overflow gives inf, 0/0 gives nan
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        q1, q2 = np.float64(start.quantity), np.float64(end.quantity)
        p1, p2 = np.float64(start.price), np.float64(end.price)

        delta_q = q2 - q1
        delta_p = p2 - p1
        avg_q = (q2 + q1) / 2
        avg_p = (p2 + p1) / 2

        if delta_p == 0 and delta_q == 0:
            return InvalidElasticity(error=NO_CHANGE_MESSAGE, observations_used=used)

        if delta_p == 0:
            pct_q = abs(delta_q / avg_q) if avg_q != 0 else np.inf
            return ValidElasticity(
                elasticity=math.inf,
                classification=Classification.PERFECTLY_ELASTIC,
                percentage_change_quantity=float(pct_q),
                percentage_change_price=0.0,
                observations_used=used,
            )

        if delta_q == 0:
            pct_p = abs(delta_p / avg_p) if avg_p != 0 else np.inf
            return ValidElasticity(
                elasticity=0.0,
                classification=Classification.PERFECTLY_INELASTIC,
                percentage_change_quantity=0.0,
                percentage_change_price=float(pct_p),
                observations_used=used,
            )

        if avg_q == 0 or avg_p == 0:
            return InvalidElasticity(error=ZERO_AVERAGE_MESSAGE, observations_used=used)

        pct_q = delta_q / avg_q
        pct_p = delta_p / avg_p
        elasticity = float(pct_q / pct_p)

    classification = classify(elasticity)
    if classification is Classification.INVALID_INPUT:
        return InvalidElasticity(error=INDETERMINATE_MESSAGE, observations_used=used)

    return ValidElasticity(
        elasticity=elasticity,
        classification=classification,
        percentage_change_quantity=float(abs(pct_q)),
        percentage_change_price=float(abs(pct_p)),
        observations_used=used,
    )


def calculate_elasticity(series: Any) -> ElasticityResult:
    """
    Calculate the price elasticity of demand for an observation series.

    Args:
        series: Ordered observations (Observation objects, mappings with
            'price' and 'quantity' keys, or (price, quantity) pairs)

    Returns:
        ValidElasticity, or InvalidElasticity when the series fails
        validation or the selected points do not define an elasticity
    """
    validation = validate_series(series)
    if isinstance(validation, ValidationFailure):
        logger.warning(f"Elasticity input rejected: {validation.message}")
        return InvalidElasticity(error=validation.message)

    observations = validation.observations
    start, end = observations[0], observations[-1]
    result = _midpoint_elasticity(start, end)

    if result.is_valid:
        logger.debug(
            f"Midpoint elasticity calculated from {len(observations)} points: "
            f"{result.elasticity:.4f} ({result.classification.label})"
        )
    else:
        logger.warning(f"Elasticity calculation failed: {result.error}")
    return result
