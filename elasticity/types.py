"""
Data types for the elasticity calculator.

Results are a tagged union: a calculation either yields a ValidElasticity
or an InvalidElasticity carrying the error message. Validation follows the
same pattern with ValidationSuccess and ValidationFailure.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from elasticity.constants import ERROR_SEPARATOR


class Classification(Enum):
    """Magnitude regime of an elasticity value, valued by its display label."""
    ELASTIC = "Elastic"
    INELASTIC = "Inelastic"
    UNIT_ELASTIC = "Unit Elastic"
    PERFECTLY_INELASTIC = "Perfectly Inelastic"
    PERFECTLY_ELASTIC = "Perfectly Elastic"
    INVALID_INPUT = "Invalid Input"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class Observation:
    """One price/quantity data point."""
    price: float
    quantity: float

    def to_dict(self) -> Dict[str, float]:
        return {"price": self.price, "quantity": self.quantity}


@dataclass(frozen=True)
class ObservationsUsed:
    """The start and end observations the midpoint formula was applied to."""
    start: Observation
    end: Observation

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True)
class ValidElasticity:
    """
    Successful elasticity calculation.

    Percentage changes are absolute fractions on the midpoint base, so 0.2
    means a 20% change.
    """
    elasticity: float
    classification: Classification
    percentage_change_quantity: float
    percentage_change_price: float
    observations_used: ObservationsUsed

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def error(self) -> None:
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Return the result as a plain dictionary keyed like the result record."""
        return {
            "elasticity": self.elasticity,
            "classification": self.classification.label,
            "percentageChangeQuantity": self.percentage_change_quantity,
            "percentageChangePrice": self.percentage_change_price,
            "observationsUsed": self.observations_used.to_dict(),
        }


@dataclass(frozen=True)
class InvalidElasticity:
    """
    Failed elasticity calculation.

    The elasticity of an invalid result is always NaN. observations_used is
    only missing when the input series itself failed validation.
    """
    error: str
    observations_used: Optional[ObservationsUsed] = None

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def elasticity(self) -> float:
        return math.nan

    @property
    def classification(self) -> Classification:
        return Classification.INVALID_INPUT

    def to_dict(self) -> Dict[str, Any]:
        """Return the result as a plain dictionary keyed like the result record."""
        result: Dict[str, Any] = {
            "elasticity": self.elasticity,
            "classification": self.classification.label,
            "error": self.error,
        }
        if self.observations_used is not None:
            result["observationsUsed"] = self.observations_used.to_dict()
        return result


ElasticityResult = Union[ValidElasticity, InvalidElasticity]


@dataclass(frozen=True)
class ValidationSuccess:
    """Series that passed validation, as typed observations in input order."""
    observations: Tuple[Observation, ...]

    @property
    def is_valid(self) -> bool:
        return True


@dataclass(frozen=True)
class ValidationFailure:
    """Series that failed validation, with every problem found."""
    errors: Tuple[str, ...]

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return ERROR_SEPARATOR.join(self.errors)


ValidationResult = Union[ValidationSuccess, ValidationFailure]
