#!/usr/bin/env python3
"""
Observation loader for the PED Calculator.

Reads an ordered price/quantity series from a CSV, JSON, Parquet or Excel
file. Row order is kept because the first and last rows are the points the
elasticity is computed from. Cell values are coerced the same way typed
input is (trimmed text, empty or unparsable cells become None) and are
otherwise left for the calculator to validate.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd

from elasticity.exceptions import DataFormatError, DataValidationError
from elasticity.validator import coerce_number
from utils.file_utils import get_file_extension
from utils.logging_utils import logger

SUPPORTED_EXTENSIONS = ("csv", "json", "parquet", "xlsx", "xls")


def parse_point(token: str) -> Dict[str, Optional[float]]:
    """
    Parse a "price,quantity" token such as "10,100" or "12.5, 80".

    Args:
        token: Text holding a price and a quantity separated by a comma

    Returns:
        Raw observation mapping with coerced values

    Raises:
        DataFormatError: If the token does not contain exactly two parts
    """
    parts = str(token).split(",")
    if len(parts) != 2:
        raise DataFormatError(f"Expected PRICE,QUANTITY but got '{token}'")
    return {"price": coerce_number(parts[0]), "quantity": coerce_number(parts[1])}


class ObservationLoader:
    """
    Loads an observation series from a tabular file.

    Parameters
    ----------
    data_path : str or Path
        Path to the data file (.csv, .json, .parquet, .xlsx or .xls).
    price_col : str
        Name of the column containing prices.
    quantity_col : str
        Name of the column containing quantities.
    label_col : str, optional
        Name of a column with point labels (for example a month), used by
        the trend view.
    """

    def __init__(
        self,
        data_path: Union[str, Path],
        price_col: str = "price",
        quantity_col: str = "quantity",
        label_col: Optional[str] = None
    ):
        self.data_path = Path(data_path)
        self.price_col = price_col
        self.quantity_col = quantity_col
        self.label_col = label_col or None

        self.required_columns = [price_col, quantity_col]
        if self.label_col:
            self.required_columns.append(self.label_col)

    def load(self) -> pd.DataFrame:
        """
        Read the data file into a DataFrame.

        Returns:
            DataFrame with the file's rows in their original order

        Raises:
            DataFormatError: If the file is missing, unsupported or unreadable
            DataValidationError: If required columns are missing
        """
        if not self.data_path.exists():
            raise DataFormatError(f"Data file not found: {self.data_path}")

        extension = get_file_extension(str(self.data_path))
        if extension not in SUPPORTED_EXTENSIONS:
            raise DataFormatError(
                f"Unsupported file format: .{extension}",
                f"supported formats are {', '.join(SUPPORTED_EXTENSIONS)}"
            )

        logger.info(f"Loading observations from {self.data_path}")
        try:
            if extension == "csv":
                frame = pd.read_csv(self.data_path, dtype=str, keep_default_na=False)
            elif extension == "json":
                frame = pd.read_json(self.data_path, orient="records", dtype=False)
            elif extension == "parquet":
                frame = pd.read_parquet(self.data_path)
            else:
                frame = pd.read_excel(self.data_path)
        except (OSError, ValueError) as e:
            raise DataFormatError(f"Could not read data file {self.data_path}", str(e)) from e

        self._validate_columns(frame)
        logger.info(f"Loaded {len(frame)} observations with columns {list(frame.columns)}")
        return frame

    def _validate_columns(self, frame: pd.DataFrame) -> None:
        missing = [col for col in self.required_columns if col not in frame.columns]
        if missing:
            raise DataValidationError(
                f"Missing required columns: {', '.join(missing)}",
                f"available columns are {', '.join(map(str, frame.columns))}"
            )

    def to_observations(self, frame: pd.DataFrame) -> List[Dict[str, Any]]:
        """
        Convert rows to raw observation mappings.

        Args:
            frame: DataFrame returned by load()

        Returns:
            One {'price', 'quantity'} mapping per row, in row order
        """
        observations = []
        for price, quantity in zip(frame[self.price_col], frame[self.quantity_col]):
            observations.append({
                "price": _coerce_cell(price),
                "quantity": _coerce_cell(quantity),
            })
        return observations

    def labels(self, frame: pd.DataFrame) -> Optional[List[str]]:
        """Return the label column as text, or None when no label column is configured."""
        if not self.label_col:
            return None
        return [str(label) for label in frame[self.label_col]]

    def load_observations(self) -> List[Dict[str, Any]]:
        """Load the file and return its raw observation mappings."""
        return self.to_observations(self.load())


def _coerce_cell(value: Any) -> Optional[float]:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    if hasattr(value, "item"):
        # numpy scalar from a typed column
        value = value.item()
    return coerce_number(value)
