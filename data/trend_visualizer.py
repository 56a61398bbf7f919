#!/usr/bin/env python3
"""
Price and quantity trend view for the PED Calculator.

The trend view shows every observation the user entered, not only the two
the elasticity is computed from. Series of up to twelve points are read as
monthly data and labelled Jan to Dec; longer series are labelled Point 1,
Point 2 and so on.
"""

import math
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from config.default_config import DEFAULT_TREND_FILENAME, VISUALIZATION_SETTINGS
from elasticity.constants import MONTH_NAMES
from elasticity.exceptions import VisualizationError
from elasticity.interpretation import describe_basis, summarize_result
from elasticity.types import ElasticityResult
from elasticity.validator import coerce_number, observation_values
from utils.decorators import timed
from utils.file_utils import ensure_dir_exists
from utils.logging_utils import logger


def trend_labels(point_count: int) -> List[str]:
    """
    Build x-axis labels for a series of the given length.

    Args:
        point_count: Number of observations

    Returns:
        Month abbreviations for up to twelve points, otherwise "Point n"
    """
    if point_count <= len(MONTH_NAMES):
        return list(MONTH_NAMES[:point_count])
    return [f"Point {index + 1}" for index in range(point_count)]


def _plot_value(value: Any) -> float:
    number = coerce_number(value)
    if number is None:
        return np.nan
    try:
        return float(number)
    except (TypeError, ValueError):
        return np.nan


class TrendVisualizer:
    """
    Builds the trend table and chart for an observation series.

    Parameters
    ----------
    results_dir : str or Path
        Directory the chart is saved to.
    dpi : int
        Resolution of saved charts.
    style : str
        Seaborn style applied to the chart.
    chart_format : str
        File format of saved charts.
    """

    def __init__(
        self,
        results_dir: Union[str, Path] = "results",
        dpi: int = VISUALIZATION_SETTINGS["plot_dpi"],
        style: str = VISUALIZATION_SETTINGS["style"],
        chart_format: str = VISUALIZATION_SETTINGS["save_format"]
    ):
        self.results_dir = Path(results_dir)
        self.dpi = dpi
        self.style = style
        self.chart_format = chart_format

    def trend_frame(
        self,
        observations: Sequence[Any],
        labels: Optional[Sequence[str]] = None
    ) -> pd.DataFrame:
        """
        Tabulate the series for the trend view.

        Values that are not numbers become NaN so the chart shows a gap.

        Args:
            observations: Raw or validated observations in input order
            labels: Optional labels overriding the generated ones

        Returns:
            DataFrame with 'name', 'price' and 'quantity' columns
        """
        points = list(observations)
        if labels is None:
            labels = trend_labels(len(points))
        elif len(labels) != len(points):
            raise VisualizationError(
                f"Got {len(labels)} labels for {len(points)} observations"
            )

        prices, quantities = [], []
        for raw in points:
            price, quantity = observation_values(raw)
            prices.append(_plot_value(price))
            quantities.append(_plot_value(quantity))

        return pd.DataFrame({
            "name": list(labels),
            "price": prices,
            "quantity": quantities,
        })

    @timed("Trend chart", log_level="debug")
    def plot_trend(
        self,
        observations: Sequence[Any],
        result: Optional[ElasticityResult] = None,
        labels: Optional[Sequence[str]] = None,
        filename: Optional[str] = None
    ) -> Path:
        """
        Plot price and quantity across all observations.

        Price uses the left axis and quantity the right axis. When a valid
        result is given, the two points the elasticity was computed from are
        circled and the title carries the result summary.

        Args:
            observations: Raw or validated observations in input order
            result: Optional elasticity result for the series
            labels: Optional point labels
            filename: Output file name; defaults to the configured trend name

        Returns:
            Path to the saved chart

        Raises:
            VisualizationError: If there is nothing to plot or saving fails
        """
        frame = self.trend_frame(observations, labels)
        if frame.empty:
            raise VisualizationError("No observations to plot")

        ensure_dir_exists(str(self.results_dir))
        output_path = self.results_dir / (filename or f"{DEFAULT_TREND_FILENAME}.{self.chart_format}")

        sns.set_style(self.style)
        fig, price_ax = plt.subplots(figsize=VISUALIZATION_SETTINGS["figsize"])
        try:
            positions = np.arange(len(frame))
            price_color = VISUALIZATION_SETTINGS["price_color"]
            quantity_color = VISUALIZATION_SETTINGS["quantity_color"]

            price_line = price_ax.plot(positions, frame["price"], marker="o", color=price_color, label="Price")
            price_ax.set_ylabel("Price", color=price_color)
            price_ax.tick_params(axis="y", labelcolor=price_color)

            quantity_ax = price_ax.twinx()
            quantity_line = quantity_ax.plot(
                positions, frame["quantity"], marker="o", color=quantity_color, label="Quantity"
            )
            quantity_ax.set_ylabel("Quantity", color=quantity_color)
            quantity_ax.tick_params(axis="y", labelcolor=quantity_color)
            quantity_ax.grid(False)

            price_ax.set_xticks(positions)
            price_ax.set_xticklabels(frame["name"], rotation=45 if len(frame) > 12 else 0)

            title = describe_basis(len(frame), result)
            if result is not None:
                title = f"{title}\n{summarize_result(result)}"
                if result.is_valid and len(frame) > 1:
                    self._highlight_endpoints(price_ax, quantity_ax, frame)
            price_ax.set_title(title)

            lines = price_line + quantity_line
            price_ax.legend(lines, [line.get_label() for line in lines], loc="upper left")

            fig.tight_layout()
            fig.savefig(output_path, dpi=self.dpi, bbox_inches="tight")
        except (OSError, ValueError) as e:
            raise VisualizationError(f"Could not save trend chart to {output_path}", str(e)) from e
        finally:
            plt.close(fig)

        logger.info(f"Saved price and quantity trend chart to {output_path}")
        return output_path

    def _highlight_endpoints(self, price_ax: Any, quantity_ax: Any, frame: pd.DataFrame) -> None:
        """Circle the first and last points, the ones the elasticity uses."""
        highlight = VISUALIZATION_SETTINGS["highlight_color"]
        ends = [0, len(frame) - 1]
        for ax, column in ((price_ax, "price"), (quantity_ax, "quantity")):
            values = frame[column].iloc[ends]
            if values.isna().any() or any(math.isinf(v) for v in values):
                continue
            ax.scatter(ends, values, s=160, facecolors="none", edgecolors=highlight, linewidths=2, zorder=3)
