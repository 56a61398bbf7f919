#!/usr/bin/env python3
"""
PED Analysis Functions

This module ties the calculator to its surroundings: loading a series from
a file, running the calculation, and writing the result JSON and the trend
chart when asked to.
"""
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from config.config_manager import ConfigManager, get_config
from config.default_config import DEFAULT_RESULT_FILENAME
from data.observation_loader import ObservationLoader
from data.trend_visualizer import TrendVisualizer
from elasticity.engine import calculate_elasticity
from elasticity.exceptions import DataError
from elasticity.interpretation import (
    describe_basis,
    describe_classification,
    format_elasticity,
    format_percentage,
    summarize_result,
)
from utils.decorators import log_errors
from utils.file_utils import save_json
from utils.logging_utils import get_logger, LoggingManager, log_step
from utils.serialization import to_serializable

# Get logger for this module
logger = get_logger()


@log_errors(DataError, msg="Error loading observations", reraise=True)
def load_observations(config_manager: ConfigManager) -> Tuple[List[Dict[str, Any]], Optional[List[str]]]:
    """
    Load the observation series named by the configuration.

    Args:
        config_manager: Configuration with data_path and column names

    Returns:
        Raw observation mappings and their labels (None without a label column)

    Raises:
        DataError: If the file cannot be read or lacks required columns
    """
    config = config_manager.app_config
    loader = ObservationLoader(
        data_path=config.data_path,
        price_col=config.data_price_col,
        quantity_col=config.data_quantity_col,
        label_col=config.data_label_col or None
    )
    frame = loader.load()
    return loader.to_observations(frame), loader.labels(frame)


@log_step("Elasticity analysis")
def run_analysis(
    observations: Sequence[Any],
    config_manager: Optional[ConfigManager] = None,
    labels: Optional[Sequence[str]] = None,
    plot: Optional[bool] = None,
    save: Optional[bool] = None
) -> Dict[str, Any]:
    """
    Calculate the elasticity of a series and produce the requested outputs.

    Args:
        observations: Ordered observations
        config_manager: Configuration; the shared instance when None
        labels: Optional trend chart labels, one per observation
        plot: Save the trend chart; defaults to config create_plots
        save: Save the result JSON; defaults to config save_results

    Returns:
        Dictionary with the result, its summary, basis text, description
        and the paths of any files written

    Raises:
        VisualizationError: If the trend chart cannot be written
    """
    config_manager = config_manager or get_config()
    config = config_manager.app_config
    plot = config.create_plots if plot is None else plot
    save = config.save_results if save is None else save

    points = list(observations)
    result = calculate_elasticity(points)
    precision = config.display_precision

    analysis = {
        "result": result,
        "summary": summarize_result(result, precision),
        "basis": describe_basis(len(points), result),
        "description": describe_classification(result.classification),
        "output_files": {},
    }

    details = {
        "Observations": len(points),
        "Elasticity": format_elasticity(result.elasticity, precision),
        "Classification": result.classification.label,
    }
    if result.is_valid:
        details["Quantity change"] = format_percentage(result.percentage_change_quantity)
        details["Price change"] = format_percentage(result.percentage_change_price)
    else:
        details["Error"] = result.error
    LoggingManager.log_dict(logger, analysis["basis"], details)

    results_dir = Path(config.results_dir)
    if save:
        result_path = results_dir / DEFAULT_RESULT_FILENAME
        save_json(to_serializable({
            "result": result,
            "summary": analysis["summary"],
            "basis": analysis["basis"],
            "description": analysis["description"],
            "observations": points,
        }), str(result_path))
        analysis["output_files"]["result"] = str(result_path)
        logger.info(f"Saved elasticity result to {result_path}")

    if plot:
        visualizer = TrendVisualizer(
            results_dir=results_dir,
            dpi=config.chart_dpi,
            style=config.chart_style,
            chart_format=config.chart_format
        )
        chart_path = visualizer.plot_trend(points, result=result, labels=labels)
        analysis["output_files"]["trend_chart"] = str(chart_path)

    return analysis
