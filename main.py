#!/usr/bin/env python3
"""
Main entry point for the PED Calculator.

Computes the price elasticity of demand for a series of price/quantity
points given on the command line or read from a file.

Usage:
    ped-calc --point 10,100 --point 12,80          # Two points
    ped-calc --data-path data/series.csv --plot     # File with a trend chart
    ped-calc --point 10,100 --point 12,80 --json    # Machine-readable output

Exit status is 0 for a valid result and 1 for invalid input or an error.
"""
import sys
import json
import argparse

from analysis import load_observations, run_analysis
from config.config_manager import ConfigManager
from data.observation_loader import parse_point
from elasticity.exceptions import PedError
from utils.logging_utils import get_logger, LoggingManager
from utils.serialization import to_serializable

# Get logger for this module
logger = get_logger()


def main(argv=None):
    """Main entry point for the PED Calculator."""
    args = parse_arguments(argv)

    # Keep stdout clean for JSON output, including configuration warnings
    stream = sys.stderr if args.json else None
    if stream is not None:
        LoggingManager.setup_logging(stream=stream)

    try:
        config_manager = setup_config(args)
    except PedError as e:
        LoggingManager.log_error(logger, "Invalid configuration", e)
        return 1

    setup_logging(config_manager, stream=stream)

    try:
        if args.point:
            observations = [parse_point(token) for token in args.point]
            labels = None
        elif config_manager.app_config.data_path:
            observations, labels = load_observations(config_manager)
        else:
            logger.error("No observations given. Use --point PRICE,QUANTITY or --data-path FILE.")
            return 1

        analysis = run_analysis(
            observations,
            config_manager=config_manager,
            labels=labels,
            plot=args.plot or None,
            save=args.save or None
        )
    except PedError as e:
        LoggingManager.log_error(logger, "Analysis failed", e)
        return 1

    print_analysis(analysis, as_json=args.json)
    return 0 if analysis["result"].is_valid else 1


def print_analysis(analysis, as_json=False):
    """
    Write the analysis to stdout.

    Args:
        analysis: Dictionary returned by run_analysis
        as_json: Print JSON instead of text
    """
    if as_json:
        payload = {
            "result": analysis["result"],
            "summary": analysis["summary"],
            "basis": analysis["basis"],
            "description": analysis["description"],
            "outputFiles": analysis["output_files"],
        }
        print(json.dumps(to_serializable(payload), indent=2, ensure_ascii=False))
        return

    print(analysis["basis"])
    print(analysis["summary"])
    print(analysis["description"])
    for name, path in analysis["output_files"].items():
        print(f"{name}: {path}")


def setup_config(args):
    """
    Set up configuration from the config file, environment and arguments.

    Args:
        args: Command line arguments

    Returns:
        ConfigManager instance
    """
    config_manager = ConfigManager(args.config)
    config = config_manager.app_config

    if args.data_path:
        config.data_path = args.data_path
    if args.price_col:
        config.data_price_col = args.price_col
    if args.quantity_col:
        config.data_quantity_col = args.quantity_col
    if args.label_col:
        config.data_label_col = args.label_col
    if args.results_dir:
        config.results_dir = args.results_dir
    if args.log_level:
        config.log_level = args.log_level
    if args.precision is not None:
        config.display_precision = args.precision

    config_manager.validate()
    return config_manager


def setup_logging(config_manager, stream=None):
    """
    Set up logging from the configuration.

    Args:
        config_manager: ConfigManager instance
        stream: Console stream for log output; stdout when None
    """
    config = config_manager.app_config
    LoggingManager.setup_logging(
        log_level=config.log_level,
        log_file=config.log_file if config.log_to_file else None,
        stream=stream
    )


def parse_arguments(argv=None):
    """
    Parse command line arguments.

    Args:
        argv: Argument list; sys.argv[1:] when None

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="Price Elasticity of Demand Calculator")

    # Input options
    parser.add_argument("--point", action="append", metavar="PRICE,QUANTITY",
                        help="Observation as PRICE,QUANTITY; repeat in order, first to last")
    parser.add_argument("--data-path", type=str, help="CSV, JSON, Parquet or Excel file with observations")
    parser.add_argument("--price-col", type=str, help="Price column in the data file")
    parser.add_argument("--quantity-col", type=str, help="Quantity column in the data file")
    parser.add_argument("--label-col", type=str, help="Optional label column for the trend chart")

    # General options
    parser.add_argument("--config", type=str, help="Path to configuration file")
    parser.add_argument("--results-dir", type=str, help="Directory to store results")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level")

    # Output options
    parser.add_argument("--plot", action="store_true", help="Save the price and quantity trend chart")
    parser.add_argument("--save", action="store_true", help="Save the result as JSON")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--precision", type=int, help="Decimal places for the elasticity")

    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
