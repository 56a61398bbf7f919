"""
Configuration manager for the PED Calculator.

This module provides a centralized configuration management system with
a structured configuration class using dataclasses. Values come from the
dataclass defaults, then an optional JSON file, then PED_* environment
variables.
"""
import json
import os
from typing import Any, Dict, Optional, Union
from pathlib import Path
from dataclasses import dataclass, asdict, fields

from config.default_config import (
    DEFAULT_DISPLAY_PRECISION,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PRICE_COL,
    DEFAULT_QUANTITY_COL,
    DEFAULT_RESULTS_DIR,
    SUPPORTED_CHART_FORMATS,
    VALID_LOG_LEVELS,
    VISUALIZATION_SETTINGS,
)
from elasticity.exceptions import ConfigurationError
from utils.logging_utils import get_logger

# Get logger for this module
logger = get_logger()

# Singleton config manager instance
_config_manager = None

MIN_CHART_DPI = 50


def get_config() -> 'ConfigManager':
    """Get the singleton ConfigManager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


@dataclass
class AppConfig:
    """Unified application configuration parameters with prefixed attributes"""
    # App settings
    results_dir: str = DEFAULT_RESULTS_DIR
    create_plots: bool = False
    save_results: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    log_to_file: bool = False
    log_file: str = DEFAULT_LOG_FILE
    display_precision: int = DEFAULT_DISPLAY_PRECISION

    # Data settings (with data_ prefix)
    data_path: str = ""
    data_price_col: str = DEFAULT_PRICE_COL
    data_quantity_col: str = DEFAULT_QUANTITY_COL
    data_label_col: str = ""

    # Chart settings (with chart_ prefix)
    chart_dpi: int = VISUALIZATION_SETTINGS["plot_dpi"]
    chart_style: str = VISUALIZATION_SETTINGS["style"]
    chart_format: str = VISUALIZATION_SETTINGS["save_format"]


def _field_types() -> Dict[str, type]:
    """Map each AppConfig field to the type of its default value."""
    return {f.name: type(f.default) for f in fields(AppConfig)}


def _convert_value(field_type: type, value: Any) -> Any:
    """
    Convert a file or environment value to a configuration field type.

    Booleans accept true/yes/1 text. Integers accept whole numbers or
    numeric text. Text fields must already be strings.

    Raises:
        TypeError: If the value has the wrong kind
        ValueError: If text cannot be read as the field type
    """
    if field_type == bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() in ('true', 'yes', '1')
        raise TypeError(f"expected true or false, got {value!r}")

    if field_type == int:
        if isinstance(value, bool):
            raise TypeError(f"expected a whole number, got {value!r}")
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"expected a whole number, got {value!r}")
        if isinstance(value, (int, float)):
            return int(value)
        if isinstance(value, str):
            return int(value.strip())
        raise TypeError(f"expected a whole number, got {value!r}")

    if not isinstance(value, str):
        raise TypeError(f"expected text, got {value!r}")
    return value


class ConfigManager:
    """
    Unified configuration manager with a typed configuration object.
    """

    # Environment variable prefix for overrides
    ENV_PREFIX = "PED_"

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to a JSON configuration file.

        Raises:
            ConfigurationError: If the configuration file cannot be parsed
        """
        self.app_config = AppConfig()

        if config_path:
            self.load_config(config_path)

        self._apply_env_overrides()

        self.validate()

    def load_config(self, config_path: Union[str, Path]) -> None:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to a JSON configuration file.

        Raises:
            ConfigurationError: If the file is not a JSON object or a value
                cannot be converted to its field type
        """
        config_path = Path(config_path)
        if not config_path.exists():
            logger.warning(f"Configuration file not found: {config_path}")
            return

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading configuration: {str(e)}")
            raise ConfigurationError(f"Could not read configuration file {config_path}", str(e)) from e

        if not isinstance(config_dict, dict):
            raise ConfigurationError(f"Configuration file {config_path} must contain a JSON object")

        field_types = _field_types()
        for key, value in config_dict.items():
            if key not in field_types:
                logger.warning(f"Ignoring unknown configuration key: {key}")
                continue
            try:
                setattr(self.app_config, key, _convert_value(field_types[key], value))
            except (ValueError, TypeError, OverflowError) as e:
                raise ConfigurationError(f"Invalid value for {key} in {config_path}", str(e)) from e

        logger.info(f"Loaded configuration from {config_path}")

    def _apply_env_overrides(self) -> None:
        """Apply configuration overrides from environment variables."""
        for field_info in fields(AppConfig):
            env_name = f"{self.ENV_PREFIX}{field_info.name.upper()}"
            if env_name not in os.environ:
                continue

            raw_value = os.environ[env_name]
            try:
                value = _convert_value(type(field_info.default), raw_value)
                setattr(self.app_config, field_info.name, value)
                logger.debug(f"Applied env override for {field_info.name}: {value}")
            except (ValueError, TypeError, OverflowError) as e:
                logger.warning(f"Invalid env value for {field_info.name}: {str(e)}")

    def save_config(self, filepath: Union[str, Path]) -> None:
        """
        Save the current configuration to a JSON file.

        Args:
            filepath: Path to save the configuration to.
        """
        config_dict = asdict(self.app_config)

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(config_dict, f, indent=4)

        logger.info(f"Saved configuration to {filepath}")

    def validate(self) -> bool:
        """
        Validate the current configuration and fix common issues.

        Returns:
            True once the configuration is usable
        """
        config = self.app_config

        log_level = str(config.log_level).upper()
        if log_level not in VALID_LOG_LEVELS:
            logger.warning(f"Unsupported log level: {config.log_level}. Using default '{DEFAULT_LOG_LEVEL}'.")
            log_level = DEFAULT_LOG_LEVEL
        config.log_level = log_level

        if not config.results_dir:
            logger.warning(f"No results directory specified. Using default '{DEFAULT_RESULTS_DIR}'.")
            config.results_dir = DEFAULT_RESULTS_DIR

        if config.data_path and not Path(config.data_path).exists():
            logger.warning(f"Data file not found: {config.data_path}. Please ensure it exists.")

        if not config.data_price_col:
            logger.warning(f"No price column specified. Using default '{DEFAULT_PRICE_COL}'.")
            config.data_price_col = DEFAULT_PRICE_COL

        if not config.data_quantity_col:
            logger.warning(f"No quantity column specified. Using default '{DEFAULT_QUANTITY_COL}'.")
            config.data_quantity_col = DEFAULT_QUANTITY_COL

        if config.chart_dpi < MIN_CHART_DPI:
            logger.warning(f"chart_dpi too small: {config.chart_dpi}. Setting to {MIN_CHART_DPI}.")
            config.chart_dpi = MIN_CHART_DPI

        chart_format = str(config.chart_format).lower()
        if chart_format not in SUPPORTED_CHART_FORMATS:
            logger.warning(f"Unsupported chart format: {config.chart_format}. Using 'png'.")
            chart_format = "png"
        config.chart_format = chart_format

        if config.display_precision < 0:
            logger.warning(
                f"display_precision cannot be negative: {config.display_precision}. "
                f"Setting to {DEFAULT_DISPLAY_PRECISION}."
            )
            config.display_precision = DEFAULT_DISPLAY_PRECISION

        return True
