"""
Configuration package for the PED Calculator.

This package provides configuration management functionality for the
price elasticity of demand calculator.
"""

from config.config_manager import AppConfig, ConfigManager, get_config

__all__ = ['AppConfig', 'ConfigManager', 'get_config']
