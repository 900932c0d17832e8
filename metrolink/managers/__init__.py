"""
Managers Package

Application-level configuration management.
"""

from .config_manager import (
    ConfigManager,
    ConfigData,
    NetworkConfig,
    RoutingConfig,
    DisplayConfig,
    LoggingConfig,
    ConfigurationError,
)

__all__ = [
    'ConfigManager',
    'ConfigData',
    'NetworkConfig',
    'RoutingConfig',
    'DisplayConfig',
    'LoggingConfig',
    'ConfigurationError',
]
