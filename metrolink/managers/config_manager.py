"""
Configuration management for the Metrolink router.

This module handles loading, saving, and validating application configuration
using Pydantic models for type safety and validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Directory holding main.py, version.py and the bundled data/ folder
APP_ROOT = Path(__file__).resolve().parents[2]


class NetworkConfig(BaseModel):
    """Configuration for the network data file."""

    csv_path: str = "data/metrolink_times_linecolour.csv"
    has_header: bool = True
    delimiter: str = ","

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("Delimiter must be a single character")
        return value


class RoutingConfig(BaseModel):
    """Configuration for route finding."""

    change_penalty_minutes: float = Field(2.0, ge=0, description="Minutes added per line change")
    default_criterion: str = "fastest"

    @field_validator("default_criterion")
    @classmethod
    def validate_criterion(cls, value: str) -> str:
        if value not in ("fastest", "fewest_changes", "both"):
            raise ValueError("default_criterion must be 'fastest', 'fewest_changes' or 'both'")
        return value


class DisplayConfig(BaseModel):
    """Configuration for route text output."""

    time_decimals: int = Field(1, ge=0, le=6)


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: str = "WARNING"
    log_file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}")
        return level


class ConfigData(BaseModel):
    """Main configuration data model."""

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigManager:
    """
    Manages application configuration with file persistence.

    Handles loading configuration from JSON files, creating default
    configurations, and saving changes back to disk.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the user config directory
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[ConfigData] = None

        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        On Windows, uses AppData/Roaming/Metrolink/config.json
        On Linux, uses XDG_CONFIG_HOME/Metrolink/config.json or ~/.config/Metrolink/config.json

        Returns:
            Path: Default configuration file path
        """
        if os.name == "nt":
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / "Metrolink" / "config.json"
            return Path("config.json")

        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            config_dir = Path(xdg_config) / "Metrolink"
        else:
            config_dir = Path.home() / ".config" / "Metrolink"
        return config_dir / "config.json"

    def load_config(self) -> ConfigData:
        """
        Load configuration from file.

        If the configuration file doesn't exist, creates a default one.

        Returns:
            ConfigData: The loaded configuration

        Raises:
            ConfigurationError: If the configuration file is invalid
        """
        logger.debug(f"Loading config from: {self.config_path}")

        if not self.config_path.exists():
            logger.info(f"Config file doesn't exist, creating default at: {self.config_path}")
            self.create_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.config = ConfigData(**data)
            logger.debug(f"Successfully loaded config from: {self.config_path}")
            return self.config
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}")
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")
        except (OSError, TypeError) as e:
            raise ConfigurationError(f"Failed to load config: {e}")

    def save_config(self, config: ConfigData) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration data to save

        Returns:
            bool: True if saved successfully, False otherwise
        """
        logger.info(f"Saving config to: {self.config_path}")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)
            self.config = config
            logger.info(f"Successfully saved config to: {self.config_path}")
            return True
        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            return False

    def create_default_config(self) -> None:
        """Create a default configuration file."""
        if not self.save_config(ConfigData()):
            raise ConfigurationError(f"Could not create default config at {self.config_path}")

    def update_change_penalty(self, minutes: float) -> None:
        """
        Update the line change penalty and save to file.

        Args:
            minutes: Non-negative penalty in minutes
        """
        if self.config is None:
            self.load_config()

        if minutes < 0:
            raise ConfigurationError("Change penalty cannot be negative")
        self.config.routing.change_penalty_minutes = float(minutes)
        self.save_config(self.config)

    def update_network_path(self, csv_path: str) -> None:
        """Point the configuration at a different network file and save."""
        if self.config is None:
            self.load_config()

        self.config.network.csv_path = csv_path
        self.save_config(self.config)

    def resolve_network_path(self) -> Path:
        """
        Get the network CSV path.

        A relative path is looked up next to the config file first, then in the
        application directory that ships the bundled ``data/`` network. When
        neither exists the config-relative path is returned so that the load
        error names it.
        """
        if self.config is None:
            self.load_config()

        path = Path(self.config.network.csv_path).expanduser()
        if path.is_absolute():
            return path

        config_relative = self.config_path.parent / path
        if not config_relative.exists():
            bundled = APP_ROOT / path
            if bundled.exists():
                logger.debug(f"Using bundled network file: {bundled}")
                return bundled
        return config_relative

    def get_config_summary(self) -> dict:
        """
        Get a summary of current configuration for display.

        Returns:
            dict: Configuration summary
        """
        if self.config is None:
            self.load_config()

        return {
            "config_path": str(self.config_path),
            "network_file": self.config.network.csv_path,
            "change_penalty_minutes": self.config.routing.change_penalty_minutes,
            "default_criterion": self.config.routing.default_criterion,
            "log_level": self.config.logging.level,
        }
