"""
Configuration management for the DIMACS parser.
Uses OmegaConf for loading, merging and accessing configuration values.
"""

import logging
import os
from typing import Any

import yaml
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from cnfparse.utils.exceptions import CNFIoError, ConfigError

logger = logging.getLogger(__name__)

# Largest count accepted in a header line (signed 32-bit, like most solvers)
DEFAULT_MAX_COUNT = 2**31 - 1

# Upper bound for parser.max_count itself (signed 64-bit)
LARGEST_MAX_COUNT = 2**63 - 1

REPORT_FORMATS = ("json", "csv")


class ParserConfig:
    """
    Configuration manager for the parser.
    Handles loading, merging, and accessing configuration parameters.
    """

    DEFAULT_CONFIG = {
        "parser": {
            "strict": True,
            "max_count": DEFAULT_MAX_COUNT,
        },
        "logging": {
            "level": "WARNING",
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
        "report": {
            "dir": None,
            "format": "json",
            "name": "cnfparse",
        },
    }

    def __init__(self, config_path: str | None = None, **overrides: Any):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to a YAML configuration file
            **overrides: Parser options (strict, max_count) applied on top of
                the defaults and the file
        """
        self.config: DictConfig = OmegaConf.create(self.DEFAULT_CONFIG)

        if config_path:
            self._load_config_file(config_path)

        for key, value in overrides.items():
            self.set(f"parser.{key}", value)

        self.validate()

    def _load_config_file(self, config_path: str) -> None:
        if not os.path.exists(config_path):
            raise CNFIoError("Configuration file not found", path=config_path)

        try:
            file_config = OmegaConf.load(config_path)
            self.config = OmegaConf.merge(self.config, file_config)
        except (OSError, yaml.YAMLError, OmegaConfBaseException) as e:
            raise CNFIoError(f"Error loading configuration file ({e})", path=config_path) from e

        logger.debug(f"Loaded configuration from {config_path}")

    @property
    def strict(self) -> bool:
        """Whether malformed clause content is an error rather than a clause end."""
        return bool(self.config.parser.strict)

    @property
    def max_count(self) -> int:
        return int(self.config.parser.max_count)

    @property
    def log_level(self) -> int:
        """Numeric level for logging.level (a name such as "INFO")."""
        return logging.getLevelName(str(self.get("logging.level")).upper())

    def validate(self) -> None:
        """
        Check the values the parser and the command line rely on.

        Raises:
            ConfigError: If a value has the wrong type or is out of range
        """
        max_count = self.get("parser.max_count")
        if (
            not isinstance(max_count, int)
            or isinstance(max_count, bool)
            or not 0 <= max_count <= LARGEST_MAX_COUNT
        ):
            raise ConfigError(
                f"Expected an integer in [0, {LARGEST_MAX_COUNT}], got {max_count!r}",
                key="parser.max_count",
            )

        report_format = self.get("report.format")
        if report_format not in REPORT_FORMATS:
            raise ConfigError(
                f"Unknown report format {report_format!r}", key="report.format"
            )

        if not isinstance(self.log_level, int):
            raise ConfigError(
                f"Unknown logging level {self.get('logging.level')!r}",
                key="logging.level",
            )

    def update(self, config_dict: dict[str, Any]) -> None:
        """
        Update the configuration with the given dictionary.

        Args:
            config_dict: Dictionary to update the configuration with
        """
        self.config = OmegaConf.merge(self.config, config_dict)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.
        Supports dot notation for nested keys (e.g., "parser.strict").

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return OmegaConf.select(self.config, key, default=default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value by key.
        Supports dot notation for nested keys (e.g., "parser.strict").
        """
        OmegaConf.update(self.config, key, value)

    def to_dict(self) -> dict[str, Any]:
        return OmegaConf.to_container(self.config, resolve=True)

    def save(self, file_path: str) -> None:
        """
        Save the configuration to a YAML file.

        Args:
            file_path: Path to save the configuration to
        """
        os.makedirs(os.path.dirname(os.path.abspath(file_path)), exist_ok=True)
        OmegaConf.save(self.config, file_path)

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)
