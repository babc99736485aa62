"""
Configuration management for indexgraph.

Provides centralized settings for edge-list parsing, result output
and logging, with sensible defaults and validation.
"""

import copy
import os
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from indexgraph.core.exceptions import ConfigurationError

OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EdgeListConfig:
    """Configuration for the textual edge-list format."""

    # Token separating a source value from its target
    arrow: str = "->"

    # Separator between several pairs written on one line
    pair_separator: str = ","

    # Lines starting with this prefix are ignored
    comment_prefix: str = "#"

    # Encoding used when reading edge-list files
    encoding: str = "utf-8"


@dataclass
class OutputConfig:
    """Configuration for traversal result output."""

    # Output format (text, json)
    format: str = "text"

    # Indentation for JSON output
    json_indent: int = 2

    # Sort the members of each frontier before rendering
    sort_frontiers: bool = True


@dataclass
class AppConfig:
    """Master configuration combining all sections."""

    edge_list: EdgeListConfig = field(default_factory=EdgeListConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    # Enable verbose logging
    verbose: bool = False

    log_level: str = "INFO"

    log_file: Optional[str] = None

    def validate(self) -> None:
        """Raise ConfigurationError if any value has the wrong type or is out of range."""
        for name, value in (
            ("edge_list.arrow", self.edge_list.arrow),
            ("edge_list.pair_separator", self.edge_list.pair_separator),
            ("edge_list.comment_prefix", self.edge_list.comment_prefix),
            ("edge_list.encoding", self.edge_list.encoding),
            ("output.format", self.output.format),
            ("log_level", self.log_level),
        ):
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"{name} must be a string, got {type(value).__name__}",
                    details={"key": name},
                )
        if isinstance(self.output.json_indent, bool) or not isinstance(self.output.json_indent, int):
            raise ConfigurationError(
                "output.json_indent must be an integer",
                details={"key": "output.json_indent"},
            )
        if not self.edge_list.arrow.strip():
            raise ConfigurationError("Edge-list arrow must not be empty")
        if self.edge_list.arrow == self.edge_list.pair_separator:
            raise ConfigurationError(
                "Edge-list arrow and pair separator must differ",
                details={"arrow": self.edge_list.arrow},
            )
        if self.output.format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown output format: {self.output.format}",
                details={"allowed": list(OUTPUT_FORMATS)},
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {self.log_level}",
                details={"allowed": list(LOG_LEVELS)},
            )


class Config:
    """
    Central configuration manager providing access to all settings.

    Supports loading from environment variables and configuration files.
    """

    _instance: Optional["Config"] = None
    _config: AppConfig = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._config = AppConfig()
        return cls._instance

    @classmethod
    def get(cls) -> AppConfig:
        """Get the current configuration."""
        if cls._instance is None:
            cls()
        return cls._instance._config

    @classmethod
    def reset(cls) -> AppConfig:
        """Restore the default configuration."""
        instance = cls()
        instance._config = AppConfig()
        return instance._config

    @classmethod
    def load_from_file(cls, config_path: str) -> AppConfig:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file.

        Returns:
            Loaded AppConfig instance.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "r") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(
                    f"Configuration file is not valid JSON: {e}",
                    details={"path": str(config_path)},
                ) from e

        config = cls._dict_to_config(data)
        config.validate()

        instance = cls()
        instance._config = config
        return instance._config

    @classmethod
    def load_from_env(cls) -> AppConfig:
        """
        Load configuration from environment variables.

        Variables are prefixed with INDEXGRAPH_. A .env file in the
        working directory is read first.

        Returns:
            AppConfig with environment overrides applied.
        """
        load_dotenv()

        instance = cls()
        config = copy.deepcopy(instance._config)

        if os.getenv("INDEXGRAPH_ARROW"):
            config.edge_list.arrow = os.getenv("INDEXGRAPH_ARROW")

        if os.getenv("INDEXGRAPH_ENCODING"):
            config.edge_list.encoding = os.getenv("INDEXGRAPH_ENCODING")

        if os.getenv("INDEXGRAPH_OUTPUT_FORMAT"):
            config.output.format = os.getenv("INDEXGRAPH_OUTPUT_FORMAT")

        if os.getenv("INDEXGRAPH_LOG_LEVEL"):
            config.log_level = os.getenv("INDEXGRAPH_LOG_LEVEL").upper()

        if os.getenv("INDEXGRAPH_LOG_FILE"):
            config.log_file = os.getenv("INDEXGRAPH_LOG_FILE")

        if os.getenv("INDEXGRAPH_VERBOSE"):
            config.verbose = os.getenv("INDEXGRAPH_VERBOSE").lower() in ("true", "1", "yes")

        config.validate()
        instance._config = config
        return config

    @staticmethod
    def _dict_to_config(data: dict) -> AppConfig:
        """Convert a dictionary to AppConfig."""
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration must be a JSON object, got {type(data).__name__}"
            )

        config = AppConfig()

        try:
            if "edge_list" in data:
                config.edge_list = EdgeListConfig(**data["edge_list"])

            if "output" in data:
                config.output = OutputConfig(**data["output"])
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration section: {e}") from e

        if "verbose" in data:
            config.verbose = data["verbose"]

        if "log_level" in data:
            config.log_level = data["log_level"]

        if "log_file" in data:
            config.log_file = data["log_file"]

        return config

    @classmethod
    def save_to_file(cls, config_path: str) -> None:
        """
        Save current configuration to a JSON file.

        Args:
            config_path: Path to save the configuration file.
        """
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = cls._config_to_dict(cls.get())

        with open(config_path, "w") as f:
            json.dump(data, f, indent=2)

    @staticmethod
    def _config_to_dict(config: AppConfig) -> dict:
        """Convert AppConfig to a dictionary."""
        return {
            "edge_list": {
                "arrow": config.edge_list.arrow,
                "pair_separator": config.edge_list.pair_separator,
                "comment_prefix": config.edge_list.comment_prefix,
                "encoding": config.edge_list.encoding,
            },
            "output": {
                "format": config.output.format,
                "json_indent": config.output.json_indent,
                "sort_frontiers": config.output.sort_frontiers,
            },
            "verbose": config.verbose,
            "log_level": config.log_level,
            "log_file": config.log_file,
        }
