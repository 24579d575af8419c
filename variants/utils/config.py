"""
Configuration System for the Variants naming engine.

This module provides a small, unified configuration interface. Options are
read from a YAML or JSON file, with environment variables overriding the
collision and logging switches.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import (
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
    ENV_DETECT_COLLISIONS,
    ENV_LOG_LEVEL,
    ENV_STRICT_COLLISIONS,
    TRUTHY_VALUES,
    YAML_SUFFIXES,
)
from .logging import get_logger, setup_logging

logger = get_logger(__name__)


@dataclass
class ReverseMapConfig:
    """Reverse lookup configuration."""

    # Report keys shared by distinct variants
    detect_collisions: bool = True
    # Reject shared keys instead of letting the first declaration win
    strict: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL
    enable_file_logging: bool = False
    log_file: str = DEFAULT_LOG_FILE


def _env_flag(name: str) -> Optional[bool]:
    """Read a boolean environment override, None when unset."""
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    return raw.lower() in TRUTHY_VALUES


class VariantsConfig:
    """
    Unified configuration manager for the Variants package.

    This class loads every option from a single YAML or JSON file and
    exposes them as typed sections.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default location.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        # Initialize configuration sections
        self.reverse_map = self._create_reverse_map_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        # Default location: try YAML first, then JSON
        config_dir = Path(__file__).parent
        yaml_config = config_dir / "variants_config.yaml"
        json_config = config_dir / "variants_config.json"

        if yaml_config.exists():
            return yaml_config
        return json_config

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            logger.debug(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        try:
            with open(self.config_file, "r") as f:
                if self.config_file.suffix.lower() in YAML_SUFFIXES:
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load configuration: {e}")
            return {}

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data or {}

    def _create_reverse_map_config(self) -> ReverseMapConfig:
        """Create reverse lookup configuration from loaded data."""
        map_data = self._config_data.get("reverse_map") or {}

        detect = map_data.get("detect_collisions", True)
        strict = map_data.get("strict", False)

        # Check environment variable overrides
        env_detect = _env_flag(ENV_DETECT_COLLISIONS)
        if env_detect is not None:
            detect = env_detect
        env_strict = _env_flag(ENV_STRICT_COLLISIONS)
        if env_strict is not None:
            strict = env_strict

        return ReverseMapConfig(detect_collisions=bool(detect), strict=bool(strict))

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._config_data.get("logging") or {}

        return LoggingConfig(
            level=os.getenv(ENV_LOG_LEVEL) or log_data.get("level", DEFAULT_LOG_LEVEL),
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", DEFAULT_LOG_FILE),
        )

    def is_strict(self) -> bool:
        """Check if shared match keys are rejected."""
        return self.reverse_map.strict

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a plain dictionary."""
        return {
            "version": "1.0",
            "description": "Variants Naming Configuration",
            "reverse_map": {
                "detect_collisions": self.reverse_map.detect_collisions,
                "strict": self.reverse_map.strict,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

    def save_config(self) -> None:
        """Save current configuration to file."""
        config_data = self.to_dict()

        with open(self.config_file, "w") as f:
            if self.config_file.suffix.lower() in YAML_SUFFIXES:
                yaml.safe_dump(config_data, f, sort_keys=False)
            else:
                json.dump(config_data, f, indent=2)
        logger.info(f"Configuration saved to {self.config_file}")


# Global configuration instance
_global_config: Optional[VariantsConfig] = None


def get_config() -> VariantsConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = VariantsConfig()
    return _global_config


def set_config(config: VariantsConfig) -> None:
    """Set the global configuration instance.

    The logging section of the new configuration is applied to the
    variants logger.
    """
    global _global_config
    _global_config = config
    configure_logging(config)


def configure_logging(config: VariantsConfig) -> None:
    """Apply a configuration's logging section to the variants logger."""
    log_file = config.logging.log_file if config.logging.enable_file_logging else None
    setup_logging(level=config.logging.level, log_file=log_file)


def reset_config() -> None:
    """Drop the global configuration so the next access reloads it."""
    global _global_config
    _global_config = None


def load_config(config_file: str) -> VariantsConfig:
    """Load configuration from a specific file."""
    return VariantsConfig(config_file)
