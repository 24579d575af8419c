"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
Variants package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional, Sequence

from .constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, LOG_FORMAT


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the Variants package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    # Determine log level
    if level is None:
        level = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)

    log_level = getattr(logging, level.upper(), logging.WARNING)

    # Configure root logger for variants
    logger = logging.getLogger("variants")
    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler if specified
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "variants" or name.startswith("variants."):
        return logging.getLogger(name)
    return logging.getLogger(f"variants.{name}")


class VariantsLogger:
    """
    Domain logging for the naming resolution pipeline.

    This class provides specialized logging methods for the resolution,
    listing and reverse mapping stages.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_resolution_start(self, table_name: str, symbol_count: int) -> None:
        """
        Log beginning of a resolution pass.

        Args:
            table_name: Name of the enumerated type being resolved
            symbol_count: Number of symbols in the table
        """
        self.logger.debug(f"Resolving names for '{table_name or '<anonymous>'}' ({symbol_count} symbols)")

    def log_symbol_resolved(
        self, identifier: str, primary: str, abbreviated: str, primary_rule: str, abbr_rule: str
    ) -> None:
        """
        Log the names chosen for one symbol and the rules that produced them.

        Args:
            identifier: Raw symbol identifier
            primary: Resolved primary name
            abbreviated: Resolved abbreviated name
            primary_rule: Name of the primary rule that matched
            abbr_rule: Name of the abbreviation rule that matched
        """
        self.logger.debug(
            f"{identifier}: primary={primary!r} ({primary_rule}), abbr={abbreviated!r} ({abbr_rule})"
        )

    def log_collision(self, key: str, identifiers: Sequence[str]) -> None:
        """
        Log a reverse-lookup key claimed by more than one symbol.

        Args:
            key: The shared match key
            identifiers: Identifiers of the colliding symbols, in declaration order
        """
        self.logger.warning(
            f"Match key {key!r} is shared by {list(identifiers)}; "
            f"lookups resolve to '{identifiers[0]}'"
        )

    def log_lookup_miss(self, text: str, key_count: int) -> None:
        """
        Log a failed reverse lookup.

        Args:
            text: Input string that matched no key
            key_count: Number of keys that were searched
        """
        self.logger.debug(f"No variant matches {text!r} ({key_count} keys searched)")


# Initialize logging on module import
setup_logging()
