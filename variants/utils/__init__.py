"""
Utils package for Variants.

This module provides logging, configuration, exceptions, constants,
string helpers and report rendering shared by the naming engine.
"""

# Core utilities
from .exceptions import (
    VariantsError,
    LookupNotFoundError,
    DuplicateKeyError,
    InvalidPolicyError,
    DeclarationError,
)
from .constants import *
from .string_utils import *

# Configuration and logging
from .config import (
    VariantsConfig,
    ReverseMapConfig,
    LoggingConfig,
    get_config,
    set_config,
    reset_config,
    load_config,
    configure_logging,
)
from .logging import setup_logging, get_logger, VariantsLogger

from .report import ReportRenderer, render_report

__all__ = [
    # Core exceptions
    "VariantsError",
    "LookupNotFoundError",
    "DuplicateKeyError",
    "InvalidPolicyError",
    "DeclarationError",

    # Constants (exported via *)
    # String utilities (exported via *)

    # Configuration
    "VariantsConfig",
    "ReverseMapConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    "configure_logging",

    # Logging
    "setup_logging",
    "get_logger",
    "VariantsLogger",

    # Reports
    "ReportRenderer",
    "render_report",
]
