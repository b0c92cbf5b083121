"""Shared utilities for XML structure conversion.

This module provides the configuration object and the correlation-aware
logging helpers used across the structure and API layers.
"""

from .config import (
    DEFAULT_NAME_SUBSTITUTIONS,
    ConfigError,
    ConfigValidationError,
    ConversionConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "DEFAULT_NAME_SUBSTITUTIONS",
    "ConfigError",
    "ConfigValidationError",
    "ConversionConfig",
    "CorrelationLogger",
    "get_logger",
]
