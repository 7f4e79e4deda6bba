"""
Domain models and value objects.

Contains the conversion configuration shared by the parser and the encoder.
"""

from src.core.domain.conversion_config import (
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_MAX_FRACTIONAL_DIGITS,
    MAX_RADIX,
    MIN_RADIX,
    ConversionConfig,
    DecimalSeparator,
)

__all__ = [
    # Constants
    "MIN_RADIX",
    "MAX_RADIX",
    "DEFAULT_DECIMAL_SEPARATOR",
    "DEFAULT_MAX_FRACTIONAL_DIGITS",
    # Conversion config model
    "ConversionConfig",
    "DecimalSeparator",
]
