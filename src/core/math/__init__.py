"""
Core math modules для Radix Converter

Float guards для промежуточного значения конвертера (bounded precision).
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Precision bounds
    MAX_EXACT_FLOAT_INTEGER,
    # NaN/Inf checks
    exceeds_exact_precision,
    is_valid_float,
    # Validation
    validate_in_range,
    validate_non_negative,
)

__all__ = [
    # Numerical Safeguards — Precision bounds
    "MAX_EXACT_FLOAT_INTEGER",
    # Numerical Safeguards — NaN/Inf checks
    "exceeds_exact_precision",
    "is_valid_float",
    # Numerical Safeguards — Validation
    "validate_in_range",
    "validate_non_negative",
]
