"""
Contract Validation Module

Модуль для валидации JSON контрактов конвертера.
"""

from .validators import (
    ContractValidator,
    ConversionConfigValidator,
    SchemaLoader,
    validate_conversion_config,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionConfigValidator",
    # Functions
    "validate_conversion_config",
]
