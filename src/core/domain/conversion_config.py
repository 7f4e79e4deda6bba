"""
ConversionConfig — Конфигурация одной конвертации

Immutable Pydantic модель, описывающая параметры вызова конвертера:
исходная и целевая система счисления, десятичный разделитель и лимит
дробных цифр. Полная совместимость с JSON Schema
(contracts/schema/conversion_config.json).

Конфигурация передаётся в каждый вызов, общего изменяемого состояния нет.
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Допустимый диапазон систем счисления: цифры 0-9 и A-Z
MIN_RADIX: Final[int] = 2
MAX_RADIX: Final[int] = 36

DEFAULT_DECIMAL_SEPARATOR: Final[str] = "."

# Лимит дробных цифр по умолчанию
DEFAULT_MAX_FRACTIONAL_DIGITS: Final[int] = 8


# =============================================================================
# ENUMS
# =============================================================================


class DecimalSeparator(str, Enum):
    """Стандартные десятичные разделители"""

    POINT = "."
    COMMA = ","


# =============================================================================
# CONVERSION CONFIG MODEL
# =============================================================================


class ConversionConfig(BaseModel):
    """
    Параметры конвертации литерала между системами счисления.

    Immutable модель (frozen=True):
    - from_radix / to_radix в диапазоне [2, 36]
    - decimal_separator: ровно один символ, не цифра и не латинская буква
      (иначе разделитель неотличим от цифры системы счисления)
    - max_fractional_digits: сколько дробных цифр максимум выводит энкодер
    """

    from_radix: int = Field(
        ..., ge=MIN_RADIX, le=MAX_RADIX, description="Исходная система счисления"
    )
    to_radix: int = Field(
        ..., ge=MIN_RADIX, le=MAX_RADIX, description="Целевая система счисления"
    )
    decimal_separator: str = Field(
        DEFAULT_DECIMAL_SEPARATOR,
        min_length=1,
        max_length=1,
        description="Разделитель целой и дробной части",
    )
    max_fractional_digits: int = Field(
        DEFAULT_MAX_FRACTIONAL_DIGITS,
        ge=0,
        description="Максимум дробных цифр в результате (усечение без округления)",
    )

    model_config = {"frozen": True}

    @field_validator("decimal_separator", mode="before")
    @classmethod
    def normalize_separator(cls, v: object) -> object:
        """DecimalSeparator → его символ"""
        if isinstance(v, DecimalSeparator):
            return v.value
        return v

    @field_validator("decimal_separator")
    @classmethod
    def validate_separator_not_digit(cls, v: str) -> str:
        """Проверка, что разделитель не совпадает с символом цифры"""
        if v.isascii() and v.isalnum():
            raise ValueError(
                f"decimal_separator {v!r} collides with a digit character"
            )
        return v
