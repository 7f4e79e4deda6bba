"""
Numerical Safeguards — Float Guards для промежуточного значения

Промежуточное представление конвертера — IEEE-754 double (Python float),
~15-17 значащих десятичных цифр. Модуль собирает проверки, которые нужны
парсеру и энкодеру при работе с таким представлением:
- NaN/Inf детекция (переполнение аккумулятора при длинных литералах)
- Граница точного представления целых чисел (2**53)
- Валидация неотрицательности и диапазонов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в энкодер (отклоняются с ValueError)
2. Промежуточное значение всегда неотрицательно
3. Потеря точности выше 2**53 не исправляется, а только детектируется
"""

import math
from typing import Final

# =============================================================================
# ГРАНИЦЫ ТОЧНОСТИ
# =============================================================================

# Наибольшее целое, начиная с которого float перестаёт представлять
# все целые числа подряд (53-битная мантисса double)
MAX_EXACT_FLOAT_INTEGER: Final[float] = float(2**53)


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def exceeds_exact_precision(value: float) -> bool:
    """
    Проверка, вышло ли значение за диапазон точных целых float.

    Выше 2**53 соседние float отличаются больше чем на 1, поэтому младшие
    цифры целой части в целевой системе счисления уже не соответствуют
    исходному литералу.

    Args:
        value: Проверяемое значение

    Returns:
        True если abs(value) > MAX_EXACT_FLOAT_INTEGER

    Examples:
        >>> exceeds_exact_precision(255.0)
        False
        >>> exceeds_exact_precision(2.0**53)
        False
        >>> exceeds_exact_precision(2.0**60)
        True
    """
    return abs(value) > MAX_EXACT_FLOAT_INTEGER


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
