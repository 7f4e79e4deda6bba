"""Encoder — float (base 10) → литерал в целевой системе счисления.

Целая часть кодируется повторным евклидовым делением, дробная —
повторным умножением на to_radix с усечением после max_fractional_digits
цифр (без округления последней цифры и без флага об усечении).

Политика краевых случаев:
- нулевая целая часть даёт пустой целый сегмент ("0.5" → ".1" в base 2,
  "0" → "")
- нулевая дробная часть — разделитель не выводится
- ненулевая дробь при max_fractional_digits=0 — результат оканчивается
  разделителем
"""

import math

from src.core.math.numerical_safeguards import validate_in_range, validate_non_negative
from src.radix.digit_codec import digit_to_char, validate_radix


def _encode_digit(value: int) -> str:
    char = digit_to_char(value)
    if char is None:
        raise ValueError(f"Digit value {value} cannot be encoded")
    return char


def _encode_integer(integer_part: int, to_radix: int) -> str:
    digits: list[str] = []
    while integer_part > 0:
        integer_part, remainder = divmod(integer_part, to_radix)
        digits.append(_encode_digit(remainder))
    return "".join(reversed(digits))


def from_decimal(
    value: float,
    to_radix: int,
    decimal_separator: str,
    max_fractional_digits: int,
) -> str:
    """
    Кодирование неотрицательного float в литерал системы to_radix.

    Args:
        value: Значение (>= 0, конечное)
        to_radix: Целевая система счисления [2, 36]
        decimal_separator: Разделитель целой и дробной части
        max_fractional_digits: Максимум дробных цифр (>= 0)

    Returns:
        Литерал вида [integer-digits][separator fraction-digits],
        цифры >= 10 в верхнем регистре

    Raises:
        ValueError: value отрицательное/NaN/Inf, to_radix вне [2, 36],
            max_fractional_digits < 0

    Examples:
        >>> from_decimal(254.0625, 16, ".", 8)
        'FE.1'
        >>> from_decimal(0.5, 2, ".", 8)
        '.1'
    """
    validate_non_negative(value, "value")
    validate_radix(to_radix, "to_radix")
    validate_in_range(max_fractional_digits, "max_fractional_digits", min_value=0)

    integer_part = math.floor(value)
    fraction = value - integer_part

    result = _encode_integer(integer_part, to_radix)

    if fraction == 0.0:
        return result

    fraction_digits: list[str] = []
    while fraction != 0.0 and len(fraction_digits) < max_fractional_digits:
        product = fraction * to_radix
        digit = math.floor(product)
        fraction_digits.append(_encode_digit(digit))
        fraction = product - digit

    return result + decimal_separator + "".join(fraction_digits)
