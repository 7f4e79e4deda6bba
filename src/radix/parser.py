"""Parser — литерал в исходной системе счисления → float (base 10).

Один проход слева направо, без backtracking и lookahead. Текущая часть
литерала отслеживается state machine с двумя состояниями:

    INTEGER  --separator--> FRACTION
    FRACTION --separator--> DuplicateSeparator
    INTEGER/FRACTION --digit--> то же состояние (накопление значения)
    INTEGER/FRACTION --неизвестный символ / цифра >= radix--> ошибка

Обратного перехода FRACTION → INTEGER нет.

Промежуточное значение — float (ограниченная точность, ~15-17 значащих
цифр). Пустой литерал даёт 0.0.
"""

from enum import Enum

from src.core.math.numerical_safeguards import is_valid_float
from src.radix.digit_codec import char_to_digit, validate_radix
from src.radix.errors import (
    DigitOutOfRange,
    DuplicateSeparator,
    InvalidToken,
    ValueOverflow,
)


class LiteralPart(str, Enum):
    """Часть литерала, которую сейчас читает парсер."""

    INTEGER = "INTEGER"
    FRACTION = "FRACTION"


def to_decimal(source: str, from_radix: int, decimal_separator: str) -> float:
    """Разбор литерала в float.

    INTEGER: value = value * from_radix + digit (старшая цифра первой).
    FRACTION: exponent уменьшается перед каждой цифрой,
              value += digit * from_radix ** exponent.

    Args:
        source: Литерал в системе from_radix
        from_radix: Исходная система счисления [2, 36]
        decimal_separator: Символ-разделитель целой и дробной части

    Returns:
        Неотрицательное значение литерала

    Raises:
        ValueError: from_radix вне [2, 36]
        InvalidToken: символ не цифра и не разделитель
        DigitOutOfRange: значение цифры >= from_radix
        DuplicateSeparator: второй разделитель
        ValueOverflow: накопленное значение не конечно

    Examples:
        >>> to_decimal("fe.1", 16, ".")
        254.0625
        >>> to_decimal("", 10, ".")
        0.0
    """
    validate_radix(from_radix, "from_radix")

    value = 0.0
    exponent = 0
    current_part = LiteralPart.INTEGER

    for char in source:
        if char == decimal_separator:
            if current_part == LiteralPart.FRACTION:
                raise DuplicateSeparator(decimal_separator)
            current_part = LiteralPart.FRACTION
            continue

        digit = char_to_digit(char)
        if digit is None:
            raise InvalidToken(char)
        if digit >= from_radix:
            raise DigitOutOfRange(char, from_radix)

        if current_part == LiteralPart.INTEGER:
            value = value * from_radix + digit
        else:
            exponent -= 1
            value += digit * float(from_radix) ** exponent

    if not is_valid_float(value):
        raise ValueOverflow(source)

    return value
