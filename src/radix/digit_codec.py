"""
Digit Codec — отображение значение цифры ↔ символ

Общий для парсера и энкодера:
- 0..9   → '0'..'9'
- 10..35 → 'A'..'Z' (на входе регистр не важен, на выходе верхний)

digit_to_char и char_to_digit — точные взаимные обратные на [0, 35]
и множестве допустимых символов (с точностью до регистра).
"""

from typing import Final

from src.core.domain.conversion_config import MAX_RADIX, MIN_RADIX

# Число значений цифр, которые умеет кодировать codec
DIGIT_VALUES: Final[int] = 36

_DECIMAL_DIGITS: Final[int] = 10


def digit_to_char(value: int) -> str | None:
    """
    Символ для значения цифры.

    Args:
        value: Значение цифры

    Returns:
        '0'-'9' для 0-9, 'A'-'Z' для 10-35, None для прочих значений

    Examples:
        >>> digit_to_char(7)
        '7'
        >>> digit_to_char(15)
        'F'
        >>> digit_to_char(36) is None
        True
    """
    if 0 <= value < _DECIMAL_DIGITS:
        return chr(value + ord("0"))
    if _DECIMAL_DIGITS <= value < DIGIT_VALUES:
        return chr(value - _DECIMAL_DIGITS + ord("A"))
    return None


def char_to_digit(char: str) -> int | None:
    """
    Значение цифры для символа.

    Args:
        char: Один символ

    Returns:
        0-9 для '0'-'9', 10-35 для 'A'-'Z' и 'a'-'z', None для прочих символов

    Examples:
        >>> char_to_digit('f')
        15
        >>> char_to_digit('F')
        15
        >>> char_to_digit('.') is None
        True
    """
    if len(char) != 1:
        return None
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + _DECIMAL_DIGITS
    if "a" <= char <= "z":
        return ord(char) - ord("a") + _DECIMAL_DIGITS
    return None


def validate_radix(radix: int, name: str) -> None:
    """
    Валидация системы счисления.

    Args:
        radix: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если radix не int или вне [2, 36]
    """
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise ValueError(f"{name} must be an integer, got {radix!r}")

    if radix < MIN_RADIX or radix > MAX_RADIX:
        raise ValueError(f"{name} must be in range [{MIN_RADIX}, {MAX_RADIX}], got {radix}")
