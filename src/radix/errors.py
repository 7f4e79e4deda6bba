"""Ошибки конвертации литералов.

Все ошибки — ошибки валидации входного литерала: не retryable, внутри
конвертера не восстанавливаются и пробрасываются вызывающему как есть.
Частичный результат при ошибке никогда не возвращается.
"""


class ConversionError(Exception):
    """Базовая ошибка конвертации литерала."""
    pass


class InvalidToken(ConversionError):
    """Символ не является ни цифрой (0-9, A-Z, a-z), ни разделителем."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Unexpected token: {char}.")


class DigitOutOfRange(ConversionError):
    """Цифра распознана, но её значение >= исходной системы счисления.

    Например, цифра '9' при from_radix=8.
    """

    def __init__(self, char: str, radix: int):
        self.char = char
        self.radix = radix
        super().__init__(f"Token '{char}' is not valid for base {radix}")


class DuplicateSeparator(ConversionError):
    """Во входном литерале больше одного десятичного разделителя."""

    def __init__(self, separator: str):
        self.separator = separator
        super().__init__(f"Double decimal separator found: {separator!r}")


class ValueOverflow(ConversionError):
    """
    Промежуточное float значение вышло за пределы double (Inf).

    Возникает на очень длинных литералах: позиционное накопление
    value * radix + digit переполняет float.
    """

    def __init__(self, source: str):
        self.source = source
        super().__init__(
            f"Literal of {len(source)} characters overflows the float intermediate"
        )
