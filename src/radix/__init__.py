"""Radix — конвертация литералов между системами счисления 2-36.

- Digit codec: значение цифры ↔ символ
- Parser: литерал → float (state machine INTEGER/FRACTION)
- Encoder: float → литерал с усечением дробной части
- Converter: композиция parser → encoder
"""

from .converter import ConversionResult, RadixConverter, convert
from .digit_codec import char_to_digit, digit_to_char, validate_radix
from .encoder import from_decimal
from .errors import (
    ConversionError,
    DigitOutOfRange,
    DuplicateSeparator,
    InvalidToken,
    ValueOverflow,
)
from .parser import LiteralPart, to_decimal

__all__ = [
    # Converter
    "RadixConverter",
    "ConversionResult",
    "convert",
    # Digit codec
    "digit_to_char",
    "char_to_digit",
    "validate_radix",
    # Parser
    "LiteralPart",
    "to_decimal",
    # Encoder
    "from_decimal",
    # Errors
    "ConversionError",
    "InvalidToken",
    "DigitOutOfRange",
    "DuplicateSeparator",
    "ValueOverflow",
]
