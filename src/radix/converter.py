"""Radix Converter — литерал из одной системы счисления в другую.

Две стадии, последовательно:
1. Parser (to_decimal): литерал from_radix → float
2. Encoder (from_decimal): float → литерал to_radix

Вызов — чистая функция от (config, source): без I/O, без общего
изменяемого состояния, без частичного результата при ошибке. Пакетные
конвертации вызывающий может выполнять параллельно.

Известное ограничение: промежуточное значение — float. Целые больше 2**53
и длинные дроби теряют точность; конвертер это детектирует и логирует,
но не исправляет.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict

from src.core.contracts import validate_conversion_config
from src.core.domain.conversion_config import ConversionConfig
from src.core.math.numerical_safeguards import exceeds_exact_precision
from src.radix.encoder import from_decimal
from src.radix.errors import ConversionError
from src.radix.parser import to_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Результат одной конвертации."""

    source: str
    result: str

    # Промежуточное значение для диагностики
    decimal_value: float
    from_radix: int
    to_radix: int

    # Детали
    details: str


class RadixConverter:
    """Конвертер литералов с фиксированной ConversionConfig.

    Stateless между вызовами: конфигурация immutable, каждый convert
    зависит только от своего аргумента.
    """

    def __init__(self, config: ConversionConfig):
        self.config = config

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "RadixConverter":
        """Создание конвертера из внешнего dict (JSON контракт).

        Raises:
            jsonschema.ValidationError: payload не соответствует
                conversion_config.json
        """
        validate_conversion_config(payload)
        return cls(ConversionConfig.model_validate(payload))

    def to_decimal(self, source: str) -> float:
        """Разбор литерала в float по from_radix и разделителю конфигурации."""
        return to_decimal(source, self.config.from_radix, self.config.decimal_separator)

    def convert(self, source: str) -> str:
        """Конвертация литерала; при ошибке исключение, без частичного вывода.

        Raises:
            ConversionError: InvalidToken / DigitOutOfRange /
                DuplicateSeparator / ValueOverflow
        """
        return self.convert_detailed(source).result

    def convert_detailed(self, source: str) -> ConversionResult:
        """Конвертация с диагностикой (промежуточное значение, детали)."""
        config = self.config

        try:
            decimal_value = self.to_decimal(source)
        except ConversionError as e:
            logger.debug(
                "conversion failed: source=%r base %d -> %d: %s",
                source,
                config.from_radix,
                config.to_radix,
                e,
            )
            raise

        if exceeds_exact_precision(decimal_value):
            logger.warning(
                "precision ceiling reached: %r (base %d) evaluates to %r, "
                "low-order digits are not exact",
                source,
                config.from_radix,
                decimal_value,
            )

        result = from_decimal(
            decimal_value,
            config.to_radix,
            config.decimal_separator,
            config.max_fractional_digits,
        )

        logger.debug(
            "converted %r (base %d) -> %r (base %d)",
            source,
            config.from_radix,
            result,
            config.to_radix,
        )

        return ConversionResult(
            source=source,
            result=result,
            decimal_value=decimal_value,
            from_radix=config.from_radix,
            to_radix=config.to_radix,
            details=f"base {config.from_radix} -> base {config.to_radix}, decimal={decimal_value!r}",
        )


def convert(config: ConversionConfig, source: str) -> str:
    """
    Конвертация литерала source по параметрам config.

    Args:
        config: Параметры конвертации
        source: Литерал в системе config.from_radix

    Returns:
        Литерал в системе config.to_radix

    Raises:
        ConversionError: ошибка валидации литерала

    Examples:
        >>> convert(ConversionConfig(from_radix=16, to_radix=10), "fe.1")
        '254.0625'
    """
    return RadixConverter(config).convert(source)
