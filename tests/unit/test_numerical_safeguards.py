"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf детекцию
2. Границу точного представления целых float (2**53)
3. Валидацию параметров
"""


import pytest

from src.core.math.numerical_safeguards import (
    MAX_EXACT_FLOAT_INTEGER,
    exceeds_exact_precision,
    is_valid_float,
    validate_in_range,
    validate_non_negative,
)

# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_are_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(254.0625)
        assert is_valid_float(1.7e308)

    def test_nan_is_invalid(self) -> None:
        assert not is_valid_float(float("nan"))

    def test_inf_is_invalid(self) -> None:
        """Переполнение аккумулятора даёт Inf"""
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))
        assert not is_valid_float(1e308 * 36)


# =============================================================================
# ТЕСТЫ ГРАНИЦЫ ТОЧНОСТИ
# =============================================================================


class TestExceedsExactPrecision:
    """Тесты для exceeds_exact_precision"""

    def test_constant_is_two_pow_53(self) -> None:
        assert MAX_EXACT_FLOAT_INTEGER == 9007199254740992.0

    def test_small_values_are_exact(self) -> None:
        assert not exceeds_exact_precision(0.0)
        assert not exceeds_exact_precision(255.0)

    def test_boundary_is_exact(self) -> None:
        """Сама граница 2**53 ещё точна"""
        assert not exceeds_exact_precision(2.0**53)

    def test_beyond_boundary(self) -> None:
        assert exceeds_exact_precision(2.0**53 + 2.0)
        assert exceeds_exact_precision(2.0**60)

    def test_integers_beyond_boundary_collide(self) -> None:
        """Выше 2**53 соседние целые неразличимы"""
        assert float(2**53 + 1) == float(2**53)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateNonNegative:
    """Тесты для validate_non_negative"""

    def test_zero_and_positive_pass(self) -> None:
        validate_non_negative(0.0, "value")
        validate_non_negative(254.0625, "value")

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="value must be non-negative"):
            validate_non_negative(-0.5, "value")

    def test_nan_raises(self) -> None:
        with pytest.raises(ValueError, match="NaN/Inf"):
            validate_non_negative(float("nan"), "value")

    def test_inf_raises(self) -> None:
        with pytest.raises(ValueError, match="NaN/Inf"):
            validate_non_negative(float("inf"), "value")


class TestValidateInRange:
    """Тесты для validate_in_range"""

    def test_in_range_passes(self) -> None:
        validate_in_range(8, "max_fractional_digits", min_value=0)
        validate_in_range(16, "radix", min_value=2, max_value=36)

    def test_below_min_raises(self) -> None:
        with pytest.raises(ValueError, match="max_fractional_digits must be >= 0"):
            validate_in_range(-1, "max_fractional_digits", min_value=0)

    def test_above_max_raises(self) -> None:
        with pytest.raises(ValueError, match="radix must be <= 36"):
            validate_in_range(37, "radix", min_value=2, max_value=36)

    def test_unbounded(self) -> None:
        validate_in_range(1e300, "value")

    def test_nan_raises(self) -> None:
        with pytest.raises(ValueError, match="NaN/Inf"):
            validate_in_range(float("nan"), "value", min_value=0)
