"""
Тесты для модуля Integer Primitives

Проверяет:
1. Распознавание целых чисел (bool и float отклоняются)
2. Валидацию параметров с понятным сообщением об ошибке
3. Знак, gcd и возведение в степень для больших чисел
"""

import pytest

from src.core.math.integer_primitives import (
    gcd_abs,
    integer_power,
    integer_sign,
    is_valid_integer,
    validate_integer,
    validate_non_negative_integer,
)

# =============================================================================
# ТЕСТЫ ПРОВЕРКИ ТИПОВ
# =============================================================================


class TestIsValidInteger:
    """Тесты для is_valid_integer"""

    def test_plain_and_large_integers_accepted(self) -> None:
        """Обычные и большие int принимаются"""
        assert is_valid_integer(0)
        assert is_valid_integer(-17)
        assert is_valid_integer(10**40)

    def test_bool_rejected(self) -> None:
        """bool не считается целым числом"""
        assert not is_valid_integer(True)
        assert not is_valid_integer(False)

    def test_non_integers_rejected(self) -> None:
        """float, str и None отклоняются"""
        assert not is_valid_integer(1.0)
        assert not is_valid_integer("1")
        assert not is_valid_integer(None)


class TestValidateInteger:
    """Тесты для validate_integer и validate_non_negative_integer"""

    def test_returns_value(self) -> None:
        """Валидное значение возвращается без изменений"""
        assert validate_integer(-5, "numerator") == -5

    def test_error_message_contains_name(self) -> None:
        """Сообщение об ошибке содержит имя параметра и тип"""
        with pytest.raises(ValueError, match="denominator must be an integer, got float"):
            validate_integer(2.5, "denominator")

    def test_none_rejected(self) -> None:
        """None отклоняется"""
        with pytest.raises(ValueError, match="numerator"):
            validate_integer(None, "numerator")

    def test_non_negative_accepts_zero(self) -> None:
        """Ноль допустим для неотрицательного параметра"""
        assert validate_non_negative_integer(0, "exponent") == 0

    def test_non_negative_rejects_negative(self) -> None:
        """Отрицательное значение отклоняется"""
        with pytest.raises(ValueError, match="exponent must be non-negative, got -1"):
            validate_non_negative_integer(-1, "exponent")


# =============================================================================
# ТЕСТЫ АРИФМЕТИКИ
# =============================================================================


class TestIntegerArithmetic:
    """Тесты для integer_sign, gcd_abs, integer_power"""

    def test_sign(self) -> None:
        """Знак: -1, 0, +1"""
        assert integer_sign(-(10**30)) == -1
        assert integer_sign(0) == 0
        assert integer_sign(42) == 1

    def test_gcd_ignores_signs(self) -> None:
        """gcd берётся по модулю аргументов"""
        assert gcd_abs(-12, 24) == 12
        assert gcd_abs(12, -24) == 12
        assert gcd_abs(5, 3) == 1

    def test_gcd_of_zero(self) -> None:
        """gcd(0, n) == |n|, gcd(0, 0) == 0"""
        assert gcd_abs(0, -7) == 7
        assert gcd_abs(0, 0) == 0

    def test_power(self) -> None:
        """Точное возведение в степень без потери точности"""
        assert integer_power(2, 100) == 2**100
        assert integer_power(-3, 3) == -27
        assert integer_power(0, 0) == 1

    def test_power_rejects_negative_exponent(self) -> None:
        """Отрицательная степень запрещена"""
        with pytest.raises(ValueError):
            integer_power(2, -1)
