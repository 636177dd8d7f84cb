"""
Integer Primitives — целочисленные примитивы для точной арифметики

Модуль оборачивает операции над целыми числами произвольной точности
(встроенный int), которые использует Fraction:
- Проверка, что значение является целым числом (не bool, не float)
- Знак целого числа (-1, 0, +1)
- Наибольший общий делитель по модулю
- Возведение в неотрицательную целую степень

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции точные: никаких float в промежуточных вычислениях
2. gcd_abs всегда возвращает неотрицательное значение
3. bool не считается целым числом, хотя является подклассом int
"""

import math


# =============================================================================
# ПРОВЕРКА ТИПОВ
# =============================================================================


def is_valid_integer(value: object) -> bool:
    """
    Проверка, является ли значение целым числом произвольной точности.

    Args:
        value: Проверяемое значение

    Returns:
        True для int (включая подклассы), False для bool, float и прочих типов

    Examples:
        >>> is_valid_integer(10**40)
        True
        >>> is_valid_integer(True)
        False
        >>> is_valid_integer(1.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


def validate_integer(value: object, name: str) -> int:
    """
    Валидация, что значение является целым числом.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Значение, приведённое к int

    Raises:
        ValueError: Если value не является int (или является bool)
    """
    if not is_valid_integer(value):
        raise ValueError(
            f"{name} must be an integer, got {type(value).__name__} {value!r}"
        )
    return int(value)


def validate_non_negative_integer(value: object, name: str) -> int:
    """
    Валидация, что значение является неотрицательным целым числом.

    Raises:
        ValueError: Если value не int или value < 0
    """
    result = validate_integer(value, name)
    if result < 0:
        raise ValueError(f"{name} must be non-negative, got {result}")
    return result


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def integer_sign(value: int) -> int:
    """
    Знак целого числа.

    Examples:
        >>> integer_sign(-7)
        -1
        >>> integer_sign(0)
        0
        >>> integer_sign(10**30)
        1
    """
    return (value > 0) - (value < 0)


def gcd_abs(a: int, b: int) -> int:
    """
    Наибольший общий делитель |a| и |b|.

    math.gcd уже работает с модулями аргументов; gcd_abs(0, 0) == 0.

    Examples:
        >>> gcd_abs(-12, 24)
        12
        >>> gcd_abs(5, 3)
        1
    """
    return math.gcd(a, b)


def integer_power(base: int, exponent: int) -> int:
    """
    Возведение целого числа в неотрицательную целую степень.

    0 ** 0 == 1, как и у встроенного int.

    Raises:
        ValueError: Если exponent отрицательный или не int
    """
    exponent = validate_non_negative_integer(exponent, "exponent")
    return base**exponent
