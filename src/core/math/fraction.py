"""
Fraction — неизменяемые рациональные числа произвольной точности

Модуль реализует точную арифметику над дробями numerator / denominator,
где числитель и знаменатель — целые числа произвольной точности (int):
- Нормализация при создании (знак в числителе, несократимая дробь)
- Арифметика: add, sum_all, subtract, multiply, divide, negate, invert, abs, pow
- Сравнение: compare_to, signum, is_equal_to, max, min
- Каноническое строковое представление ("5 / 3", "-2", "0")

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator >= 0, знак всегда хранится в numerator
2. gcd(|numerator|, denominator) == 1 для любого ненулевого значения
3. Ноль хранится канонически как (0, 0); деление на ноль при создании
   не является ошибкой и даёт ноль
4. Экземпляр никогда не изменяется: каждая операция возвращает новую дробь

ОСОБЕННОСТИ ПОВЕДЕНИЯ:
    subtract(a, b) = a + (-|b|), т.е. Fraction(5).subtract(Fraction(-3)) == 2
    max/min при равенстве возвращают второй операнд
    sum_all возвращает None, если последовательность или элемент равны None

ФОРМУЛЫ:
    a/b + c/d = (a*d + c*b) / (b*d)
    a/b * c/d = (a*c) / (b*d)
    compare(a/b, c/d) = sign(a*d - c*b)
"""

from typing import Any, Final, Iterable, Mapping

from pydantic import BaseModel, Field, model_validator

from src.core.math.integer_primitives import (
    gcd_abs,
    integer_power,
    integer_sign,
    is_valid_integer,
    validate_integer,
)

# =============================================================================
# СТРОКОВОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================

# Представление канонического нуля
ZERO_REPR: Final[str] = "0"

# Разделитель числителя и знаменателя в str(Fraction)
FRACTION_SEPARATOR: Final[str] = " / "


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FractionOperandError(TypeError):
    """
    Операнд бинарной операции не является Fraction (например, None).

    Бинарные операции требуют non-null операнд и падают сразу,
    не пытаясь интерпретировать значение.
    Исключения из правила: is_equal_to (возвращает False) и
    sum_all (возвращает None).
    """

    pass


def _require_operand(value: object, operation: str) -> "Fraction":
    if not isinstance(value, Fraction):
        raise FractionOperandError(
            f"{operation} requires a Fraction operand, got {type(value).__name__}"
        )
    return value


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Неизменяемая дробь numerator / denominator.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    Нормализация выполняется model_validator, поэтому инварианты
    соблюдаются и для Fraction(5, -10), и для Fraction.model_validate({...}).

    Examples:
        >>> str(Fraction(-10, -6))
        '5 / 3'
        >>> str(Fraction(5, -10))
        '-1 / 2'
        >>> str(Fraction(4, 0))
        '0'
    """

    numerator: int = Field(..., description="Числитель (несёт знак дроби)")
    denominator: int = Field(
        ..., ge=0, description="Знаменатель (неотрицательный, 0 только у нуля)"
    )

    model_config = {"frozen": True}  # Immutable

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        super().__init__(numerator=numerator, denominator=denominator)

    @model_validator(mode="before")
    @classmethod
    def normalize(cls, data: Any) -> Any:
        """
        Приведение пары (numerator, denominator) к канонической форме.

        1. Отрицательный знаменатель: меняем знак у обоих
        2. numerator == 0 или denominator == 0: канонический ноль (0, 0)
        3. Иначе сокращаем на gcd(|numerator|, denominator)
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Fraction expects numerator and denominator, got {type(data).__name__}"
            )

        numerator = validate_integer(data.get("numerator"), "numerator")
        denominator = validate_integer(data.get("denominator", 1), "denominator")

        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        if numerator == 0 or denominator == 0:
            return {"numerator": 0, "denominator": 0}

        gcd = cls.get_gcd(numerator, denominator)
        return {"numerator": numerator // gcd, "denominator": denominator // gcd}

    @staticmethod
    def get_gcd(numerator: int, denominator: int) -> int:
        """Наибольший общий делитель числителя и знаменателя (>= 0)"""
        return gcd_abs(numerator, denominator)

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> "Fraction":
        """
        Копия дроби с заменой полей.

        Pydantic не запускает валидаторы в model_copy, поэтому обновлённая
        пара проходит через конструктор Fraction и нормализуется заново.

        Raises:
            ValidationError: Если новые значения не int
        """
        if not update:
            return super().model_copy(deep=deep)

        numerator = update.get("numerator", self.numerator)
        denominator = update.get("denominator", self.denominator)
        return Fraction(numerator, denominator)

    def _value_terms(self) -> tuple[int, int]:
        # Канонический ноль (0, 0) участвует в перекрёстных произведениях как 0/1
        return self.numerator, self.denominator or 1

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, val: "Fraction") -> "Fraction":
        """
        Сумма self + val.

        a/b + c/d = (a*d + c*b) / (b*d), затем нормализация.

        Raises:
            FractionOperandError: Если val не Fraction
        """
        val = _require_operand(val, "add")
        a, b = self._value_terms()
        c, d = val._value_terms()
        return Fraction(a * d + c * b, b * d)

    @staticmethod
    def sum_all(fractions: "Iterable[Fraction | None] | None") -> "Fraction | None":
        """
        Сумма всех элементов последовательности.

        Args:
            fractions: Дроби для суммирования; может быть None или содержать None

        Returns:
            None, если fractions равно None или содержит None;
            канонический ноль для пустой последовательности;
            иначе сумма всех элементов

        Raises:
            FractionOperandError: Если элемент не None и не Fraction

        Examples:
            >>> str(Fraction.sum_all([Fraction(1, 2), Fraction(1, 3)]))
            '5 / 6'
            >>> Fraction.sum_all([None, Fraction(1, 2)]) is None
            True
        """
        if fractions is None:
            return None

        total = Fraction(0)
        for fraction in fractions:
            if fraction is None:
                return None
            total = total.add(fraction)
        return total

    def subtract(self, val: "Fraction") -> "Fraction":
        """
        Разность self - |val|.

        Вычитается модуль val: Fraction(5).subtract(Fraction(-3)) == Fraction(2),
        а не 8.
        """
        val = _require_operand(val, "subtract")
        return self.add(val.abs().negate())

    def multiply(self, val: "Fraction") -> "Fraction":
        """
        Произведение self * val.

        a/b * c/d = (a*c) / (b*d), затем нормализация.
        """
        val = _require_operand(val, "multiply")
        return Fraction(
            self.numerator * val.numerator,
            self.denominator * val.denominator,
        )

    def divide(self, val: "Fraction") -> "Fraction":
        """Частное self / val = self * invert(val); деление на ноль даёт ноль"""
        val = _require_operand(val, "divide")
        return self.multiply(val.invert())

    def negate(self) -> "Fraction":
        return Fraction(-self.numerator, self.denominator)

    def invert(self) -> "Fraction":
        """Обратная дробь 1 / self; обратная к нулю — снова ноль"""
        return Fraction(self.denominator, self.numerator)

    def abs(self) -> "Fraction":
        return Fraction(abs(self.numerator), self.denominator)

    def pow(self, exponent: int) -> "Fraction":
        """
        Возведение в целую степень.

        a^0 = 1, a^e = (1/a)^(-e) при e < 0.

        Args:
            exponent: Целая степень (может быть нулевой или отрицательной)

        Raises:
            ValueError: Если exponent не int
        """
        exponent = validate_integer(exponent, "exponent")

        if exponent == 0:
            return Fraction(1)
        if exponent < 0:
            return Fraction(
                integer_power(self.denominator, -exponent),
                integer_power(self.numerator, -exponent),
            )
        return Fraction(
            integer_power(self.numerator, exponent),
            integer_power(self.denominator, exponent),
        )

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare_to(self, val: "Fraction") -> int:
        """
        Сравнение через перекрёстное умножение.

        Returns:
            -1, 0 или 1, если self меньше, равно или больше val
        """
        val = _require_operand(val, "compare_to")
        a, b = self._value_terms()
        c, d = val._value_terms()
        return integer_sign(a * d - c * b)

    def signum(self) -> int:
        """Знак дроби: знаменатель неотрицателен, поэтому это знак числителя"""
        return integer_sign(self.numerator)

    def is_equal_to(self, val: "Fraction | None") -> bool:
        """
        Проверка равенства значений.

        Обе дроби нормализованы, поэтому достаточно сравнить пары
        (numerator, denominator). Для None возвращает False.
        """
        if not isinstance(val, Fraction):
            return False
        return self.numerator == val.numerator and self.denominator == val.denominator

    def max(self, val: "Fraction") -> "Fraction":
        """Больший из self и val; при равенстве возвращается val"""
        val = _require_operand(val, "max")
        if self.compare_to(val) > 0:
            return self
        return val

    def min(self, val: "Fraction") -> "Fraction":
        """Меньший из self и val; при равенстве возвращается val"""
        val = _require_operand(val, "min")
        if self.compare_to(val) < 0:
            return self
        return val

    # -------------------------------------------------------------------------
    # Протокол чисел Python
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> "Fraction":
        return self.__add__(other)

    def __sub__(self, other: object) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rsub__(self, other: object) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __rmul__(self, other: object) -> "Fraction":
        return self.__mul__(other)

    def __truediv__(self, other: object) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: object) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __neg__(self) -> "Fraction":
        return self.negate()

    def __abs__(self) -> "Fraction":
        return self.abs()

    def __pow__(self, exponent: object) -> "Fraction":
        if not is_valid_integer(exponent):
            return NotImplemented
        return self.pow(exponent)

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.is_equal_to(other)

    def __hash__(self) -> int:
        # Целые значения (и ноль) хэшируются как int, чтобы Fraction(2) == 2
        if self.denominator in (0, 1):
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __lt__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        """
        Нормализованное строковое представление.

        "0" для нуля, "-2" для целых значений, "-1 / 2" для остальных.
        """
        if self.numerator == 0:
            return ZERO_REPR
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}{FRACTION_SEPARATOR}{self.denominator}"


def _coerce(value: object) -> Fraction | None:
    # int-операнды операторов приводятся к Fraction(value)
    if isinstance(value, Fraction):
        return value
    if is_valid_integer(value):
        return Fraction(value)
    return None


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

FRACTION_ZERO: Final[Fraction] = Fraction(0)
FRACTION_ONE: Final[Fraction] = Fraction(1)

sum_all = Fraction.sum_all
