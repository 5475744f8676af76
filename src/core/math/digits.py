"""
DigitExtractor & DigitSummer — Decimal Digits of a Magnitude

Разложение Magnitude на ИСТИННЫЕ десятичные цифры и их сумма.

Алгоритм разложения:
    пока magnitude != 0:
        magnitude, digit = divmod(magnitude, 10)   # по всему magnitude
        yield digit

divmod по всему magnitude — длинное деление от старшего limb к младшему
с бегущим остатком r:

    combined = r * LIMB_BASE + limb
    limb'    = combined div divisor
    r        = combined mod divisor

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Limb НЕ является цифрой: сумма raw limbs не равна сумме цифр
2. Цифры выдаются в порядке least-significant first
3. Ноль → ровно одна цифра 0
4. Входной magnitude не изменяется (работа ведётся на копии)
"""

from typing import Iterable, Iterator, Sequence

from src.core.math.magnitude import LIMB_BASE, Magnitude, require_int
from src.core.math.scalar_multiplier import MAX_SCALAR

DECIMAL_BASE = 10


# =============================================================================
# ДЛИННОЕ ДЕЛЕНИЕ
# =============================================================================


def divmod_small(magnitude: Magnitude, divisor: int) -> tuple[Magnitude, int]:
    """
    Деление всего Magnitude на малый делитель.

    Args:
        magnitude: Делимое (не изменяется)
        divisor: Делитель, 1 <= divisor <= MAX_SCALAR

    Returns:
        (quotient, remainder): частное в канонической форме и остаток

    Raises:
        TypeError: Если divisor не int
        ValueError: Если divisor вне [1, MAX_SCALAR]

    Examples:
        >>> q, r = divmod_small(Magnitude(1234), 10)
        >>> q.limbs, r
        ((123,), 4)
        >>> q, r = divmod_small(Magnitude.from_limbs([0, 1]), 10)
        >>> q.limbs, r
        ((100000000,), 0)
    """
    require_int(divisor, "divisor")
    if divisor < 1 or divisor > MAX_SCALAR:
        raise ValueError(f"divisor must be in [1, {MAX_SCALAR}], got {divisor}")

    limbs = magnitude.limbs
    quotient = [0] * len(limbs)
    remainder = 0

    for index in range(len(limbs) - 1, -1, -1):
        combined = remainder * LIMB_BASE + limbs[index]
        quotient[index] = combined // divisor
        remainder = combined % divisor

    return Magnitude.from_limbs(quotient), remainder


# =============================================================================
# DIGIT EXTRACTOR
# =============================================================================


def iter_decimal_digits(magnitude: Magnitude) -> Iterator[int]:
    """
    Ленивое разложение на десятичные цифры (least-significant first).

    Каждая цифра — остаток от деления ВСЕГО magnitude на 10.

    Examples:
        >>> list(iter_decimal_digits(Magnitude(120)))
        [0, 2, 1]
        >>> list(iter_decimal_digits(Magnitude(0)))
        [0]
    """
    if magnitude.is_zero():
        yield 0
        return

    current = magnitude.copy()
    while not current.is_zero():
        current, digit = divmod_small(current, DECIMAL_BASE)
        yield digit


def decimal_digits(magnitude: Magnitude) -> list[int]:
    """Материализованная последовательность цифр (least-significant first)."""
    return list(iter_decimal_digits(magnitude))


def to_decimal_string(magnitude: Magnitude) -> str:
    """
    Десятичная запись Magnitude (most-significant first).

    Examples:
        >>> to_decimal_string(Magnitude.from_limbs([800, 6]))
        '6000000800'
        >>> to_decimal_string(Magnitude.zero())
        '0'
    """
    return render_digits(decimal_digits(magnitude))


def render_digits(digits: Sequence[int]) -> str:
    """
    Десятичная запись из цифр least-significant first.

    Examples:
        >>> render_digits([0, 2, 1])
        '120'
    """
    return "".join(str(digit) for digit in reversed(digits))


# =============================================================================
# DIGIT SUMMER
# =============================================================================


def sum_digits(digits: Iterable[int]) -> int:
    """
    Сумма последовательности десятичных цифр.

    Raises:
        ValueError: Если элемент не является цифрой 0..9
    """
    total = 0
    for digit in digits:
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise ValueError(f"digit must be an int in [0, 9], got {digit!r}")
        total += digit
    return total


def digit_sum(magnitude: Magnitude) -> int:
    """
    Сумма десятичных цифр Magnitude.

    Examples:
        >>> digit_sum(Magnitude(3628800))
        27
        >>> digit_sum(Magnitude.from_limbs([15]))
        6
    """
    return sum_digits(iter_decimal_digits(magnitude))
