"""
ScalarMultiplier — Carry-Correct Multiplication by a Small Scalar

Умножение Magnitude на малый беззнаковый scalar с распространением carry:

    product = limb * scalar + carry
    limb    = product mod LIMB_BASE
    carry   = product div LIMB_BASE

После последнего limb оставшийся carry разворачивается в новые старшие limbs.

Аккумулятор моделируется как беззнаковое 64-битное целое. Так как
product <= LIMB_BASE * scalar, допустимый scalar ограничен
MAX_SCALAR = ACCUMULATOR_MAX // LIMB_BASE.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. scalar > MAX_SCALAR → ArithmeticOverflow ДО изменения любого limb
2. Результат всегда в канонической форме (scalar = 0 → ровно [0])
3. value(result) = value(magnitude) × scalar
"""

from typing import Final, NamedTuple

from src.core.math.magnitude import LIMB_BASE, Magnitude, require_int

# =============================================================================
# ПАРАМЕТРЫ АККУМУЛЯТОРА
# =============================================================================

# Максимальное значение аккумулятора (unsigned 64-bit)
ACCUMULATOR_MAX: Final[int] = 2**64 - 1

# Максимальный scalar, при котором limb * scalar + carry <= ACCUMULATOR_MAX
MAX_SCALAR: Final[int] = ACCUMULATOR_MAX // LIMB_BASE


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ArithmeticOverflow(ArithmeticError):
    """
    Нарушение precondition scalar: limb * scalar + carry не помещается
    в аккумулятор.

    Ошибка вызывающей стороны (bounding входа), не повторяется и не
    подавляется ядром.
    """

    pass


class MultiplyResult(NamedTuple):
    """Результат checked_multiply: произведение и флаг переполнения."""

    magnitude: Magnitude
    overflow: bool


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_scalar(scalar: int) -> None:
    """
    Проверка precondition scalar.

    Raises:
        TypeError: Если scalar не int
        ValueError: Если scalar < 0
        ArithmeticOverflow: Если scalar > MAX_SCALAR
    """
    require_int(scalar, "scalar")

    if scalar < 0:
        raise ValueError(f"scalar must be non-negative, got {scalar}")

    if scalar > MAX_SCALAR:
        raise ArithmeticOverflow(
            f"scalar={scalar} exceeds MAX_SCALAR={MAX_SCALAR}: "
            f"limb * scalar + carry would overflow the {ACCUMULATOR_MAX.bit_length()}-bit accumulator"
        )


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_assign(magnitude: Magnitude, scalar: int) -> None:
    """
    Умножение Magnitude на scalar in-place.

    Args:
        magnitude: Множимое (изменяется)
        scalar: Множитель, 0 <= scalar <= MAX_SCALAR

    Raises:
        TypeError: Если scalar не int
        ValueError: Если scalar < 0
        ArithmeticOverflow: Если scalar > MAX_SCALAR (magnitude не изменяется)

    Examples:
        >>> m = Magnitude(999_999_999)
        >>> multiply_assign(m, 2)
        >>> m.limbs
        (999999998, 1)
    """
    validate_scalar(scalar)

    if scalar == 0:
        magnitude.assign_limbs([0])
        return

    new_limbs = []
    carry = 0
    for limb in magnitude.limbs:
        product = limb * scalar + carry
        new_limbs.append(product % LIMB_BASE)
        carry = product // LIMB_BASE

    # Carry разворачивается в новые старшие limbs
    while carry > 0:
        new_limbs.append(carry % LIMB_BASE)
        carry //= LIMB_BASE

    magnitude.assign_limbs(new_limbs)


def multiply(magnitude: Magnitude, scalar: int) -> Magnitude:
    """
    Произведение Magnitude × scalar как новый Magnitude.

    Исходный magnitude не изменяется.

    Raises:
        TypeError, ValueError, ArithmeticOverflow: см. multiply_assign
    """
    result = magnitude.copy()
    multiply_assign(result, scalar)
    return result


def checked_multiply(magnitude: Magnitude, scalar: int) -> MultiplyResult:
    """
    Умножение с явным результатом успех/переполнение вместо exception.

    Returns:
        MultiplyResult(magnitude, overflow):
            - overflow=False: magnitude — новое произведение
            - overflow=True: magnitude — неизменённая копия входа

    Raises:
        TypeError: Если scalar не int
        ValueError: Если scalar < 0

    Examples:
        >>> checked_multiply(Magnitude(3), 4)
        MultiplyResult(magnitude=Magnitude(limbs=[12]), overflow=False)
        >>> checked_multiply(Magnitude(3), MAX_SCALAR + 1).overflow
        True
    """
    try:
        return MultiplyResult(multiply(magnitude, scalar), False)
    except ArithmeticOverflow:
        return MultiplyResult(magnitude.copy(), True)
