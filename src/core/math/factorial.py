"""
FactorialEngine — n! over Magnitude

Вычисление n! последовательным умножением Magnitude на n, n-1, ..., 1
(начиная с Magnitude(1)). Порядок убывающий и фиксированный для
детерминизма и инкрементального тестирования.

Верхняя граница n НЕ является контрактом ядра: FACTORIAL_UPPER_BOUND_DEFAULT
используется только вызывающей стороной как потолок производительности.
Единственное ограничение ядра — n <= MAX_SCALAR (первый множитель равен n).
"""

import logging
from typing import Final

from src.core.math.magnitude import Magnitude, require_int
from src.core.math.scalar_multiplier import multiply_assign

logger = logging.getLogger(__name__)

# Потолок n по умолчанию для вызывающей стороны (CLI)
FACTORIAL_UPPER_BOUND_DEFAULT: Final[int] = 2000


def factorial(n: int) -> Magnitude:
    """
    Вычисление n! как Magnitude.

    Args:
        n: Неотрицательное целое

    Returns:
        Magnitude со значением n! (0! = 1)

    Raises:
        TypeError: Если n не int
        ValueError: Если n < 0
        ArithmeticOverflow: Если n > MAX_SCALAR

    Examples:
        >>> factorial(0).limbs
        (1,)
        >>> factorial(5).limbs
        (120,)
        >>> factorial(13).limbs
        (227020800, 6)
    """
    require_int(n, "n")
    if n < 0:
        raise ValueError(f"factorial is undefined for negative integers, got {n}")

    accumulator = Magnitude.one()
    for i in range(n, 0, -1):
        multiply_assign(accumulator, i)

    logger.debug("factorial computed: n=%d limb_count=%d", n, accumulator.limb_count)
    return accumulator
