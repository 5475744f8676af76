"""
Digit sum service — bound validation and pipeline orchestration.

Pipeline:
    validate_bound(n) → factorial(n) → decimal digits → sum → DigitSumReport
"""

from __future__ import annotations

import logging

from src.core.domain import DigitSumReport
from src.core.math import decimal_digits, factorial, render_digits, sum_digits
from src.factorial_hash.settings import FactorialHashSettings

logger = logging.getLogger(__name__)


class BoundOutOfRange(ValueError):
    """Аргумент n вне диапазона [0, upper_bound], выбранного вызывающей стороной."""

    def __init__(self, n: int, upper_bound: int):
        self.n = n
        self.upper_bound = upper_bound
        super().__init__(f"Given number ({n}) is out of range [0,{upper_bound}]!")


def validate_bound(n: int, upper_bound: int) -> None:
    """
    Проверка n против потолка вызывающей стороны.

    Raises:
        BoundOutOfRange: Если n < 0 или n > upper_bound
    """
    if n < 0 or n > upper_bound:
        raise BoundOutOfRange(n, upper_bound)


def compute_report(n: int, settings: FactorialHashSettings | None = None) -> DigitSumReport:
    """
    Вычисление суммы цифр n! с валидацией потолка.

    Args:
        n: Аргумент факториала
        settings: Настройки (default: FactorialHashSettings())

    Returns:
        DigitSumReport

    Raises:
        BoundOutOfRange: Если n вне [0, settings.upper_bound]
    """
    if settings is None:
        settings = FactorialHashSettings()

    validate_bound(n, settings.upper_bound)

    magnitude = factorial(n)
    digits = decimal_digits(magnitude)
    total = sum_digits(digits)

    factorial_decimal = None
    if settings.include_factorial:
        factorial_decimal = render_digits(digits)

    logger.info(
        "digit sum computed: n=%d digit_count=%d digit_sum=%d limb_count=%d",
        n,
        len(digits),
        total,
        magnitude.limb_count,
    )

    return DigitSumReport(
        upper_bound=settings.upper_bound,
        n=n,
        digit_count=len(digits),
        digit_sum=total,
        limb_count=magnitude.limb_count,
        factorial_decimal=factorial_decimal,
    )
