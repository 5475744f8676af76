"""
Domain models and value objects.

Contains the result model of the factorial digit sum pipeline.
"""

from src.core.domain.digit_sum_report import DigitSumReport

__all__ = [
    "DigitSumReport",
]
