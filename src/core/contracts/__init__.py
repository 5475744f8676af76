"""
Contract Validation Module

Модуль для валидации JSON контрактов Factorial Hash.
"""

from .validators import (
    DEFAULT_SCHEMA_DIR,
    ContractValidator,
    DigitSumReportValidator,
    SchemaLoader,
    get_schema_loader,
    validate_digit_sum_report,
)

__all__ = [
    # Constants
    "DEFAULT_SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DigitSumReportValidator",
    # Functions
    "get_schema_loader",
    "validate_digit_sum_report",
]
