"""
DigitSumReport — Модель результата digit sum факториала

Immutable Pydantic модель результата пайплайна:
factorial(n) → десятичные цифры → сумма цифр.

Полная совместимость с JSON Schema (src/core/contracts/schema/digit_sum_report.json).
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class DigitSumReport(BaseModel):
    """
    Результат вычисления суммы цифр n!.

    Immutable модель (frozen=True). Содержит:
    - Вход (n, upper_bound)
    - Результат (digit_sum)
    - Диагностику представления (digit_count, limb_count)
    - Опционально десятичную запись n!
    """

    schema_version: str = Field(
        default="1", pattern="^1$", description="Версия схемы для tracking совместимости"
    )

    # Вход
    upper_bound: int = Field(..., ge=0, description="Потолок n, заданный вызывающей стороной")
    n: int = Field(..., ge=0, description="Аргумент факториала")

    # Результат
    digit_count: int = Field(..., ge=1, description="Количество десятичных цифр n!")
    digit_sum: int = Field(..., ge=1, description="Сумма десятичных цифр n!")
    limb_count: int = Field(..., ge=1, description="Количество limbs Magnitude n!")

    factorial_decimal: Optional[str] = Field(
        default=None, pattern="^[1-9][0-9]*$", description="Десятичная запись n!"
    )

    model_config = {"frozen": True}

    @field_validator("n")
    @classmethod
    def validate_n_within_bound(cls, v: int, info) -> int:
        """Проверка, что n <= upper_bound"""
        if "upper_bound" in info.data:
            upper_bound = info.data["upper_bound"]
            if v > upper_bound:
                raise ValueError(f"n {v} exceeds upper_bound {upper_bound}")
        return v

    @field_validator("digit_sum")
    @classmethod
    def validate_digit_sum_range(cls, v: int, info) -> int:
        """Сумма цифр не превышает 9 * digit_count"""
        if "digit_count" in info.data:
            digit_count = info.data["digit_count"]
            if v > 9 * digit_count:
                raise ValueError(
                    f"digit_sum {v} exceeds 9 * digit_count ({9 * digit_count})"
                )
        return v

    @field_validator("factorial_decimal")
    @classmethod
    def validate_factorial_decimal_length(cls, v: Optional[str], info) -> Optional[str]:
        """Длина десятичной записи совпадает с digit_count"""
        if v is not None and "digit_count" in info.data:
            digit_count = info.data["digit_count"]
            if len(v) != digit_count:
                raise ValueError(
                    f"factorial_decimal has {len(v)} digits, expected {digit_count}"
                )
        return v
