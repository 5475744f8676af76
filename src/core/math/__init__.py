"""
Core math modules для Factorial Hash

Арифметика произвольной точности над неотрицательными целыми:
Magnitude, умножение на scalar, факториал, десятичные цифры.
"""

# Magnitude
from src.core.math.magnitude import (
    LIMB_BASE,
    LIMB_DIGITS,
    Magnitude,
    validate_limb,
)

# Scalar Multiplier
from src.core.math.scalar_multiplier import (
    ACCUMULATOR_MAX,
    MAX_SCALAR,
    ArithmeticOverflow,
    MultiplyResult,
    checked_multiply,
    multiply,
    multiply_assign,
    validate_scalar,
)

# Factorial Engine
from src.core.math.factorial import (
    FACTORIAL_UPPER_BOUND_DEFAULT,
    factorial,
)

# Digit Extractor / Digit Summer
from src.core.math.digits import (
    DECIMAL_BASE,
    decimal_digits,
    digit_sum,
    divmod_small,
    iter_decimal_digits,
    render_digits,
    sum_digits,
    to_decimal_string,
)

__all__ = [
    # Magnitude — Constants
    "LIMB_BASE",
    "LIMB_DIGITS",
    # Magnitude — Types
    "Magnitude",
    # Magnitude — Validation
    "validate_limb",
    # Scalar Multiplier — Constants
    "ACCUMULATOR_MAX",
    "MAX_SCALAR",
    # Scalar Multiplier — Exceptions
    "ArithmeticOverflow",
    # Scalar Multiplier — Types
    "MultiplyResult",
    # Scalar Multiplier — Functions
    "checked_multiply",
    "multiply",
    "multiply_assign",
    "validate_scalar",
    # Factorial Engine
    "FACTORIAL_UPPER_BOUND_DEFAULT",
    "factorial",
    # Digits — Constants
    "DECIMAL_BASE",
    # Digits — Functions
    "decimal_digits",
    "digit_sum",
    "divmod_small",
    "iter_decimal_digits",
    "render_digits",
    "sum_digits",
    "to_decimal_string",
]
