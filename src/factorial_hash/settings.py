"""Runtime settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``FACTORIAL_HASH_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings

from src.core.math import FACTORIAL_UPPER_BOUND_DEFAULT, MAX_SCALAR


class FactorialHashSettings(BaseSettings):
    """Settings for the factorial-hash CLI.

    Attributes:
        upper_bound: Largest accepted ``n``. A performance ceiling chosen by
            the caller; the arithmetic core itself only requires
            ``n <= MAX_SCALAR``.
        include_factorial: Attach the decimal numeral of ``n!`` to reports.
        json_output: Print the report as JSON instead of text.
        verbose: DEBUG-level logging.
        log_json: JSON log lines on stderr.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FACTORIAL_HASH_",
    }

    upper_bound: int = Field(default=FACTORIAL_UPPER_BOUND_DEFAULT, ge=0, le=MAX_SCALAR)
    include_factorial: bool = False

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> FactorialHashSettings:
        """Construct settings from CLI invocation.

        Options the user did not pass arrive as ``None`` and are dropped so
        that env vars and defaults still apply.
        """
        overrides = {key: value for key, value in cli_flags.items() if value is not None}
        return cls(**overrides)
