"""
Runtime configuration for intcalc.

Settings are read from environment variables:

    - INTCALC_MAX_EXPONENT: largest exponent accepted by ``^``
      (default 2147483647, the signed 32-bit limit)
    - INTCALC_MAX_RESULT_BITS: largest result size, in bits, that ``^`` may
      produce (default 2147483647)
    - INTCALC_LOG_LEVEL: logging level name for the CLI (default WARNING)
    - INTCALC_PROMPT: prompt shown by the REPL (default: no prompt)

Usage:
    from intcalc.core.settings import get_settings

    settings = get_settings()
    settings.max_exponent  # 2147483647
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

MAX_EXPONENT_VAR = "INTCALC_MAX_EXPONENT"
MAX_RESULT_BITS_VAR = "INTCALC_MAX_RESULT_BITS"
LOG_LEVEL_VAR = "INTCALC_LOG_LEVEL"
PROMPT_VAR = "INTCALC_PROMPT"

DEFAULT_MAX_EXPONENT = 2**31 - 1
DEFAULT_MAX_RESULT_BITS = 2**31 - 1
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class CalculatorSettings(BaseModel):
    """Tunables for the evaluator and its command-line host."""

    max_exponent: int = Field(
        default=DEFAULT_MAX_EXPONENT,
        ge=0,
        description="Largest exponent accepted by the ^ operator",
    )
    max_result_bits: int = Field(
        default=DEFAULT_MAX_RESULT_BITS,
        ge=0,
        description="Largest result size in bits the ^ operator may produce",
    )
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level name")
    prompt: str = Field(default="", description="REPL prompt")

    model_config = ConfigDict(frozen=True)


def _read_non_negative_int(var: str, default: int) -> int:
    raw = os.environ.get(var, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = -1
    if value < 0:
        logger.warning(
            "Invalid %s value '%s'. Expected a non-negative integer, using %d.",
            var,
            raw,
            default,
        )
        return default
    return value


def _read_log_level() -> str:
    raw = os.environ.get(LOG_LEVEL_VAR, "").upper().strip()
    if not raw:
        return DEFAULT_LOG_LEVEL
    if raw not in _LOG_LEVELS:
        logger.warning(
            "Unknown %s value '%s'. Valid values: %s. Defaulting to %s.",
            LOG_LEVEL_VAR,
            raw,
            ", ".join(sorted(_LOG_LEVELS)),
            DEFAULT_LOG_LEVEL,
        )
        return DEFAULT_LOG_LEVEL
    return raw


def get_settings() -> CalculatorSettings:
    """Build settings from the current environment.

    Invalid values never raise; they are logged and replaced by defaults.
    """
    return CalculatorSettings(
        max_exponent=_read_non_negative_int(MAX_EXPONENT_VAR, DEFAULT_MAX_EXPONENT),
        max_result_bits=_read_non_negative_int(MAX_RESULT_BITS_VAR, DEFAULT_MAX_RESULT_BITS),
        log_level=_read_log_level(),
        prompt=os.environ.get(PROMPT_VAR, ""),
    )
