"""Runtime settings of the monetary package.

Values are read once at import from the process environment, falling back to an
optional `.env` file read with python-dotenv (the environment is left untouched):

    MONETA_DECIMAL_PRECISION       minimum significant digits of the `decimal` context used by
                                   `Money` operations (default 28)
    MONETA_DEFAULT_ROUNDING_MODE   rounding mode used by `Money.multiply` / `Money.divide`
                                   when none is given (default HALF_UP)
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Context, getcontext, localcontext
from typing import Mapping

from dotenv import dotenv_values, find_dotenv

from moneta.domain.monetary.errors import InvalidArgument
from moneta.domain.monetary.rounding_mode import RoundingMode

logger = logging.getLogger(__name__)

ENV_DECIMAL_PRECISION = "MONETA_DECIMAL_PRECISION"
ENV_DEFAULT_ROUNDING_MODE = "MONETA_DEFAULT_ROUNDING_MODE"

DEFAULT_DECIMAL_PRECISION: int = 28
DEFAULT_ROUNDING_MODE: RoundingMode = RoundingMode.HALF_UP


@dataclass(frozen=True)
class Settings:
    decimal_precision: int = DEFAULT_DECIMAL_PRECISION
    default_rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build `Settings` from $environ (defaults to `.env` values overlaid by `os.environ`).

    Args:
        environ: Explicit mapping of environment variables. When None, values of a `.env`
            file in the working directory (if any) are read and `os.environ` takes precedence.
            The process environment itself is never modified.

    Returns:
        Settings: Validated settings.

    Raises:
        InvalidArgument: If a configured value cannot be parsed.
    """
    if environ is None:
        dotenv_environ = {key: value for key, value in dotenv_values(find_dotenv(usecwd=True)).items() if value is not None}
        environ = {**dotenv_environ, **os.environ}

    raw_precision = environ.get(ENV_DECIMAL_PRECISION)
    if raw_precision is None:
        precision = DEFAULT_DECIMAL_PRECISION
    else:
        try:
            precision = int(raw_precision)
        except ValueError as e:
            raise InvalidArgument(f"${ENV_DECIMAL_PRECISION} must be an integer, but provided value is: '{raw_precision}'") from e

    # Raise: Decimal context precision must be positive
    if precision < 1:
        raise InvalidArgument(f"${ENV_DECIMAL_PRECISION} must be >= 1, but provided value is: {precision}")

    raw_mode = environ.get(ENV_DEFAULT_ROUNDING_MODE)
    rounding_mode = DEFAULT_ROUNDING_MODE if raw_mode is None else RoundingMode.from_str(raw_mode)

    settings = Settings(decimal_precision=precision, default_rounding_mode=rounding_mode)
    logger.debug(f"Loaded {settings}")
    return settings


settings: Settings = load_settings()


def decimal_context(min_precision: int = 0):
    """Local `decimal` context with at least `settings.decimal_precision` digits.

    Operations run inside it instead of relying on the thread's own context, so the
    configured precision holds in every thread. $min_precision raises the precision
    further when operands need more digits to be handled exactly.

    Example:
        >>> with decimal_context(40):
        ...     getcontext().prec
        40
    """
    context: Context = getcontext().copy()
    context.prec = max(settings.decimal_precision, min_precision)
    return localcontext(context)
