"""Runtime configuration for the mortgage calculator.

Settings are read from environment variables so the CLI can be configured
without flags; explicit command-line options take precedence. This module
also owns the logging setup used by the CLI.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_CURRENCY = "USD"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PERCENT_DECIMALS = 2
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ENV_CURRENCY = "MORTGAGE_CALC_CURRENCY"
ENV_LOG_LEVEL = "MORTGAGE_CALC_LOG_LEVEL"
ENV_PERCENT_DECIMALS = "MORTGAGE_CALC_PERCENT_DECIMALS"

# Symbols placed around a formatted amount, keyed by ISO currency code.
CURRENCY_OPTIONS = {
    "USD": {"label": "US dollar", "prefix": "$", "suffix": ""},
    "EUR": {"label": "Euro", "prefix": "€", "suffix": ""},
    "GBP": {"label": "British pound", "prefix": "£", "suffix": ""},
    "PLN": {"label": "Polish złoty", "prefix": "", "suffix": " zł"},
}


def normalized_currency(code: Optional[str]) -> str:
    code = (code or DEFAULT_CURRENCY).upper()
    return code if code in CURRENCY_OPTIONS else DEFAULT_CURRENCY


@dataclass(frozen=True)
class Settings:
    currency: str = DEFAULT_CURRENCY
    log_level: str = DEFAULT_LOG_LEVEL
    percent_decimals: int = DEFAULT_PERCENT_DECIMALS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Unknown currencies fall back to USD and an unparsable decimal count
        falls back to the default.
        """
        env = os.environ if environ is None else environ
        try:
            decimals = int(env.get(ENV_PERCENT_DECIMALS, DEFAULT_PERCENT_DECIMALS))
        except ValueError:
            decimals = DEFAULT_PERCENT_DECIMALS
        return cls(
            currency=normalized_currency(env.get(ENV_CURRENCY)),
            log_level=env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper(),
            percent_decimals=max(decimals, 0),
        )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Attach a stderr handler to the package logger at ``level``.

    Calling this again replaces the previous handler instead of stacking a
    second one.
    """
    logger = logging.getLogger("mortgage_calc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return logger
