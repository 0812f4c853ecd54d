"""Utility functions for the mortgage calculator.

This module provides helpers for parsing user input into numbers and for
splitting month counts into years and months for display.
"""

from __future__ import annotations

import math
from typing import Tuple

from .exceptions import InvalidInputError

_SUFFIXES = {"k": 1_000.0, "m": 1_000_000.0}


def parse_amount(value: str) -> float:
    """Parse a numeric string with optional suffixes.

    Accepts plain numbers ("500000"), comma separators ("500,000") and
    shorthand with ``k``/``m`` suffixes (e.g. "500k" meaning 500_000). A
    leading currency symbol is ignored.

    Raises
    ------
    InvalidInputError
        If the string is not a finite number.
    """
    cleaned = value.strip().lower().replace(",", "").lstrip("$€£")
    factor = 1.0
    if cleaned and cleaned[-1] in _SUFFIXES:
        factor = _SUFFIXES[cleaned[-1]]
        cleaned = cleaned[:-1]
    try:
        amount = float(cleaned) * factor
    except ValueError as exc:
        raise InvalidInputError(f"Invalid amount: {value}") from exc
    if not math.isfinite(amount):
        raise InvalidInputError(f"Invalid amount: {value}")
    return amount


def parse_percent(value: str) -> float:
    """Parse an interest rate such as "5.25" or "5.25%" into percent units."""
    cleaned = value.strip()
    if cleaned.endswith("%"):
        cleaned = cleaned[:-1]
    try:
        rate = float(cleaned)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid percentage: {value}") from exc
    if not math.isfinite(rate):
        raise InvalidInputError(f"Invalid percentage: {value}")
    return rate


def split_months(months: float) -> Tuple[int, int]:
    """Return ``(years, months)`` for a whole number of months."""
    years, rest = divmod(int(round(months)), 12)
    return years, rest
