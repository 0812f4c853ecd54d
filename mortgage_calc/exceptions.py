"""Exception types for the mortgage calculator.

Validation failures raise ``InvalidInputError``. It derives from
``ValueError`` as well as the package base class, so callers that only know
about the built-in exception still catch it.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class MortgageCalcError(Exception):
    """Base exception for all mortgage calculator errors.

    Attributes
    ----------
    message: str
        Human-readable error description.
    context: dict
        Additional details about the failure (e.g. the offending field and
        value).
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class InvalidInputError(MortgageCalcError, ValueError):
    """Raised when a financial input is out of its valid range."""
