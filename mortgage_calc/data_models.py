"""Data models for the mortgage calculator.

This module defines the immutable records passed between the engine and its
callers: the loan parameters, individual schedule entries, the result of an
extra-payment simulation and the headline summary shown to the user. All
values are plain floats; the records are frozen dataclasses so a computed
result cannot be changed after the fact.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LoanParameters:
    """Inputs describing a fixed-rate loan.

    Attributes
    ----------
    loan_amount: float
        The financed amount (property price minus down payment).
    annual_interest_rate_percent: float
        Nominal annual rate in percent, e.g. ``5.5`` for 5.5 %.
    term_years: float
        Loan term in years. Usually whole years, fractional terms are
        accepted.
    """

    loan_amount: float
    annual_interest_rate_percent: float
    term_years: float

    @property
    def number_of_payments(self) -> float:
        return self.term_years * 12


@dataclass(frozen=True)
class PropertyPurchase:
    """Property price and down payment as entered by the user."""

    property_price: float
    down_payment: float

    @property
    def loan_amount(self) -> float:
        return self.property_price - self.down_payment

    @property
    def down_payment_percent(self) -> float:
        return self.down_payment / self.property_price * 100


@dataclass(frozen=True)
class PaymentScheduleEntry:
    """One month of an amortization schedule.

    ``principal + interest`` equals ``payment``. ``remaining_balance`` is
    clamped at zero, so it never shows a negative balance even when the
    payment overshoots the debt in the last period.
    """

    payment_number: int
    payment: float
    principal: float
    interest: float
    remaining_balance: float


@dataclass(frozen=True)
class ExtraPaymentImpact:
    """Outcome of paying a constant extra amount towards principal monthly."""

    new_loan_term_months: int
    months_saved: float
    interest_saved: float
    total_interest_standard: float
    total_interest_with_extra: float


@dataclass(frozen=True)
class LoanSummary:
    # headline figures printed after the prompts
    loan_amount: float
    monthly_payment: float
    total_payment: float
    total_interest: float
    number_of_payments: float
