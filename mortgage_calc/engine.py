"""Core calculation engine for the mortgage calculator.

This module implements the fixed-rate amortization arithmetic: the closed
form annuity payment, the totals derived from it, the payment-by-payment
schedule and a month-by-month simulation of paying extra principal. Every
function is pure; results are returned as plain floats or as the frozen
records from ``data_models``.
"""

from __future__ import annotations

import logging
import math
from typing import List

from .data_models import ExtraPaymentImpact, LoanParameters, LoanSummary, PaymentScheduleEntry
from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)

# Unclamped balances below this (in currency units) mean the supplied payment
# over-amortizes the loan by more than float rounding can explain.
BALANCE_TOLERANCE = 0.01


def _monthly_rate(annual_interest_rate_percent: float) -> float:
    return annual_interest_rate_percent / 100 / 12


def _number_of_payments(term_years: float) -> float:
    """Return ``term_years * 12``, rejecting terms that cannot be amortized."""
    n = term_years * 12
    if not math.isfinite(n) or n <= 0:
        logger.error("Rejected loan term of %r years", term_years)
        raise InvalidInputError("Loan term must be positive", context={"term_years": term_years})
    return n


def calculate_monthly_payment(
    loan_amount: float, annual_interest_rate_percent: float, term_years: float
) -> float:
    """Return the constant monthly payment for a fixed-rate loan.

    The formula is:

        payment = P * (r * (1 + r)^n) / ((1 + r)^n - 1)

    where ``P`` is the loan amount, ``r`` the monthly rate (annual percent
    divided by 100 and by 12) and ``n`` the number of monthly payments. When
    the rate is zero the payment simplifies to ``P / n``.

    Raises
    ------
    InvalidInputError
        If the term does not give a positive, finite number of payments.
    """
    n = _number_of_payments(term_years)
    r = _monthly_rate(annual_interest_rate_percent)
    if r == 0:
        payment = loan_amount / n
    else:
        factor = (1 + r) ** n
        payment = loan_amount * (r * factor) / (factor - 1)
    logger.debug(
        "Monthly payment for %.2f at %.4f%% over %s years: %.6f",
        loan_amount,
        annual_interest_rate_percent,
        term_years,
        payment,
    )
    return payment


def calculate_total_payment(monthly_payment: float, term_years: float) -> float:
    """Return the sum of all scheduled payments over the term."""
    return monthly_payment * term_years * 12


def calculate_total_interest(total_payment: float, loan_amount: float) -> float:
    """Return the interest part of ``total_payment``."""
    return total_payment - loan_amount


def summarize_loan(params: LoanParameters) -> LoanSummary:
    """Compute the headline figures for ``params``."""
    monthly_payment = calculate_monthly_payment(
        params.loan_amount, params.annual_interest_rate_percent, params.term_years
    )
    total_payment = calculate_total_payment(monthly_payment, params.term_years)
    return LoanSummary(
        loan_amount=params.loan_amount,
        monthly_payment=monthly_payment,
        total_payment=total_payment,
        total_interest=calculate_total_interest(total_payment, params.loan_amount),
        number_of_payments=params.number_of_payments,
    )


def generate_amortization_schedule(
    loan_amount: float,
    monthly_payment: float,
    annual_interest_rate_percent: float,
    term_years: float,
) -> List[PaymentScheduleEntry]:
    """Build the full payment-by-payment schedule.

    Each period charges interest on the previous balance and applies the
    rest of ``monthly_payment`` to principal. The schedule always holds
    ``floor(term_years * 12)`` entries. The reported balance is clamped at
    zero, so a payment that pays the loan off early yields trailing entries
    with a zero balance; when the unclamped balance drops below
    ``-BALANCE_TOLERANCE`` a warning is logged for the first such period.
    """
    n = _number_of_payments(term_years)
    r = _monthly_rate(annual_interest_rate_percent)
    total_payments = int(math.floor(n))

    schedule: List[PaymentScheduleEntry] = []
    balance = loan_amount
    overshoot_reported = False
    for payment_number in range(1, total_payments + 1):
        interest = balance * r
        principal = monthly_payment - interest
        balance -= principal
        if balance < -BALANCE_TOLERANCE and not overshoot_reported:
            logger.warning(
                "Payment %.2f over-amortizes the loan: balance reached %.2f at period %d",
                monthly_payment,
                balance,
                payment_number,
            )
            overshoot_reported = True
        schedule.append(
            PaymentScheduleEntry(
                payment_number=payment_number,
                payment=monthly_payment,
                principal=principal,
                interest=interest,
                remaining_balance=max(0.0, balance),
            )
        )

    logger.debug("Generated schedule with %d entries", len(schedule))
    return schedule


def _validate_extra_payment_inputs(
    loan_amount: float,
    annual_interest_rate_percent: float,
    term_years: float,
    extra_monthly_payment: float,
) -> None:
    inputs = (
        ("loan_amount", loan_amount),
        ("annual_interest_rate_percent", annual_interest_rate_percent),
        ("term_years", term_years),
        ("extra_monthly_payment", extra_monthly_payment),
    )
    for field, value in inputs:
        if not math.isfinite(value):
            logger.error("Non-finite input: %s=%r", field, value)
            raise InvalidInputError("Inputs must be finite numbers", context={field: value})

    checks = (
        (loan_amount <= 0, "Loan amount must be positive", "loan_amount", loan_amount),
        (
            annual_interest_rate_percent < 0,
            "Interest rate cannot be negative",
            "annual_interest_rate_percent",
            annual_interest_rate_percent,
        ),
        (term_years <= 0, "Loan term must be positive", "term_years", term_years),
        (
            extra_monthly_payment < 0,
            "Extra payment cannot be negative",
            "extra_monthly_payment",
            extra_monthly_payment,
        ),
    )
    for failed, message, field, value in checks:
        if failed:
            logger.error("%s: %s=%r", message, field, value)
            raise InvalidInputError(message, context={field: value})


def calculate_extra_payment_impact(
    loan_amount: float,
    annual_interest_rate_percent: float,
    term_years: float,
    extra_monthly_payment: float,
) -> ExtraPaymentImpact:
    """Simulate paying ``extra_monthly_payment`` on top of the standard payment.

    The standard plan is the baseline. The simulation applies the standard
    payment plus the extra amount each month until the balance is paid off,
    or until twice the scheduled number of months has elapsed. When the last
    payment overshoots the balance, the interest attributed to the overshoot
    is taken back out so the total reflects only interest actually owed.

    Raises
    ------
    InvalidInputError
        For a non-finite input, a non-positive loan amount or term, or a
        negative rate or extra payment.
    """
    _validate_extra_payment_inputs(
        loan_amount, annual_interest_rate_percent, term_years, extra_monthly_payment
    )

    loan_term_months = term_years * 12
    standard_payment = calculate_monthly_payment(
        loan_amount, annual_interest_rate_percent, term_years
    )
    total_interest_standard = calculate_total_interest(
        standard_payment * loan_term_months, loan_amount
    )

    if extra_monthly_payment == 0:
        return ExtraPaymentImpact(
            new_loan_term_months=int(loan_term_months),
            months_saved=0,
            interest_saved=0.0,
            total_interest_standard=total_interest_standard,
            total_interest_with_extra=total_interest_standard,
        )

    r = _monthly_rate(annual_interest_rate_percent)
    payment = standard_payment + extra_monthly_payment
    balance = loan_amount
    month = 0
    total_interest_with_extra = 0.0

    while balance > 0 and month < loan_term_months * 2:
        month += 1
        interest = balance * r
        total_interest_with_extra += interest
        balance -= payment - interest
        if balance < 0:
            # balance is negative here, so this removes interest on the overshoot
            total_interest_with_extra += balance * r
            balance = 0.0

    if balance > 0:
        logger.warning(
            "Extra payment simulation stopped after %d months with %.2f outstanding",
            month,
            balance,
        )
    logger.debug(
        "Extra payment of %.2f pays the loan off in %d months instead of %s",
        extra_monthly_payment,
        month,
        loan_term_months,
    )

    return ExtraPaymentImpact(
        new_loan_term_months=month,
        months_saved=loan_term_months - month,
        interest_saved=total_interest_standard - total_interest_with_extra,
        total_interest_standard=total_interest_standard,
        total_interest_with_extra=total_interest_with_extra,
    )
