"""Output helpers for the mortgage calculator.

This module renders the engine's results as text: currency and percentage
strings, the headline summary, a padded amortization table and the effect of
an extra monthly payment. Everything is written with ``click.echo`` so the
CLI commands can be exercised with click's test runner.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence

import click

from .data_models import ExtraPaymentImpact, LoanSummary, PaymentScheduleEntry, PropertyPurchase
from .settings import CURRENCY_OPTIONS, DEFAULT_CURRENCY, DEFAULT_PERCENT_DECIMALS
from .utils import split_months

COLUMN_WIDTH = 13
SCHEDULE_HEADER = "Payment #  | Payment       | Principal     | Interest      | Remaining Balance"


def format_currency(amount: float, currency: str = DEFAULT_CURRENCY) -> str:
    """Format ``amount`` with two decimals, thousands separators and symbol."""
    option = CURRENCY_OPTIONS.get(currency.upper(), CURRENCY_OPTIONS[DEFAULT_CURRENCY])
    # -0.004 rounds to "0.00" and should not keep its sign
    rounded = round(amount, 2)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{option['prefix']}{abs(rounded):,.2f}{option['suffix']}"


def format_percentage(value: float, decimal_places: int = DEFAULT_PERCENT_DECIMALS) -> str:
    return f"{value:.{decimal_places}f}%"


def format_term(months: float) -> str:
    years, rest = split_months(months)
    return f"{years} years, {rest} months"


def schedule_preview(
    schedule: Sequence[PaymentScheduleEntry], term_years: float
) -> List[Optional[PaymentScheduleEntry]]:
    """Select the rows shown by default for a long schedule.

    The preview holds the first twelve payments. For terms longer than a
    year it continues with the last payment of every ``ceil(term / 10)``-th
    year starting with year two, and ends with the final payment. ``None``
    marks a gap between the selected rows.
    """
    rows: List[Optional[PaymentScheduleEntry]] = list(schedule[:12])
    if term_years <= 1:
        return rows

    rows.append(None)
    step = math.ceil(term_years / 10)
    year = 2
    while year <= term_years:
        index = year * 12 - 1
        if index >= len(schedule):
            break
        rows.append(schedule[index])
        year += step

    if schedule:
        rows.append(None)
        rows.append(schedule[-1])
    return rows


def format_schedule_row(entry: PaymentScheduleEntry, currency: str = DEFAULT_CURRENCY) -> str:
    cells = [str(entry.payment_number).rjust(10)]
    for value in (entry.payment, entry.principal, entry.interest, entry.remaining_balance):
        cells.append(format_currency(value, currency).rjust(COLUMN_WIDTH))
    return " | ".join(cells)


def print_schedule(
    rows: Iterable[Optional[PaymentScheduleEntry]], currency: str = DEFAULT_CURRENCY
) -> None:
    """Print schedule rows as a table; ``None`` rows print as ``...``."""
    click.echo("\n===== Amortization Schedule =====")
    click.echo(SCHEDULE_HEADER)
    click.echo("-" * 74)
    for entry in rows:
        if entry is None:
            click.echo("...")
        else:
            click.echo(format_schedule_row(entry, currency))


def print_summary(
    purchase: PropertyPurchase,
    rate_percent: float,
    term_years: float,
    summary: LoanSummary,
    currency: str = DEFAULT_CURRENCY,
    percent_decimals: int = DEFAULT_PERCENT_DECIMALS,
) -> None:
    """Print the loan inputs followed by the four headline figures."""
    down_pct = format_percentage(purchase.down_payment_percent, percent_decimals)
    click.echo("\n===== Mortgage Payment Summary =====")
    click.echo(f"Property Price: {format_currency(purchase.property_price, currency)}")
    click.echo(f"Down Payment: {format_currency(purchase.down_payment, currency)} ({down_pct})")
    click.echo(f"Loan Amount: {format_currency(summary.loan_amount, currency)}")
    click.echo(f"Interest Rate: {format_percentage(rate_percent, percent_decimals)}")
    click.echo(f"Loan Term: {term_years:g} years")
    click.echo(f"\nMonthly Payment: {format_currency(summary.monthly_payment, currency)}")
    click.echo(
        f"Total of {summary.number_of_payments:g} Payments: "
        f"{format_currency(summary.total_payment, currency)}"
    )
    click.echo(f"Total Interest: {format_currency(summary.total_interest, currency)}")


def print_extra_payment_impact(
    extra_monthly_payment: float,
    impact: ExtraPaymentImpact,
    currency: str = DEFAULT_CURRENCY,
) -> None:
    click.echo("\n===== Extra Payment Impact =====")
    click.echo(f"Extra Monthly Payment: {format_currency(extra_monthly_payment, currency)}")
    click.echo(f"New Loan Term: {format_term(impact.new_loan_term_months)}")
    click.echo(f"Time Saved: {format_term(impact.months_saved)}")
    click.echo(
        f"Total Interest (standard): {format_currency(impact.total_interest_standard, currency)}"
    )
    click.echo(
        f"Total Interest (with extra): {format_currency(impact.total_interest_with_extra, currency)}"
    )
    click.echo(f"Interest Saved: {format_currency(impact.interest_saved, currency)}")
