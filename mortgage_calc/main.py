"""Command‑line interface for the mortgage calculator.

This module uses the ``click`` library to implement a multi‑command
interface. Run without a sub-command it prompts for the purchase details
interactively; the ``summary``, ``schedule`` and ``extra`` sub-commands take
the same inputs as options for scripted use.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Optional

import click

from .data_models import LoanParameters, LoanSummary, PropertyPurchase
from .engine import (
    calculate_extra_payment_impact,
    generate_amortization_schedule,
    summarize_loan,
)
from .exceptions import InvalidInputError
from .formatter import print_extra_payment_impact, print_schedule, print_summary, schedule_preview
from .settings import CURRENCY_OPTIONS, Settings, configure_logging
from .utils import parse_amount, parse_percent

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class AmountType(click.ParamType):
    """Click parameter accepting amounts like ``450000``, ``450,000`` or ``450k``."""

    name = "amount"

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> float:
        if isinstance(value, (int, float)):
            return float(value)
        try:
            return parse_amount(value)
        except InvalidInputError as exc:
            self.fail(str(exc), param, ctx)


AMOUNT = AmountType()


class PercentType(click.ParamType):
    """Click parameter accepting rates like ``5.25`` or ``5.25%``."""

    name = "percent"

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> float:
        if isinstance(value, (int, float)):
            return float(value)
        try:
            return parse_percent(value)
        except InvalidInputError as exc:
            self.fail(str(exc), param, ctx)


PERCENT = PercentType()


def validate_purchase(property_price: float, down_payment: float) -> PropertyPurchase:
    """Check the purchase inputs the way the prompts do.

    Raises
    ------
    click.BadParameter
        If the price is not positive, or the down payment is negative or not
        below the price.
    """
    if property_price <= 0:
        raise click.BadParameter("Please enter a positive number", param_hint="property price")
    if down_payment < 0:
        raise click.BadParameter("Please enter a non-negative number", param_hint="down payment")
    if down_payment >= property_price:
        raise click.BadParameter(
            "Down payment cannot exceed the property price", param_hint="down payment"
        )
    return PropertyPurchase(property_price=property_price, down_payment=down_payment)


def validate_loan_terms(rate: float, term: float) -> None:
    if rate < 0:
        raise click.BadParameter("Please enter a non-negative number", param_hint="interest rate")
    if not math.isfinite(term) or term <= 0:
        raise click.BadParameter("Please enter a positive number", param_hint="loan term")


def _amount_prompt(check: Callable[[float], None]) -> Callable[[str], float]:
    """Return a ``value_proc`` for ``click.prompt`` that parses then checks.

    ``click.prompt`` shows the error and asks again whenever the proc raises
    a ``click.UsageError``.
    """

    def proc(value: str) -> float:
        try:
            amount = parse_amount(value)
        except InvalidInputError as exc:
            raise click.BadParameter(str(exc))
        check(amount)
        return amount

    return proc


def _positive(value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise click.BadParameter("Please enter a positive number")


def _non_negative(value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise click.BadParameter("Please enter a non-negative number")


def _rate_prompt(value: str) -> float:
    try:
        rate = parse_percent(value)
    except InvalidInputError as exc:
        raise click.BadParameter(str(exc))
    _non_negative(rate)
    return rate


def _down_payment_check(property_price: float) -> Callable[[float], None]:
    def check(value: float) -> None:
        _non_negative(value)
        if value >= property_price:
            raise click.BadParameter("Down payment cannot exceed the property price")

    return check


def run_calculation(
    settings: Settings, purchase: PropertyPurchase, rate: float, term: float
) -> LoanSummary:
    """Compute and print the headline figures for a purchase."""
    params = LoanParameters(
        loan_amount=purchase.loan_amount,
        annual_interest_rate_percent=rate,
        term_years=term,
    )
    logger.info("Calculating %.2f at %s%% over %s years", params.loan_amount, rate, term)
    try:
        summary = summarize_loan(params)
    except InvalidInputError as exc:
        raise click.ClickException(str(exc))
    print_summary(purchase, rate, term, summary, settings.currency, settings.percent_decimals)
    return summary


def show_schedule(
    settings: Settings, summary: LoanSummary, rate: float, term: float, full: bool = False
) -> None:
    schedule = generate_amortization_schedule(
        summary.loan_amount, summary.monthly_payment, rate, term
    )
    rows = schedule if full else schedule_preview(schedule, term)
    print_schedule(rows, settings.currency)


def show_extra_payment_impact(
    settings: Settings, loan_amount: float, rate: float, term: float, extra_payment: float
) -> None:
    try:
        impact = calculate_extra_payment_impact(loan_amount, rate, term, extra_payment)
    except InvalidInputError as exc:
        raise click.BadParameter(exc.message, param_hint="extra payment")
    print_extra_payment_impact(extra_payment, impact, settings.currency)


def loan_options(func: Callable) -> Callable:
    """Attach the options shared by every non-interactive command."""
    options = [
        click.option("--price", "-p", "price", required=True, type=AMOUNT, help="Total property price"),
        click.option("--down-payment", "-d", "down_payment", type=AMOUNT, default="0", show_default=True, help="Down payment amount"),
        click.option("--rate", "-r", "rate", required=True, type=PERCENT, help="Annual interest rate (percent, e.g. 5.25 or 5.25%)"),
        click.option("--term", "-t", "term", required=True, type=float, help="Loan term in years"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group(invoke_without_command=True)
@click.option(
    "--currency",
    "currency",
    type=click.Choice(sorted(CURRENCY_OPTIONS), case_sensitive=False),
    help="Currency used to display amounts (default from MORTGAGE_CALC_CURRENCY or USD)",
)
@click.option(
    "--log-level",
    "log_level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (default from MORTGAGE_CALC_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, currency: Optional[str], log_level: Optional[str]) -> None:
    """A command‑line mortgage payment calculator."""
    env = Settings.from_env()
    settings = Settings(
        currency=currency.upper() if currency else env.currency,
        log_level=log_level.upper() if log_level else env.log_level,
        percent_decimals=env.percent_decimals,
    )
    configure_logging(settings.log_level)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        ctx.invoke(interactive)


@cli.command()
@click.pass_obj
def interactive(settings: Settings) -> None:
    """Prompt for the purchase details and print the results."""
    click.echo("\n===== Mortgage Payment Calculator =====\n")
    property_price = click.prompt(
        "What is the total property price?", value_proc=_amount_prompt(_positive)
    )
    down_payment = click.prompt(
        "What is your down payment amount?",
        value_proc=_amount_prompt(_down_payment_check(property_price)),
    )
    rate = click.prompt(
        "What is the annual interest rate? (e.g. 5.25 for 5.25%)", value_proc=_rate_prompt
    )
    term = click.prompt("What is the loan term in years?", value_proc=_amount_prompt(_positive))

    purchase = PropertyPurchase(property_price=property_price, down_payment=down_payment)
    summary_data = run_calculation(settings, purchase, rate, term)

    if click.confirm("\nWould you like to see the amortization schedule?", default=False):
        show_schedule(settings, summary_data, rate, term)

    extra_payment = click.prompt(
        "\nExtra monthly payment towards principal (0 to skip)",
        default="0",
        value_proc=_amount_prompt(_non_negative),
    )
    if extra_payment > 0:
        show_extra_payment_impact(settings, purchase.loan_amount, rate, term, extra_payment)

    click.echo("\nThank you for using the Mortgage Payment Calculator!")


@cli.command()
@loan_options
@click.pass_obj
def summary(settings: Settings, price: float, down_payment: float, rate: float, term: float) -> None:
    """Print the monthly payment, total payment and total interest."""
    purchase = validate_purchase(price, down_payment)
    validate_loan_terms(rate, term)
    run_calculation(settings, purchase, rate, term)


@cli.command()
@loan_options
@click.option("--full", "full", is_flag=True, help="Print every payment instead of a preview")
@click.pass_obj
def schedule(settings: Settings, price: float, down_payment: float, rate: float, term: float, full: bool) -> None:
    """Print the summary followed by the amortization schedule."""
    purchase = validate_purchase(price, down_payment)
    validate_loan_terms(rate, term)
    summary_data = run_calculation(settings, purchase, rate, term)
    show_schedule(settings, summary_data, rate, term, full=full)


@cli.command()
@loan_options
@click.option("--extra", "-e", "extra_payment", required=True, type=AMOUNT, help="Extra amount paid towards principal every month")
@click.pass_obj
def extra(settings: Settings, price: float, down_payment: float, rate: float, term: float, extra_payment: float) -> None:
    """Show how an extra monthly payment shortens the loan and saves interest."""
    purchase = validate_purchase(price, down_payment)
    validate_loan_terms(rate, term)
    show_extra_payment_impact(settings, purchase.loan_amount, rate, term, extra_payment)


if __name__ == "__main__":
    cli()
