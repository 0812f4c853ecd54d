# tests/test_formatter.py
import pytest

from mortgage_calc.data_models import ExtraPaymentImpact, LoanSummary, PaymentScheduleEntry, PropertyPurchase
from mortgage_calc.engine import calculate_monthly_payment, generate_amortization_schedule
from mortgage_calc.formatter import (
    format_currency,
    format_percentage,
    format_schedule_row,
    format_term,
    print_extra_payment_impact,
    print_schedule,
    print_summary,
    schedule_preview,
)


@pytest.mark.parametrize(
    "amount, currency, expected",
    [
        (1234.5, "USD", "$1,234.50"),
        (1135.5830, "USD", "$1,135.58"),
        (-1234.567, "USD", "-$1,234.57"),
        (-0.004, "USD", "$0.00"),
        (0, "EUR", "€0.00"),
        (1_000_000, "GBP", "£1,000,000.00"),
        (2500, "PLN", "2,500.00 zł"),
        (10, "xyz", "$10.00"),
    ],
)
def test_format_currency(amount, currency, expected):
    assert format_currency(amount, currency) == expected


def test_format_percentage():
    assert format_percentage(5.5) == "5.50%"
    assert format_percentage(4.125, 3) == "4.125%"
    assert format_percentage(20, 0) == "20%"


def test_format_term():
    assert format_term(250) == "20 years, 10 months"
    assert format_term(12) == "1 years, 0 months"


def _schedule(term_years):
    pmt = calculate_monthly_payment(100_000, 6, term_years)
    return generate_amortization_schedule(100_000, pmt, 6, term_years)


def test_preview_thirty_years():
    sched = _schedule(30)
    rows = schedule_preview(sched, 30)
    assert rows[:12] == sched[:12]
    assert rows[12] is None
    sampled = [r.payment_number for r in rows[13:-2]]
    assert sampled == [24, 60, 96, 132, 168, 204, 240, 276, 312, 348]
    assert rows[-2] is None
    assert rows[-1] is sched[-1]


def test_preview_short_term_shows_every_year_end():
    sched = _schedule(5)
    rows = schedule_preview(sched, 5)
    assert [r.payment_number for r in rows[13:-2]] == [24, 36, 48, 60]
    assert rows[-1].payment_number == 60


def test_preview_one_year_is_first_twelve_only():
    sched = _schedule(1)
    assert schedule_preview(sched, 1) == sched


def test_schedule_row_is_padded():
    entry = PaymentScheduleEntry(1, 1135.58, 218.91, 916.67, 199781.09)
    row = format_schedule_row(entry)
    assert row.startswith("         1 | ")
    assert row.split(" | ")[-1] == "  $199,781.09"


def test_print_schedule_marks_gaps(capsys):
    entry = PaymentScheduleEntry(1, 100.0, 90.0, 10.0, 910.0)
    print_schedule([entry, None, entry])
    out = capsys.readouterr().out
    assert "Amortization Schedule" in out
    assert out.count("...") == 1


def test_print_summary(capsys):
    purchase = PropertyPurchase(property_price=250_000, down_payment=50_000)
    summary = LoanSummary(
        loan_amount=200_000,
        monthly_payment=1135.58,
        total_payment=408_808.8,
        total_interest=208_808.8,
        number_of_payments=360,
    )
    print_summary(purchase, 5.5, 30, summary)
    out = capsys.readouterr().out
    assert "Down Payment: $50,000.00 (20.00%)" in out
    assert "Interest Rate: 5.50%" in out
    assert "Loan Term: 30 years" in out
    assert "Total of 360 Payments: $408,808.80" in out
    assert "Total Interest: $208,808.80" in out


def test_print_extra_payment_impact(capsys):
    impact = ExtraPaymentImpact(
        new_loan_term_months=298,
        months_saved=62,
        interest_saved=39_000.0,
        total_interest_standard=247_220.13,
        total_interest_with_extra=208_220.13,
    )
    print_extra_payment_impact(200, impact, "EUR")
    out = capsys.readouterr().out
    assert "New Loan Term: 24 years, 10 months" in out
    assert "Time Saved: 5 years, 2 months" in out
    assert "Interest Saved: €39,000.00" in out
