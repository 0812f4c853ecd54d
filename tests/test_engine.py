# tests/test_engine.py
import logging

import pytest

from mortgage_calc.engine import (
    calculate_monthly_payment,
    calculate_total_interest,
    calculate_total_payment,
    generate_amortization_schedule,
    summarize_loan,
)
from mortgage_calc.exceptions import InvalidInputError


def test_monthly_payment_thirty_year_mortgage():
    pmt = calculate_monthly_payment(200_000, 5.5, 30)
    assert round(pmt, 2) == 1135.58


def test_monthly_payment_matches_closed_form():
    r = 4.5 / 100 / 12
    n = 15 * 12
    expected = 300_000 * r / (1 - (1 + r) ** -n)
    assert calculate_monthly_payment(300_000, 4.5, 15) == pytest.approx(expected, rel=1e-12)


def test_zero_interest_rate_is_straight_line():
    pmt = calculate_monthly_payment(150_000, 0, 15)
    assert pmt == pytest.approx(150_000 / 180, abs=1e-9)
    assert round(pmt, 2) == 833.33


@pytest.mark.parametrize("term", [0, -5, float("inf"), float("nan")])
def test_monthly_payment_rejects_degenerate_terms(term):
    with pytest.raises(InvalidInputError) as excinfo:
        calculate_monthly_payment(100_000, 5, term)
    assert "term_years" in excinfo.value.context


def test_total_payment_and_interest_compose():
    pmt = calculate_monthly_payment(250_000, 6.25, 20)
    total = calculate_total_payment(pmt, 20)
    assert total == pytest.approx(pmt * 240)
    assert calculate_total_interest(total, 250_000) == pytest.approx(pmt * 20 * 12 - 250_000)


def test_totals_are_not_validated():
    assert calculate_total_payment(-100.0, 1) == -1200.0
    assert calculate_total_interest(1000.0, 2500.0) == -1500.0


def test_summarize_loan(thirty_year_loan):
    summary = summarize_loan(thirty_year_loan)
    assert summary.loan_amount == 200_000
    assert summary.number_of_payments == 360
    assert summary.total_payment == pytest.approx(summary.monthly_payment * 360)
    assert summary.total_interest == pytest.approx(summary.total_payment - 200_000)


def test_schedule_length_and_numbering():
    pmt = calculate_monthly_payment(200_000, 5.5, 30)
    sched = generate_amortization_schedule(200_000, pmt, 5.5, 30)
    assert len(sched) == 360
    assert [e.payment_number for e in sched] == list(range(1, 361))


def test_schedule_entries_split_payment():
    pmt = calculate_monthly_payment(200_000, 5.5, 30)
    sched = generate_amortization_schedule(200_000, pmt, 5.5, 30)
    first = sched[0]
    assert first.interest == pytest.approx(200_000 * 5.5 / 100 / 12)
    for entry in sched:
        assert entry.payment == pmt
        assert entry.principal + entry.interest == pytest.approx(entry.payment)


def test_schedule_balance_non_increasing_and_paid_off():
    pmt = calculate_monthly_payment(200_000, 5.5, 30)
    sched = generate_amortization_schedule(200_000, pmt, 5.5, 30)
    balances = [e.remaining_balance for e in sched]
    assert all(later <= earlier for earlier, later in zip(balances, balances[1:]))
    assert sched[-1].remaining_balance < 1
    assert sum(e.principal for e in sched) == pytest.approx(200_000, abs=1.0)


def test_zero_rate_schedule():
    pmt = calculate_monthly_payment(24_000, 0, 2)
    sched = generate_amortization_schedule(24_000, pmt, 0, 2)
    assert len(sched) == 24
    assert all(e.interest == 0 for e in sched)
    assert sched[-1].remaining_balance == pytest.approx(0.0, abs=1e-6)


def test_fractional_term_uses_whole_months():
    sched = generate_amortization_schedule(10_000, 1_000, 3, 2.5)
    assert len(sched) == 30


def test_schedule_rejects_zero_term():
    with pytest.raises(InvalidInputError):
        generate_amortization_schedule(10_000, 500, 5, 0)


def test_overpaying_schedule_clamps_balance_and_warns(caplog):
    caplog.set_level(logging.WARNING, logger="mortgage_calc.engine")
    sched = generate_amortization_schedule(1_000, 200, 0, 1)
    assert len(sched) == 12
    assert sched[4].remaining_balance == 0
    assert all(e.remaining_balance == 0 for e in sched[4:])
    # principal keeps being reported even after the loan is paid off
    assert sched[-1].principal == 200
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "period 6" in warnings[0].getMessage()


def test_exact_payment_does_not_warn(caplog):
    caplog.set_level(logging.WARNING, logger="mortgage_calc.engine")
    pmt = calculate_monthly_payment(300_000, 4.5, 30)
    generate_amortization_schedule(300_000, pmt, 4.5, 30)
    assert not caplog.records


def test_loan_parameters_derived_values(thirty_year_loan):
    assert thirty_year_loan.number_of_payments == 360
