from __future__ import annotations

import logging

import pytest
from click.testing import CliRunner

from mortgage_calc.data_models import LoanParameters


@pytest.fixture(autouse=True)
def _reset_package_logger():
    # the CLI installs a handler bound to the runner's captured stderr
    yield
    logger = logging.getLogger("mortgage_calc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def thirty_year_loan() -> LoanParameters:
    # 200k at 5.5% over 30 years, ~1135.58 per month
    return LoanParameters(loan_amount=200_000, annual_interest_rate_percent=5.5, term_years=30)
