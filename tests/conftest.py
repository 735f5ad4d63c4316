"""Canonical fixtures used across engine tests.

Fixture: $500K Toronto purchase, $100K down, 5.25% over 25 years, monthly.
"""

import pytest
from decimal import Decimal

from canmortgage.models.loan import City, LoanParameters, PaymentFrequency, Province


@pytest.fixture
def canonical_params() -> LoanParameters:
    return LoanParameters(
        home_price=Decimal("500000"),
        down_payment=Decimal("100000"),
        annual_rate_pct=Decimal("5.25"),
        amortization_years=25,
        payment_frequency=PaymentFrequency.MONTHLY,
        province=Province.ONTARIO,
        city=City.TORONTO,
        is_first_time_buyer=False,
    )


@pytest.fixture
def vancouver_params() -> LoanParameters:
    return LoanParameters(
        home_price=Decimal("800000"),
        down_payment=Decimal("160000"),
        annual_rate_pct=Decimal("4.5"),
        amortization_years=30,
        payment_frequency=PaymentFrequency.BI_WEEKLY,
        province=Province.BC,
        city=City.VANCOUVER,
        is_first_time_buyer=True,
    )
