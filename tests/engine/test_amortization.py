from decimal import Decimal

import pytest

from canmortgage.engine.amortization import (
    generate_schedule,
    maturity_tolerance,
    schedule_for,
    total_interest,
)
from canmortgage.engine.errors import DegenerateAmortizationError, InvalidInputError
from canmortgage.engine.payment import compute_payment

RATE_525 = Decimal("5.25") / 100 / 12


@pytest.fixture
def canonical_payment():
    return compute_payment(Decimal("500000"), Decimal("100000"), Decimal("5.25"), 25)


class TestGenerateSchedule:
    def test_row_count(self, canonical_payment):
        schedule = schedule_for(canonical_payment)
        assert len(schedule) == 25
        assert [r.year for r in schedule] == list(range(1, 26))

    def test_first_year(self, canonical_payment):
        first = schedule_for(canonical_payment)[0]
        assert first.principal_payment == Decimal("7953.46")
        assert first.interest_payment == Decimal("20810.43")
        assert first.balance == Decimal("392046.54")
        assert first.cumulative_interest == Decimal("20810.43")

    def test_principal_plus_interest_is_total(self, canonical_payment):
        for row in schedule_for(canonical_payment):
            assert row.principal_payment + row.interest_payment == row.total_payment

    def test_final_balance_zero(self, canonical_payment):
        assert schedule_for(canonical_payment)[-1].balance == Decimal("0.00")

    def test_final_balance_zero_with_rounded_payment(self):
        """A cent-rounded payment leaves a residue that the last payment retires."""
        schedule = generate_schedule(Decimal("400000"), Decimal("2396.99"), RATE_525, 25)
        assert schedule[-1].balance == Decimal("0.00")

    def test_balance_identity(self, canonical_payment):
        schedule = schedule_for(canonical_payment)
        previous = Decimal("400000")
        for row in schedule:
            assert abs(previous - row.principal_payment - row.balance) <= Decimal("0.02")
            previous = row.balance

    def test_monotonic(self, canonical_payment):
        schedule = schedule_for(canonical_payment)
        for prev, row in zip(schedule, schedule[1:]):
            assert row.balance <= prev.balance
            assert row.cumulative_interest >= prev.cumulative_interest
            assert row.principal_payment > prev.principal_payment

    def test_interest_matches_payment_totals(self, canonical_payment):
        schedule = schedule_for(canonical_payment)
        assert abs(total_interest(schedule) - canonical_payment.total_interest) <= Decimal("0.13")
        assert abs(schedule[-1].cumulative_interest - canonical_payment.total_interest) <= Decimal("0.01")

    def test_bi_weekly_uses_full_monthly_payment(self):
        monthly = compute_payment(500000, 100000, Decimal("5.25"), 25, "monthly")
        bi_weekly = compute_payment(500000, 100000, Decimal("5.25"), 25, "bi-weekly")
        assert schedule_for(monthly) == schedule_for(bi_weekly)

    def test_zero_rate(self):
        schedule = generate_schedule(Decimal("360000"), Decimal("1000"), Decimal("0"), 30)
        assert all(r.interest_payment == Decimal("0.00") for r in schedule)
        assert all(r.principal_payment == Decimal("12000.00") for r in schedule)
        assert schedule[0].balance == Decimal("348000.00")
        assert schedule[-1].balance == Decimal("0.00")

    def test_zero_loan(self):
        schedule = generate_schedule(Decimal("0"), Decimal("0"), RATE_525, 5)
        assert len(schedule) == 5
        assert all(r.total_payment == Decimal("0.00") and r.balance == Decimal("0.00") for r in schedule)

    def test_overpayment_pays_off_early(self):
        schedule = generate_schedule(Decimal("10000"), Decimal("5000"), Decimal("0.005"), 3)
        assert len(schedule) == 3
        assert schedule[0].balance == Decimal("0.00")
        assert schedule[1].total_payment == Decimal("0.00")
        assert schedule[0].principal_payment == Decimal("10000.00")

    def test_restartable(self, canonical_payment):
        assert schedule_for(canonical_payment) == schedule_for(canonical_payment)


class TestScheduleValidation:
    def test_payment_below_interest(self):
        # First month interest on $400K at 5.25% is $1,750
        with pytest.raises(DegenerateAmortizationError):
            generate_schedule(Decimal("400000"), Decimal("1700"), RATE_525, 25)

    def test_payment_equal_to_interest(self):
        with pytest.raises(DegenerateAmortizationError):
            generate_schedule(Decimal("400000"), Decimal("1750"), RATE_525, 25)

    def test_payment_too_small_for_term(self):
        # Covers interest but would leave ~$370K owing after 25 years
        with pytest.raises(DegenerateAmortizationError) as exc:
            generate_schedule(Decimal("400000"), Decimal("1800"), RATE_525, 25)
        assert exc.value.field == "monthly_payment"

    def test_payment_a_few_dollars_short(self):
        with pytest.raises(DegenerateAmortizationError):
            generate_schedule(Decimal("400000"), Decimal("2390"), RATE_525, 25)

    def test_zero_payment_zero_rate(self):
        with pytest.raises(DegenerateAmortizationError):
            generate_schedule(Decimal("1000"), Decimal("0"), Decimal("0"), 1)

    def test_degenerate_is_invalid_input(self):
        with pytest.raises(InvalidInputError):
            generate_schedule(Decimal("400000"), Decimal("1"), RATE_525, 25)

    @pytest.mark.parametrize("loan,payment,rate,years,field", [
        ("-1", "100", "0.004", 5, "loan_amount"),
        ("1000", "-100", "0.004", 5, "monthly_payment"),
        ("1000", "100", "-0.004", 5, "monthly_rate"),
        ("1000", "100", "0.004", 0, "amortization_years"),
    ])
    def test_invalid_arguments(self, loan, payment, rate, years, field):
        with pytest.raises(InvalidInputError) as exc:
            generate_schedule(loan, payment, rate, years)
        assert exc.value.field == field


class TestMaturityTolerance:
    def test_zero_rate(self):
        assert maturity_tolerance(Decimal("0"), 300) == Decimal("2.5")

    def test_covers_cent_rounding(self):
        # Rounding $2,396.99 leaves about $0.53 at maturity
        assert Decimal("0.53") < maturity_tolerance(RATE_525, 300) < Decimal("5")
