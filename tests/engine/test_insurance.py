from decimal import Decimal

import pytest

from canmortgage.engine.errors import InvalidInputError
from canmortgage.engine.insurance import cmhc_insurance, total_loan_amount


class TestCMHCInsurance:
    def test_twenty_percent_down_not_required(self):
        ins = cmhc_insurance(Decimal("500000"), Decimal("100000"))
        assert ins.is_required is False
        assert ins.premium == Decimal("0")

    @pytest.mark.parametrize("down,rate,premium", [
        ("75000", "0.028", "11900.00"),  # 15%
        ("50000", "0.031", "13950.00"),  # 10%
        ("25000", "0.04", "19000.00"),   # 5%
        ("10000", "0.04", "19600.00"),   # 2%, below the legal minimum but still priced
    ])
    def test_premium_tiers(self, down, rate, premium):
        ins = cmhc_insurance(Decimal("500000"), Decimal(down))
        assert ins.is_required is True
        assert ins.rate == Decimal(rate)
        assert ins.premium == Decimal(premium)

    def test_invalid_down_payment(self):
        with pytest.raises(InvalidInputError):
            cmhc_insurance(Decimal("500000"), Decimal("500000"))


class TestTotalLoanAmount:
    def test_premium_added_to_loan(self):
        loan = total_loan_amount(Decimal("500000"), Decimal("50000"))
        assert loan.base_loan_amount == Decimal("450000")
        assert loan.insurance_premium == Decimal("13950.00")
        assert loan.total_loan_amount == Decimal("463950.00")

    def test_uninsured(self):
        loan = total_loan_amount(Decimal("500000"), Decimal("150000"))
        assert loan.total_loan_amount == loan.base_loan_amount == Decimal("350000")
