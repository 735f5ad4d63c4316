"""CMHC mortgage default insurance.

Required when the down payment is under 20% of the price. The premium is a
percentage of the base loan that rises as the down payment shrinks.
"""

from decimal import Decimal, ROUND_HALF_UP

from canmortgage.engine.validation import check_down_payment, check_home_price, to_decimal
from canmortgage.models.planning import LoanAmountBreakdown, MortgageInsurance

TWO_PLACES = Decimal("0.01")

INSURANCE_THRESHOLD_PCT = Decimal("20")

# (minimum down payment %, premium rate), checked in order
CMHC_PREMIUM_TIERS: tuple[tuple[Decimal, Decimal], ...] = (
    (Decimal("15"), Decimal("0.028")),
    (Decimal("10"), Decimal("0.031")),
    (Decimal("0"), Decimal("0.04")),
)


def cmhc_insurance(home_price, down_payment) -> MortgageInsurance:
    price = to_decimal(home_price, "home_price")
    down = to_decimal(down_payment, "down_payment")
    check_home_price(price)
    check_down_payment(price, down)

    down_pct = down / price * 100
    if down_pct >= INSURANCE_THRESHOLD_PCT:
        return MortgageInsurance(premium=Decimal("0"), rate=Decimal("0"), is_required=False)

    rate = next(r for floor, r in CMHC_PREMIUM_TIERS if down_pct >= floor)
    premium = ((price - down) * rate).quantize(TWO_PLACES, ROUND_HALF_UP)
    return MortgageInsurance(premium=premium, rate=rate, is_required=True)


def total_loan_amount(home_price, down_payment) -> LoanAmountBreakdown:
    """Base loan plus the insurance premium, which is added to the mortgage."""
    insurance = cmhc_insurance(home_price, down_payment)
    base = to_decimal(home_price, "home_price") - to_decimal(down_payment, "down_payment")
    return LoanAmountBreakdown(
        base_loan_amount=base,
        insurance_premium=insurance.premium,
        total_loan_amount=base + insurance.premium,
    )
