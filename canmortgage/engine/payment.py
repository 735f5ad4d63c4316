"""Periodic mortgage payment from loan parameters.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from canmortgage.engine.validation import (
    check_amortization_years,
    check_down_payment,
    check_home_price,
    check_rate,
    to_decimal,
    to_frequency,
)
from canmortgage.models.loan import PaymentFrequency, PaymentResult

TWO_PLACES = Decimal("0.01")


def monthly_rate(annual_rate_pct: Decimal) -> Decimal:
    """5.25 (percent per year) -> 0.004375 (fraction per month)."""
    return annual_rate_pct / 100 / 12


def annuity_payment(principal: Decimal, rate: Decimal, periods: int) -> Decimal:
    """Unrounded level payment that retires `principal` over `periods` at `rate` per period."""
    if principal == 0:
        return Decimal("0")
    factor = (1 + rate) ** periods
    # Rates too small to move 1 + r at working precision amortize straight-line
    if rate == 0 or factor == 1:
        return principal / periods
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    return principal * (rate * factor) / (factor - 1)


def compute_payment(
    home_price,
    down_payment,
    annual_rate_pct,
    amortization_years: int,
    payment_frequency=PaymentFrequency.MONTHLY,
) -> PaymentResult:
    """Calculate the periodic payment, total interest and total cost of a mortgage.

    Bi-weekly is a display relabel: the periodic payment is half the monthly
    payment, and totals are still based on the monthly schedule.

    Raises:
        InvalidInputError: on any out-of-domain input.
    """
    price = to_decimal(home_price, "home_price")
    down = to_decimal(down_payment, "down_payment")
    rate_pct = to_decimal(annual_rate_pct, "annual_rate_pct")
    years = check_amortization_years(amortization_years)
    frequency = to_frequency(payment_frequency)
    check_home_price(price)
    check_down_payment(price, down)
    check_rate(rate_pct)

    loan_amount = price - down
    r = monthly_rate(rate_pct)
    n = years * 12
    payment = annuity_payment(loan_amount, r, n)

    total_cost = (payment * n + down).quantize(TWO_PLACES, ROUND_HALF_UP)
    # Keeps total_cost == total_interest + home_price exact to the cent
    total_interest = total_cost - price.quantize(TWO_PLACES, ROUND_HALF_UP)

    periodic = payment / 2 if frequency is PaymentFrequency.BI_WEEKLY else payment

    return PaymentResult(
        loan_amount=loan_amount.quantize(TWO_PLACES, ROUND_HALF_UP),
        periodic_payment=periodic.quantize(TWO_PLACES, ROUND_HALF_UP),
        monthly_payment=payment.quantize(TWO_PLACES, ROUND_HALF_UP),
        total_interest=total_interest,
        total_cost=total_cost,
        payment_frequency=frequency,
        amortization_years=years,
        monthly_rate=r,
        exact_monthly_payment=payment,
    )
