"""Maximum affordable home price under GDS/TDS debt-service limits.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from canmortgage.config import settings
from canmortgage.engine.errors import InvalidInputError
from canmortgage.engine.payment import monthly_rate
from canmortgage.engine.validation import check_amortization_years, check_rate, to_decimal
from canmortgage.models.planning import AffordabilityResult

TWO_PLACES = Decimal("0.01")


def max_loan_for_payment(payment: Decimal, rate: Decimal, periods: int) -> Decimal:
    """Inverse annuity: the principal a level payment can retire."""
    factor = (1 + rate) ** periods
    if rate == 0 or factor == 1:
        return payment * periods
    return payment * (factor - 1) / (rate * factor)


def calculate_affordability(
    annual_income,
    monthly_debts,
    down_payment,
    annual_rate_pct,
    amortization_years: int | None = None,
    gds_limit: Decimal | None = None,
    tds_limit: Decimal | None = None,
) -> AffordabilityResult:
    """Largest price whose payment fits both the GDS and TDS limits.

    Args:
        annual_income: Gross household income per year
        monthly_debts: Existing non-housing debt payments per month
        down_payment: Cash available for the down payment
        annual_rate_pct: Qualifying rate in percent (e.g. 5.25)
        amortization_years: Defaults to settings.affordability_amortization_years
    """
    income = to_decimal(annual_income, "annual_income")
    debts = to_decimal(monthly_debts, "monthly_debts")
    down = to_decimal(down_payment, "down_payment")
    rate_pct = to_decimal(annual_rate_pct, "annual_rate_pct")
    if amortization_years is None:
        amortization_years = settings.affordability_amortization_years
    years = check_amortization_years(amortization_years)
    gds = settings.gds_limit if gds_limit is None else gds_limit
    tds = settings.tds_limit if tds_limit is None else tds_limit

    if income <= 0:
        raise InvalidInputError("Annual income must be greater than zero", "annual_income")
    if debts < 0:
        raise InvalidInputError("Monthly debts cannot be negative", "monthly_debts")
    if down < 0:
        raise InvalidInputError("Down payment cannot be negative", "down_payment")
    check_rate(rate_pct)

    monthly_income = income / 12
    max_payment = max(Decimal("0"), min(monthly_income * gds, monthly_income * tds - debts))
    max_loan = max_loan_for_payment(max_payment, monthly_rate(rate_pct), years * 12)

    gds_ratio = max_payment / monthly_income * 100
    tds_ratio = (max_payment + debts) / monthly_income * 100

    return AffordabilityResult(
        max_affordable_price=(max_loan + down).quantize(Decimal("1"), ROUND_HALF_UP),
        max_monthly_payment=max_payment.quantize(TWO_PLACES, ROUND_HALF_UP),
        gds_ratio=gds_ratio.quantize(TWO_PLACES, ROUND_HALF_UP),
        tds_ratio=tds_ratio.quantize(TWO_PLACES, ROUND_HALF_UP),
        is_within_budget=gds_ratio <= gds * 100 and tds_ratio <= tds * 100,
    )
