"""Rental investment metrics: cash flow, NOI, cap rate, cash-on-cash return.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from canmortgage.engine.validation import check_home_price, to_decimal
from canmortgage.models.planning import InvestmentMetrics, MonthlyExpenses

TWO_PLACES = Decimal("0.01")


def calculate_investment_metrics(
    home_price,
    down_payment,
    monthly_payment,
    monthly_rent,
    expenses: MonthlyExpenses,
) -> InvestmentMetrics:
    """Cash flow metrics for a rental property.

    NOI excludes the mortgage payment; cash flow and break-even rent include it.
    ROI is annual cash flow over the down payment, 0 when nothing was put down.
    """
    price = to_decimal(home_price, "home_price")
    down = to_decimal(down_payment, "down_payment")
    payment = to_decimal(monthly_payment, "monthly_payment")
    rent = to_decimal(monthly_rent, "monthly_rent")
    check_home_price(price)

    operating = expenses.total
    total_monthly = operating + payment
    monthly_cash_flow = rent - total_monthly
    noi = (rent - operating) * 12

    cap_rate = noi / price * 100
    roi = monthly_cash_flow * 12 / down * 100 if down > 0 else Decimal("0")

    return InvestmentMetrics(
        monthly_cash_flow=monthly_cash_flow.quantize(TWO_PLACES, ROUND_HALF_UP),
        cap_rate=cap_rate.quantize(TWO_PLACES, ROUND_HALF_UP),
        roi=roi.quantize(TWO_PLACES, ROUND_HALF_UP),
        break_even_rent=total_monthly.quantize(TWO_PLACES, ROUND_HALF_UP),
        total_monthly_expenses=total_monthly.quantize(TWO_PLACES, ROUND_HALF_UP),
        net_operating_income=noi.quantize(TWO_PLACES, ROUND_HALF_UP),
    )
