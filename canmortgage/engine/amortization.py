"""Year-by-year amortization schedule.

Simulates every month at full precision and emits one summary row per
12-month block. Rounding happens only on the emitted rows.
"""

from decimal import Decimal, ROUND_HALF_UP

from canmortgage.engine.errors import DegenerateAmortizationError, InvalidInputError
from canmortgage.engine.validation import check_amortization_years, to_decimal
from canmortgage.models.loan import AmortizationYearRow, PaymentResult

TWO_PLACES = Decimal("0.01")
# Largest error a payment can carry from being rounded to the cent
HALF_CENT = Decimal("0.005")


def maturity_tolerance(rate: Decimal, periods: int) -> Decimal:
    """Balance left at maturity by a payment that is short by half a cent.

    Each month's shortfall compounds to maturity, so the drift is half a cent
    times the future-value annuity factor, plus $1 of slack.
    """
    factor = (1 + rate) ** periods
    fv_factor = Decimal(periods) if rate == 0 or factor == 1 else (factor - 1) / rate
    return HALF_CENT * fv_factor + 1


def generate_schedule(
    loan_amount,
    monthly_payment,
    monthly_rate,
    amortization_years: int,
) -> list[AmortizationYearRow]:
    """Generate one row per loan year, exactly `amortization_years` rows.

    Args:
        loan_amount: Principal at the start of year 1
        monthly_payment: Full monthly payment (never the halved bi-weekly figure)
        monthly_rate: Periodic rate as a fraction (e.g. 0.004375 for 5.25%/yr)
        amortization_years: Term in years

    A payment rounded to the cent leaves a small residue at maturity; the
    last payment absorbs it so the final balance is zero. Anything larger
    than that rounding drift is a payment too small for the term.

    Raises:
        InvalidInputError: negative amounts or a non-positive term.
        DegenerateAmortizationError: payment does not exceed the first month's interest,
            or does not retire the loan within the term.
    """
    balance = to_decimal(loan_amount, "loan_amount")
    payment = to_decimal(monthly_payment, "monthly_payment")
    rate = to_decimal(monthly_rate, "monthly_rate")
    years = check_amortization_years(amortization_years)

    if balance < 0:
        raise InvalidInputError("Loan amount cannot be negative", "loan_amount")
    if payment < 0:
        raise InvalidInputError("Monthly payment cannot be negative", "monthly_payment")
    if rate < 0:
        raise InvalidInputError("Monthly rate cannot be negative", "monthly_rate")
    if balance > 0 and payment <= balance * rate:
        raise DegenerateAmortizationError(
            f"Monthly payment {payment} does not cover first month's interest "
            f"{(balance * rate).quantize(TWO_PLACES, ROUND_HALF_UP)}",
            "monthly_payment",
        )

    last_month = years * 12
    tolerance = maturity_tolerance(rate, last_month)
    cumulative_interest = Decimal("0")
    rows: list[AmortizationYearRow] = []

    for year in range(1, years + 1):
        year_principal = Decimal("0")
        year_interest = Decimal("0")

        for month in range(1, 13):
            interest = balance * rate
            principal = payment - interest

            if (year - 1) * 12 + month == last_month:
                residue = balance - principal
                if residue > tolerance:
                    raise DegenerateAmortizationError(
                        f"Monthly payment {payment} does not amortize the loan within "
                        f"{years} years ({residue.quantize(TWO_PLACES, ROUND_HALF_UP)} left at maturity)",
                        "monthly_payment",
                    )
                # Final payment adjustment absorbs rounding drift
                principal = balance
            elif principal > balance:
                principal = balance

            balance = max(Decimal("0"), balance - principal)
            year_principal += principal
            year_interest += interest

        cumulative_interest += year_interest
        principal_r = year_principal.quantize(TWO_PLACES, ROUND_HALF_UP)
        interest_r = year_interest.quantize(TWO_PLACES, ROUND_HALF_UP)

        rows.append(AmortizationYearRow(
            year=year,
            principal_payment=principal_r,
            interest_payment=interest_r,
            total_payment=principal_r + interest_r,
            balance=balance.quantize(TWO_PLACES, ROUND_HALF_UP),
            cumulative_interest=cumulative_interest.quantize(TWO_PLACES, ROUND_HALF_UP),
        ))

    return rows


def schedule_for(payment: PaymentResult) -> list[AmortizationYearRow]:
    """Schedule for a computed payment, simulated with the unrounded monthly payment."""
    return generate_schedule(
        payment.loan_amount,
        payment.exact_monthly_payment,
        payment.monthly_rate,
        payment.amortization_years,
    )


def total_interest(schedule: list[AmortizationYearRow]) -> Decimal:
    return sum((row.interest_payment for row in schedule), Decimal("0"))
