"""Full mortgage calculation: payment, yearly schedule and closing costs together."""

from dataclasses import dataclass, field
from decimal import Decimal

from canmortgage.engine.amortization import schedule_for
from canmortgage.engine.closing_costs import DEFAULT_FEES, estimate_closing_costs
from canmortgage.engine.insurance import cmhc_insurance
from canmortgage.engine.payment import compute_payment
from canmortgage.engine.validation import (
    check_amortization_years,
    check_jurisdiction,
    to_decimal,
    to_frequency,
)
from canmortgage.models.closing import ClosingCostBreakdown, FeeSchedule, JurisdictionProfile
from canmortgage.models.loan import AmortizationYearRow, LoanParameters, PaymentResult, Province
from canmortgage.models.planning import MortgageInsurance


@dataclass(frozen=True)
class CalculationResult:
    parameters: LoanParameters
    payment: PaymentResult
    schedule: list[AmortizationYearRow] = field(default_factory=list)
    closing_costs: ClosingCostBreakdown | None = None
    insurance: MortgageInsurance | None = None

    @property
    def cash_to_close(self) -> Decimal:
        """Down payment plus closing costs."""
        closing = self.closing_costs.total if self.closing_costs else Decimal("0")
        return self.parameters.down_payment + closing


def build_parameters(
    home_price,
    down_payment,
    annual_rate_pct,
    amortization_years: int,
    payment_frequency="monthly",
    province="ontario",
    city="toronto",
    is_first_time_buyer: bool = False,
) -> LoanParameters:
    """Coerce raw form values into LoanParameters, rejecting bad enums and mismatched cities."""
    prov, cty = check_jurisdiction(province, city)
    return LoanParameters(
        home_price=to_decimal(home_price, "home_price"),
        down_payment=to_decimal(down_payment, "down_payment"),
        annual_rate_pct=to_decimal(annual_rate_pct, "annual_rate_pct"),
        amortization_years=check_amortization_years(amortization_years),
        payment_frequency=to_frequency(payment_frequency),
        province=prov,
        city=cty,
        is_first_time_buyer=bool(is_first_time_buyer),
    )


def run_calculation(
    params: LoanParameters,
    include_closing_costs: bool = True,
    jurisdictions: dict[Province, JurisdictionProfile] | None = None,
    fees: FeeSchedule = DEFAULT_FEES,
) -> CalculationResult:
    """Compute everything a calculation page shows for one set of inputs.

    All inputs are validated before any result is built; a failure in any
    part raises and no partial result is returned.
    """
    check_jurisdiction(params.province, params.city)
    payment = compute_payment(
        params.home_price,
        params.down_payment,
        params.annual_rate_pct,
        params.amortization_years,
        params.payment_frequency,
    )
    closing = None
    if include_closing_costs:
        closing = estimate_closing_costs(
            params.home_price,
            params.province,
            params.city,
            params.is_first_time_buyer,
            jurisdictions=jurisdictions,
            fees=fees,
        )
    return CalculationResult(
        parameters=params,
        payment=payment,
        schedule=schedule_for(payment),
        closing_costs=closing,
        insurance=cmhc_insurance(params.home_price, params.down_payment),
    )


def to_record(result: CalculationResult) -> dict:
    """Flatten a calculation into the fields a calculation store persists.

    Notes and comments are user annotations and are added by the store's caller.
    """
    p = result.parameters
    return {
        "home_price": p.home_price,
        "down_payment": p.down_payment,
        "interest_rate": p.annual_rate_pct,
        "amortization_years": p.amortization_years,
        "payment_frequency": p.payment_frequency.value,
        "province": p.province.value,
        "city": p.city.value,
        "is_first_time_buyer": p.is_first_time_buyer,
        "monthly_payment": result.payment.periodic_payment,
        "total_interest": result.payment.total_interest,
    }
