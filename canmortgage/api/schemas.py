"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field

# Terms beyond this are rejected before any simulation runs
MAX_TERM_YEARS = 100


# ---- Request schemas ----

class PaymentRequest(BaseModel):
    home_price: Decimal = Field(..., description="Purchase price")
    down_payment: Decimal = Field(..., description="Cash down payment")
    interest_rate: Decimal = Field(..., description="Annual rate in percent, e.g. 5.25")
    amortization_years: int = Field(25, le=MAX_TERM_YEARS)
    payment_frequency: str = "monthly"


class CalculateRequest(PaymentRequest):
    province: str = "ontario"
    city: str = "toronto"
    is_first_time_buyer: bool = False
    include_closing_costs: bool = True


class ScheduleRequest(BaseModel):
    loan_amount: Decimal
    monthly_payment: Decimal = Field(..., description="Full monthly payment (not the bi-weekly half)")
    monthly_rate: Decimal = Field(..., description="Monthly rate as a fraction, e.g. 0.004375")
    amortization_years: int = Field(..., le=MAX_TERM_YEARS)


class ClosingCostsRequest(BaseModel):
    home_price: Decimal
    province: str = "ontario"
    city: str = "toronto"
    is_first_time_buyer: bool = False


class AffordabilityRequest(BaseModel):
    annual_income: Decimal
    monthly_debts: Decimal = Decimal("0")
    down_payment: Decimal
    interest_rate: Decimal
    amortization_years: int | None = Field(None, le=MAX_TERM_YEARS)


class RentVsBuyRequest(BaseModel):
    monthly_rent: Decimal
    annual_rent_increase: Decimal = Decimal("3")
    comparison_years: int = Field(10, le=MAX_TERM_YEARS)
    down_payment: Decimal
    monthly_payment: Decimal


class MonthlyExpensesSchema(BaseModel):
    taxes: Decimal = Decimal("0")
    insurance: Decimal = Decimal("0")
    condo_fees: Decimal = Decimal("0")
    maintenance: Decimal = Decimal("0")
    other: Decimal = Decimal("0")


class InvestmentRequest(BaseModel):
    home_price: Decimal
    down_payment: Decimal
    monthly_payment: Decimal
    monthly_rent: Decimal
    monthly_expenses: MonthlyExpensesSchema = Field(default_factory=MonthlyExpensesSchema)


# ---- Response schemas ----

class PaymentResponse(BaseModel):
    loan_amount: Decimal
    periodic_payment: Decimal
    monthly_payment: Decimal
    bi_weekly_payment: Decimal | None = None
    total_interest: Decimal
    total_cost: Decimal
    payment_frequency: str
    amortization_years: int


class AmortizationYearResponse(BaseModel):
    year: int
    principal_payment: Decimal
    interest_payment: Decimal
    total_payment: Decimal
    balance: Decimal
    cumulative_interest: Decimal


class ClosingCostsResponse(BaseModel):
    land_transfer_tax: Decimal
    additional_tax: Decimal
    legal_fees: Decimal
    title_insurance: Decimal
    home_inspection: Decimal
    appraisal: Decimal
    survey_fee: Decimal
    first_time_buyer_rebate: Decimal
    provincial_rebate: Decimal
    municipal_rebate: Decimal
    total: Decimal


class MortgageInsuranceResponse(BaseModel):
    premium: Decimal
    rate: Decimal
    is_required: bool


class CalculationRecordResponse(BaseModel):
    """Flattened fields a calculation store persists."""
    home_price: Decimal
    down_payment: Decimal
    interest_rate: Decimal
    amortization_years: int
    payment_frequency: str
    province: str
    city: str
    is_first_time_buyer: bool
    monthly_payment: Decimal
    total_interest: Decimal


class CalculateResponse(BaseModel):
    payment: PaymentResponse
    schedule: list[AmortizationYearResponse]
    closing_costs: ClosingCostsResponse | None = None
    mortgage_insurance: MortgageInsuranceResponse
    cash_to_close: Decimal
    record: CalculationRecordResponse


class AffordabilityResponse(BaseModel):
    max_affordable_price: Decimal
    max_monthly_payment: Decimal
    gds_ratio: Decimal
    tds_ratio: Decimal
    is_within_budget: bool


class RentVsBuyYearResponse(BaseModel):
    year: int
    cumulative_rent: Decimal
    cumulative_ownership: Decimal
    difference: Decimal


class RentVsBuyResponse(BaseModel):
    total_rent_paid: Decimal
    total_ownership_cost: Decimal
    net_benefit: Decimal
    yearly_comparison: list[RentVsBuyYearResponse]


class InvestmentResponse(BaseModel):
    monthly_cash_flow: Decimal
    cap_rate: Decimal
    roi: Decimal
    break_even_rent: Decimal
    total_monthly_expenses: Decimal
    net_operating_income: Decimal
