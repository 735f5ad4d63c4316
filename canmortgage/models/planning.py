from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class MortgageInsurance:
    premium: Decimal
    rate: Decimal
    is_required: bool


@dataclass(frozen=True)
class LoanAmountBreakdown:
    base_loan_amount: Decimal
    insurance_premium: Decimal
    total_loan_amount: Decimal


@dataclass(frozen=True)
class AffordabilityResult:
    max_affordable_price: Decimal
    max_monthly_payment: Decimal
    gds_ratio: Decimal  # Percent, e.g. Decimal("32.00")
    tds_ratio: Decimal
    is_within_budget: bool


@dataclass(frozen=True)
class RentVsBuyYear:
    year: int
    cumulative_rent: Decimal
    cumulative_ownership: Decimal
    difference: Decimal  # Ownership - rent; positive = owning cost more so far


@dataclass(frozen=True)
class RentVsBuyResult:
    total_rent_paid: Decimal
    total_ownership_cost: Decimal
    net_benefit: Decimal  # Rent - ownership; positive favours buying
    yearly_comparison: list[RentVsBuyYear] = field(default_factory=list)


@dataclass(frozen=True)
class MonthlyExpenses:
    taxes: Decimal = Decimal("0")
    insurance: Decimal = Decimal("0")
    condo_fees: Decimal = Decimal("0")
    maintenance: Decimal = Decimal("0")
    other: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        return self.taxes + self.insurance + self.condo_fees + self.maintenance + self.other


@dataclass(frozen=True)
class InvestmentMetrics:
    monthly_cash_flow: Decimal
    cap_rate: Decimal  # Percent
    roi: Decimal  # Cash-on-cash, percent
    break_even_rent: Decimal
    total_monthly_expenses: Decimal
    net_operating_income: Decimal  # Annual
