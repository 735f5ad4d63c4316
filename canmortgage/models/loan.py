from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PaymentFrequency(Enum):
    MONTHLY = "monthly"
    BI_WEEKLY = "bi-weekly"


class Province(Enum):
    ONTARIO = "ontario"
    BC = "bc"


class City(Enum):
    TORONTO = "toronto"
    VANCOUVER = "vancouver"


@dataclass(frozen=True)
class LoanParameters:
    home_price: Decimal
    down_payment: Decimal
    annual_rate_pct: Decimal  # e.g. Decimal("5.25") for 5.25%
    amortization_years: int
    payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY
    province: Province = Province.ONTARIO
    city: City = City.TORONTO
    is_first_time_buyer: bool = False

    @property
    def loan_amount(self) -> Decimal:
        return self.home_price - self.down_payment


@dataclass(frozen=True)
class PaymentResult:
    loan_amount: Decimal
    periodic_payment: Decimal  # Halved for bi-weekly display
    monthly_payment: Decimal  # Full monthly payment, rounded
    total_interest: Decimal
    total_cost: Decimal
    payment_frequency: PaymentFrequency
    amortization_years: int

    # Unrounded values for downstream simulation
    monthly_rate: Decimal
    exact_monthly_payment: Decimal


@dataclass(frozen=True)
class AmortizationYearRow:
    year: int
    principal_payment: Decimal
    interest_payment: Decimal
    total_payment: Decimal
    balance: Decimal  # Remaining principal at year end
    cumulative_interest: Decimal
