from dataclasses import dataclass, field
from decimal import Decimal

from canmortgage.models.loan import City, Province


@dataclass(frozen=True)
class TaxBracket:
    """One marginal slice: the rate applies from the previous upper bound up to `upper`."""
    upper: Decimal | None  # None = unbounded top bracket
    rate: Decimal


@dataclass(frozen=True)
class BracketSchedule:
    name: str
    brackets: tuple[TaxBracket, ...]


@dataclass(frozen=True)
class FirstTimeBuyerRebate:
    max_amount: Decimal
    price_ceiling: Decimal | None = None  # None = no price limit

    def applies_to(self, home_price: Decimal) -> bool:
        return self.price_ceiling is None or home_price <= self.price_ceiling


@dataclass(frozen=True)
class MunicipalTax:
    schedule: BracketSchedule
    rebate: FirstTimeBuyerRebate | None = None


@dataclass(frozen=True)
class JurisdictionProfile:
    province: Province
    land_transfer_tax: BracketSchedule
    provincial_rebate: FirstTimeBuyerRebate | None = None
    municipal_taxes: dict[City, MunicipalTax] = field(default_factory=dict)


@dataclass(frozen=True)
class FeeSchedule:
    """Flat and percentage-of-price estimates. Not bracketed."""
    legal_pct: Decimal = Decimal("0.001")
    legal_base: Decimal = Decimal("1500")
    title_insurance_pct: Decimal = Decimal("0.0005")
    title_insurance_min: Decimal = Decimal("250")
    title_insurance_max: Decimal = Decimal("1500")
    home_inspection: Decimal = Decimal("500")
    appraisal: Decimal = Decimal("400")
    survey_fee: Decimal = Decimal("1000")


@dataclass(frozen=True)
class ClosingCostBreakdown:
    land_transfer_tax: Decimal
    additional_tax: Decimal  # Municipal surtax, 0 outside Toronto
    legal_fees: Decimal
    title_insurance: Decimal
    home_inspection: Decimal
    appraisal: Decimal
    survey_fee: Decimal
    first_time_buyer_rebate: Decimal
    total: Decimal

    provincial_rebate: Decimal = Decimal("0")
    municipal_rebate: Decimal = Decimal("0")

    @property
    def transfer_taxes(self) -> Decimal:
        return self.land_transfer_tax + self.additional_tax

    @property
    def fees(self) -> Decimal:
        return (
            self.legal_fees + self.title_insurance + self.home_inspection
            + self.appraisal + self.survey_fee
        )
