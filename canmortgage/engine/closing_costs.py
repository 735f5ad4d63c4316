"""Jurisdiction-specific closing costs for a home purchase.

Transfer taxes go through the marginal bracket primitive with per-jurisdiction
tables. Professional fees are flat or percentage-of-price estimates.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from canmortgage.engine.brackets import apply_brackets
from canmortgage.engine.errors import InvalidInputError
from canmortgage.engine.validation import (
    check_home_price,
    check_jurisdiction,
    to_decimal,
)
from canmortgage.models.closing import (
    BracketSchedule,
    ClosingCostBreakdown,
    FeeSchedule,
    FirstTimeBuyerRebate,
    JurisdictionProfile,
    MunicipalTax,
    TaxBracket,
)
from canmortgage.models.loan import City, Province

TWO_PLACES = Decimal("0.01")

ONTARIO_LAND_TRANSFER_TAX = BracketSchedule(
    name="Ontario Land Transfer Tax",
    brackets=(
        TaxBracket(upper=Decimal("55000"), rate=Decimal("0.005")),
        TaxBracket(upper=Decimal("250000"), rate=Decimal("0.01")),
        TaxBracket(upper=Decimal("400000"), rate=Decimal("0.015")),
        TaxBracket(upper=Decimal("2000000"), rate=Decimal("0.02")),
        TaxBracket(upper=None, rate=Decimal("0.025")),
    ),
)

TORONTO_MUNICIPAL_LAND_TRANSFER_TAX = BracketSchedule(
    name="Toronto Municipal Land Transfer Tax",
    brackets=(
        TaxBracket(upper=Decimal("55000"), rate=Decimal("0.005")),
        TaxBracket(upper=Decimal("400000"), rate=Decimal("0.01")),
        TaxBracket(upper=Decimal("2000000"), rate=Decimal("0.02")),
        TaxBracket(upper=None, rate=Decimal("0.025")),
    ),
)

# Top bracket is 3% general rate + 2% further residential rate
BC_PROPERTY_TRANSFER_TAX = BracketSchedule(
    name="BC Property Transfer Tax",
    brackets=(
        TaxBracket(upper=Decimal("200000"), rate=Decimal("0.01")),
        TaxBracket(upper=Decimal("2000000"), rate=Decimal("0.02")),
        TaxBracket(upper=Decimal("3000000"), rate=Decimal("0.03")),
        TaxBracket(upper=None, rate=Decimal("0.05")),
    ),
)

ONTARIO_FIRST_TIME_BUYER_REBATE = FirstTimeBuyerRebate(
    max_amount=Decimal("4000"), price_ceiling=Decimal("368000"),
)
TORONTO_FIRST_TIME_BUYER_REBATE = FirstTimeBuyerRebate(max_amount=Decimal("4475"))
BC_FIRST_TIME_BUYER_REBATE = FirstTimeBuyerRebate(
    max_amount=Decimal("8000"), price_ceiling=Decimal("500000"),
)

JURISDICTIONS: dict[Province, JurisdictionProfile] = {
    Province.ONTARIO: JurisdictionProfile(
        province=Province.ONTARIO,
        land_transfer_tax=ONTARIO_LAND_TRANSFER_TAX,
        provincial_rebate=ONTARIO_FIRST_TIME_BUYER_REBATE,
        municipal_taxes={
            City.TORONTO: MunicipalTax(
                schedule=TORONTO_MUNICIPAL_LAND_TRANSFER_TAX,
                rebate=TORONTO_FIRST_TIME_BUYER_REBATE,
            ),
        },
    ),
    Province.BC: JurisdictionProfile(
        province=Province.BC,
        land_transfer_tax=BC_PROPERTY_TRANSFER_TAX,
        provincial_rebate=BC_FIRST_TIME_BUYER_REBATE,
    ),
}

DEFAULT_FEES = FeeSchedule()


def _rebate(tax: Decimal, home_price: Decimal, rule: FirstTimeBuyerRebate | None) -> Decimal:
    """Rebate offsets only its own tax and never exceeds it."""
    if rule is None or not rule.applies_to(home_price):
        return Decimal("0")
    return min(tax, rule.max_amount)


def legal_fees(home_price: Decimal, fees: FeeSchedule = DEFAULT_FEES) -> Decimal:
    """Percentage of price rounded to whole dollars, plus a base fee."""
    return (home_price * fees.legal_pct).quantize(Decimal("1"), ROUND_HALF_UP) + fees.legal_base


def title_insurance(home_price: Decimal, fees: FeeSchedule = DEFAULT_FEES) -> Decimal:
    premium = home_price * fees.title_insurance_pct
    return min(max(premium, fees.title_insurance_min), fees.title_insurance_max)


def estimate_closing_costs(
    home_price,
    province,
    city,
    is_first_time_buyer: bool = False,
    jurisdictions: dict[Province, JurisdictionProfile] | None = None,
    fees: FeeSchedule = DEFAULT_FEES,
) -> ClosingCostBreakdown:
    """Estimate one-time purchase costs for a home in the given jurisdiction.

    Args:
        home_price: Purchase price
        province: Province enum or its value ("ontario", "bc")
        city: City enum or its value ("toronto", "vancouver"); must lie in `province`
        is_first_time_buyer: Apply first-time buyer rebates where eligible
        jurisdictions: Tax tables by province (defaults to JURISDICTIONS)
        fees: Flat/percentage fee estimates

    Raises:
        InvalidInputError: non-positive price, unknown or mismatched jurisdiction.
    """
    price = to_decimal(home_price, "home_price")
    check_home_price(price)
    prov, cty = check_jurisdiction(province, city)

    tables = JURISDICTIONS if jurisdictions is None else jurisdictions
    profile = tables.get(prov)
    if profile is None:
        raise InvalidInputError(f"No tax tables for province {prov.value!r}", "province")

    land_transfer_tax = apply_brackets(price, profile.land_transfer_tax)
    municipal = profile.municipal_taxes.get(cty)
    additional_tax = apply_brackets(price, municipal.schedule) if municipal else Decimal("0")

    provincial_rebate = Decimal("0")
    municipal_rebate = Decimal("0")
    if is_first_time_buyer:
        provincial_rebate = _rebate(land_transfer_tax, price, profile.provincial_rebate)
        if municipal is not None:
            municipal_rebate = _rebate(additional_tax, price, municipal.rebate)

    def q(amount: Decimal) -> Decimal:
        return amount.quantize(TWO_PLACES, ROUND_HALF_UP)

    items = {
        "land_transfer_tax": q(land_transfer_tax),
        "additional_tax": q(additional_tax),
        "legal_fees": q(legal_fees(price, fees)),
        "title_insurance": q(title_insurance(price, fees)),
        "home_inspection": q(fees.home_inspection),
        "appraisal": q(fees.appraisal),
        "survey_fee": q(fees.survey_fee),
    }
    provincial_rebate = q(provincial_rebate)
    municipal_rebate = q(municipal_rebate)
    rebate = provincial_rebate + municipal_rebate
    total = max(Decimal("0"), sum(items.values(), Decimal("0")) - rebate)

    return ClosingCostBreakdown(
        **items,
        first_time_buyer_rebate=rebate,
        total=total,
        provincial_rebate=provincial_rebate,
        municipal_rebate=municipal_rebate,
    )
