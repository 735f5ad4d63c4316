"""Input coercion and precondition checks shared by the engine functions."""

from decimal import Decimal, InvalidOperation
from enum import Enum

from canmortgage.engine.errors import InvalidInputError
from canmortgage.models.loan import City, PaymentFrequency, Province

# Each city belongs to exactly one province
CITY_PROVINCE: dict[City, Province] = {
    City.TORONTO: Province.ONTARIO,
    City.VANCOUVER: Province.BC,
}


def to_decimal(value, field: str) -> Decimal:
    """Convert int/float/str/Decimal to Decimal via str (no binary float noise)."""
    if isinstance(value, bool):
        raise InvalidInputError(f"{field} must be a number, got bool", field)
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, TypeError, ValueError):
            raise InvalidInputError(f"{field} must be a number, got {value!r}", field) from None
    if not result.is_finite():
        raise InvalidInputError(f"{field} must be finite, got {value!r}", field)
    return result


def to_enum(enum_cls: type[Enum], value, field: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise InvalidInputError(
            f"Unrecognized {field} {value!r} (expected one of: {allowed})", field
        ) from None


def check_home_price(home_price: Decimal) -> None:
    if home_price <= 0:
        raise InvalidInputError("Home price must be greater than zero", "home_price")


def check_down_payment(home_price: Decimal, down_payment: Decimal) -> None:
    if down_payment < 0:
        raise InvalidInputError("Down payment cannot be negative", "down_payment")
    if down_payment >= home_price:
        raise InvalidInputError(
            "Down payment must be less than the home price", "down_payment"
        )


def check_rate(annual_rate_pct: Decimal) -> None:
    if annual_rate_pct < 0:
        raise InvalidInputError("Interest rate cannot be negative", "annual_rate_pct")


def check_amortization_years(amortization_years) -> int:
    if isinstance(amortization_years, bool) or not isinstance(amortization_years, int):
        raise InvalidInputError(
            f"Amortization period must be a whole number of years, got {amortization_years!r}",
            "amortization_years",
        )
    if amortization_years <= 0:
        raise InvalidInputError(
            "Amortization period must be at least one year", "amortization_years"
        )
    return amortization_years


def check_jurisdiction(province, city) -> tuple[Province, City]:
    """Resolve and cross-check province/city. Mismatches are rejected, never corrected."""
    prov = to_enum(Province, province, "province")
    cty = to_enum(City, city, "city")
    if CITY_PROVINCE[cty] is not prov:
        raise InvalidInputError(
            f"City {cty.value!r} is not in province {prov.value!r}", "city"
        )
    return prov, cty


def to_frequency(value) -> PaymentFrequency:
    return to_enum(PaymentFrequency, value, "payment_frequency")
