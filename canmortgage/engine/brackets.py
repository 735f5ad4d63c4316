"""Marginal bracket computation, the same primitive behind every transfer tax table."""

from dataclasses import dataclass
from decimal import Decimal

from canmortgage.models.closing import BracketSchedule


@dataclass(frozen=True)
class BracketSlice:
    lower: Decimal
    upper: Decimal | None
    rate: Decimal
    taxable: Decimal  # Portion of the amount falling inside this bracket
    tax: Decimal


def validate_schedule(schedule: BracketSchedule) -> None:
    """Brackets must be ascending with a single unbounded top bracket."""
    if not schedule.brackets:
        raise ValueError(f"{schedule.name}: schedule has no brackets")
    previous = Decimal("0")
    for i, bracket in enumerate(schedule.brackets):
        is_last = i == len(schedule.brackets) - 1
        if bracket.rate < 0:
            raise ValueError(f"{schedule.name}: negative rate in bracket {i + 1}")
        if bracket.upper is None:
            if not is_last:
                raise ValueError(f"{schedule.name}: unbounded bracket {i + 1} is not last")
            continue
        if bracket.upper <= previous:
            raise ValueError(f"{schedule.name}: bracket {i + 1} upper bound not ascending")
        previous = bracket.upper
    if schedule.brackets[-1].upper is not None:
        raise ValueError(f"{schedule.name}: top bracket must be unbounded")


def bracket_breakdown(amount: Decimal, schedule: BracketSchedule) -> list[BracketSlice]:
    """Split `amount` across the brackets it reaches. Unrounded."""
    validate_schedule(schedule)
    slices: list[BracketSlice] = []
    lower = Decimal("0")
    for bracket in schedule.brackets:
        if amount <= lower:
            break
        top = amount if bracket.upper is None else min(amount, bracket.upper)
        taxable = top - lower
        slices.append(BracketSlice(
            lower=lower,
            upper=bracket.upper,
            rate=bracket.rate,
            taxable=taxable,
            tax=taxable * bracket.rate,
        ))
        if bracket.upper is None:
            break
        lower = bracket.upper
    return slices


def apply_brackets(amount: Decimal, schedule: BracketSchedule) -> Decimal:
    """Tax = sum over reached brackets of (min(amount, upper) - lower) * rate."""
    return sum((s.tax for s in bracket_breakdown(amount, schedule)), Decimal("0"))
