"""FastAPI dependency injection."""

from canmortgage.engine.closing_costs import DEFAULT_FEES, JURISDICTIONS
from canmortgage.models.closing import FeeSchedule, JurisdictionProfile
from canmortgage.models.loan import Province


def get_jurisdictions() -> dict[Province, JurisdictionProfile]:
    return JURISDICTIONS


def get_fee_schedule() -> FeeSchedule:
    return DEFAULT_FEES
