"""Calculator routes: payment, schedule, closing costs, and the combined calculation."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from canmortgage.api.deps import get_fee_schedule, get_jurisdictions
from canmortgage.api.schemas import (
    AmortizationYearResponse,
    CalculateRequest,
    CalculateResponse,
    CalculationRecordResponse,
    ClosingCostsRequest,
    ClosingCostsResponse,
    MortgageInsuranceResponse,
    PaymentRequest,
    PaymentResponse,
    ScheduleRequest,
)
from canmortgage.engine.amortization import generate_schedule
from canmortgage.engine.calculation import build_parameters, run_calculation, to_record
from canmortgage.engine.closing_costs import estimate_closing_costs
from canmortgage.engine.errors import InvalidInputError
from canmortgage.engine.payment import compute_payment
from canmortgage.models.closing import ClosingCostBreakdown, FeeSchedule, JurisdictionProfile
from canmortgage.models.loan import AmortizationYearRow, PaymentFrequency, PaymentResult, Province

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["calculator"])


def _bad_request(e: InvalidInputError) -> HTTPException:
    logger.warning("Rejected calculation input (%s): %s", e.field, e)
    return HTTPException(status_code=400, detail=str(e))


def _payment_response(p: PaymentResult) -> PaymentResponse:
    return PaymentResponse(
        loan_amount=p.loan_amount,
        periodic_payment=p.periodic_payment,
        monthly_payment=p.monthly_payment,
        bi_weekly_payment=(
            p.periodic_payment if p.payment_frequency is PaymentFrequency.BI_WEEKLY else None
        ),
        total_interest=p.total_interest,
        total_cost=p.total_cost,
        payment_frequency=p.payment_frequency.value,
        amortization_years=p.amortization_years,
    )


def _schedule_response(rows: list[AmortizationYearRow]) -> list[AmortizationYearResponse]:
    return [
        AmortizationYearResponse(
            year=r.year,
            principal_payment=r.principal_payment,
            interest_payment=r.interest_payment,
            total_payment=r.total_payment,
            balance=r.balance,
            cumulative_interest=r.cumulative_interest,
        )
        for r in rows
    ]


def _closing_response(c: ClosingCostBreakdown) -> ClosingCostsResponse:
    return ClosingCostsResponse(
        land_transfer_tax=c.land_transfer_tax,
        additional_tax=c.additional_tax,
        legal_fees=c.legal_fees,
        title_insurance=c.title_insurance,
        home_inspection=c.home_inspection,
        appraisal=c.appraisal,
        survey_fee=c.survey_fee,
        first_time_buyer_rebate=c.first_time_buyer_rebate,
        provincial_rebate=c.provincial_rebate,
        municipal_rebate=c.municipal_rebate,
        total=c.total,
    )


@router.post("/calculate", response_model=CalculateResponse)
async def calculate(
    req: CalculateRequest,
    jurisdictions: dict[Province, JurisdictionProfile] = Depends(get_jurisdictions),
    fees: FeeSchedule = Depends(get_fee_schedule),
):
    """Primary endpoint: form values → payment, yearly schedule, closing costs."""
    try:
        params = build_parameters(
            home_price=req.home_price,
            down_payment=req.down_payment,
            annual_rate_pct=req.interest_rate,
            amortization_years=req.amortization_years,
            payment_frequency=req.payment_frequency,
            province=req.province,
            city=req.city,
            is_first_time_buyer=req.is_first_time_buyer,
        )
        result = run_calculation(
            params,
            include_closing_costs=req.include_closing_costs,
            jurisdictions=jurisdictions,
            fees=fees,
        )
    except InvalidInputError as e:
        raise _bad_request(e)

    logger.debug(
        "Calculated %s payment %s on loan %s",
        params.payment_frequency.value, result.payment.periodic_payment, result.payment.loan_amount,
    )
    ins = result.insurance
    return CalculateResponse(
        payment=_payment_response(result.payment),
        schedule=_schedule_response(result.schedule),
        closing_costs=_closing_response(result.closing_costs) if result.closing_costs else None,
        mortgage_insurance=MortgageInsuranceResponse(
            premium=ins.premium, rate=ins.rate, is_required=ins.is_required,
        ),
        cash_to_close=result.cash_to_close,
        record=CalculationRecordResponse(**to_record(result)),
    )


@router.post("/payment", response_model=PaymentResponse)
async def payment(req: PaymentRequest):
    try:
        result = compute_payment(
            req.home_price,
            req.down_payment,
            req.interest_rate,
            req.amortization_years,
            req.payment_frequency,
        )
    except InvalidInputError as e:
        raise _bad_request(e)
    return _payment_response(result)


@router.post("/schedule", response_model=list[AmortizationYearResponse])
async def schedule(req: ScheduleRequest):
    try:
        rows = generate_schedule(
            req.loan_amount, req.monthly_payment, req.monthly_rate, req.amortization_years
        )
    except InvalidInputError as e:
        raise _bad_request(e)
    return _schedule_response(rows)


@router.post("/closing-costs", response_model=ClosingCostsResponse)
async def closing_costs(
    req: ClosingCostsRequest,
    jurisdictions: dict[Province, JurisdictionProfile] = Depends(get_jurisdictions),
    fees: FeeSchedule = Depends(get_fee_schedule),
):
    try:
        breakdown = estimate_closing_costs(
            req.home_price,
            req.province,
            req.city,
            req.is_first_time_buyer,
            jurisdictions=jurisdictions,
            fees=fees,
        )
    except InvalidInputError as e:
        raise _bad_request(e)
    return _closing_response(breakdown)
