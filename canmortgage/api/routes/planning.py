"""Planning tools: affordability, rent vs buy, rental investment metrics."""

import logging

from fastapi import APIRouter, HTTPException

from canmortgage.api.schemas import (
    AffordabilityRequest,
    AffordabilityResponse,
    InvestmentRequest,
    InvestmentResponse,
    RentVsBuyRequest,
    RentVsBuyResponse,
    RentVsBuyYearResponse,
)
from canmortgage.engine.affordability import calculate_affordability
from canmortgage.engine.errors import InvalidInputError
from canmortgage.engine.investment import calculate_investment_metrics
from canmortgage.engine.rent_vs_buy import calculate_rent_vs_buy
from canmortgage.models.planning import MonthlyExpenses

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["planning"])


@router.post("/affordability", response_model=AffordabilityResponse)
async def affordability(req: AffordabilityRequest):
    try:
        result = calculate_affordability(
            annual_income=req.annual_income,
            monthly_debts=req.monthly_debts,
            down_payment=req.down_payment,
            annual_rate_pct=req.interest_rate,
            amortization_years=req.amortization_years,
        )
    except InvalidInputError as e:
        logger.warning("Rejected affordability input (%s): %s", e.field, e)
        raise HTTPException(status_code=400, detail=str(e))
    return AffordabilityResponse(
        max_affordable_price=result.max_affordable_price,
        max_monthly_payment=result.max_monthly_payment,
        gds_ratio=result.gds_ratio,
        tds_ratio=result.tds_ratio,
        is_within_budget=result.is_within_budget,
    )


@router.post("/rent-vs-buy", response_model=RentVsBuyResponse)
async def rent_vs_buy(req: RentVsBuyRequest):
    try:
        result = calculate_rent_vs_buy(
            monthly_rent=req.monthly_rent,
            annual_rent_increase_pct=req.annual_rent_increase,
            comparison_years=req.comparison_years,
            down_payment=req.down_payment,
            monthly_payment=req.monthly_payment,
        )
    except InvalidInputError as e:
        logger.warning("Rejected rent-vs-buy input (%s): %s", e.field, e)
        raise HTTPException(status_code=400, detail=str(e))
    return RentVsBuyResponse(
        total_rent_paid=result.total_rent_paid,
        total_ownership_cost=result.total_ownership_cost,
        net_benefit=result.net_benefit,
        yearly_comparison=[
            RentVsBuyYearResponse(
                year=y.year,
                cumulative_rent=y.cumulative_rent,
                cumulative_ownership=y.cumulative_ownership,
                difference=y.difference,
            )
            for y in result.yearly_comparison
        ],
    )


@router.post("/investment", response_model=InvestmentResponse)
async def investment(req: InvestmentRequest):
    e = req.monthly_expenses
    expenses = MonthlyExpenses(
        taxes=e.taxes,
        insurance=e.insurance,
        condo_fees=e.condo_fees,
        maintenance=e.maintenance,
        other=e.other,
    )
    try:
        result = calculate_investment_metrics(
            home_price=req.home_price,
            down_payment=req.down_payment,
            monthly_payment=req.monthly_payment,
            monthly_rent=req.monthly_rent,
            expenses=expenses,
        )
    except InvalidInputError as err:
        logger.warning("Rejected investment input (%s): %s", err.field, err)
        raise HTTPException(status_code=400, detail=str(err))
    return InvestmentResponse(
        monthly_cash_flow=result.monthly_cash_flow,
        cap_rate=result.cap_rate,
        roi=result.roi,
        break_even_rent=result.break_even_rent,
        total_monthly_expenses=result.total_monthly_expenses,
        net_operating_income=result.net_operating_income,
    )
