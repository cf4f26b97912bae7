"""Scenario routes: rate moves and interest shocks."""

from fastapi import APIRouter

from mashkanta.api.schemas import (
    RateScenarioRequest,
    RateScenarioResponse,
    ScenarioOutcomeResponse,
    ShockRequest,
    ShockResponse,
    summary_response,
)
from mashkanta.models.results import RISK_LEVEL_LABELS
from mashkanta.engine.scenario import analyze_rate_scenarios, interest_shock, SHOCK_SCENARIOS

router = APIRouter(prefix="/api/v1/scenarios", tags=["scenarios"])


@router.post("/rates", response_model=RateScenarioResponse)
async def rate_scenarios(req: RateScenarioRequest):
    analysis = analyze_rate_scenarios(
        req.mix.to_mix(),
        rate_change=req.rate_change,
        monthly_income=req.monthly_income,
    )
    return RateScenarioResponse(
        rate_change_locked=analysis.rate_change_locked,
        outcomes=[
            ScenarioOutcomeResponse(
                name=o.name,
                rate_change=o.rate_change,
                summary=summary_response(o.calculation.summary),
                debt_to_income=o.debt_to_income,
                risk=o.risk.value if o.risk else None,
                risk_label=RISK_LEVEL_LABELS[o.risk] if o.risk else None,
            )
            for o in analysis.outcomes
        ],
    )


@router.post("/shock", response_model=ShockResponse)
async def shock(req: ShockRequest):
    increase = SHOCK_SCENARIOS[req.scenario] if req.scenario else req.increase
    result = interest_shock(req.mix.to_mix(), increase)
    return ShockResponse(
        increase=result.increase,
        affected_amount=result.affected_amount,
        base_payment=result.base_payment,
        new_payment=result.new_payment,
        payment_increase=result.payment_increase,
        percentage_increase=result.percentage_increase,
        total_extra_cost=result.total_extra_cost,
    )
