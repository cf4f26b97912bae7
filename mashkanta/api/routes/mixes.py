"""Mix routes: calculation, comparison, chart series and CSV export."""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from mashkanta.api.schemas import (
    MixIn,
    CompareRequest,
    MixCalculationResponse,
    ComparisonResponse,
    SeriesResponse,
    SeriesPointResponse,
    BreakdownPointResponse,
    summary_response,
    track_response,
)
from mashkanta.models.results import MixCalculation
from mashkanta.engine.mix import calculate_mix, compare_mixes, is_amount_balanced
from mashkanta.engine.series import (
    monthly_payment_series,
    debt_balance_series,
    blended_rate_series,
    principal_interest_series,
)
from mashkanta.export import tracks_csv

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/mixes", tags=["mixes"])


def _calc_to_response(calc: MixCalculation, include_schedule: bool = False) -> MixCalculationResponse:
    mix = calc.mix
    return MixCalculationResponse(
        id=mix.id,
        name=mix.name,
        notes=mix.notes,
        total_amount=mix.total_amount,
        tracks_amount=mix.tracks_amount,
        amount_balanced=is_amount_balanced(mix),
        summary=summary_response(calc.summary),
        tracks=[track_response(tc, include_schedule) for tc in calc.track_calculations],
    )


@router.post("/calculate", response_model=MixCalculationResponse)
async def calculate(req: MixIn, include_schedule: bool = False):
    return _calc_to_response(calculate_mix(req.to_mix()), include_schedule)


@router.post("/compare", response_model=ComparisonResponse)
async def compare(req: CompareRequest):
    try:
        comparison = compare_mixes([m.to_mix() for m in req.mixes])
    except ValueError as e:
        logger.info("Comparison rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return ComparisonResponse(
        mixes=[_calc_to_response(c) for c in comparison.calculations],
        best_by_monthly_payment=comparison.best_by_monthly_payment.mix.id,
        best_by_total_cost=comparison.best_by_total_cost.mix.id,
        best_by_total_interest=comparison.best_by_total_interest.mix.id,
        monthly_difference=comparison.monthly_difference,
        total_difference=comparison.total_difference,
        interest_difference=comparison.interest_difference,
    )


@router.post("/series", response_model=SeriesResponse)
async def series(req: MixIn):
    """All chart series for a mix, aligned by month."""
    calcs = list(calculate_mix(req.to_mix()).track_calculations)

    def points(rows):
        return [
            SeriesPointResponse(month=p.month, year=p.year, total=p.total, by_track=p.by_track)
            for p in rows
        ]

    return SeriesResponse(
        monthly_payment=points(monthly_payment_series(calcs)),
        debt_balance=points(debt_balance_series(calcs)),
        blended_rate=points(blended_rate_series(calcs)),
        principal_interest=[
            BreakdownPointResponse(
                month=p.month,
                year=p.year,
                interest=p.interest,
                principal=p.principal,
                interest_pct=p.interest_pct,
                principal_pct=p.principal_pct,
            )
            for p in principal_interest_series(calcs)
        ],
    )


@router.post("/export", response_class=PlainTextResponse)
async def export(req: MixIn):
    """Per-track breakdown as CSV."""
    calc = calculate_mix(req.to_mix())
    return PlainTextResponse(
        tracks_csv(calc),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{req.id}.csv"'},
    )
