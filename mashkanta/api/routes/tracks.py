"""Track routes: rate defaults and single-track schedules."""

from fastapi import APIRouter

from mashkanta.api.schemas import TrackIn, TrackTypeResponse, TrackCalculationResponse, track_response
from mashkanta.models.mix import TrackType, TRACK_TYPE_LABELS, DEFAULT_INTEREST_RATES
from mashkanta.engine.track import calculate_track

router = APIRouter(prefix="/api/v1/tracks", tags=["tracks"])


@router.get("/types", response_model=list[TrackTypeResponse])
async def list_track_types():
    return [
        TrackTypeResponse(
            type=t,
            label=TRACK_TYPE_LABELS[t],
            default_rate=DEFAULT_INTEREST_RATES[t],
        )
        for t in TrackType
    ]


@router.post("/schedule", response_model=TrackCalculationResponse)
async def track_schedule(req: TrackIn):
    """Monthly payment, totals and full amortization schedule for one track."""
    return track_response(calculate_track(req.to_track()), include_schedule=True)
