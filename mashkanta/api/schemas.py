"""Pydantic schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

from mashkanta.models.mix import Mix, Track, TrackType
from mashkanta.models.results import MixSummary, TrackCalculation


# ---- Request schemas ----

class TrackIn(BaseModel):
    id: str
    name: str = ""
    type: TrackType = TrackType.FIXED
    amount: Decimal = Field(..., ge=0, description="Principal in ILS")
    interest_rate: Decimal = Field(..., ge=0, description="Annual rate in percent")
    years: int = Field(..., gt=0, le=50)
    percentage: Decimal = Field(Decimal("0"), ge=0, le=100)

    def to_track(self) -> Track:
        return Track(
            id=self.id,
            name=self.name or self.id,
            type=self.type,
            amount=self.amount,
            interest_rate=self.interest_rate,
            years=self.years,
            percentage=self.percentage,
        )


class MixIn(BaseModel):
    id: str
    name: str = ""
    total_amount: Decimal = Field(..., ge=0)
    tracks: list[TrackIn] = Field(default_factory=list)
    notes: str = ""
    created_at: datetime | None = None

    def to_mix(self) -> Mix:
        extra = {"created_at": self.created_at} if self.created_at else {}
        return Mix(
            id=self.id,
            name=self.name or self.id,
            total_amount=self.total_amount,
            tracks=tuple(t.to_track() for t in self.tracks),
            notes=self.notes,
            **extra,
        )


class CompareRequest(BaseModel):
    mixes: list[MixIn]


class RateScenarioRequest(BaseModel):
    mix: MixIn
    rate_change: Decimal = Field(Decimal("0"), ge=-5, le=10, description="Percentage points")
    monthly_income: Decimal | None = Field(None, gt=0)


class ShockRequest(BaseModel):
    mix: MixIn
    scenario: Literal["mild", "moderate", "severe"] | None = None
    increase: Decimal = Field(Decimal("1"), ge=0, le=10, description="Used when no scenario is named")


# ---- Response schemas ----

class TrackTypeResponse(BaseModel):
    type: TrackType
    label: str
    default_rate: Decimal


class AmortizationRowResponse(BaseModel):
    month: int
    balance_start: Decimal
    payment: Decimal
    interest: Decimal
    principal: Decimal
    balance_end: Decimal


class TrackCalculationResponse(BaseModel):
    id: str
    name: str
    type: TrackType
    label: str
    amount: Decimal
    interest_rate: Decimal
    years: int
    monthly_payment: Decimal
    total_interest: Decimal
    total_paid: Decimal
    months: int
    schedule: list[AmortizationRowResponse] | None = None


class MixSummaryResponse(BaseModel):
    total_monthly_payment: Decimal
    total_interest: Decimal
    total_paid: Decimal
    average_rate: Decimal
    weighted_average_years: Decimal


class MixCalculationResponse(BaseModel):
    id: str
    name: str
    notes: str
    total_amount: Decimal
    tracks_amount: Decimal
    amount_balanced: bool
    summary: MixSummaryResponse
    tracks: list[TrackCalculationResponse]


class ComparisonResponse(BaseModel):
    mixes: list[MixCalculationResponse]
    best_by_monthly_payment: str
    best_by_total_cost: str
    best_by_total_interest: str
    monthly_difference: Decimal
    total_difference: Decimal
    interest_difference: Decimal


class SeriesPointResponse(BaseModel):
    month: int
    year: int
    total: Decimal
    by_track: dict[str, Decimal]


class BreakdownPointResponse(BaseModel):
    month: int
    year: int
    interest: Decimal
    principal: Decimal
    interest_pct: Decimal
    principal_pct: Decimal


class SeriesResponse(BaseModel):
    monthly_payment: list[SeriesPointResponse]
    debt_balance: list[SeriesPointResponse]
    blended_rate: list[SeriesPointResponse]
    principal_interest: list[BreakdownPointResponse]


class ScenarioOutcomeResponse(BaseModel):
    name: str
    rate_change: Decimal
    summary: MixSummaryResponse
    debt_to_income: Decimal | None = None
    risk: str | None = None
    risk_label: str | None = None


class RateScenarioResponse(BaseModel):
    rate_change_locked: bool
    outcomes: list[ScenarioOutcomeResponse]


class ShockResponse(BaseModel):
    increase: Decimal
    affected_amount: Decimal
    base_payment: Decimal
    new_payment: Decimal
    payment_increase: Decimal
    percentage_increase: Decimal
    total_extra_cost: Decimal


# ---- Engine -> response ----

def summary_response(s: MixSummary) -> MixSummaryResponse:
    return MixSummaryResponse(
        total_monthly_payment=s.total_monthly_payment,
        total_interest=s.total_interest,
        total_paid=s.total_paid,
        average_rate=s.average_rate,
        weighted_average_years=s.weighted_average_years,
    )


def track_response(tc: TrackCalculation, include_schedule: bool = False) -> TrackCalculationResponse:
    t = tc.track
    schedule = None
    if include_schedule:
        schedule = [
            AmortizationRowResponse(
                month=r.month,
                balance_start=r.balance_start,
                payment=r.payment,
                interest=r.interest,
                principal=r.principal,
                balance_end=r.balance_end,
            )
            for r in tc.schedule
        ]
    return TrackCalculationResponse(
        id=t.id,
        name=t.name,
        type=t.type,
        label=t.label,
        amount=t.amount,
        interest_rate=t.interest_rate,
        years=t.years,
        monthly_payment=tc.monthly_payment,
        total_interest=tc.total_interest,
        total_paid=tc.total_paid,
        months=tc.months,
        schedule=schedule,
    )
