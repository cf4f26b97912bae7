from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from mashkanta.models.mix import Mix, Track


@dataclass(frozen=True)
class AmortizationRow:
    month: int  # 1-based
    balance_start: Decimal
    payment: Decimal
    interest: Decimal
    principal: Decimal
    balance_end: Decimal


@dataclass(frozen=True)
class TrackCalculation:
    track: Track
    monthly_payment: Decimal
    total_interest: Decimal
    total_paid: Decimal
    schedule: tuple[AmortizationRow, ...] = ()

    @property
    def months(self) -> int:
        return len(self.schedule)

    def row(self, month: int) -> AmortizationRow | None:
        """Schedule row for a 1-based month, or None once the track is paid off."""
        if 1 <= month <= len(self.schedule):
            return self.schedule[month - 1]
        return None


@dataclass(frozen=True)
class MixSummary:
    total_monthly_payment: Decimal = Decimal("0")
    total_interest: Decimal = Decimal("0")
    total_paid: Decimal = Decimal("0")
    average_rate: Decimal = Decimal("0")  # Weighted by track amount, annual percent
    weighted_average_years: Decimal = Decimal("0")


@dataclass(frozen=True)
class MixCalculation:
    """Computed view of a mix.

    The input mix is carried untouched; the totals are exposed as properties
    so callers can read either `calc.summary.total_paid` or `calc.total_paid`.
    """
    mix: Mix
    track_calculations: tuple[TrackCalculation, ...]
    summary: MixSummary

    @property
    def total_monthly_payment(self) -> Decimal:
        return self.summary.total_monthly_payment

    @property
    def total_interest(self) -> Decimal:
        return self.summary.total_interest

    @property
    def total_paid(self) -> Decimal:
        return self.summary.total_paid

    @property
    def average_rate(self) -> Decimal:
        return self.summary.average_rate

    @property
    def weighted_average_years(self) -> Decimal:
        return self.summary.weighted_average_years

    @property
    def tracks(self) -> tuple[Track, ...]:
        return tuple(c.track for c in self.track_calculations)


@dataclass(frozen=True)
class MixComparison:
    calculations: tuple[MixCalculation, ...]
    best_by_monthly_payment: MixCalculation
    best_by_total_cost: MixCalculation
    best_by_total_interest: MixCalculation

    # Cheapest vs most expensive mix, per metric
    monthly_difference: Decimal = Decimal("0")
    total_difference: Decimal = Decimal("0")
    interest_difference: Decimal = Decimal("0")


@dataclass(frozen=True)
class SeriesPoint:
    """One month of a chart series, summed across tracks."""
    month: int
    year: int
    total: Decimal
    by_track: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class BreakdownPoint:
    month: int
    year: int
    interest: Decimal
    principal: Decimal
    interest_pct: Decimal
    principal_pct: Decimal


class RiskLevel(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


RISK_LEVEL_LABELS: dict[RiskLevel, str] = {
    RiskLevel.LOW: "נמוך",
    RiskLevel.MEDIUM: "בינוני",
    RiskLevel.HIGH: "גבוה",
}


@dataclass(frozen=True)
class ScenarioOutcome:
    name: str
    rate_change: Decimal
    calculation: MixCalculation
    debt_to_income: Decimal | None = None  # Percent of monthly income
    risk: RiskLevel | None = None


@dataclass(frozen=True)
class RateScenarioAnalysis:
    base: ScenarioOutcome
    optimistic: ScenarioOutcome
    pessimistic: ScenarioOutcome
    custom: ScenarioOutcome
    rate_change_locked: bool = False  # Prime tracks present; custom change not applied

    @property
    def outcomes(self) -> tuple[ScenarioOutcome, ...]:
        return (self.base, self.optimistic, self.pessimistic, self.custom)


@dataclass(frozen=True)
class ShockResult:
    increase: Decimal  # Percentage points
    base: MixCalculation
    shocked: MixCalculation
    affected_amount: Decimal  # Principal sitting in affected tracks

    @property
    def base_payment(self) -> Decimal:
        return self.base.total_monthly_payment

    @property
    def new_payment(self) -> Decimal:
        return self.shocked.total_monthly_payment

    @property
    def payment_increase(self) -> Decimal:
        return self.new_payment - self.base_payment

    @property
    def percentage_increase(self) -> Decimal:
        if self.base_payment == 0:
            return Decimal("0")
        return self.payment_increase / self.base_payment * 100

    @property
    def total_extra_cost(self) -> Decimal:
        return self.shocked.total_paid - self.base.total_paid
