"""What-if analysis on a mix: rate moves, interest shocks, affordability.

Scenarios never touch the input mix; each builds a modified copy and runs
it through calculate_mix.
"""

from dataclasses import replace
from decimal import Decimal

from mashkanta.config import settings
from mashkanta.models.mix import Mix, TrackType
from mashkanta.models.results import (
    MixCalculation,
    RateScenarioAnalysis,
    RiskLevel,
    ScenarioOutcome,
    ShockResult,
)
from mashkanta.engine.mix import calculate_mix

# Rate increases in percentage points
SHOCK_SCENARIOS: dict[str, Decimal] = {
    "mild": Decimal("1"),
    "moderate": Decimal("2"),
    "severe": Decimal("3"),
}

# Prime follows the Bank of Israel rate, not the borrower's scenario
RATE_SCENARIO_EXEMPT = frozenset({TrackType.PRIME})
SHOCK_AFFECTED = frozenset({TrackType.PRIME, TrackType.VARIABLE})


def shift_rates(
    mix: Mix,
    delta: Decimal,
    min_rate: Decimal | None = None,
    exempt: frozenset[TrackType] = RATE_SCENARIO_EXEMPT,
) -> Mix:
    """Copy of `mix` with every non-exempt track's rate moved by `delta`.

    Shifted rates are floored at `min_rate`.
    """
    floor = settings.scenario_min_rate if min_rate is None else min_rate
    tracks = tuple(
        t if t.type in exempt else replace(t, interest_rate=max(floor, t.interest_rate + delta))
        for t in mix.tracks
    )
    return replace(mix, tracks=tracks)


def debt_to_income_ratio(monthly_payment: Decimal, monthly_income: Decimal) -> Decimal:
    """Monthly payment as a percent of monthly income; 0 without income."""
    if monthly_income <= 0:
        return Decimal("0")
    return monthly_payment / monthly_income * 100


def assess_risk(ratio: Decimal) -> RiskLevel:
    if ratio <= settings.dti_low_threshold:
        return RiskLevel.LOW
    if ratio <= settings.dti_medium_threshold:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def _outcome(
    name: str,
    rate_change: Decimal,
    calc: MixCalculation,
    monthly_income: Decimal | None,
) -> ScenarioOutcome:
    if monthly_income is None:
        return ScenarioOutcome(name=name, rate_change=rate_change, calculation=calc)
    ratio = debt_to_income_ratio(calc.summary.total_monthly_payment, monthly_income)
    return ScenarioOutcome(
        name=name,
        rate_change=rate_change,
        calculation=calc,
        debt_to_income=ratio,
        risk=assess_risk(ratio),
    )


def analyze_rate_scenarios(
    mix: Mix,
    rate_change: Decimal = Decimal("0"),
    monthly_income: Decimal | None = None,
) -> RateScenarioAnalysis:
    """Base, optimistic, pessimistic and a custom rate move for one mix.

    When the mix holds a prime track the custom move is not applied.
    """
    locked = mix.has_prime
    custom_change = Decimal("0") if locked else rate_change

    def run(delta: Decimal) -> MixCalculation:
        return calculate_mix(shift_rates(mix, delta))

    return RateScenarioAnalysis(
        base=_outcome("base", Decimal("0"), calculate_mix(mix), monthly_income),
        optimistic=_outcome(
            "optimistic", settings.optimistic_rate_change,
            run(settings.optimistic_rate_change), monthly_income,
        ),
        pessimistic=_outcome(
            "pessimistic", settings.pessimistic_rate_change,
            run(settings.pessimistic_rate_change), monthly_income,
        ),
        custom=_outcome("custom", custom_change, run(custom_change), monthly_income),
        rate_change_locked=locked,
    )


def interest_shock(
    mix: Mix,
    increase: Decimal,
    affected: frozenset[TrackType] = SHOCK_AFFECTED,
) -> ShockResult:
    """Raise the rate of floating tracks by `increase` points and measure the hit.

    Fixed and CPI-linked tracks keep their rate.
    """
    exempt = frozenset(TrackType) - affected
    shocked_mix = shift_rates(mix, increase, min_rate=Decimal("0"), exempt=exempt)
    affected_amount = sum(
        (t.amount for t in mix.tracks if t.type in affected), Decimal("0")
    )
    return ShockResult(
        increase=increase,
        base=calculate_mix(mix),
        shocked=calculate_mix(shocked_mix),
        affected_amount=affected_amount,
    )
