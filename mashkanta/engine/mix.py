"""Mix aggregation and multi-mix comparison.

Tracks are calculated independently and summed; weighted averages use each
track's nominal amount over the mix total. Divisions by a zero total yield 0.
"""

import logging
from decimal import Decimal

from mashkanta.config import settings
from mashkanta.models.mix import Mix
from mashkanta.models.results import MixCalculation, MixComparison, MixSummary
from mashkanta.engine.track import calculate_track

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def amount_mismatch(mix: Mix) -> Decimal:
    """Sum of track amounts minus the mix total (positive = over-allocated)."""
    return mix.tracks_amount - mix.total_amount


def is_amount_balanced(mix: Mix, tolerance: Decimal | None = None) -> bool:
    tol = settings.amount_tolerance if tolerance is None else tolerance
    return abs(amount_mismatch(mix)) < tol


def calculate_mix(mix: Mix, tolerance: Decimal | None = None) -> MixCalculation:
    """Calculate every track of a mix and the portfolio summary.

    `tolerance` is passed through to each track's amortization schedule.
    """
    if not is_amount_balanced(mix):
        logger.warning(
            "Mix %s: track amounts %s differ from total %s",
            mix.id, mix.tracks_amount, mix.total_amount,
        )

    calcs = tuple(calculate_track(t, tolerance=tolerance) for t in mix.tracks)

    total_monthly = sum((c.monthly_payment for c in calcs), ZERO)
    total_interest = sum((c.total_interest for c in calcs), ZERO)
    total_paid = sum((c.total_paid for c in calcs), ZERO)

    weighted_rate = sum((t.interest_rate * t.amount for t in mix.tracks), ZERO)
    weighted_years = sum((t.years * t.amount for t in mix.tracks), ZERO)

    if mix.total_amount > 0:
        average_rate = weighted_rate / mix.total_amount
        average_years = weighted_years / mix.total_amount
    else:
        average_rate = ZERO
        average_years = ZERO

    return MixCalculation(
        mix=mix,
        track_calculations=calcs,
        summary=MixSummary(
            total_monthly_payment=total_monthly,
            total_interest=total_interest,
            total_paid=total_paid,
            average_rate=average_rate,
            weighted_average_years=average_years,
        ),
    )


def _lowest(calcs: tuple[MixCalculation, ...], metric) -> MixCalculation:
    # Strict < so the first mix wins ties
    best = calcs[0]
    for calc in calcs[1:]:
        if metric(calc) < metric(best):
            best = calc
    return best


def _spread(calcs: tuple[MixCalculation, ...], metric) -> Decimal:
    values = [metric(c) for c in calcs]
    return max(values) - min(values)


def compare_mixes(mixes: list[Mix]) -> MixComparison:
    """Calculate each mix and pick the cheapest by monthly payment, total cost
    and total interest. The three picks may be different mixes.
    """
    if not mixes:
        raise ValueError("No mixes to compare")

    calcs = tuple(calculate_mix(m) for m in mixes)

    def monthly(c: MixCalculation) -> Decimal:
        return c.summary.total_monthly_payment

    def total(c: MixCalculation) -> Decimal:
        return c.summary.total_paid

    def interest(c: MixCalculation) -> Decimal:
        return c.summary.total_interest

    comparison = MixComparison(
        calculations=calcs,
        best_by_monthly_payment=_lowest(calcs, monthly),
        best_by_total_cost=_lowest(calcs, total),
        best_by_total_interest=_lowest(calcs, interest),
        monthly_difference=_spread(calcs, monthly),
        total_difference=_spread(calcs, total),
        interest_difference=_spread(calcs, interest),
    )
    logger.debug(
        "Compared %d mixes: monthly=%s total=%s interest=%s",
        len(calcs),
        comparison.best_by_monthly_payment.mix.id,
        comparison.best_by_total_cost.mix.id,
        comparison.best_by_total_interest.mix.id,
    )
    return comparison
