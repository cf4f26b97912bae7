"""Single-track calculation: payment, schedule and totals.

Pure functions. No I/O.
"""

from decimal import Decimal

from mashkanta.models.mix import Track
from mashkanta.models.results import TrackCalculation
from mashkanta.engine.amortization import monthly_payment, amortization_schedule


def calculate_track(track: Track, tolerance: Decimal | None = None) -> TrackCalculation:
    """Monthly payment, full schedule and totals for one track.

    total_paid sums the emitted rows, so a schedule that ended early is
    reflected in the totals.
    """
    pmt = monthly_payment(track.amount, track.interest_rate, track.years)
    schedule = amortization_schedule(
        track.amount, track.interest_rate, track.years, tolerance=tolerance
    )

    total_paid = sum((row.payment for row in schedule), Decimal("0"))
    total_interest = total_paid - track.amount

    return TrackCalculation(
        track=track,
        monthly_payment=pmt,
        total_interest=total_interest,
        total_paid=total_paid,
        schedule=tuple(schedule),
    )
