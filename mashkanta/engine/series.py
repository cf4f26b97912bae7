"""Month-aligned chart series across the tracks of a mix.

Every series runs to the longest track's schedule. A track whose schedule has
ended contributes 0 for the remaining months. Pure functions, recomputed on
every call.
"""

from decimal import Decimal

from mashkanta.models.results import BreakdownPoint, SeriesPoint, TrackCalculation

ZERO = Decimal("0")


def _horizon(calcs: list[TrackCalculation]) -> int:
    return max((c.months for c in calcs), default=0)


def _year(month: int) -> int:
    return (month - 1) // 12 + 1


def monthly_payment_series(calcs: list[TrackCalculation]) -> list[SeriesPoint]:
    """Total monthly payment at each month."""
    points: list[SeriesPoint] = []
    for month in range(1, _horizon(calcs) + 1):
        by_track: dict[str, Decimal] = {}
        total = ZERO
        for c in calcs:
            row = c.row(month)
            value = row.payment if row else ZERO
            by_track[c.track.id] = value
            total += value
        points.append(SeriesPoint(
            month=month,
            year=_year(month),
            total=total,
            by_track=by_track,
        ))
    return points


def debt_balance_series(calcs: list[TrackCalculation]) -> list[SeriesPoint]:
    """Outstanding balance at the end of each month."""
    points: list[SeriesPoint] = []
    for month in range(1, _horizon(calcs) + 1):
        by_track: dict[str, Decimal] = {}
        total = ZERO
        for c in calcs:
            row = c.row(month)
            value = row.balance_end if row else ZERO
            by_track[c.track.id] = value
            total += value
        points.append(SeriesPoint(
            month=month,
            year=_year(month),
            total=total,
            by_track=by_track,
        ))
    return points


def blended_rate_series(calcs: list[TrackCalculation]) -> list[SeriesPoint]:
    """Balance-weighted nominal rate of the tracks still running each month.

    Weights are the balances carried into the month. by_track holds the rate
    of each running track and 0 for tracks already paid off.
    """
    points: list[SeriesPoint] = []
    for month in range(1, _horizon(calcs) + 1):
        by_track: dict[str, Decimal] = {}
        weighted = ZERO
        balance = ZERO
        for c in calcs:
            row = c.row(month)
            if row is None:
                by_track[c.track.id] = ZERO
                continue
            by_track[c.track.id] = c.track.interest_rate
            weighted += row.balance_start * c.track.interest_rate
            balance += row.balance_start
        points.append(SeriesPoint(
            month=month,
            year=_year(month),
            total=weighted / balance if balance > 0 else ZERO,
            by_track=by_track,
        ))
    return points


def principal_interest_series(calcs: list[TrackCalculation]) -> list[BreakdownPoint]:
    """Interest vs principal paid each month, with each side's percent share."""
    points: list[BreakdownPoint] = []
    for month in range(1, _horizon(calcs) + 1):
        interest = ZERO
        principal = ZERO
        for c in calcs:
            row = c.row(month)
            if row is None:
                continue
            interest += row.interest
            principal += row.principal

        paid = interest + principal
        if paid > 0:
            interest_pct = interest / paid * 100
            principal_pct = principal / paid * 100
        else:
            interest_pct = ZERO
            principal_pct = ZERO

        points.append(BreakdownPoint(
            month=month,
            year=_year(month),
            interest=interest,
            principal=principal,
            interest_pct=interest_pct,
            principal_pct=principal_pct,
        ))
    return points
