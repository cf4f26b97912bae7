"""Terminal report for one or more mortgage mixes.

Usage:
    mashkanta-report mixes.json
    mashkanta-report mixes.json --schedule --income 25000

The file holds a JSON list of mixes (or an object with a "mixes" list) in the
same shape the API accepts.
"""

import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pydantic import ValidationError

from mashkanta.config import settings
from mashkanta.api.schemas import CompareRequest
from mashkanta.models.mix import Mix
from mashkanta.models.results import MixCalculation, MixComparison, RISK_LEVEL_LABELS
from mashkanta.engine.amortization import yearly_summary
from mashkanta.engine.mix import calculate_mix, compare_mixes, amount_mismatch, is_amount_balanced
from mashkanta.engine.scenario import debt_to_income_ratio, assess_risk
from mashkanta.formatting import format_ils, format_percent

logger = logging.getLogger(__name__)


# ── Helpers ──────────────────────────────────────────────────────────────────

def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def _decimal(value: str) -> Decimal:
    try:
        number = Decimal(value)
    except InvalidOperation:
        number = None
    if number is None or not number.is_finite():
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    return number


def load_mixes(path: Path) -> list[Mix]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, list):
        data = {"mixes": data}
    return [m.to_mix() for m in CompareRequest.model_validate(data).mixes]


# ── Report sections ──────────────────────────────────────────────────────────

def print_mix(calc: MixCalculation, income: Decimal | None = None) -> None:
    mix = calc.mix
    s = calc.summary
    _header(mix.name)
    print(f"  Total Amount:       {format_ils(mix.total_amount)}")
    if not is_amount_balanced(mix):
        print(f"  !! Tracks sum to {format_ils(mix.tracks_amount)}"
              f" ({format_ils(amount_mismatch(mix))} off)")
    print(f"  Monthly Payment:    {format_ils(s.total_monthly_payment)}")
    print(f"  Total Interest:     {format_ils(s.total_interest)}")
    print(f"  Total Paid:         {format_ils(s.total_paid)}")
    print(f"  Average Rate:       {format_percent(s.average_rate)}")
    print(f"  Average Term:       {float(s.weighted_average_years):.1f} years")
    if income is not None:
        ratio = debt_to_income_ratio(s.total_monthly_payment, income)
        print(f"  Debt-to-Income:     {format_percent(ratio, 1)}"
              f" ({RISK_LEVEL_LABELS[assess_risk(ratio)]})")
    print()
    for tc in calc.track_calculations:
        t = tc.track
        print(f"  {t.name:<16} {t.label:<12} {format_ils(t.amount):>14}"
              f" {format_percent(t.interest_rate):>7} {t.years:>3}y"
              f" {format_ils(tc.monthly_payment):>10}/mo")


def print_schedule(calc: MixCalculation) -> None:
    for tc in calc.track_calculations:
        print(f"\n  {tc.track.name}: yearly")
        print(f"  {'Year':>4} {'Paid':>14} {'Principal':>14} {'Interest':>14} {'Balance':>14}")
        for y in yearly_summary(list(tc.schedule)):
            print(f"  {int(y['year']):>4} {format_ils(y['payment']):>14}"
                  f" {format_ils(y['principal']):>14} {format_ils(y['interest']):>14}"
                  f" {format_ils(y['ending_balance']):>14}")


def print_comparison(comparison: MixComparison) -> None:
    _header("Comparison")
    print(f"  Lowest Monthly:     {comparison.best_by_monthly_payment.mix.name}")
    print(f"  Lowest Total Cost:  {comparison.best_by_total_cost.mix.name}")
    print(f"  Lowest Interest:    {comparison.best_by_total_interest.mix.name}")
    print(f"  Monthly Spread:     {format_ils(comparison.monthly_difference)}")
    print(f"  Total Cost Spread:  {format_ils(comparison.total_difference)}")
    print(f"  Interest Spread:    {format_ils(comparison.interest_difference)}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Mortgage mix report")
    parser.add_argument("file", type=Path, help="JSON file with one or more mixes")
    parser.add_argument("--schedule", action="store_true", help="Print yearly amortization per track")
    parser.add_argument("--income", type=_decimal, help="Net monthly income for debt-to-income")
    args = parser.parse_args(argv)
    if args.income is not None and args.income <= 0:
        parser.error("--income must be positive")

    logging.basicConfig(level=settings.log_level)

    try:
        mixes = load_mixes(args.file)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        print(f"Error: could not read mixes from {args.file}: {e}", file=sys.stderr)
        return 1

    logger.debug("Loaded %d mixes from %s", len(mixes), args.file)

    if not mixes:
        print("Error: no mixes in file", file=sys.stderr)
        return 1

    for mix in mixes:
        calc = calculate_mix(mix)
        print_mix(calc, args.income)
        if args.schedule:
            print_schedule(calc)

    if len(mixes) > 1:
        print_comparison(compare_mixes(mixes))

    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
