from decimal import Decimal

import pytest

from mashkanta.engine.mix import calculate_mix
from mashkanta.engine.scenario import (
    shift_rates,
    analyze_rate_scenarios,
    debt_to_income_ratio,
    assess_risk,
    interest_shock,
    SHOCK_SCENARIOS,
)
from mashkanta.models.mix import TrackType
from mashkanta.models.results import RiskLevel
from tests.factories import make_track, make_mix


class TestShiftRates:
    def test_moves_every_track(self, variable_mix):
        shifted = shift_rates(variable_mix, Decimal("2"))
        assert [t.interest_rate for t in shifted.tracks] == [Decimal("6.5"), Decimal("5.8")]

    def test_input_mix_untouched(self, variable_mix):
        shift_rates(variable_mix, Decimal("2"))
        assert [t.interest_rate for t in variable_mix.tracks] == [Decimal("4.5"), Decimal("3.8")]

    def test_prime_exempt(self, canonical_mix):
        shifted = shift_rates(canonical_mix, Decimal("2"))
        rates = {t.id: t.interest_rate for t in shifted.tracks}
        assert rates == {"fixed": Decimal("6.5"), "prime": Decimal("5.2"), "madad": Decimal("4.1")}

    def test_floor(self, variable_mix):
        shifted = shift_rates(variable_mix, Decimal("-5"))
        assert all(t.interest_rate == Decimal("0.1") for t in shifted.tracks)

    def test_custom_floor_and_exempt(self, variable_mix):
        shifted = shift_rates(
            variable_mix, Decimal("-5"), min_rate=Decimal("0"), exempt=frozenset({TrackType.FIXED})
        )
        assert [t.interest_rate for t in shifted.tracks] == [Decimal("4.5"), Decimal("0")]


class TestRateScenarios:
    def test_ordering(self, variable_mix):
        analysis = analyze_rate_scenarios(variable_mix, rate_change=Decimal("1"))
        base = analysis.base.calculation.summary.total_monthly_payment
        assert analysis.optimistic.calculation.summary.total_monthly_payment < base
        assert analysis.pessimistic.calculation.summary.total_monthly_payment > base
        assert analysis.custom.calculation.summary.total_monthly_payment > base
        assert analysis.custom.rate_change == Decimal("1")
        assert not analysis.rate_change_locked

    def test_default_moves(self, variable_mix):
        analysis = analyze_rate_scenarios(variable_mix)
        assert analysis.optimistic.rate_change == Decimal("-1")
        assert analysis.pessimistic.rate_change == Decimal("2")
        assert [o.name for o in analysis.outcomes] == ["base", "optimistic", "pessimistic", "custom"]

    def test_prime_locks_custom_change(self, canonical_mix):
        analysis = analyze_rate_scenarios(canonical_mix, rate_change=Decimal("3"))
        assert analysis.rate_change_locked
        assert analysis.custom.rate_change == 0
        assert (
            analysis.custom.calculation.summary.total_monthly_payment
            == analysis.base.calculation.summary.total_monthly_payment
        )

    def test_without_income(self, variable_mix):
        analysis = analyze_rate_scenarios(variable_mix)
        assert analysis.base.debt_to_income is None
        assert analysis.base.risk is None

    def test_with_income(self, variable_mix):
        analysis = analyze_rate_scenarios(variable_mix, monthly_income=Decimal("20000"))
        payment = calculate_mix(variable_mix).summary.total_monthly_payment
        assert analysis.base.debt_to_income == payment / Decimal("20000") * 100
        assert analysis.base.risk == assess_risk(analysis.base.debt_to_income)
        assert analysis.pessimistic.debt_to_income > analysis.base.debt_to_income


class TestDebtToIncome:
    def test_ratio(self):
        assert debt_to_income_ratio(Decimal("5000"), Decimal("20000")) == Decimal("25")

    @pytest.mark.parametrize("income", [Decimal("0"), Decimal("-100")])
    def test_no_income_guarded(self, income):
        assert debt_to_income_ratio(Decimal("5000"), income) == 0

    @pytest.mark.parametrize("ratio,level", [
        (Decimal("10"), RiskLevel.LOW),
        (Decimal("30"), RiskLevel.LOW),
        (Decimal("30.01"), RiskLevel.MEDIUM),
        (Decimal("40"), RiskLevel.MEDIUM),
        (Decimal("41"), RiskLevel.HIGH),
    ])
    def test_risk_bands(self, ratio, level):
        assert assess_risk(ratio) == level


class TestInterestShock:
    def test_only_floating_tracks_move(self, variable_mix):
        result = interest_shock(variable_mix, Decimal("1"))
        rates = {c.track.id: c.track.interest_rate for c in result.shocked.track_calculations}
        assert rates == {"fixed": Decimal("4.5"), "variable": Decimal("4.8")}
        assert result.affected_amount == Decimal("400000")

    def test_payment_increase(self, canonical_mix):
        result = interest_shock(canonical_mix, SHOCK_SCENARIOS["severe"])
        assert result.payment_increase > 0
        assert result.new_payment == result.base_payment + result.payment_increase
        assert result.percentage_increase == result.payment_increase / result.base_payment * 100
        assert result.total_extra_cost > 0

    def test_fixed_mix_unaffected(self, fixed_track):
        result = interest_shock(make_mix("fixed", "1000000", fixed_track), Decimal("2"))
        assert result.affected_amount == 0
        assert result.payment_increase == 0
        assert result.percentage_increase == 0
        assert result.total_extra_cost == 0

    def test_empty_mix_guarded(self):
        result = interest_shock(make_mix("bare", "0"), Decimal("1"))
        assert result.base_payment == 0
        assert result.percentage_increase == 0

    def test_scenario_presets(self):
        assert SHOCK_SCENARIOS == {
            "mild": Decimal("1"),
            "moderate": Decimal("2"),
            "severe": Decimal("3"),
        }

    def test_bigger_shock_costs_more(self):
        mix = make_mix("prime", "500000", make_track("p", "500000", "5.2", 25, TrackType.PRIME))
        mild = interest_shock(mix, SHOCK_SCENARIOS["mild"])
        severe = interest_shock(mix, SHOCK_SCENARIOS["severe"])
        assert severe.payment_increase > mild.payment_increase
