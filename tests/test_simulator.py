"""Tests for the Monte Carlo comparison simulator."""

import numpy as np
import pytest

from expensehedge.models.scenario import HedgeMode, ScenarioParameters
from expensehedge.services.economics import calculate_emotional_hedging, calculate_hedging
from expensehedge.services.simulator import (
    periods_for,
    run_comparison_simulation,
    run_monte_carlo_simulation,
    seeded_source,
)
from expensehedge.services.statistics import calculate_stats


def _scenario(baseline, adverse, probability, months, fee=0.01):
    return ScenarioParameters(
        baseline_value=baseline,
        adverse_value=adverse,
        event_probability=probability,
        period_count=months,
        fee_rate=fee,
    )


class TestRunComparisonSimulation:
    """Paired hedged/unhedged simulation."""

    def test_lengths(self, recurring_scenario):
        results = run_comparison_simulation(recurring_scenario, 0.8, 1000)

        assert len(results.hedged) == 1000
        assert len(results.unhedged) == 1000
        assert all(isinstance(value, float) for value in results.hedged)

    def test_single_period_outcomes_are_quote_branches(self, recurring_scenario):
        results = run_comparison_simulation(recurring_scenario, 0.8, 500, seeded_source(1))
        quote = calculate_hedging(100, 180, 0.8, 0.35, 0.01)

        for hedged in results.hedged:
            assert hedged in (quote.hedged_outcome_if_event_true, quote.hedged_outcome_if_event_false)
        for unhedged in results.unhedged:
            assert unhedged in (-100, -180)

    @pytest.mark.parametrize("mode", [HedgeMode.RECURRING, HedgeMode.CONSOLATION])
    def test_zero_ratio_hedged_equals_unhedged(self, mode):
        scenario = _scenario(100, 250, 0.3, 6).model_copy(update={"mode": mode})
        results = run_comparison_simulation(scenario, 0.0, 300, seeded_source(11))

        assert np.allclose(results.hedged, results.unhedged, rtol=0, atol=1e-9)

    def test_no_additional_exposure_means_no_hedge_effect(self):
        results = run_comparison_simulation(_scenario(100, 100, 0.3, 6), 0.5, 100)

        assert len(results.hedged) == 100
        for hedged, unhedged in zip(results.hedged, results.unhedged):
            assert abs(hedged - unhedged) < 0.01

    def test_inverted_inputs_still_run(self):
        results = run_comparison_simulation(_scenario(200, 100, 0.3, 6), 0.5, 100)

        assert len(results.hedged) == 100

    def test_scripted_draws(self, scripted_source):
        # Alternating event / no event: every two-month trial sees exactly one event
        source = scripted_source([0.1, 0.9])
        results = run_comparison_simulation(_scenario(100, 180, 0.35, 2), 0.8, 3, source)
        quote = calculate_hedging(100, 180, 0.8, 0.35, 0.01)

        expected = quote.hedged_outcome_if_event_true + quote.hedged_outcome_if_event_false
        assert results.hedged == pytest.approx([expected] * 3)
        assert results.unhedged == [-280, -280, -280]
        assert source.calls == 6

    def test_draw_equal_to_probability_is_no_event(self, scripted_source):
        results = run_comparison_simulation(_scenario(100, 180, 0.35, 1), 0.8, 4, scripted_source([0.35]))

        assert results.unhedged == [-100] * 4

    def test_consolation_runs_a_single_period(self, consolation_scenario, scripted_source):
        scenario = consolation_scenario.model_copy(update={"period_count": 12})
        source = scripted_source([0.2, 0.7])
        results = run_comparison_simulation(scenario, 1.0, 4, source)
        quote = calculate_emotional_hedging(50, 100, 1.0, 0.4, 0.02)

        assert source.calls == 4
        assert periods_for(scenario) == 1
        assert results.hedged == [
            quote.outcome_if_adverse_event,
            quote.outcome_if_favorable_event,
            quote.outcome_if_adverse_event,
            quote.outcome_if_favorable_event,
        ]
        assert results.unhedged == [-50] * 4

    def test_seeded_source_is_reproducible(self, severe_scenario):
        first = run_comparison_simulation(severe_scenario, 0.5, 200, seeded_source(42))
        second = run_comparison_simulation(severe_scenario, 0.5, 200, seeded_source(42))
        other = run_comparison_simulation(severe_scenario, 0.5, 200, seeded_source(43))

        assert first == second
        assert first.unhedged != other.unhedged

    def test_hedging_reduces_worst_case(self):
        scenario = _scenario(100, 220, 0.35, 12)
        results = run_comparison_simulation(scenario, 0.8, 1000, seeded_source(7))

        hedged_stats = calculate_stats(results.hedged)
        unhedged_stats = calculate_stats(results.unhedged)

        assert hedged_stats.worst_case_10 > unhedged_stats.worst_case_10

    def test_longer_horizons_scale_mean_and_spread(self):
        short = run_comparison_simulation(_scenario(120, 180, 0.25, 1), 0.7, 2000, seeded_source(3))
        long = run_comparison_simulation(_scenario(120, 180, 0.25, 12), 0.7, 2000, seeded_source(4))

        short_range = max(short.hedged) - min(short.hedged)
        long_range = max(long.hedged) - min(long.hedged)
        assert long_range > short_range

        ratio = calculate_stats(long.hedged).mean / calculate_stats(short.hedged).mean
        assert ratio == pytest.approx(12, rel=0.05)


class TestRunMonteCarloSimulation:
    """Hedged-only convenience wrapper."""

    def test_returns_hedged_sequence(self, severe_scenario):
        hedged = run_monte_carlo_simulation(severe_scenario, 0.8, 150, seeded_source(9))
        comparison = run_comparison_simulation(severe_scenario, 0.8, 150, seeded_source(9))

        assert hedged == comparison.hedged

    def test_default_runs(self, recurring_scenario):
        assert len(run_monte_carlo_simulation(recurring_scenario, 0.8)) == 5000
