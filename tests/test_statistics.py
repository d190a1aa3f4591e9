"""Post-processing statistics tests."""

import math

import pytest

from revolve_mc.statistics import (
    EstimateSummary, figure_of_merit, fit_power_law, repeated_estimates,
    summarize_estimates, summarize_runs,
)
from revolve_mc.types import ANALYTICAL, SimulationResult


def test_summarize_estimates_empty():
    summary = summarize_estimates([], ANALYTICAL)
    assert summary == EstimateSummary(0, 0.0, 0.0, ANALYTICAL)


def test_summarize_estimates_single_value():
    summary = summarize_estimates([4.2], ANALYTICAL)
    assert summary.count == 1
    assert summary.mean == pytest.approx(4.2)
    assert summary.std_dev == 0.0
    assert summary.ci95 == pytest.approx((4.2, 4.2))


def test_summarize_estimates_known_values():
    values = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
    summary = summarize_estimates(values, 5.0)
    assert summary.mean == pytest.approx(5.0)
    sample_var = sum((v - 5.0) ** 2 for v in values) / (len(values) - 1)
    assert summary.std_dev == pytest.approx(math.sqrt(sample_var / len(values)))
    lo, hi = summary.ci95
    assert lo == pytest.approx(summary.mean - 1.96 * summary.std_dev)
    assert hi == pytest.approx(summary.mean + 1.96 * summary.std_dev)
    assert summary.error == pytest.approx(0.0)
    assert summary.covers_analytical()


def test_summary_error_and_coverage():
    summary = EstimateSummary(count=4, mean=5.5, std_dev=0.1, analytical=5.0)
    assert summary.error == pytest.approx(0.1)
    assert not summary.covers_analytical()


def test_summary_to_dict():
    data = EstimateSummary(count=3, mean=5.0, std_dev=0.5, analytical=4.0).to_dict()
    assert data["count"] == 3
    assert data["mean"] == 5.0
    assert data["std_dev"] == 0.5
    assert data["ci95"] == pytest.approx([4.02, 5.98])
    assert data["error"] == pytest.approx(0.25)
    assert data["analytical"] == 4.0


def test_summary_print(capsys):
    EstimateSummary(count=5, mean=4.9, std_dev=0.05, analytical=ANALYTICAL).print_summary()
    out = capsys.readouterr().out
    assert "Runs: \t\t5" in out
    assert "95% CI: \t[4.802000, 4.998000]" in out


def test_summarize_runs_uses_run_analytical():
    runs = [
        SimulationResult(estimate=4.0, trials=10, successes=5, error=0.2, analytical=5.0),
        SimulationResult(estimate=6.0, trials=10, successes=5, error=0.2, analytical=5.0),
    ]
    summary = summarize_runs(runs)
    assert summary.count == 2
    assert summary.mean == pytest.approx(5.0)
    assert summary.analytical == 5.0
    assert summary.std_dev == pytest.approx(1.0)


def test_summarize_runs_rejects_empty():
    with pytest.raises(ValueError):
        summarize_runs([])


def test_repeated_estimates_are_independent_per_seed():
    results = repeated_estimates([1, 2, 3], 200)
    assert [r.seed for r in results] == [1, 2, 3]
    assert len({r.trials for r in results}) > 1
    assert all(r.successes == 200 for r in results)


def test_repeated_estimates_first_seed_matches_single_run():
    (result,) = repeated_estimates([5555], 100)
    assert result.trials == 218
    assert result.estimate == pytest.approx(4.527341468389614, abs=1e-12)


def test_repeated_estimates_bracket_analytical():
    summary = summarize_runs(repeated_estimates(range(1, 41), 2000))
    assert summary.count == 40
    assert abs(summary.mean - ANALYTICAL) < 5 * summary.std_dev
    assert summary.std_dev > 0.0


def test_fit_power_law_recovers_exact_curve():
    counts = [100, 200, 400, 800, 1600]
    errors = [3.0 * n ** -0.5 for n in counts]
    amplitude, exponent = fit_power_law(counts, errors)
    assert amplitude == pytest.approx(3.0, rel=1e-9)
    assert exponent == pytest.approx(-0.5, rel=1e-9)


def test_fit_power_law_skips_zero_errors():
    counts = [10, 20, 40, 80]
    errors = [1.0, 0.0, 0.25, 0.125]
    amplitude, exponent = fit_power_law(counts, errors)
    assert exponent == pytest.approx(-1.0, rel=1e-9)
    assert amplitude == pytest.approx(10.0, rel=1e-9)


def test_fit_power_law_needs_two_points():
    with pytest.raises(ValueError):
        fit_power_law([100, 200], [0.1, 0.0])


def test_fit_power_law_length_mismatch():
    with pytest.raises(ValueError):
        fit_power_law([100, 200, 300], [0.1, 0.05])


def test_figure_of_merit():
    assert figure_of_merit(0.1, 2.0) == pytest.approx(50.0)
    assert figure_of_merit(0.0, 2.0) == 0.0
    assert figure_of_merit(0.1, 0.0) == 0.0


def test_result_figure_of_merit_and_throughput():
    result = SimulationResult(estimate=4.5, trials=1000, successes=500,
                              error=0.1, analytical=ANALYTICAL, wall_time=2.0)
    assert result.figure_of_merit == pytest.approx(50.0)
    assert result.samples_per_second == pytest.approx(500.0)
    data = result.to_dict()
    assert data["figure_of_merit"] == pytest.approx(50.0)
    assert data["samples_per_sec"] == pytest.approx(500.0)
