import math

import numpy as np
import pytest
from scipy.stats import t as student_t

from statprimer import InvalidInputError, confidence_interval, generate_synthetic_data


def test_zero_variance_sample_has_zero_margin():
    ci = confidence_interval([10, 10, 10, 10], confidence_level=0.95)
    assert ci.mean == 10.0
    assert ci.lower == 10.0
    assert ci.upper == 10.0
    assert ci.margin_error == 0.0
    assert ci.se == 0.0
    assert ci.n == 4


def test_interval_matches_t_formula():
    sample = [2, 4, 4, 4, 5, 5, 7, 9]
    ci = confidence_interval(sample)

    sd = float(np.std(sample, ddof=1))
    se = sd / math.sqrt(len(sample))
    t_crit = float(student_t.ppf(0.975, len(sample) - 1))
    assert math.isclose(ci.mean, 5.0)
    assert math.isclose(ci.se, se)
    assert math.isclose(ci.margin_error, t_crit * se)
    assert math.isclose(ci.lower, 5.0 - t_crit * se)
    assert math.isclose(ci.upper, 5.0 + t_crit * se)
    assert ci.confidence_level == 0.95


def test_large_samples_still_use_t_distribution():
    data = generate_synthetic_data(n=1000, type="normal", seed=3)
    ci = confidence_interval(data.sample)
    t_crit = float(student_t.ppf(0.975, 999))
    assert math.isclose(ci.margin_error, t_crit * ci.se)
    assert not math.isclose(ci.margin_error, 1.959963984540054 * ci.se)


def test_width_grows_with_confidence_level():
    data = generate_synthetic_data(n=40, type="uniform", seed=5)
    widths = [
        confidence_interval(data.sample, confidence_level=level).width
        for level in (0.80, 0.90, 0.95, 0.99)
    ]
    assert widths == sorted(widths)
    assert len(set(widths)) == len(widths)


def test_bounds_bracket_the_mean():
    data = generate_synthetic_data(n=25, type="bimodal", seed=9)
    ci = confidence_interval(data.sample, confidence_level=0.9)
    assert ci.lower <= ci.mean <= ci.upper
    assert math.isclose(ci.upper - ci.mean, ci.mean - ci.lower)


def test_missing_values_are_dropped():
    ci = confidence_interval([1.0, None, 2.0, 3.0, float("nan")])
    assert ci.n == 3
    assert math.isclose(ci.mean, 2.0)


@pytest.mark.parametrize("level", [0, 1, 1.5, -0.1, float("nan"), "0.95", True, None])
def test_confidence_level_out_of_range_raises(level):
    with pytest.raises(InvalidInputError):
        confidence_interval([1, 2, 3], confidence_level=level)


@pytest.mark.parametrize("sample", [[5.0], [5.0, None], [], [None, None]])
def test_fewer_than_two_observations_raises(sample):
    with pytest.raises(InvalidInputError):
        confidence_interval(sample)


def test_non_numeric_input_is_reported_first():
    with pytest.raises(InvalidInputError, match="numeric"):
        confidence_interval(["a", "b"], confidence_level=2.0)


def test_keeping_missing_values_is_rejected():
    with pytest.raises(InvalidInputError):
        confidence_interval([1.0, 2.0, None], drop_missing=False)


@pytest.mark.parametrize("value", [0.1, 0.7, 2.3, 12.1])
def test_constant_sample_with_inexact_float_has_zero_margin(value):
    for n in (2, 3, 12, 29):
        ci = confidence_interval([value] * n)
        assert ci.se == 0.0
        assert ci.margin_error == 0.0
        assert ci.lower == ci.upper == ci.mean
        assert ci.mean == pytest.approx(value)


@pytest.mark.parametrize("sample", [[1.0, math.inf, 3.0], [-math.inf, 2.0, 4.0]])
def test_infinite_values_raise(sample):
    with pytest.raises(InvalidInputError, match="infinite"):
        confidence_interval(sample)
