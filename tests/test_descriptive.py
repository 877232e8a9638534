import math

import numpy as np
import pandas as pd
import pytest

from statprimer import InvalidInputError, descriptive_stats, generate_synthetic_data


def test_descriptive_stats_known_values():
    stats = descriptive_stats([1, 2, 3, 4, 5])
    assert math.isclose(stats.mean, 3.0)
    assert math.isclose(stats.median, 3.0)
    assert math.isclose(stats.sd, math.sqrt(2.5))
    assert round(stats.sd, 3) == 1.581
    assert math.isclose(stats.var, 2.5)
    assert stats.min == 1.0
    assert stats.max == 5.0
    assert math.isclose(stats.q25, 2.0)
    assert math.isclose(stats.q75, 4.0)
    assert stats.n == 5
    assert stats.missing == 0


def test_quartiles_use_linear_interpolation():
    stats = descriptive_stats([1, 2, 3, 4])
    # Linear interpolation between order statistics at (n - 1) * p.
    assert math.isclose(stats.q25, 1.75)
    assert math.isclose(stats.q75, 3.25)
    assert math.isclose(stats.median, 2.5)


def test_missing_values_are_counted_and_dropped():
    sample = [1.0, None, 3.0, float("nan"), 5.0]
    stats = descriptive_stats(sample)
    assert stats.n == 3
    assert stats.missing == 2
    assert stats.n + stats.missing == len(sample)
    assert math.isclose(stats.mean, 3.0)


def test_accepts_pandas_series_with_nullable_missing():
    series = pd.Series([2.0, None, 4.0, 6.0], dtype="Float64")
    stats = descriptive_stats(series)
    assert stats.n == 3
    assert stats.missing == 1
    assert math.isclose(stats.mean, 4.0)


def test_order_statistics_are_monotone_on_generated_data():
    data = generate_synthetic_data(n=200, type="skewed", seed=11)
    sample = list(data.sample) + [None] * 4
    stats = descriptive_stats(sample)
    assert stats.min <= stats.q25 <= stats.median <= stats.q75 <= stats.max
    assert stats.n + stats.missing == len(sample)


@pytest.mark.parametrize(
    "sample", [[], [None, None], [np.nan, np.nan, np.nan], np.array([], dtype=float)]
)
def test_empty_or_all_missing_raises(sample):
    with pytest.raises(InvalidInputError):
        descriptive_stats(sample)


@pytest.mark.parametrize(
    "sample", [["a", "b"], [1, "2", 3], [True, False], None, "12345", [[1, 2], [3, 4]]]
)
def test_non_numeric_input_raises(sample):
    with pytest.raises(InvalidInputError):
        descriptive_stats(sample)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError, match="No non-missing values"):
        descriptive_stats([None])


def test_keeping_missing_values_is_rejected():
    with pytest.raises(InvalidInputError, match="drop_missing is False"):
        descriptive_stats([1.0, None, 2.0], drop_missing=False)

    stats = descriptive_stats([1.0, 2.0, 3.0], drop_missing=False)
    assert stats.n == 3
    assert stats.missing == 0


def test_single_value_has_undefined_spread():
    with pytest.warns(RuntimeWarning, match="single observation"):
        stats = descriptive_stats([7.5])
    assert stats.mean == 7.5
    assert stats.median == 7.5
    assert stats.q25 == stats.q75 == 7.5
    assert math.isnan(stats.sd)
    assert math.isnan(stats.var)


def test_result_is_immutable_and_indexable():
    stats = descriptive_stats([1, 2, 3])
    assert stats["mean"] == stats.mean
    assert stats.count == stats.n == 3
    assert set(stats.as_dict()) == {
        "mean", "median", "sd", "var", "min", "max", "q25", "q75", "n", "missing"
    }
    with pytest.raises(KeyError):
        stats["mode"]
    with pytest.raises(AttributeError):
        stats.mean = 10.0


def test_infinite_values_raise():
    with pytest.raises(InvalidInputError, match="1 infinite value"):
        descriptive_stats([1.0, 2.0, float("-inf"), None])
