"""Tests for text formatting and tabular export of result records."""

import math

import pandas as pd
import pytest

from statprimer import (
    confidence_interval,
    descriptive_stats,
    format_confidence_interval,
    format_descriptive_stats,
    format_ttest,
    format_value_with_margin,
    generate_synthetic_data,
    results_to_dataframe,
    save_results_to_csv,
    simple_ttest,
)
from statprimer.output import RESULTS_FILENAME

SAMPLE = [12.1, 11.4, 13.0, 12.7, 11.9, 12.3, 12.8, None]


@pytest.mark.parametrize(
    "value, margin, expected",
    [
        (10.2834, 0.4123, "10.3 ± 0.4"),
        (10.2834, 0.15, "10.28 ± 0.15"),
        (1234.5, 23, "1230 ± 20"),
        (4.5678, 0.02, "4.57 ± 0.02"),
        (10, 0, "10 ± 0"),
    ],
)
def test_format_value_with_margin(value, margin, expected):
    assert format_value_with_margin(value, margin) == expected


def test_format_value_with_non_finite_margin():
    assert format_value_with_margin(3.5, math.inf) == "3.5 ± inf"


def test_descriptive_block():
    text = format_descriptive_stats(descriptive_stats(SAMPLE))
    lines = text.splitlines()
    assert lines[0] == "Descriptive Statistics"
    assert "N        : 7" in lines
    assert "Missing  : 1" in lines
    assert any(line.startswith("Mean     : 12.3143") for line in lines)


def test_interval_block():
    ci = confidence_interval(SAMPLE, confidence_level=0.90)
    text = format_confidence_interval(ci)
    assert text.startswith("90% Confidence Interval for the Mean")
    assert f"[{ci.lower:.4f}, {ci.upper:.4f}]" in text
    assert "Sample size    : 7" in text
    assert format_value_with_margin(ci.mean, ci.margin_error) in text


def test_ttest_block_one_sample():
    result = simple_ttest(SAMPLE, mu=12)
    text = format_ttest(result)
    assert text.splitlines()[0] == "One-sample t-test"
    assert result.interpretation in text
    assert "95% confidence interval for the mean:" in text
    assert "Alternative hypothesis: two-sided" in text


def test_ttest_block_two_sample():
    result = simple_ttest(
        [1.0, 2.0, 3.0, 4.0], [2.5, 3.5, 4.5, 6.0], alternative="less"
    )
    text = format_ttest(result)
    assert text.splitlines()[0] == "Two-sample t-test"
    assert "confidence interval for the mean difference: [-inf," in text
    assert "Alternative hypothesis: less" in text


def test_results_to_dataframe_layout():
    data = generate_synthetic_data(n=25, seed=5)
    results = {
        "descriptive": descriptive_stats(data.sample),
        "interval": confidence_interval(data.sample),
        "ttest": simple_ttest(data.sample, mu=50),
        "data": data,
    }
    table = results_to_dataframe(results)

    assert list(table.columns) == ["Analysis", "Statistic", "Value"]
    assert set(table["Analysis"]) == {"descriptive", "interval", "ttest", "data"}

    ttest_rows = table[table["Analysis"] == "ttest"].set_index("Statistic")["Value"]
    assert {"conf_int_lower", "conf_int_upper", "estimate_1", "p_value"} <= set(
        ttest_rows.index
    )
    assert "conf_int" not in ttest_rows.index

    data_rows = table[table["Analysis"] == "data"].set_index("Statistic")["Value"]
    assert data_rows["sample_size"] == 25
    assert "sample" not in data_rows.index


def test_results_to_dataframe_rejects_foreign_values():
    with pytest.raises(TypeError, match="Unsupported result type"):
        results_to_dataframe({"raw": {"mean": 1.0}})


def test_save_results_to_csv(tmp_path):
    outdir = tmp_path / "nested" / "out"
    summary = descriptive_stats([1.0, 2.0, 3.0, 4.0])
    path = save_results_to_csv({"summary": summary}, str(outdir))

    assert path.endswith(RESULTS_FILENAME)
    table = pd.read_csv(path)
    assert list(table.columns) == ["Analysis", "Statistic", "Value"]
    values = table.set_index("Statistic")["Value"]
    assert float(values["mean"]) == pytest.approx(2.5)
    assert float(values["n"]) == 4
