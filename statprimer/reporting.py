"""Format result records as readable text and tidy tables.

This module is used after the numerical work to present results the way a
statistics handout would: short labelled blocks of text, and a long-format
table that can be exported with :mod:`statprimer.output`.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Tuple

import numpy as np
import pandas as pd

from .schema import IntervalResult, SummaryResult, SyntheticData, TestResult


def _round_margin(margin: float) -> Tuple[float, int]:
    """Round a margin to 1 significant figure, or 2 when it leads with 1.

    Returns:
        tuple[float, int]: Rounded margin and the ``round`` digits used,
        which may be negative (tens, hundreds, ...).
    """
    m = abs(float(margin))
    exponent = math.floor(math.log10(m))
    leading = m / (10**exponent)
    sig_figs = 2 if 1.0 <= leading < 2.0 else 1
    ndigits = sig_figs - 1 - exponent
    rounded = round(m, ndigits)
    if rounded == 0:
        ndigits = sig_figs - exponent
        rounded = round(m, ndigits)
    return float(rounded), int(ndigits)


def format_value_with_margin(value: float, margin: float) -> str:
    """Render ``value ± margin`` with the value rounded to the margin's place.

    Args:
        value (float): Point estimate.
        margin (float): Margin of error in the same units as ``value``.

    Returns:
        str: For example ``"10.3 ± 0.4"``. Zero, negative or non-finite
        margins are shown unrounded.

    Note:
        The margin keeps 1 significant figure (2 when its leading digit is
        1) and the value is rounded to the same decimal place.
    """
    margin = float(margin)
    if not math.isfinite(margin) or margin <= 0:
        return f"{float(value):g} ± {margin:g}"
    rounded_margin, ndigits = _round_margin(margin)
    places = max(ndigits, 0)
    rounded_value = round(float(value), ndigits)
    return f"{rounded_value:.{places}f} ± {rounded_margin:.{places}f}"


def format_descriptive_stats(result: SummaryResult) -> str:
    """Return a labelled multi-line block for a :class:`SummaryResult`."""
    rows = [
        ("Mean", result.mean),
        ("Median", result.median),
        ("SD", result.sd),
        ("Variance", result.var),
        ("Min", result.min),
        ("Max", result.max),
        ("Q25", result.q25),
        ("Q75", result.q75),
    ]
    lines = ["Descriptive Statistics", "======================"]
    lines.extend(f"{label:<9}: {value:.4f}" for label, value in rows)
    lines.append(f"{'N':<9}: {result.n}")
    lines.append(f"{'Missing':<9}: {result.missing}")
    return "\n".join(lines)


def format_confidence_interval(result: IntervalResult) -> str:
    """Return a labelled multi-line block for an :class:`IntervalResult`."""
    pct = f"{result.confidence_level * 100:g}%"
    return "\n".join(
        [
            f"{pct} Confidence Interval for the Mean",
            "=" * (len(pct) + 33),
            f"Sample mean    : {result.mean:.4f}",
            f"Interval       : [{result.lower:.4f}, {result.upper:.4f}]",
            f"Margin of error: {result.margin_error:.4f}",
            f"Standard error : {result.se:.4f}",
            f"Sample size    : {result.n}",
            f"Reported as    : "
            f"{format_value_with_margin(result.mean, result.margin_error)}",
        ]
    )


def format_ttest(result: TestResult) -> str:
    """Return the interpretation of a :class:`TestResult` with its interval."""
    pct = f"{result.confidence_level * 100:g}%"
    target = "mean" if result.test_type == "one-sample" else "mean difference"
    low, high = result.conf_int
    return "\n".join(
        [
            result.method,
            "=" * len(result.method),
            result.interpretation,
            f"{pct} confidence interval for the {target}: [{low:.4f}, {high:.4f}]",
            f"Alternative hypothesis: {result.alternative}",
        ]
    )


def _flatten_record(record: Any) -> Dict[str, Any]:
    if not isinstance(
        record, (SummaryResult, IntervalResult, TestResult, SyntheticData)
    ):
        raise TypeError(f"Unsupported result type: {type(record).__name__}")
    flat: Dict[str, Any] = {}
    for key in record.keys():
        value = getattr(record, key)
        if isinstance(value, np.ndarray):
            flat[f"{key}_size"] = int(value.size)
        elif key == "conf_int":
            flat["conf_int_lower"], flat["conf_int_upper"] = value
        elif key == "estimate":
            for idx, est in enumerate(value, start=1):
                flat[f"estimate_{idx}"] = est
        else:
            flat[key] = value
    return flat


def results_to_dataframe(results: Mapping[str, Any]) -> pd.DataFrame:
    """Collect labelled result records into one long-format table.

    Args:
        results (Mapping[str, Any]): Analysis label mapped to a result
            record from this package.

    Returns:
        pandas.DataFrame: Columns ``Analysis``, ``Statistic`` and ``Value``,
        one row per field. Tuples are split into numbered fields and sample
        arrays are reported by size only.

    Raises:
        TypeError: If a value is not one of the package's result records.
    """
    rows: List[Dict[str, Any]] = []
    for label, record in results.items():
        for key, value in _flatten_record(record).items():
            rows.append({"Analysis": label, "Statistic": key, "Value": value})
    return pd.DataFrame(rows, columns=["Analysis", "Statistic", "Value"])
