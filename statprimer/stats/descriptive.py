"""Summarize a numeric sample with the usual descriptive statistics."""

from __future__ import annotations

import math
import warnings
from typing import Any

import numpy as np

from ..schema import SummaryResult
from ..validation import prepare_sample, require_observations

QUANTILE_METHOD = "linear"
# Standard errors at or below this multiple of the data scale are rounding noise.
CONSTANT_TOLERANCE = 10 * np.finfo(float).eps


def sample_sd(values: np.ndarray) -> float:
    """Return the ``n - 1`` standard deviation, or NaN for fewer than 2 values."""
    if len(values) < 2:
        return math.nan
    return float(np.std(values, ddof=1))


def is_essentially_zero(stderr: float, *scales: float) -> bool:
    """Return True when ``stderr`` is indistinguishable from zero.

    Constant data such as ``[0.1, 0.1, 0.1]`` leave a standard error of about
    1e-17 after floating-point rounding. It is treated as zero when it falls
    below ``CONSTANT_TOLERANCE`` times the largest of ``scales`` and 1.
    """
    scale = max([1.0, *(abs(float(s)) for s in scales)])
    return float(stderr) <= CONSTANT_TOLERANCE * scale


def descriptive_stats(sample: Any, drop_missing: bool = True) -> SummaryResult:
    """Compute descriptive statistics for a numeric sample.

    Args:
        sample: Sequence of numbers. ``None``/``NaN`` entries are missing.
        drop_missing (bool, optional): Remove missing values before
            computing. Defaults to ``True``.

    Returns:
        SummaryResult: Mean, median, sample SD and variance (``n - 1``
        denominator), min, max, 25th and 75th percentiles, the number of
        retained values and the number of missing values in the input.

    Raises:
        InvalidInputError: If the sample is non-numeric, contains missing
            values while ``drop_missing`` is ``False``, or has no values left
            to analyze.

    Note:
        Percentiles use linear interpolation between order statistics, the
        same rule as ``numpy.quantile(..., method="linear")``.
        A single value has an undefined SD and variance; both are reported as
        NaN with a ``RuntimeWarning``.
    """
    values, n_missing = prepare_sample(sample, drop_missing=drop_missing)
    require_observations(values, 1)

    n = int(len(values))
    if n < 2:
        warnings.warn(
            "Standard deviation and variance are undefined for a single "
            "observation; reporting NaN.",
            RuntimeWarning,
            stacklevel=2,
        )
        sd = math.nan
        var = math.nan
    else:
        sd = sample_sd(values)
        var = float(np.var(values, ddof=1))

    q25, q75 = np.quantile(values, [0.25, 0.75], method=QUANTILE_METHOD)

    return SummaryResult(
        mean=float(np.mean(values)),
        median=float(np.median(values)),
        sd=sd,
        var=var,
        min=float(np.min(values)),
        max=float(np.max(values)),
        q25=float(q25),
        q75=float(q75),
        n=n,
        missing=n_missing,
    )
