"""Student-t confidence intervals for a population mean."""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from scipy.stats import t as student_t

from ..schema import IntervalResult
from ..validation import (
    prepare_sample,
    require_observations,
    validate_confidence_level,
)
from .descriptive import is_essentially_zero, sample_sd

DEFAULT_CONFIDENCE_LEVEL = 0.95


def t_critical(confidence_level: float, df: float) -> float:
    """Return the two-sided Student t critical value for ``confidence_level``."""
    alpha = 1.0 - confidence_level
    return float(student_t.ppf(1.0 - alpha / 2.0, df))


def confidence_interval(
    sample: Any,
    confidence_level: float = DEFAULT_CONFIDENCE_LEVEL,
    drop_missing: bool = True,
) -> IntervalResult:
    """Calculate a confidence interval for the population mean.

    Args:
        sample: Sequence of numbers. ``None``/``NaN`` entries are missing.
        confidence_level (float, optional): Coverage probability strictly
            between 0 and 1. Defaults to ``0.95``.
        drop_missing (bool, optional): Remove missing values before
            computing. Defaults to ``True``.

    Returns:
        IntervalResult: Sample mean, bounds, confidence level, sample size,
        standard error and margin of error.

    Raises:
        InvalidInputError: If the sample is non-numeric, the confidence level
            is out of range, or fewer than 2 usable observations remain.

    Note:
        The critical value always comes from the t distribution with
        ``n - 1`` degrees of freedom, however large the sample. There is no
        switch to the normal approximation.
        A standard error within floating-point noise of zero, as for a
        constant sample, is reported as exactly 0.

    References:
        One-sample t interval: mean ± t(1 - α/2, n - 1) · s / √n.
    """
    values, _ = prepare_sample(sample, drop_missing=drop_missing)
    level = validate_confidence_level(confidence_level)
    require_observations(values, 2)

    n = int(len(values))
    mean = float(np.mean(values))
    se = sample_sd(values) / math.sqrt(n)
    if is_essentially_zero(se, mean):
        se = 0.0
    margin_error = t_critical(level, n - 1) * se

    return IntervalResult(
        mean=mean,
        lower=mean - margin_error,
        upper=mean + margin_error,
        confidence_level=level,
        n=n,
        se=se,
        margin_error=margin_error,
    )
