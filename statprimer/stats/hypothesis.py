"""One-sample, Welch two-sample and paired t-tests with plain-language output.

The significance decision compares the p-value with ``1 - confidence_level``
rather than a fixed alpha, so a 99% confidence level demands p < 0.01.
"""

from __future__ import annotations

import math
import warnings
from typing import Any, Optional, Sequence, Tuple

import numpy as np
from scipy import stats as scipy_stats

from ..errors import InvalidInputError
from ..schema import TEST_LABELS, TestResult
from ..validation import (
    coerce_numeric,
    require_observations,
    validate_confidence_level,
    validate_finite,
)
from .descriptive import is_essentially_zero, sample_sd
from .interval import DEFAULT_CONFIDENCE_LEVEL

VALID_ALTERNATIVES: Tuple[str, ...] = ("two-sided", "greater", "less")
_ALTERNATIVE_ALIASES = {"two.sided": "two-sided", "two_sided": "two-sided"}


def normalize_alternative(alternative: Any) -> str:
    """Map an alternative-hypothesis tag onto ``VALID_ALTERNATIVES``."""
    if not isinstance(alternative, str):
        raise InvalidInputError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}."
        )
    tag = alternative.strip().lower()
    tag = _ALTERNATIVE_ALIASES.get(tag, tag)
    if tag not in VALID_ALTERNATIVES:
        raise InvalidInputError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}."
        )
    return tag


def _fmt(value: float, digits: int) -> str:
    """Round for display and drop trailing zeros (``3.000`` -> ``3``)."""
    value = float(value)
    if not math.isfinite(value):
        return str(value)
    return np.format_float_positional(round(value, digits), trim="-")


def _run_scipy_ttest(
    test_type: str,
    x: np.ndarray,
    y: Optional[np.ndarray],
    mu: float,
    alternative: str,
) -> Any:
    if test_type == "one-sample":
        return scipy_stats.ttest_1samp(x, popmean=mu, alternative=alternative)
    if test_type == "paired":
        return scipy_stats.ttest_rel(x, y, alternative=alternative)
    return scipy_stats.ttest_ind(x, y, equal_var=False, alternative=alternative)


def _degenerate_inference(
    estimate: float, null_value: float, alternative: str
) -> Tuple[float, float, Tuple[float, float]]:
    """Return statistic, p-value and interval when the standard error is zero.

    There is no sampling distribution to refer to. The statistic is 0 or ±inf
    depending on whether the estimate matches the null value, the p-value
    takes the matching limit and the interval collapses onto the estimate.
    """
    warnings.warn(
        "Data are essentially constant; the t statistic is degenerate.",
        RuntimeWarning,
        stacklevel=3,
    )
    if np.isclose(estimate, null_value, rtol=0.0, atol=1e-12):
        statistic, p_value = 0.0, 1.0
    else:
        statistic = math.inf if estimate > null_value else -math.inf
        if alternative == "less":
            p_value = 1.0 if statistic > 0 else 0.0
        elif alternative == "greater":
            p_value = 0.0 if statistic > 0 else 1.0
        else:
            p_value = 0.0

    if alternative == "less":
        conf_int = (-math.inf, estimate)
    elif alternative == "greater":
        conf_int = (estimate, math.inf)
    else:
        conf_int = (estimate, estimate)
    return statistic, p_value, conf_int


def _paired_values(
    x_raw: np.ndarray, y_raw: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    if len(x_raw) != len(y_raw):
        raise InvalidInputError(
            f"x and y must have the same length for a paired test, "
            f"got {len(x_raw)} and {len(y_raw)}."
        )
    complete = ~(np.isnan(x_raw) | np.isnan(y_raw))
    return x_raw[complete], y_raw[complete]


def _interpretation(
    test_type: str,
    label: str,
    x: np.ndarray,
    y: Optional[np.ndarray],
    mu: float,
    statistic: float,
    p_value: float,
    significant: bool,
    confidence_level: float,
) -> str:
    significance = (
        "statistically significant" if significant else "not statistically significant"
    )
    verb = "reject" if significant else "fail to reject"
    level_text = f"{_fmt(confidence_level * 100, 10)}% confidence level"

    if test_type == "one-sample":
        lines = [
            f"Based on the {label} with {len(x)} observations:",
            f"- Sample mean: {_fmt(np.mean(x), 3)}",
        ]
        conclusion = f"{verb} the null hypothesis that the mean equals {_fmt(mu, 10)}"
    else:
        mean_x = float(np.mean(x))
        mean_y = float(np.mean(y))
        lines = [
            f"Based on the {label} comparing {len(x)} vs {len(y)} observations:",
            f"- Group 1 mean: {_fmt(mean_x, 3)}",
            f"- Group 2 mean: {_fmt(mean_y, 3)}",
            f"- Mean difference: {_fmt(mean_x - mean_y, 3)}",
        ]
        conclusion = f"{verb} the null hypothesis of equal means"

    lines.extend(
        [
            f"- T-statistic: {_fmt(statistic, 3)}",
            f"- P-value: {_fmt(p_value, 4)}",
            f"- Result is {significance} at {level_text}",
            f"- Conclusion: We {conclusion}",
        ]
    )
    return "\n".join(lines)


def simple_ttest(
    x: Sequence[float],
    y: Optional[Sequence[float]] = None,
    mu: float = 0,
    alternative: str = "two-sided",
    confidence_level: float = DEFAULT_CONFIDENCE_LEVEL,
    paired: bool = False,
) -> TestResult:
    """Run a one-sample, Welch two-sample or paired t-test.

    Args:
        x: First sample (or the only sample for a one-sample test).
        y: Optional second sample. Supplying it switches to a two-sample
            test (or a paired test when ``paired`` is ``True``).
        mu (float, optional): Hypothesised mean for the one-sample test.
            Ignored when ``y`` is given. Defaults to ``0``.
        alternative (str, optional): ``"two-sided"``, ``"greater"`` or
            ``"less"``. ``"two.sided"`` is accepted as an alias.
        confidence_level (float, optional): Confidence level for the
            interval, also used as the significance threshold
            ``1 - confidence_level``. Defaults to ``0.95``.
        paired (bool, optional): Treat ``x`` and ``y`` as matched pairs.
            Only meaningful when ``y`` is given.

    Returns:
        TestResult: Test type, t statistic, p-value, confidence interval,
        sample mean(s), a plain-language interpretation and the significance
        flag.

    Raises:
        InvalidInputError: If ``x`` or ``y`` is non-numeric, the options are
            invalid, a sample has fewer than 2 usable observations, or paired
            samples differ in length.

    Note:
        Missing values are dropped from each sample on its own. For a paired
        test the pairs are kept aligned: a pair is dropped when either member
        is missing.
        The two-sample test does not assume equal variances (Welch).
        Statistics, p-values, degrees of freedom and intervals come from
        :func:`scipy.stats.ttest_1samp`, :func:`scipy.stats.ttest_ind` and
        :func:`scipy.stats.ttest_rel`. When the standard error is within
        floating-point noise of zero the test is degenerate and is resolved
        without them, with a ``RuntimeWarning``.
    """
    x_raw = coerce_numeric(x, name="x")
    y_raw = coerce_numeric(y, name="y") if y is not None else None
    alternative = normalize_alternative(alternative)
    level = validate_confidence_level(confidence_level)

    if y_raw is None:
        mu = validate_finite(mu, "mu")
        x_vals = x_raw[~np.isnan(x_raw)]
        require_observations(x_vals, 2, name="x")
        n_x = int(len(x_vals))
        test_type = "one-sample"
        y_vals = None
        estimate: Tuple[float, ...] = (float(np.mean(x_vals)),)
        point = estimate[0]
        null_value = mu
        stderr = sample_sd(x_vals) / math.sqrt(n_x)
        df = float(n_x - 1)
    elif paired:
        x_vals, y_vals = _paired_values(x_raw, y_raw)
        require_observations(x_vals, 2, name="paired x/y")
        n_x = int(len(x_vals))
        test_type = "paired"
        diffs = x_vals - y_vals
        estimate = (float(np.mean(x_vals)), float(np.mean(y_vals)))
        point = float(np.mean(diffs))
        null_value = 0.0
        stderr = sample_sd(diffs) / math.sqrt(n_x)
        df = float(n_x - 1)
    else:
        x_vals = x_raw[~np.isnan(x_raw)]
        y_vals = y_raw[~np.isnan(y_raw)]
        require_observations(x_vals, 2, name="x")
        require_observations(y_vals, 2, name="y")
        n_x = int(len(x_vals))
        test_type = "two-sample"
        estimate = (float(np.mean(x_vals)), float(np.mean(y_vals)))
        point = estimate[0] - estimate[1]
        null_value = 0.0
        var_x = float(np.var(x_vals, ddof=1))
        var_y = float(np.var(y_vals, ddof=1))
        stderr = math.sqrt(var_x / n_x + var_y / len(y_vals))
        df = float(n_x + len(y_vals) - 2)

    if is_essentially_zero(stderr, point, null_value, *estimate):
        stderr = 0.0
        statistic, p_value, conf_int = _degenerate_inference(
            point, null_value, alternative
        )
    else:
        res = _run_scipy_ttest(test_type, x_vals, y_vals, mu, alternative)
        statistic = float(res.statistic)
        p_value = float(res.pvalue)
        df = float(res.df)
        ci = res.confidence_interval(confidence_level=level)
        conf_int = (float(ci.low), float(ci.high))

    significant = bool(p_value < (1.0 - level))

    label = TEST_LABELS[test_type]
    interpretation = _interpretation(
        test_type,
        label,
        x_vals,
        y_vals,
        mu,
        statistic,
        p_value,
        significant,
        level,
    )

    return TestResult(
        test_type=test_type,
        statistic=statistic,
        p_value=p_value,
        conf_int=conf_int,
        estimate=estimate,
        interpretation=interpretation,
        significant=significant,
        df=df,
        stderr=float(stderr),
        alternative=alternative,
        confidence_level=level,
        mu=mu if y_raw is None else None,
        n_x=n_x,
        n_y=None if y_vals is None else int(len(y_vals)),
    )
