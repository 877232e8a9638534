"""Define the immutable result records returned by the public functions."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional, Tuple

import numpy as np


class _RecordAccess:
    """Mapping-style read access for frozen result dataclasses."""

    def __getitem__(self, key: str) -> Any:
        if key not in self.keys():
            raise KeyError(key)
        return getattr(self, key)

    def keys(self) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(self))

    def as_dict(self) -> Dict[str, Any]:
        """Return a plain ``dict`` copy of the record."""
        return asdict(self)


@dataclass(frozen=True)
class SummaryResult(_RecordAccess):
    """Descriptive statistics for one sample.

    Attributes:
        mean: Arithmetic mean of the retained values.
        median: Median of the retained values.
        sd: Sample standard deviation (``n - 1`` denominator).
        var: Sample variance (``n - 1`` denominator).
        min: Smallest retained value.
        max: Largest retained value.
        q25: 25th percentile, linear interpolation between order statistics.
        q75: 75th percentile, linear interpolation between order statistics.
        n: Number of retained values.
        missing: Number of missing markers found in the original input.
    """

    mean: float
    median: float
    sd: float
    var: float
    min: float
    max: float
    q25: float
    q75: float
    n: int
    missing: int

    @property
    def count(self) -> int:
        return self.n


@dataclass(frozen=True)
class IntervalResult(_RecordAccess):
    """Two-sided t-based confidence interval for a population mean.

    Attributes:
        mean: Sample mean.
        lower: Lower bound, ``mean - margin_error``.
        upper: Upper bound, ``mean + margin_error``.
        confidence_level: Confidence level used, strictly inside ``(0, 1)``.
        n: Number of observations used.
        se: Standard error of the mean, ``sd / sqrt(n)``.
        margin_error: Half-width of the interval.
    """

    mean: float
    lower: float
    upper: float
    confidence_level: float
    n: int
    se: float
    margin_error: float

    @property
    def width(self) -> float:
        return self.upper - self.lower


TEST_LABELS = {
    "one-sample": "One-sample t-test",
    "two-sample": "Two-sample t-test",
    "paired": "Paired t-test",
}


@dataclass(frozen=True)
class TestResult(_RecordAccess):
    """Outcome of :func:`statprimer.stats.hypothesis.simple_ttest`.

    Attributes:
        test_type: ``"one-sample"``, ``"two-sample"`` or ``"paired"``.
        statistic: Student t statistic.
        p_value: p-value for the requested alternative.
        conf_int: ``(lower, upper)`` interval for the mean (one-sample) or
            the mean difference (two-sample and paired). One-sided
            alternatives give an infinite bound.
        estimate: ``(mean_x,)`` for one-sample tests, ``(mean_x, mean_y)``
            otherwise.
        interpretation: Plain-language summary of the result.
        significant: ``p_value < 1 - confidence_level``.
        df: Degrees of freedom (Welch-Satterthwaite for two-sample tests).
        stderr: Standard error of the estimated mean or mean difference.
        alternative: ``"two-sided"``, ``"greater"`` or ``"less"``.
        confidence_level: Confidence level used for the interval and the
            significance threshold.
        mu: Hypothesised mean, or ``None`` when a second sample was given.
        n_x: Observations used from ``x``.
        n_y: Observations used from ``y`` (``None`` for one-sample tests).
    """

    __test__ = False

    test_type: str
    statistic: float
    p_value: float
    conf_int: Tuple[float, float]
    estimate: Tuple[float, ...]
    interpretation: str
    significant: bool
    df: float
    stderr: float
    alternative: str
    confidence_level: float
    mu: Optional[float]
    n_x: int
    n_y: Optional[int]

    @property
    def method(self) -> str:
        return TEST_LABELS[self.test_type]

    @property
    def mean_difference(self) -> Optional[float]:
        if len(self.estimate) < 2:
            return None
        return self.estimate[0] - self.estimate[1]


@dataclass(frozen=True, eq=False)
class SyntheticData(_RecordAccess):
    """Generated sample together with its population parameters.

    Attributes:
        sample: Generated values as a one-dimensional float array.
        true_mean: Population mean of the generating distribution.
        true_sd: Population standard deviation of the generating
            distribution (mixture value for ``"bimodal"``).
        distribution_name: Human-readable distribution label.
    """

    sample: np.ndarray
    true_mean: float
    true_sd: float
    distribution_name: str
