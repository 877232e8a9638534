"""
Synthetic datasets for exercising the statistics helpers in examples.

Four fixed distribution families are available. Their parameters live in a
small lookup table so the population mean and SD reported alongside each
sample always match the generator that produced it.

Reproducibility uses numpy's ``default_rng`` (PCG64). A given seed yields the
same sample on every call with the same numpy release; streams are not
expected to match other languages' generators.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import numpy as np

from .errors import InvalidInputError
from .schema import SyntheticData

DISTRIBUTION_TYPES = ("normal", "uniform", "skewed", "bimodal")

NORMAL_MEAN = 50.0
NORMAL_SD = 10.0
UNIFORM_MIN = 0.0
UNIFORM_MAX = 100.0
GAMMA_SHAPE = 2.0
GAMMA_RATE = 0.1
BIMODAL_MEANS = (40.0, 60.0)
BIMODAL_SD = 5.0


@dataclass(frozen=True)
class DistributionSpec:
    """Population parameters and sampler for one distribution family."""

    name: str
    true_mean: float
    true_sd: float
    sampler: Callable[[np.random.Generator, int], np.ndarray]


def _sample_normal(rng: np.random.Generator, n: int) -> np.ndarray:
    return rng.normal(loc=NORMAL_MEAN, scale=NORMAL_SD, size=n)


def _sample_uniform(rng: np.random.Generator, n: int) -> np.ndarray:
    return rng.uniform(low=UNIFORM_MIN, high=UNIFORM_MAX, size=n)


def _sample_skewed(rng: np.random.Generator, n: int) -> np.ndarray:
    # numpy parameterizes the gamma by scale, the reciprocal of the rate.
    return rng.gamma(shape=GAMMA_SHAPE, scale=1.0 / GAMMA_RATE, size=n)


def _sample_bimodal(rng: np.random.Generator, n: int) -> np.ndarray:
    n1 = n // 2
    n2 = n - n1
    low = rng.normal(loc=BIMODAL_MEANS[0], scale=BIMODAL_SD, size=n1)
    high = rng.normal(loc=BIMODAL_MEANS[1], scale=BIMODAL_SD, size=n2)
    return rng.permutation(np.concatenate([low, high]))


def _bimodal_sd() -> float:
    """SD of an equal-weight mixture: within variance plus between variance."""
    centre = sum(BIMODAL_MEANS) / 2.0
    between = sum((m - centre) ** 2 for m in BIMODAL_MEANS) / len(BIMODAL_MEANS)
    return math.sqrt(BIMODAL_SD**2 + between)


_DISTRIBUTIONS: Dict[str, DistributionSpec] = {
    "normal": DistributionSpec("Normal", NORMAL_MEAN, NORMAL_SD, _sample_normal),
    "uniform": DistributionSpec(
        "Uniform",
        (UNIFORM_MIN + UNIFORM_MAX) / 2.0,
        math.sqrt((UNIFORM_MAX - UNIFORM_MIN) ** 2 / 12.0),
        _sample_uniform,
    ),
    "skewed": DistributionSpec(
        "Right-skewed (Gamma)",
        GAMMA_SHAPE / GAMMA_RATE,
        math.sqrt(GAMMA_SHAPE / GAMMA_RATE**2),
        _sample_skewed,
    ),
    "bimodal": DistributionSpec(
        "Bimodal", sum(BIMODAL_MEANS) / 2.0, _bimodal_sd(), _sample_bimodal
    ),
}


def _rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a random generator, deterministic when ``seed`` is given."""
    return np.random.default_rng(seed)


def generate_synthetic_data(
    n: int = 100, type: str = "normal", seed: Optional[int] = None
) -> SyntheticData:
    """Generate a synthetic sample for demonstrations and tests.

    Args:
        n (int, optional): Sample size, a positive integer. Defaults to
            ``100``.
        type (str, optional): Distribution family: ``"normal"`` (mean 50,
            SD 10), ``"uniform"`` (on [0, 100]), ``"skewed"`` (gamma, shape 2,
            rate 0.1) or ``"bimodal"`` (equal mix of N(40, 5) and N(60, 5),
            shuffled). Defaults to ``"normal"``.
        seed (int, optional): Seed for reproducible output.

    Returns:
        SyntheticData: The sample with the population mean, population SD and
        a readable distribution name.

    Raises:
        InvalidInputError: If ``n`` is not a positive integer or ``type`` is
            not a known distribution family.
    """
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, numbers.Real):
        raise InvalidInputError(f"Sample size n must be a positive integer, got {n!r}.")
    if not float(n).is_integer() or n <= 0:
        raise InvalidInputError(f"Sample size n must be a positive integer, got {n!r}.")

    family = _DISTRIBUTIONS.get(type) if isinstance(type, str) else None
    if family is None:
        raise InvalidInputError(
            f"Unknown distribution type {type!r}; expected one of {DISTRIBUTION_TYPES}."
        )

    rng = _rng(seed)
    sample = np.asarray(family.sampler(rng, int(n)), dtype=float)
    return SyntheticData(
        sample=sample,
        true_mean=float(family.true_mean),
        true_sd=float(family.true_sd),
        distribution_name=family.name,
    )
