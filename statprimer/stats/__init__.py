"""
Statistical core for the teaching helpers.

This subpackage holds the numeric routines. All functions accept plain
sequences, numpy arrays or pandas Series and return frozen result records
from ``statprimer.schema``; no plotting or reporting logic is included.

Modules:
    descriptive:
        Mean, median, sample SD/variance, range and linear-interpolation
        quartiles, with missing-value accounting.

    interval:
        Student-t confidence interval for a population mean. Always uses the
        t distribution, whatever the sample size.

    hypothesis:
        One-sample, Welch two-sample and paired t-tests with a
        plain-language interpretation. Significance is judged against
        ``1 - confidence_level``.

Design Principle:
    This subpackage has no dependencies on plotting/ or reporting modules.
    It provides pure numerical utilities that can be independently tested.
"""

from .descriptive import descriptive_stats
from .hypothesis import VALID_ALTERNATIVES, simple_ttest
from .interval import DEFAULT_CONFIDENCE_LEVEL, confidence_interval

__all__ = [
    "descriptive_stats",
    "confidence_interval",
    "simple_ttest",
    "DEFAULT_CONFIDENCE_LEVEL",
    "VALID_ALTERNATIVES",
]
