"""
A small Python package of statistics helpers for teaching and demos.

Computes summary statistics, t-based confidence intervals and t-tests with a
plain-language interpretation, and generates synthetic samples to try them on.

Modules:
    - stats: Descriptive statistics, confidence intervals and t-tests.
    - synthetic: Reproducible samples from four fixed distributions.
    - plotting: Histogram rendering with optional normal overlay.
    - reporting: Readable text blocks and tidy result tables.
    - output: CSV export of result tables.
"""

__version__ = "1.0.0"

from .errors import InvalidInput, InvalidInputError
from .output import save_results_to_csv
from .plotting import plot_histogram
from .reporting import (
    format_confidence_interval,
    format_descriptive_stats,
    format_ttest,
    format_value_with_margin,
    results_to_dataframe,
)
from .schema import IntervalResult, SummaryResult, SyntheticData, TestResult
from .stats import confidence_interval, descriptive_stats, simple_ttest
from .synthetic import generate_synthetic_data

__all__ = [
    # Statistics
    "descriptive_stats",
    "confidence_interval",
    "simple_ttest",
    # Data generation
    "generate_synthetic_data",
    # Plotting
    "plot_histogram",
    # Reporting
    "format_descriptive_stats",
    "format_confidence_interval",
    "format_ttest",
    "format_value_with_margin",
    "results_to_dataframe",
    "save_results_to_csv",
    # Types
    "SummaryResult",
    "IntervalResult",
    "TestResult",
    "SyntheticData",
    "InvalidInputError",
    "InvalidInput",
]
