"""Render presentation-ready histograms of a single numeric sample."""

from __future__ import annotations

import numbers
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from scipy.stats import norm

from ..errors import InvalidInputError
from ..stats.descriptive import sample_sd
from ..validation import prepare_sample, require_observations
from .style import (
    STYLE,
    add_info_box,
    clean_axis,
    finalize_figure,
    save_figure,
    set_axis_labels,
    setup_plot_style,
)

DEFAULT_BINS = 30
DEFAULT_COLOR = "lightblue"
NORMAL_CURVE_POINTS = 100


def _validate_bins(bins: Any) -> int:
    if (
        isinstance(bins, (bool, np.bool_))
        or not isinstance(bins, numbers.Integral)
        or bins <= 0
    ):
        raise InvalidInputError(f"bins must be a positive integer, got {bins!r}.")
    return int(bins)


def normal_overlay(values: np.ndarray, bins: int) -> tuple[np.ndarray, np.ndarray]:
    """Return a fitted normal curve scaled to histogram counts.

    Args:
        values (numpy.ndarray): Sample values without missing entries.
        bins (int): Number of histogram bins.

    Returns:
        tuple[numpy.ndarray, numpy.ndarray]: ``NORMAL_CURVE_POINTS`` x
        positions spanning the sample range and the matching heights
        ``pdf(x) * n * range / bins``.
    """
    mean = float(np.mean(values))
    sd = sample_sd(values)
    lo = float(np.min(values))
    hi = float(np.max(values))
    x_grid = np.linspace(lo, hi, NORMAL_CURVE_POINTS)
    y_curve = norm.pdf(x_grid, loc=mean, scale=sd) * len(values) * (hi - lo) / bins
    return x_grid, y_curve


def stats_text(values: np.ndarray) -> str:
    """Format the sample size, mean and SD annotation shown on the plot."""
    return (
        f"n = {len(values)}\n"
        f"Mean = {np.mean(values):.2f}\n"
        f"SD = {sample_sd(values):.2f}"
    )


def plot_histogram(
    sample: Any,
    title: str = "Histogram",
    x_label: str = "Value",
    y_label: str = "Frequency",
    bins: int = DEFAULT_BINS,
    overlay_normal: bool = False,
    annotate_stats: bool = True,
    color: str = DEFAULT_COLOR,
    output_path: str | Path | None = None,
) -> Figure:
    """Create a histogram with optional normal overlay and summary annotation.

    Args:
        sample: Sequence of numbers. Missing values are dropped.
        title (str, optional): Plot title. Defaults to ``"Histogram"``.
        x_label (str, optional): X-axis label. Defaults to ``"Value"``.
        y_label (str, optional): Y-axis label. Defaults to ``"Frequency"``.
        bins (int, optional): Number of bins. Defaults to ``30``.
        overlay_normal (bool, optional): Draw a dashed red normal curve
            fitted to the sample mean and SD. Defaults to ``False``.
        annotate_stats (bool, optional): Print ``n``, mean and SD in the
            upper-right corner. Defaults to ``True``.
        color (str, optional): Bar fill color. Defaults to ``"lightblue"``.
        output_path (str or Path, optional): When given, also save the
            figure there as PNG.

    Returns:
        matplotlib.figure.Figure: The rendered figure. The caller owns it and
        should close it with ``plt.close(fig)`` when done.

    Raises:
        InvalidInputError: If the sample is non-numeric or empty after
            dropping missing values, ``bins`` is not a positive integer, or a
            normal overlay is requested for fewer than 2 values.
    """
    values, _ = prepare_sample(sample, drop_missing=True)
    require_observations(values, 1)
    bins = _validate_bins(bins)
    if overlay_normal:
        require_observations(values, 2)

    setup_plot_style()
    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.hist(
        values,
        bins=bins,
        color=color,
        edgecolor="white",
        alpha=STYLE.BAR_ALPHA,
        label="Observed",
    )

    if overlay_normal and sample_sd(values) > 0:
        x_grid, y_curve = normal_overlay(values, bins)
        ax.plot(
            x_grid,
            y_curve,
            color="red",
            linewidth=STYLE.LINEWIDTH,
            linestyle="--",
            label="Normal fit",
        )

    if annotate_stats:
        add_info_box(ax, stats_text(values), loc="upper right")

    set_axis_labels(ax, x=x_label, y=y_label, title=title)
    clean_axis(ax)
    finalize_figure(fig)

    if output_path is not None:
        save_figure(fig, output_path)
    return fig
