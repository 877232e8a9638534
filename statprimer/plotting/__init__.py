"""
Plotting utilities for the teaching helpers.

Modules:
    histogram:
        Histogram of one sample with an optional fitted normal curve and an
        ``n`` / mean / SD annotation box.

    style:
        Shared rcParams, axis cleanup, annotation and save helpers.

Design Principles:
    1. No inference in plotting code. Figures show the sample and simple
       summaries; tests and intervals live in ``statprimer.stats``.

    2. Functions return the matplotlib ``Figure`` so notebooks can display
       it; saving to disk is optional.
"""

from .histogram import plot_histogram
from .style import save_figure, setup_plot_style

__all__ = ["plot_histogram", "save_figure", "setup_plot_style"]
