"""Centralized plotting style, annotation, and save helpers."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

OUTPUT_FORMATS: tuple[str, ...] = ("png", "pdf", "svg")
FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 10.0
    TITLE_FONTSIZE: float = 14.0
    LABEL_FONTSIZE: float = 12.0
    TICK_FONTSIZE: float = 10.0
    ANNOTATION_FONTSIZE: float = 10.0
    LINEWIDTH: float = 1.5
    LINEWIDTH_THIN: float = 1.0
    BAR_ALPHA: float = 0.7
    GRID_ALPHA: float = 0.25
    FIGSIZE_SINGLE: tuple[float, float] = (7.0, 4.5)


STYLE = StyleConfig()

FONT_SIZES = {
    "title": STYLE.TITLE_FONTSIZE,
    "axis_label": STYLE.LABEL_FONTSIZE,
    "tick": STYLE.TICK_FONTSIZE,
    "annotation": STYLE.ANNOTATION_FONTSIZE,
}


def apply_global_style(font_scale: float = 1.0) -> None:
    """Update Matplotlib rcParams for single-panel teaching figures."""
    scale = float(font_scale)
    plt.rcParams.update(
        {
            "font.size": STYLE.BASE_FONTSIZE * scale,
            "axes.titlesize": STYLE.TITLE_FONTSIZE * scale,
            "axes.titleweight": "bold",
            "axes.titlelocation": "center",
            "axes.labelsize": STYLE.LABEL_FONTSIZE * scale,
            "xtick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "ytick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "axes.linewidth": STYLE.LINEWIDTH_THIN,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "patch.edgecolor": "white",
            "lines.linewidth": STYLE.LINEWIDTH,
            "legend.frameon": False,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
        }
    )


def setup_plot_style() -> None:
    """Apply the project plotting style once per process."""
    if not _STYLE_STATE["initialized"]:
        apply_global_style()
        _STYLE_STATE["initialized"] = True


def clean_axis(ax: Axes, *, nbins: int = 6, value_grid: bool = True) -> None:
    """Limit tick counts, hide the top/right spines and add a dotted y grid."""
    ax.tick_params(axis="both", labelsize=FONT_SIZES["tick"])
    for axis in (ax.xaxis, ax.yaxis):
        axis.set_major_locator(MaxNLocator(nbins=nbins))
    for side in ("top", "right"):
        ax.spines[side].set_visible(False)
    ax.grid(False)
    if value_grid:
        ax.grid(True, axis="y", alpha=STYLE.GRID_ALPHA, linestyle=":")


def set_axis_labels(
    ax: Axes,
    x: str | None = None,
    y: str | None = None,
    title: str | None = None,
) -> None:
    """Apply axis labels and a centered bold title with project typography."""
    if x is not None:
        ax.set_xlabel(x, fontsize=FONT_SIZES["axis_label"], labelpad=6)
    if y is not None:
        ax.set_ylabel(y, fontsize=FONT_SIZES["axis_label"], labelpad=6)
    if title is not None:
        ax.set_title(
            title, fontsize=FONT_SIZES["title"], fontweight="bold", loc="center"
        )


def add_info_box(
    ax: Axes,
    text: str,
    loc: str = "upper right",
    fontsize: float = FONT_SIZES["annotation"],
    *,
    bbox: bool = True,
) -> None:
    """Add an annotation anchored to one corner, optionally in a rounded box."""
    anchor_map = {
        "upper left": (0.03, 0.97, "left", "top"),
        "upper right": (0.97, 0.97, "right", "top"),
        "lower left": (0.03, 0.03, "left", "bottom"),
        "lower right": (0.97, 0.03, "right", "bottom"),
    }
    x, y, ha, va = anchor_map.get(loc, anchor_map["upper right"])
    box = (
        {"boxstyle": "round,pad=0.3", "facecolor": "white", "alpha": 0.8}
        if bbox
        else None
    )
    ax.text(
        x,
        y,
        text,
        transform=ax.transAxes,
        ha=ha,
        va=va,
        fontsize=fontsize,
        bbox=box,
    )


def save_figure(
    fig: Figure,
    savepath: str | Path,
    formats: Sequence[str] = ("png",),
    dpi: int = FIGURE_DPI,
    *,
    bbox_inches: str = "tight",
    pad_inches: float = 0.12,
) -> Path:
    """Save a figure to one or more formats and return the first path written.

    A suffix on ``savepath`` is replaced by each requested format, so
    ``hist.png`` with ``formats=("png", "pdf")`` writes ``hist.png`` and
    ``hist.pdf``.
    """
    for ext in formats:
        if ext not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported extension '{ext}'. Expected one of {OUTPUT_FORMATS}."
            )
    base = Path(savepath)
    if base.suffix:
        base = base.with_suffix("")
    base.parent.mkdir(parents=True, exist_ok=True)
    for ext in formats:
        target = base.with_suffix(f".{ext}")
        fig.savefig(
            str(target),
            dpi=dpi if ext == "png" else None,
            bbox_inches=bbox_inches,
            pad_inches=pad_inches,
        )
    return base.with_suffix(f".{formats[0]}")


def finalize_figure(fig: Figure, *, tight: bool = True) -> Figure:
    """Apply final layout to a figure and return it."""
    if tight:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            fig.tight_layout(pad=1.2)
    return fig
