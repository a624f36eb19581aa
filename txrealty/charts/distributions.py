from __future__ import annotations

import math
from typing import List, Sequence

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from .style import pretty, save_fig


def plot_densities(
    df: pd.DataFrame,
    columns: Sequence[str],
    out_dir: str,
    formats: Sequence[str] = ("png",),
    dpi: int = 150,
) -> List[str]:
    """One kernel density panel per numeric variable, with the mean marked."""
    ncols = 3
    nrows = math.ceil(len(columns) / ncols)
    fig, axes = plt.subplots(nrows, ncols, figsize=(5 * ncols, 3.6 * nrows), squeeze=False)
    flat = axes.ravel()
    for ax, col in zip(flat, columns):
        sns.kdeplot(data=df, x=col, fill=True, linewidth=1.5, ax=ax)
        ax.axvline(df[col].mean(), color="black", linestyle="--", linewidth=1)
        ax.set_title(f"Density of {pretty(col)}")
        ax.set_xlabel(pretty(col))
    for ax in flat[len(columns):]:
        ax.set_visible(False)
    fig.tight_layout()
    return save_fig(fig, "density_numeric", out_dir, formats, dpi)


def plot_frequency_bars(
    table: pd.DataFrame,
    variable: str,
    out_dir: str,
    formats: Sequence[str] = ("png",),
    dpi: int = 150,
) -> List[str]:
    """Bar chart of a frequency table with the absolute count on each bar."""
    labels = [str(v) for v in table.index]
    fig, ax = plt.subplots(figsize=(max(6, 0.6 * len(labels)), 4.5))
    bars = ax.bar(labels, table["abs_freq"].to_numpy(), color=sns.color_palette("Blues_d", 1)[0])
    ax.bar_label(bars, labels=[str(int(v)) for v in table["abs_freq"]], padding=2, fontsize=8)
    ax.set_title(f"Frequency of {pretty(variable)}")
    ax.set_xlabel(pretty(variable))
    ax.set_ylabel("Count")
    if len(labels) > 6:
        ax.tick_params(axis="x", labelrotation=45)
        plt.setp(ax.get_xticklabels(), ha="right")
    fig.tight_layout()
    return save_fig(fig, f"freq_{variable}", out_dir, formats, dpi)
