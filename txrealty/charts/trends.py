from __future__ import annotations

import math
from typing import List, Sequence

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from matplotlib.lines import Line2D

from .style import MONTH_LABELS, city_palette, pretty, save_fig


def plot_monthly_lines(
    df: pd.DataFrame,
    metric: str,
    out_dir: str,
    formats: Sequence[str] = ("png",),
    dpi: int = 150,
) -> List[str]:
    """Metric across months, one line per city, one panel per year."""
    cities = sorted(df["city"].unique())
    palette = city_palette(cities)
    years = sorted(df["year"].unique())
    ncols = 3
    nrows = math.ceil(len(years) / ncols)
    fig, axes = plt.subplots(nrows, ncols, figsize=(5 * ncols, 3.4 * nrows), sharey=True, squeeze=False)
    flat = axes.ravel()
    for ax, year in zip(flat, years):
        sns.lineplot(
            data=df[df["year"] == year].sort_values("month"),
            x="month",
            y=metric,
            hue="city",
            hue_order=cities,
            palette=palette,
            marker="o",
            legend=False,
            ax=ax,
        )
        ax.set_title(str(year))
        ax.set_xticks(range(1, 13))
        ax.set_xticklabels(MONTH_LABELS, rotation=45)
        ax.set_xlabel("Month")
        ax.set_ylabel(pretty(metric))
    for ax in flat[len(years):]:
        ax.set_visible(False)
    handles = [Line2D([0], [0], color=palette[c], marker="o", label=c) for c in cities]
    fig.legend(handles=handles, title="City", loc="upper right", bbox_to_anchor=(1.12, 0.95))
    fig.suptitle(f"{pretty(metric)} by month and city", fontweight="bold")
    fig.tight_layout()
    return save_fig(fig, f"monthly_{metric}", out_dir, formats, dpi)


def plot_volume_share(
    share: pd.DataFrame,
    out_dir: str,
    formats: Sequence[str] = ("png",),
    dpi: int = 150,
) -> List[str]:
    """Year-over-year share of total volume, one line per city."""
    cities = sorted(share["city"].unique())
    fig, ax = plt.subplots(figsize=(8, 4.5))
    sns.lineplot(
        data=share,
        x="year",
        y="share_pct",
        hue="city",
        hue_order=cities,
        palette=city_palette(cities),
        marker="o",
        ax=ax,
    )
    for _, row in share.iterrows():
        ax.annotate(f"{row['share_pct']:.1f}%", (row["year"], row["share_pct"]),
                    textcoords="offset points", xytext=(0, 5), ha="center", fontsize=7)
    ax.set_xticks(sorted(share["year"].unique()))
    ax.set_title("Share of yearly volume by city")
    ax.set_xlabel("Year")
    ax.set_ylabel("Share of volume (%)")
    ax.legend(title="City", bbox_to_anchor=(1.02, 1), loc="upper left")
    fig.tight_layout()
    return save_fig(fig, "volume_share_by_year", out_dir, formats, dpi)
