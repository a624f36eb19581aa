from __future__ import annotations

from typing import List, Sequence

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from txrealty.metrics.volume import volume_pivot

from .style import MONTH_LABELS, city_palette, pretty, save_fig


def plot_box_by_city(
    df: pd.DataFrame,
    metric: str,
    out_dir: str,
    formats: Sequence[str] = ("png",),
    dpi: int = 150,
) -> List[str]:
    """Boxplot of metric grouped by city, with each group's median written above its box."""
    order = sorted(df["city"].unique())
    fig, ax = plt.subplots(figsize=(8, 4.5))
    sns.boxplot(data=df, x="city", y=metric, hue="city", order=order,
                palette=city_palette(order), legend=False, ax=ax)
    medians = df.groupby("city")[metric].median()
    for i, city in enumerate(order):
        ax.text(i, medians[city], f"{medians[city]:,.2f}",
                ha="center", va="bottom", fontsize=8, fontweight="bold", color="black")
    ax.set_title(f"{pretty(metric)} by city")
    ax.set_xlabel("City")
    ax.set_ylabel(pretty(metric))
    fig.tight_layout()
    return save_fig(fig, f"box_{metric}_by_city", out_dir, formats, dpi)


def plot_box_by_city_year(
    df: pd.DataFrame,
    metric: str,
    out_dir: str,
    formats: Sequence[str] = ("png",),
    dpi: int = 150,
) -> List[str]:
    order = sorted(df["city"].unique())
    fig, ax = plt.subplots(figsize=(10, 4.5))
    by_year = df.assign(year=df["year"].astype(str))
    sns.boxplot(data=by_year, x="city", y=metric, hue="year", order=order, palette="Blues", ax=ax)
    ax.set_title(f"{pretty(metric)} by city and year")
    ax.set_xlabel("City")
    ax.set_ylabel(pretty(metric))
    ax.legend(title="Year", bbox_to_anchor=(1.02, 1), loc="upper left")
    fig.tight_layout()
    return save_fig(fig, f"box_{metric}_by_city_year", out_dir, formats, dpi)


def plot_volume_stacked(
    df: pd.DataFrame,
    out_dir: str,
    normalize: bool = False,
    formats: Sequence[str] = ("png",),
    dpi: int = 150,
) -> List[str]:
    """Volume by month stacked by city, one panel per year; normalize gives 100% bars."""
    years = sorted(df["year"].unique())
    cities = sorted(df["city"].unique())
    colors = list(city_palette(cities).values())
    fig, axes = plt.subplots(len(years), 1, figsize=(10, 2.8 * len(years)), sharex=True, squeeze=False)
    for ax, year in zip(axes.ravel(), years):
        pivot = volume_pivot(df[df["year"] == year], index="month", columns="city", normalize=normalize)
        pivot = pivot.reindex(columns=cities, fill_value=0.0)
        pivot.plot(kind="bar", stacked=True, color=colors, ax=ax, width=0.8, legend=False)
        ax.set_title(str(year))
        ax.set_ylabel("Share (%)" if normalize else "Volume (M USD)")
        if normalize:
            ax.set_ylim(0, 100)
    last = axes.ravel()[-1]
    last.set_xticklabels(MONTH_LABELS[: len(last.get_xticklabels())], rotation=0)
    last.set_xlabel("Month")
    handles, labels = axes.ravel()[0].get_legend_handles_labels()
    fig.legend(handles, labels, title="City", loc="upper right", bbox_to_anchor=(1.12, 0.98))
    title = "Monthly volume by city (100%)" if normalize else "Monthly volume by city"
    fig.suptitle(title, fontweight="bold")
    fig.tight_layout()
    name = "volume_stacked_normalized" if normalize else "volume_stacked"
    return save_fig(fig, name, out_dir, formats, dpi)
