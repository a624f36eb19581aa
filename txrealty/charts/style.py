from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import seaborn as sns  # noqa: E402

logger = logging.getLogger(__name__)

CITY_ORDER = ["Beaumont", "Bryan-College Station", "Tyler", "Wichita Falls"]
CITY_PALETTE = dict(zip(CITY_ORDER, sns.color_palette("deep", len(CITY_ORDER)).as_hex()))
MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def apply_theme() -> None:
    sns.set_theme(style="whitegrid", context="notebook")
    plt.rcParams["axes.titleweight"] = "bold"
    plt.rcParams["axes.titlesize"] = 12
    plt.rcParams["axes.labelsize"] = 10


def city_palette(cities: Sequence[str]) -> dict:
    extra = [c for c in cities if c not in CITY_PALETTE]
    palette = dict(CITY_PALETTE)
    if extra:
        palette.update(zip(extra, sns.color_palette("muted", len(extra)).as_hex()))
    return {c: palette[c] for c in cities}


def pretty(name: str) -> str:
    return name.replace("_", " ").title()


def save_fig(fig, name: str, out_dir: str, formats: Sequence[str] = ("png",), dpi: int = 150) -> List[str]:
    """Save a figure in each format under out_dir, close it, return the written paths."""
    Path(out_dir).mkdir(parents=True, exist_ok=True)
    paths: List[str] = []
    for fmt in formats:
        path = str(Path(out_dir) / f"{name}.{fmt}")
        fig.savefig(path, dpi=dpi, bbox_inches="tight")
        paths.append(path)
    plt.close(fig)
    logger.info("Wrote figure %s", name)
    return paths
