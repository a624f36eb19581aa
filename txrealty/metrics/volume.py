from __future__ import annotations

import pandas as pd


def volume_pivot(
    df: pd.DataFrame,
    index: str = "month",
    columns: str = "city",
    normalize: bool = False,
) -> pd.DataFrame:
    """Total volume by index x columns; normalize scales each row to 100%."""
    pivot = df.pivot_table(index=index, columns=columns, values="volume", aggfunc="sum", fill_value=0.0)
    if normalize:
        pivot = pivot.div(pivot.sum(axis=1), axis=0) * 100
    return pivot


def volume_share(df: pd.DataFrame) -> pd.DataFrame:
    """Each city's percentage of the total yearly volume (long format)."""
    totals = df.groupby(["year", "city"], as_index=False)["volume"].sum()
    totals["share_pct"] = totals["volume"] / totals.groupby("year")["volume"].transform("sum") * 100
    return totals.sort_values(["city", "year"]).reset_index(drop=True)
