"""
Frequency tables and the normalized Gini heterogeneity index.

Continuous variables are first cut into equal-width classes spanning
[min, max]; the resulting categorical keeps empty classes so that J is the
number of classes requested, not the number observed.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd

N_CLASSES = 15

FREQUENCY_COLUMNS = ["abs_freq", "rel_freq", "cum_abs_freq", "cum_rel_freq"]


def frequency_table(values: pd.Series, order: Optional[Sequence] = None) -> pd.DataFrame:
    """Absolute, relative and cumulative frequencies, ordered by category."""
    series = pd.Series(values)
    counts = series.value_counts(sort=False, dropna=True)
    if order is not None:
        counts = counts.reindex(list(order), fill_value=0)
    else:
        counts = counts.sort_index()

    n = int(counts.sum())
    table = pd.DataFrame({"abs_freq": counts.astype("int64")})
    table["rel_freq"] = table["abs_freq"] / n
    table["cum_abs_freq"] = table["abs_freq"].cumsum()
    # n / n keeps the last cumulative value at exactly 1.0
    table["cum_rel_freq"] = table["cum_abs_freq"] / n
    table.index.name = series.name
    return table


def gini_index(values: pd.Series, order: Optional[Sequence] = None) -> float:
    """Normalized Gini index: 1 - sum(f_i^2), divided by (J - 1) / J."""
    rel = frequency_table(values, order=order)["rel_freq"].to_numpy()
    j = len(rel)
    if j <= 1:
        return 0.0
    g = 1.0 - float(np.sum(rel ** 2))
    return g / ((j - 1) / j)


def bin_classes(values: pd.Series, n_classes: int = N_CLASSES) -> pd.Series:
    """Cut a continuous variable into equal-width classes spanning [min, max]."""
    series = pd.Series(values, dtype="float64")
    lo, hi = float(series.min()), float(series.max())
    if lo == hi:
        edges = np.array([lo - 0.5, hi + 0.5])
    else:
        edges = np.linspace(lo, hi, n_classes + 1)
    binned = pd.cut(series, bins=edges, include_lowest=True)
    binned.name = f"{series.name}_class" if series.name else "class"
    return binned


def build_frequencies(
    df: pd.DataFrame,
    categorical: Iterable[str],
    binned: Iterable[str] = (),
    n_classes: int = N_CLASSES,
) -> Dict[str, pd.DataFrame]:
    tables: Dict[str, pd.DataFrame] = {}
    gini_rows: List[Dict] = []

    for col in categorical:
        table = frequency_table(df[col])
        tables[f"freq_{col}"] = table
        gini_rows.append({"variable": col, "classes": len(table), "gini": gini_index(df[col])})

    for col in binned:
        classes = bin_classes(df[col], n_classes=n_classes)
        table = frequency_table(classes)
        tables[f"freq_{col}_classes"] = table
        gini_rows.append({"variable": classes.name, "classes": len(table), "gini": gini_index(classes)})

    tables["gini"] = pd.DataFrame(gini_rows).set_index("variable")
    return tables
