from __future__ import annotations

from typing import Dict, Iterable, List

import numpy as np
import pandas as pd
from scipy import stats

SUMMARY_COLUMNS = [
    "min", "q1", "median", "q3", "max", "range", "iqr",
    "mean", "std", "cv", "skewness", "kurtosis",
]


def describe_series(values: Iterable[float]) -> Dict[str, float]:
    """
    Position, dispersion and shape statistics for one numeric variable.

    Quartiles use linear interpolation. ``std`` is the sample standard
    deviation and ``cv`` is std / mean in percent. Skewness is the biased
    Fisher-Pearson coefficient; ``kurtosis`` is excess kurtosis, i.e. the
    fourth standardized moment minus 3 (a normal distribution reads 0).
    """
    arr = np.asarray(list(values), dtype="float64")
    q0, q1, q2, q3, q4 = np.quantile(arr, [0.0, 0.25, 0.5, 0.75, 1.0])
    mean = float(arr.mean())
    std = float(arr.std(ddof=1))
    return {
        "min": float(q0),
        "q1": float(q1),
        "median": float(q2),
        "q3": float(q3),
        "max": float(q4),
        "range": float(q4 - q0),
        "iqr": float(q3 - q1),
        "mean": mean,
        "std": std,
        "cv": std / mean * 100 if mean != 0 else float("nan"),
        "skewness": float(stats.skew(arr, bias=True)),
        "kurtosis": float(stats.kurtosis(arr, fisher=False, bias=True)) - 3.0,
    }


def summary_table(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    rows = {col: describe_series(df[col].to_numpy()) for col in columns}
    table = pd.DataFrame.from_dict(rows, orient="index")[SUMMARY_COLUMNS]
    table.index.name = "variable"
    return table


def most_variable(summary: pd.DataFrame) -> str:
    return str(summary["cv"].idxmax())


def most_skewed(summary: pd.DataFrame) -> str:
    return str(summary["skewness"].abs().idxmax())


def grouped_summary(df: pd.DataFrame, by: List[str], columns: Iterable[str]) -> pd.DataFrame:
    """Mean and sample standard deviation of each column per group."""
    grouped = df.groupby(by, sort=True)[list(columns)].agg(["mean", "std"])
    grouped.columns = [f"{col}_{stat}" for col, stat in grouped.columns]
    return grouped
