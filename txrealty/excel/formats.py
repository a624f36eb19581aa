from __future__ import annotations

import pandas as pd


def _is_interval(values: pd.Series) -> bool:
    dtype = values.dtype
    if isinstance(dtype, pd.CategoricalDtype):
        dtype = dtype.categories.dtype
    return isinstance(dtype, pd.IntervalDtype)


def normalize_interval_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Interval-typed columns become their string labels (openpyxl cannot store intervals)."""
    out = df.copy()
    for col in out.columns:
        if _is_interval(out[col]):
            out[col] = out[col].astype(str)
    return out


def round_floats(df: pd.DataFrame, decimals: int = 4) -> pd.DataFrame:
    out = df.copy()
    float_cols = out.select_dtypes(include="float").columns
    out[float_cols] = out[float_cols].round(decimals)
    return out
