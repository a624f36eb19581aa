from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd


def _mask(df: pd.DataFrame, conditions: dict) -> pd.Series:
    mask = pd.Series(True, index=df.index)
    for col, value in conditions.items():
        if col not in df.columns:
            raise KeyError(f"Unknown column: {col}")
        mask &= df[col] == value
    return mask


def count_rows(df: pd.DataFrame, **conditions: Any) -> int:
    return int(_mask(df, conditions).sum())


def probability(df: pd.DataFrame, **conditions: Any) -> float:
    """Share of rows matching every column == value condition."""
    if df.empty:
        return 0.0
    return count_rows(df, **conditions) / len(df)


def default_events(df: pd.DataFrame) -> List[Dict[str, Any]]:
    events: List[Dict[str, Any]] = [{"city": city} for city in sorted(df["city"].unique())]
    events.append({"month": 7})
    events.append({"month": 12, "year": 2012})
    return events


def probability_table(df: pd.DataFrame, events: Optional[List[Dict[str, Any]]] = None) -> pd.DataFrame:
    rows = []
    for conditions in events if events is not None else default_events(df):
        label = ", ".join(f"{col} = {value}" for col, value in conditions.items())
        rows.append({
            "event": label,
            "rows": count_rows(df, **conditions),
            "probability": probability(df, **conditions),
        })
    return pd.DataFrame(rows).set_index("event")
