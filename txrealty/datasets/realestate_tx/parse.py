from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from .schema import DATASET

KEY_COLUMNS = ["city", "year", "month"]
INT_COLUMNS = ["year", "month", "sales", "listings"]
FLOAT_COLUMNS = ["volume", "median_price", "months_inventory"]


class ParseError(ValueError):
    """The input file does not match the expected 8-column schema."""


def _check_columns(df: pd.DataFrame, path: str) -> None:
    expected = list(DATASET["columns"])
    found = [str(c).strip() for c in df.columns]
    if len(found) != len(expected):
        raise ParseError(f"{path}: expected {len(expected)} columns, found {len(found)}")
    missing = set(expected) - set(found)
    if missing:
        raise ParseError(f"{path}: missing columns {sorted(missing)}")


def _coerce(df: pd.DataFrame, path: str) -> pd.DataFrame:
    out = df.copy()
    if out.isna().any().any():
        bad = sorted(out.columns[out.isna().any().to_numpy()])
        raise ParseError(f"{path}: missing values in {bad}")

    out["city"] = out["city"].astype(str).str.strip()
    for col in INT_COLUMNS + FLOAT_COLUMNS:
        values = pd.to_numeric(out[col], errors="coerce")
        if values.isna().any():
            row = int(values.isna().to_numpy().nonzero()[0][0])
            raise ParseError(f"{path}: non-numeric value in {col} at row {row + 1}")
        out[col] = values
    for col in INT_COLUMNS:
        if (out[col] % 1 != 0).any():
            raise ParseError(f"{path}: {col} must hold integers")
        out[col] = out[col].astype("int64")
    for col in FLOAT_COLUMNS:
        out[col] = out[col].astype("float64")
    return out


def read_listings(path: str, sep: str = ",") -> pd.DataFrame:
    try:
        df = pd.read_csv(path, sep=sep)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise ParseError(f"{path}: {exc}") from exc
    df.columns = [str(c).strip() for c in df.columns]
    _check_columns(df, path)
    if df.empty:
        raise ParseError(f"{path}: no data rows")
    df = _coerce(df, path)
    return df[list(DATASET["columns"])].reset_index(drop=True)


def parse(cfg: Dict[str, Any], raw_files: List[str]) -> pd.DataFrame:
    sep = cfg.get("dataset", {}).get("sep", ",")
    frames = [read_listings(path, sep=sep) for path in raw_files]
    if not frames:
        return pd.DataFrame(columns=list(DATASET["columns"]))
    df = pd.concat(frames, ignore_index=True)
    return df.sort_values(KEY_COLUMNS).reset_index(drop=True)


def check_panel(df: pd.DataFrame) -> List[str]:
    """Fail on duplicate city/year/month keys; return other panel gaps as warnings."""
    dup = df.duplicated(subset=KEY_COLUMNS)
    if dup.any():
        first = df.loc[dup, KEY_COLUMNS].iloc[0].tolist()
        raise RuntimeError(f"Panel check failed: {int(dup.sum())} duplicate city/year/month rows, first {first}")

    issues: List[str] = []
    unknown = set(df["city"].unique()) - set(DATASET["cities"])
    if unknown:
        issues.append(f"unknown cities: {sorted(unknown)}")
    bad_months = df.loc[~df["month"].between(1, 12), "month"].unique()
    if len(bad_months):
        issues.append(f"months outside 1-12: {sorted(bad_months.tolist())}")
    missing_cities = set(DATASET["cities"]) - set(df["city"].unique())
    if missing_cities:
        issues.append(f"missing cities: {sorted(missing_cities)}")
    missing_years = set(DATASET["years"]) - set(df["year"].unique().tolist())
    if missing_years:
        issues.append(f"missing years: {sorted(missing_years)}")
    expected = len(DATASET["cities"]) * len(DATASET["years"]) * 12
    if len(df) != expected:
        issues.append(f"expected {expected} rows for a complete panel, found {len(df)}")
    if (df["sales"] > df["listings"]).any():
        issues.append(f"{int((df['sales'] > df['listings']).sum())} rows with sales above listings")
    return issues
