from __future__ import annotations

from pathlib import Path

import pandas as pd


def ensure_dir(path: str) -> str:
    Path(path).mkdir(parents=True, exist_ok=True)
    return path


def figures_dir(cfg: dict) -> str:
    return ensure_dir(cfg["paths"]["figures_dir"])


def tables_dir(cfg: dict) -> str:
    return ensure_dir(cfg["paths"]["tables_dir"])


def write_csv(df: pd.DataFrame, path: str, index: bool = True) -> str:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=index)
    return path
