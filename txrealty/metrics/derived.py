from __future__ import annotations

import numpy as np
import pandas as pd


def add_derived_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Append avg_price (USD) and sales_offer_efficiency to a copy of the table."""
    out = df.copy()
    out["avg_price"] = out["volume"] / out["sales"].replace(0, np.nan) * 1_000_000
    out["sales_offer_efficiency"] = out["sales"] / out["listings"].replace(0, np.nan)
    return out
