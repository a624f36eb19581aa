from pathlib import Path

import numpy as np
import pandas as pd
import pytest
import yaml

CITIES = ["Beaumont", "Bryan-College Station", "Tyler", "Wichita Falls"]
YEARS = list(range(2010, 2015))
# column order of the published CSV; the loader reorders it
SOURCE_COLUMNS = ["city", "year", "month", "sales", "volume", "median_price", "listings", "months_inventory"]


@pytest.fixture
def panel() -> pd.DataFrame:
    rng = np.random.default_rng(42)
    rows = []
    for city in CITIES:
        for year in YEARS:
            for month in range(1, 13):
                sales = int(rng.integers(80, 400))
                listings = int(rng.integers(800, 3000))
                rows.append({
                    "city": city,
                    "year": year,
                    "month": month,
                    "sales": sales,
                    "volume": round(sales * float(rng.uniform(0.1, 0.2)), 3),
                    "median_price": round(float(rng.uniform(90_000, 180_000)), -2),
                    "listings": listings,
                    "months_inventory": round(listings / sales, 1),
                })
    return pd.DataFrame(rows, columns=SOURCE_COLUMNS)


@pytest.fixture
def panel_csv(tmp_path: Path, panel: pd.DataFrame) -> str:
    path = tmp_path / "data" / "realestate_texas.csv"
    path.parent.mkdir(parents=True)
    panel.to_csv(path, index=False)
    return str(path)


@pytest.fixture
def config_path(tmp_path: Path, panel_csv: str, monkeypatch) -> str:
    monkeypatch.delenv("TXREALTY_DATA_PATH", raising=False)
    cfg = {
        "project": {"output_dir": "output", "output_excel": "output/report.xlsx"},
        "dataset": {"local_path": "data/realestate_texas.csv"},
        "charts": {"enabled": False, "dpi": 60},
    }
    path = tmp_path / "config" / "report.yaml"
    path.parent.mkdir(parents=True)
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return str(path)
