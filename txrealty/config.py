import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

DEFAULT_NUMERIC = ["sales", "listings", "volume", "median_price", "months_inventory"]


def load_config(path: str, data_path: Optional[str] = None) -> Dict[str, Any]:
    load_dotenv()
    cfg_path = Path(path).resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    base_dir = cfg_path.parent.parent
    cfg.setdefault("project", {})
    cfg.setdefault("dataset", {})
    cfg.setdefault("analysis", {})
    cfg.setdefault("charts", {})

    cfg["project"].setdefault("output_dir", "output")
    cfg["project"].setdefault("output_excel", "output/realestate_tx_report.xlsx")

    cfg["dataset"].setdefault("sep", ",")
    # overrides resolve against the working directory, the config value against the project root
    override = data_path or os.getenv("TXREALTY_DATA_PATH")
    local_path = cfg["dataset"].get("local_path")
    if override:
        resolved_data = Path(override).resolve()
    elif local_path:
        resolved_data = (base_dir / local_path).resolve()
    else:
        raise ValueError("Config must include dataset.local_path (or set TXREALTY_DATA_PATH)")

    cfg["analysis"].setdefault("categorical", ["city", "year", "month"])
    cfg["analysis"].setdefault("binned", ["median_price"])
    cfg["analysis"].setdefault("n_classes", 15)
    cfg["analysis"].setdefault("numeric", list(DEFAULT_NUMERIC))
    cfg["analysis"].setdefault("group_by", [["city"], ["year"], ["month"], ["city", "year"]])

    cfg["charts"].setdefault("enabled", True)
    cfg["charts"].setdefault("dpi", 150)
    cfg["charts"].setdefault("formats", ["png"])
    cfg["charts"].setdefault("line_metrics", ["sales", "median_price"])
    cfg["charts"].setdefault("box_metrics", ["median_price", "avg_price", "sales_offer_efficiency"])

    output_dir = (base_dir / cfg["project"]["output_dir"]).resolve()
    cfg["paths"] = {
        "base_dir": str(base_dir),
        "data_path": str(resolved_data),
        "output_dir": str(output_dir),
        "figures_dir": str(output_dir / "figures"),
        "tables_dir": str(output_dir / "tables"),
        "output_excel": str((base_dir / cfg["project"]["output_excel"]).resolve()),
    }

    return cfg
