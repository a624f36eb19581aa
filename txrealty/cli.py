from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from txrealty import config as config_mod
from txrealty.charts import comparisons, distributions, trends
from txrealty.charts.style import apply_theme
from txrealty.datasets.realestate_tx import fetch as realestate_fetch
from txrealty.datasets.realestate_tx import parse as realestate_parse
from txrealty.datasets.realestate_tx.schema import DATASET as REALESTATE_SCHEMA
from txrealty.excel.build_workbook import build_data_dictionary, build_workbook
from txrealty.io.cache import figures_dir, tables_dir, write_csv
from txrealty.metrics.derived import add_derived_columns
from txrealty.metrics.frequency import build_frequencies
from txrealty.metrics.probability import probability_table
from txrealty.metrics.summary import grouped_summary, most_skewed, most_variable, summary_table
from txrealty.metrics.volume import volume_share

logger = logging.getLogger("txrealty")

DERIVED_COLUMNS = ["avg_price", "sales_offer_efficiency"]


def _setup_logging() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")


def _print_table(title: str, df: pd.DataFrame) -> None:
    print(f"\n== {title} ==")
    with pd.option_context("display.max_columns", 50, "display.width", 160, "display.float_format", "{:,.4f}".format):
        print(df.to_string())


def load_dataset(cfg: Dict[str, Any]) -> pd.DataFrame:
    logger.info("Loading %s", REALESTATE_SCHEMA["name"])
    raw_files = realestate_fetch.fetch(cfg)
    df = realestate_parse.parse(cfg, raw_files)
    for issue in realestate_parse.check_panel(df):
        logger.warning("%s panel: %s", REALESTATE_SCHEMA["name"], issue)
    logger.info("Loaded %d rows", len(df))
    return df


def build_tables(cfg: Dict[str, Any], df: pd.DataFrame) -> Dict[str, pd.DataFrame]:
    analysis = cfg["analysis"]
    tables: Dict[str, pd.DataFrame] = {}

    tables.update(build_frequencies(df, analysis["categorical"], analysis["binned"], analysis["n_classes"]))
    tables["summary"] = summary_table(df, analysis["numeric"])

    derived = add_derived_columns(df)
    tables["summary_derived"] = summary_table(derived, DERIVED_COLUMNS)

    for by in analysis["group_by"]:
        by = [by] if isinstance(by, str) else list(by)
        tables[f"by_{'_'.join(by)}"] = grouped_summary(derived, by, analysis["numeric"] + DERIVED_COLUMNS)

    tables["probabilities"] = probability_table(df)
    tables["volume_share"] = volume_share(df).set_index(["city", "year"])
    return tables


def render_charts(cfg: Dict[str, Any], df: pd.DataFrame, tables: Dict[str, pd.DataFrame]) -> List[str]:
    charts_cfg = cfg["charts"]
    out_dir = figures_dir(cfg)
    opts = {"formats": charts_cfg["formats"], "dpi": charts_cfg["dpi"]}
    derived = add_derived_columns(df)
    apply_theme()

    paths: List[str] = []
    paths += distributions.plot_densities(derived, cfg["analysis"]["numeric"] + DERIVED_COLUMNS, out_dir, **opts)
    for name, table in tables.items():
        if name.startswith("freq_"):
            paths += distributions.plot_frequency_bars(table, name[len("freq_"):], out_dir, **opts)
    for metric in charts_cfg["line_metrics"]:
        paths += trends.plot_monthly_lines(derived, metric, out_dir, **opts)
    for metric in charts_cfg["box_metrics"]:
        paths += comparisons.plot_box_by_city(derived, metric, out_dir, **opts)
        paths += comparisons.plot_box_by_city_year(derived, metric, out_dir, **opts)
    paths += comparisons.plot_volume_stacked(df, out_dir, normalize=False, **opts)
    paths += comparisons.plot_volume_stacked(df, out_dir, normalize=True, **opts)
    paths += trends.plot_volume_share(volume_share(df), out_dir, **opts)
    return paths


def report(cfg_path: str, data_path: Optional[str] = None, charts: Optional[bool] = None) -> Dict[str, pd.DataFrame]:
    cfg = config_mod.load_config(cfg_path, data_path=data_path)
    Path(cfg["paths"]["output_dir"]).mkdir(parents=True, exist_ok=True)
    Path(Path(cfg["paths"]["output_excel"]).parent).mkdir(parents=True, exist_ok=True)

    df = load_dataset(cfg)
    tables = build_tables(cfg, df)

    summary = tables["summary"]
    for name, table in tables.items():
        if name.startswith("freq_"):
            _print_table(f"Frequencies: {name[len('freq_'):]}", table)
    _print_table("Gini index", tables["gini"])
    _print_table("Summary statistics", summary)
    _print_table("Derived columns", tables["summary_derived"])
    _print_table("Probabilities", tables["probabilities"])
    print(f"\nHighest relative variability (CV): {most_variable(summary)}")
    print(f"Most asymmetric distribution (|skewness|): {most_skewed(summary)}")

    out_tables = tables_dir(cfg)
    for name, table in tables.items():
        write_csv(table, f"{out_tables}/{name}.csv")
    logger.info("Wrote %d tables to %s", len(tables), out_tables)

    build_workbook(cfg["paths"]["output_excel"], tables, build_data_dictionary([REALESTATE_SCHEMA]))
    logger.info("Wrote workbook %s", cfg["paths"]["output_excel"])

    enabled = cfg["charts"]["enabled"] if charts is None else charts
    if enabled:
        paths = render_charts(cfg, df, tables)
        logger.info("Wrote %d figure files to %s", len(paths), cfg["paths"]["figures_dir"])
    else:
        logger.warning("Charts disabled; skipping figures.")
    return tables


def main(argv: Optional[List[str]] = None) -> None:
    _setup_logging()
    parser = argparse.ArgumentParser(prog="txrealty", description="Descriptive statistics report for the Texas real-estate panel.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    report_cmd = sub.add_parser("report", help="Compute tables, write the workbook and render charts.")
    report_cmd.add_argument("--config", required=True, help="Path to config YAML")
    report_cmd.add_argument("--data", default=None, help="Input CSV (overrides dataset.local_path)")
    report_cmd.add_argument("--no-charts", action="store_true", help="Skip figure rendering")

    args = parser.parse_args(argv)
    if args.cmd == "report":
        report(args.config, data_path=args.data, charts=False if args.no_charts else None)


if __name__ == "__main__":
    main()
