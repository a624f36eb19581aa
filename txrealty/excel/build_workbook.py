from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd
from openpyxl import Workbook
from openpyxl.utils.dataframe import dataframe_to_rows

from .formats import normalize_interval_columns, round_floats

PERCENT_COLUMNS = ("rel_freq", "cum_rel_freq")


def write_df(wb: Workbook, sheet_name: str, df: pd.DataFrame, freeze: str = "A2") -> None:
    # Excel caps sheet names at 31 characters
    sheet_name = sheet_name[:31]
    if sheet_name in wb.sheetnames:
        ws = wb[sheet_name]
        wb.remove(ws)
    ws = wb.create_sheet(sheet_name)
    if df.empty:
        ws.append(["empty"])
        return
    df = round_floats(normalize_interval_columns(df))
    df = df.astype(object).where(pd.notnull(df), None)
    for r in dataframe_to_rows(df, index=False, header=True):
        ws.append(r)
    ws.freeze_panes = freeze
    for col in ws.columns:
        col_letter = col[0].column_letter
        max_len = 0
        for cell in col[:50]:
            if cell.value is None:
                continue
            max_len = max(max_len, len(str(cell.value)))
        ws.column_dimensions[col_letter].width = min(max(10, max_len + 2), 45)
    _format_percent_columns(ws)


def _format_percent_columns(ws) -> None:
    header = [cell.value for cell in ws[1]]
    for idx, col_name in enumerate(header, start=1):
        if col_name in PERCENT_COLUMNS:
            for row in ws.iter_rows(min_row=2, max_row=ws.max_row, min_col=idx, max_col=idx):
                cell = row[0]
                if cell.value is not None:
                    cell.number_format = "0.00%"


def build_data_dictionary(schemas: List[Dict[str, Any]]) -> pd.DataFrame:
    rows: List[Dict[str, Any]] = []
    for schema in schemas:
        columns = schema.get("columns", {})
        measures = schema.get("measures", {})
        for field in list(columns) + [m for m in measures if m not in columns]:
            rows.append({
                "dataset": schema.get("name"),
                "field": field,
                "dtype": columns.get(field, "float64"),
                "description": measures.get(field, ""),
                "source_name": schema.get("source_name"),
                "limitations": schema.get("limitations"),
            })
    return pd.DataFrame(rows)


def build_workbook(
    output_path: str,
    tables: Dict[str, pd.DataFrame],
    data_dict_df: pd.DataFrame,
) -> None:
    wb = Workbook()
    if "Sheet" in wb.sheetnames:
        wb.remove(wb["Sheet"])

    for sheet_name, df in tables.items():
        write_df(wb, sheet_name, df.reset_index())
    write_df(wb, "data_dictionary", data_dict_df)

    wb.save(output_path)
