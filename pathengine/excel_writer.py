#!/usr/bin/env python3
"""
Excel output for path reports.

Each sheet gets a bold header row, optional yellow fill on flagged rows
(paths that failed or changed under normalization), column widths sized to
content and an openpyxl table so the result can be filtered in Excel.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.table import Table, TableStyleInfo

MAX_COLUMN_WIDTH = 50


@dataclass(frozen=True)
class ReportSheet:
    """
    One worksheet of a path report.

    Attributes:
        name: Sheet/tab name.
        headers: Ordered column headers.
        rows: Row values, ordered to match headers.
        flagged: Optional per-row flags; flagged rows are filled yellow.
    """

    name: str
    headers: Sequence[str]
    rows: Sequence[Sequence[Any]]
    flagged: Optional[Sequence[bool]] = None


def _fit_columns(ws, headers: Sequence[str]) -> None:
    for col_idx, header in enumerate(headers, 1):
        col_letter = get_column_letter(col_idx)
        longest = max(
            [len(str(header))] + [len(str(cell.value)) for cell in ws[col_letter] if cell.value is not None]
        )
        ws.column_dimensions[col_letter].width = min(longest + 2, MAX_COLUMN_WIDTH)


def _render_sheet(ws, sheet: ReportSheet) -> None:
    ws.title = sheet.name
    header_font = Font(bold=True)
    flag_fill = PatternFill(start_color="FFFF00", end_color="FFFF00", fill_type="solid")

    for col_idx, header in enumerate(sheet.headers, 1):
        ws.cell(row=1, column=col_idx, value=header).font = header_font

    flags = list(sheet.flagged or [])
    for offset, row in enumerate(sheet.rows):
        is_flagged = offset < len(flags) and bool(flags[offset])
        for col_idx, value in enumerate(row, 1):
            cell = ws.cell(row=offset + 2, column=col_idx, value=value)
            if is_flagged:
                cell.fill = flag_fill

    _fit_columns(ws, sheet.headers)

    if sheet.rows:
        data_range = f"A1:{get_column_letter(len(sheet.headers))}{len(sheet.rows) + 1}"
        table = Table(displayName=sheet.name.replace(" ", "") + "Table", ref=data_range)
        table.tableStyleInfo = TableStyleInfo(
            name="TableStyleMedium9",
            showFirstColumn=False,
            showLastColumn=False,
            showRowStripes=True,
            showColumnStripes=False,
        )
        ws.add_table(table)


def write_report_workbook(output_path: Path | str, sheets: Sequence[ReportSheet]) -> Path:
    """
    Write sheets into a new workbook.

    Args:
        output_path: Destination .xlsx path; parent folders are created.
        sheets: Sheets in tab order.

    Returns:
        Path to the written workbook.
    """
    if not sheets:
        raise ValueError("At least one sheet must be provided to write a workbook.")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    for idx, sheet in enumerate(sheets):
        ws = wb.active if idx == 0 else wb.create_sheet()
        _render_sheet(ws, sheet)

    wb.save(output_path)
    return output_path
