"""Excel export for enriched visits."""
from pathlib import Path
from typing import BinaryIO, List, Union

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from shiftvisits.analytics.summary import (
    ChartData,
    visits_by_location,
    visits_by_shift_type,
    visits_by_team,
)
from shiftvisits.models.shift import ShiftType
from shiftvisits.models.visit import Visit
from shiftvisits.utils.logging_setup import get_logger

logger = get_logger("shiftvisits.io.excel_export")

# Color scheme for shift types
SHIFT_COLORS = {
    ShiftType.DIURNO.value: "FFF2CC",
    ShiftType.NOTURNO.value: "D9E1F2",
}

HEADERS = ["Date", "Time", "Location", "Shift date", "Shift", "Team"]

THIN = Side(border_style="thin", color="CCCCCC")
BORDER_THIN = Border(top=THIN, bottom=THIN, left=THIN, right=THIN)
HEADER_FILL = PatternFill("solid", fgColor="DDDDDD")


def _write_header(ws, headers: List[str], row: int = 1):
    for c, title in enumerate(headers, start=1):
        cell = ws.cell(row=row, column=c, value=title)
        cell.font = Font(bold=True)
        cell.fill = HEADER_FILL
        cell.alignment = Alignment(horizontal="center", vertical="center")
        cell.border = BORDER_THIN


def _autosize(ws, min_width: int = 8, max_width: int = 40):
    """Set column widths from the longest value in each column."""
    for col_cells in ws.columns:
        length = max(len(str(c.value)) if c.value is not None else 0 for c in col_cells)
        letter = get_column_letter(col_cells[0].column)
        ws.column_dimensions[letter].width = max(min_width, min(max_width, length + 2))


def _write_visits_sheet(ws, visits: List[Visit]):
    _write_header(ws, HEADERS)
    for r, v in enumerate(visits, start=2):
        values = [v.date, v.time, v.location, v.shift_date, v.shift_type.value, v.team]
        fill = PatternFill("solid", fgColor=SHIFT_COLORS[v.shift_type.value])
        for c, value in enumerate(values, start=1):
            cell = ws.cell(row=r, column=c, value=value)
            cell.border = BORDER_THIN
            if c == 5:
                cell.fill = fill
                cell.alignment = Alignment(horizontal="center")
    ws.freeze_panes = "A2"
    _autosize(ws)


def _write_counts_block(ws, title: str, data: List[ChartData], start_row: int) -> int:
    """Write a two-column count table; returns the next free row."""
    ws.cell(row=start_row, column=1, value=title).font = Font(bold=True, size=12)
    _write_header(ws, ["Name", "Visits"], row=start_row + 1)
    r = start_row + 2
    for item in data:
        ws.cell(row=r, column=1, value=item.name).border = BORDER_THIN
        ws.cell(row=r, column=2, value=item.value).border = BORDER_THIN
        r += 1
    return r + 1


def _write_summary_sheet(ws, visits: List[Visit]):
    r = 1
    r = _write_counts_block(ws, "By shift type", visits_by_shift_type(visits), r)
    r = _write_counts_block(ws, "By team", visits_by_team(visits), r)
    _write_counts_block(ws, "By location", visits_by_location(visits), r)
    _autosize(ws)


def export_to_excel(visits: List[Visit], output: Union[str, Path, BinaryIO]) -> None:
    """
    Write visits to an .xlsx workbook.

    Sheets:
        Visits: one row per visit, shift column colored by type
        Summary: counts per shift type, team and location

    Args:
        visits: Enriched visits
        output: File path or binary buffer
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "Visits"
    _write_visits_sheet(ws, visits)
    _write_summary_sheet(wb.create_sheet("Summary"), visits)

    if isinstance(output, (str, Path)):
        Path(output).parent.mkdir(parents=True, exist_ok=True)
    wb.save(output)
    logger.info(f"Excel export: {len(visits)} visits")
