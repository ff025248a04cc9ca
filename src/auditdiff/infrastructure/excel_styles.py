"""
Excel styling for change reports.

Color palette, fonts, fills and header helpers shared by report sheets.
"""

from __future__ import annotations

from dataclasses import dataclass

from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet


class Colors:
    """Report color palette (hex codes without #)."""

    HEADER_BG = "203764"
    HEADER_TEXT = "FFFFFF"
    CREATED_BG = "C6EFCE"
    UPDATED_BG = "FFEB9C"
    DELETED_BG = "FFC7CE"
    BORDER = "B4B4B4"


def _solid(color: str) -> PatternFill:
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


class Fonts:
    HEADER = Font(name="Segoe UI", size=11, bold=True, color=Colors.HEADER_TEXT)
    DATA = Font(name="Segoe UI", size=10)
    MONOSPACE = Font(name="Consolas", size=10)


class Fills:
    HEADER = _solid(Colors.HEADER_BG)
    CREATED = _solid(Colors.CREATED_BG)
    UPDATED = _solid(Colors.UPDATED_BG)
    DELETED = _solid(Colors.DELETED_BG)


class Borders:
    THIN = Border(
        left=Side(style="thin", color=Colors.BORDER),
        right=Side(style="thin", color=Colors.BORDER),
        top=Side(style="thin", color=Colors.BORDER),
        bottom=Side(style="thin", color=Colors.BORDER),
    )


class Alignments:
    CENTER_WRAP = Alignment(horizontal="center", vertical="center", wrap_text=True)
    LEFT = Alignment(horizontal="left", vertical="center", wrap_text=False)
    LEFT_WRAP = Alignment(horizontal="left", vertical="center", wrap_text=True)


@dataclass
class ColumnDef:
    """
    Column definition for a report sheet.

    Attributes:
        name: Column header text
        width: Column width in characters
        alignment: Text alignment
        is_monospace: If True, use monospace font
    """

    name: str
    width: int = 12
    alignment: Alignment = Alignments.LEFT
    is_monospace: bool = False


def apply_header_row(ws: Worksheet, columns: list[ColumnDef], row: int = 1) -> None:
    """Write and style the header row, and set column widths."""
    for col_idx, col_def in enumerate(columns, start=1):
        cell = ws.cell(row=row, column=col_idx, value=col_def.name)
        cell.font = Fonts.HEADER
        cell.fill = Fills.HEADER
        cell.alignment = Alignments.CENTER_WRAP
        cell.border = Borders.THIN
        ws.column_dimensions[get_column_letter(col_idx)].width = col_def.width


def freeze_header(ws: Worksheet, row: int = 2) -> None:
    ws.freeze_panes = ws.cell(row=row, column=1)


def add_autofilter(ws: Worksheet, columns: list[ColumnDef], header_row: int = 1) -> None:
    last_col = get_column_letter(len(columns))
    ws.auto_filter.ref = f"A{header_row}:{last_col}{max(ws.max_row, header_row)}"
