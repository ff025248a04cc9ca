"""
Excel change report.

Writes diff output to a single "Changes" sheet, one row per Element,
colored by the kind of change.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from openpyxl import Workbook

from auditdiff.domain.element import Element, EventType, Value
from auditdiff.infrastructure.excel_styles import (
    Alignments,
    Borders,
    ColumnDef,
    Fills,
    Fonts,
    add_autofilter,
    apply_header_row,
    freeze_header,
)

logger = logging.getLogger(__name__)

SHEET_NAME = "Changes"

COLUMNS = [
    ColumnDef("Field", width=20),
    ColumnDef("Path", width=45, is_monospace=True),
    ColumnDef("Change", width=12, alignment=Alignments.CENTER_WRAP),
    ColumnDef("Previous", width=30, alignment=Alignments.LEFT_WRAP),
    ColumnDef("Updated", width=30, alignment=Alignments.LEFT_WRAP),
    ColumnDef("Identifiers", width=25, is_monospace=True),
]

CHANGE_FILLS = {
    EventType.CREATED: Fills.CREATED,
    EventType.UPDATED: Fills.UPDATED,
    EventType.DELETED: Fills.DELETED,
}


def _cell_text(value: Value | None) -> str | None:
    return None if value is None else str(value)


class ChangeReportWriter:
    """Builds an xlsx workbook from change records."""

    def __init__(self) -> None:
        self.workbook = Workbook()
        self.sheet = self.workbook.active
        self.sheet.title = SHEET_NAME
        apply_header_row(self.sheet, COLUMNS)
        freeze_header(self.sheet)
        self._row = 2

    def add_changes(self, changes: Iterable[Element]) -> int:
        """
        Append one row per change.

        Returns:
            Number of rows written
        """
        written = 0
        for change in changes:
            change_type = change.change_type
            identifiers = change.metadata.identifiers
            row = [
                change.name,
                change.fqdn,
                change_type.value if change_type else None,
                _cell_text(change.previous_value),
                _cell_text(change.updated_value),
                json.dumps(identifiers, sort_keys=True) if identifiers else None,
            ]
            for col_idx, (value, col_def) in enumerate(zip(row, COLUMNS), start=1):
                cell = self.sheet.cell(row=self._row, column=col_idx, value=value)
                cell.font = Fonts.MONOSPACE if col_def.is_monospace else Fonts.DATA
                cell.alignment = col_def.alignment
                cell.border = Borders.THIN
            if change_type in CHANGE_FILLS:
                self.sheet.cell(row=self._row, column=3).fill = CHANGE_FILLS[change_type]
            self._row += 1
            written += 1
        return written

    def save(self, path: Path) -> Path:
        add_autofilter(self.sheet, COLUMNS)
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.workbook.save(path)
        logger.info("Wrote %d changes to %s", self._row - 2, path)
        return path


def write_change_report(changes: Iterable[Element], path: Path) -> Path:
    """Write a change report in one call."""
    writer = ChangeReportWriter()
    writer.add_changes(changes)
    return writer.save(path)
