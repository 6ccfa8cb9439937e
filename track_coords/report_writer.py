"""Excel run report: one row per discovered GPX file plus summary counters."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pandas as pd
from openpyxl.styles import Border, Font, PatternFill, Side
from openpyxl.worksheet.worksheet import Worksheet

from .errors import OutputDirectoryError
from .models import Track
from .services.track_service import PipelineStats

TRACKS_SHEET = "Tracks"
SUMMARY_SHEET = "Summary"
TRACK_COLUMNS = [
    "File",
    "Activity Type",
    "Status",
    "Reason",
    "Points Loaded",
    "Points Final",
]

HEADER_FONT = Font(bold=True)
HEADER_FILL = PatternFill(patternType="solid", fgColor="FFFF40FF")
HEADER_BORDER = Border(
    left=Side(style="thin", color="000000"),
    right=Side(style="thin", color="000000"),
    top=Side(style="thin", color="000000"),
    bottom=Side(style="thin", color="000000"),
)

LOGGER = logging.getLogger(__name__)

PathInput = str | Path | PathLike[str]

__all__ = ["build_track_rows", "write_report"]


def build_track_rows(tracks: Sequence[Track]) -> List[Dict[str, Any]]:
    return [
        {
            "File": track.identity.name,
            "Activity Type": track.activity_type or "",
            "Status": track.status,
            "Reason": track.reason or "",
            "Points Loaded": track.points_loaded,
            "Points Final": len(track.points),
        }
        for track in tracks
    ]


def _autosize(ws: Worksheet) -> None:
    from .config import (
        EXCEL_AUTOSIZE_COLUMNS,
        EXCEL_AUTOSIZE_MAX_ROWS,
        EXCEL_AUTOSIZE_MAX_WIDTH,
        EXCEL_AUTOSIZE_MIN_WIDTH,
        EXCEL_AUTOSIZE_PADDING,
    )

    if not EXCEL_AUTOSIZE_COLUMNS or ws.max_row > EXCEL_AUTOSIZE_MAX_ROWS:
        return
    for col_cells in ws.columns:
        col_letter = getattr(col_cells[0], "column_letter", None)
        if not col_letter:
            continue
        max_len = max(
            (len(str(cell.value)) for cell in col_cells if cell.value is not None),
            default=0,
        )
        ws.column_dimensions[col_letter].width = min(
            EXCEL_AUTOSIZE_MAX_WIDTH,
            max(EXCEL_AUTOSIZE_MIN_WIDTH, max_len + EXCEL_AUTOSIZE_PADDING),
        )


def _style_header_row(ws: Worksheet, max_col: int) -> None:
    for col_idx in range(1, max_col + 1):
        cell = ws.cell(row=1, column=col_idx)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.border = HEADER_BORDER


def write_report(
    filepath: PathInput, tracks: Sequence[Track], stats: PipelineStats
) -> Path:
    """Write the run report workbook to ``filepath`` and return its path."""

    path = Path(filepath)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError(
            f"Cannot create report directory {path.parent}: {exc}"
        ) from exc

    tracks_df = pd.DataFrame(build_track_rows(tracks), columns=TRACK_COLUMNS)
    summary_df = pd.DataFrame(stats.as_rows(), columns=["Metric", "Value"])
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for sheet_name, df in ((TRACKS_SHEET, tracks_df), (SUMMARY_SHEET, summary_df)):
            df.to_excel(writer, sheet_name=sheet_name, index=False)
            ws = writer.sheets[sheet_name]
            _style_header_row(ws, len(df.columns))
            _autosize(ws)
    LOGGER.info("Run report saved to %s (%d tracks)", path, len(tracks))
    return path
