"""Common test fixtures."""

from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path
from typing import Any

import pytest
from openpyxl import Workbook

from schedule_reader.io.grid import Grid


def write_schedule_xlsx(
    filepath: str | Path,
    rows: list[list[Any]],
    sheet_name: str = "Sheet1",
) -> Path:
    """Write ``rows`` to a workbook, starting at A1. None leaves a cell blank."""
    filepath = Path(filepath)
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    for row_idx, row in enumerate(rows, 1):
        for col_idx, value in enumerate(row, 1):
            if value is not None:
                ws.cell(row=row_idx, column=col_idx, value=value)
    wb.save(str(filepath))
    return filepath


@pytest.fixture
def schedule_rows() -> list[list[Any]]:
    """Three-day schedule: JENNY, a blank row, TOM, and a numeric decoration row."""
    return [
        [dt.date(2022, 2, 1)],
        [dt.date(2022, 2, 3)],
        ["JENNY", 9, 14.5, "V"],
        [None],
        ["TOM", "SC", None, "Q"],
        [42, 9, 9, 9],
    ]


@pytest.fixture
def schedule_grid(schedule_rows) -> Grid:
    return Grid.from_rows(schedule_rows)


@pytest.fixture
def schedule_xlsx(tmp_path, schedule_rows) -> Path:
    return write_schedule_xlsx(tmp_path / "schedule.xlsx", schedule_rows)


@pytest.fixture
def make_xlsx(tmp_path):
    """Factory writing rows to a workbook under tmp_path."""

    def _make(rows: list[list[Any]], sheet_name: str = "Sheet1", name: str = "s.xlsx") -> Path:
        return write_schedule_xlsx(tmp_path / name, rows, sheet_name=sheet_name)

    return _make


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """setup_logging() reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    level = root.level
    before = list(root.handlers)
    yield
    root.setLevel(level)
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler and handler not in before:
            root.removeHandler(handler)
