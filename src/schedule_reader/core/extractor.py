"""Discover the schedule range and the employee rows of a grid."""

from __future__ import annotations

import datetime as dt
import logging

from schedule_reader.errors import MissingScheduleBounds
from schedule_reader.io.grid import Cell, CellKind, Grid
from schedule_reader.models.schedule import Employee, Location, ScheduleRange

_log = logging.getLogger(__name__)

# Fixed header layout: A1 = start date, A2 = end date, names from A3 down
START_DATE_CELL = (0, 0)
END_DATE_CELL = (1, 0)
NAME_COLUMN = 0
FIRST_EMPLOYEE_ROW = 2


def read_schedule_range(grid: Grid) -> ScheduleRange:
    """Read the start/end dates from the two header cells.

    Raises:
        MissingScheduleBounds: If either cell is absent or not a date.
        InvalidScheduleRange: If the end date lies before the start date.
    """
    start_date = _read_date(grid, START_DATE_CELL, "start")
    end_date = _read_date(grid, END_DATE_CELL, "end")
    return ScheduleRange(start_date=start_date, end_date=end_date)


def _read_date(grid: Grid, position: tuple[int, int], label: str) -> dt.date:
    cell = grid.get(*position)
    if cell is None or cell.is_empty:
        raise MissingScheduleBounds(f"Schedule {label} date cell {position} is empty")
    if cell.kind != CellKind.DATETIME or not isinstance(cell.value, dt.date):
        raise MissingScheduleBounds(
            f"Schedule {label} date cell {position} is not a date: {cell.value!r}"
        )
    if isinstance(cell.value, dt.datetime):
        return cell.value.date()
    return cell.value


def is_employee_row(cell: Cell | None) -> bool:
    """A name-column cell marks an employee row only when it holds a string."""
    return cell is not None and cell.kind == CellKind.STRING


def find_employees(
    grid: Grid,
    logger: logging.Logger | None = None,
) -> list[Employee]:
    """Scan the name column and return one stub per employee row, top to bottom.

    Rows holding numbers, dates or nothing in the name column are skipped.
    Repeated names are kept as separate employees.
    """
    log = logger or _log
    employees: list[Employee] = []
    for row in range(FIRST_EMPLOYEE_ROW, grid.height):
        cell = grid.get(row, NAME_COLUMN)
        if not is_employee_row(cell):
            kind = cell.kind.value if cell else "absent"
            log.debug("Row %d skipped, name cell is %s", row, kind)
            continue
        employees.append(
            Employee(name=cell.value, location=Location(row=row, column=NAME_COLUMN))
        )
    log.debug("Found %d employee rows", len(employees))
    return employees
