"""Build a complete Schedule from a grid."""

from __future__ import annotations

import logging

from schedule_reader.core.classifier import classify_day
from schedule_reader.core.extractor import find_employees, read_schedule_range
from schedule_reader.io.grid import Grid
from schedule_reader.models.day import Day
from schedule_reader.models.schedule import Employee, Schedule, ScheduleRange

_log = logging.getLogger(__name__)

# Day columns start right after the name column
_FIRST_DAY_COLUMN = 1


def build_schedule(grid: Grid, logger: logging.Logger | None = None) -> Schedule:
    """Extract the range and employees, then classify every employee day.

    Raises:
        MissingScheduleBounds: If the header date cells are unusable.
    """
    log = logger or _log
    schedule_range = read_schedule_range(grid)
    log.debug(
        "Schedule %s to %s (%d days)",
        schedule_range.start_date,
        schedule_range.end_date,
        schedule_range.duration_days,
    )

    employees = [
        _fill_days(stub, grid, schedule_range, log)
        for stub in find_employees(grid, logger=log)
    ]
    return Schedule(range=schedule_range, employees=tuple(employees))


def _fill_days(
    stub: Employee,
    grid: Grid,
    schedule_range: ScheduleRange,
    log: logging.Logger,
) -> Employee:
    row = stub.location.row
    days: list[Day] = []
    for offset, day in enumerate(schedule_range.dates()):
        column = _FIRST_DAY_COLUMN + offset
        cell = grid.get(row, column)
        status = classify_day(cell, day, logger=log)
        if status is None:
            log.debug("%s: no usable cell at (%d, %d) for %s", stub.name, row, column, day)
            continue
        days.append(Day(date=day, status=status))

    if len(days) < schedule_range.duration_days:
        log.info(
            "%s: %d of %d days classified",
            stub.name,
            len(days),
            schedule_range.duration_days,
        )
    return stub.model_copy(update={"days": tuple(days)})
