"""Map a raw day cell to a DayStatus."""

from __future__ import annotations

import datetime as dt
import logging

from schedule_reader.io.grid import Cell, CellKind
from schedule_reader.models.day import DayKind, DayStatus

_log = logging.getLogger(__name__)

# Shift codes without an explicit hour start at noon
_CODE_START = dt.time(12, 0, 0)

# Day code -> status kind. Matching is case-sensitive.
DAY_CODES: dict[str, DayKind] = {
    "V": DayKind.VACATION,
    "A": DayKind.A_DAY,
    "X": DayKind.OFF,
    "M": DayKind.OFF,
    "SC": DayKind.WORK,
    "B": DayKind.WORK,
    "C": DayKind.WORK,
    "R": DayKind.WORK,
}


def classify_day(
    cell: Cell | None,
    day: dt.date,
    logger: logging.Logger | None = None,
) -> DayStatus | None:
    """Classify one day cell.

    Priority: empty -> Off, integer -> Work at that hour, float -> Work at
    the truncated hour, string -> day code table. Unknown codes give
    Undefined and a warning. Returns None when the cell is missing or of
    any other type; callers must then skip the date entirely.

    Args:
        cell: Grid cell at the employee row and the day's column, or None
            if that column is outside the grid.
        day: Calendar date the column represents.
        logger: Receives diagnostics; defaults to the module logger.
    """
    log = logger or _log
    if cell is None:
        return None

    if cell.kind == CellKind.EMPTY:
        return DayStatus.off()
    if cell.kind == CellKind.INT:
        return _work_at_hour(int(cell.value), day, log)
    if cell.kind == CellKind.FLOAT:
        # Truncated, not rounded: 14.5 starts at 14:00
        return _work_at_hour(int(cell.value), day, log)
    if cell.kind == CellKind.STRING:
        return _classify_code(cell.value, day, log)
    return None


def _work_at_hour(hour: int, day: dt.date, log: logging.Logger) -> DayStatus:
    if not 0 <= hour <= 23:
        log.warning("UnrecognizedDayCode: hour %d on %s is not a time of day", hour, day)
        return DayStatus.undefined()
    return DayStatus.work(dt.datetime.combine(day, dt.time(hour, 0, 0)))


def _classify_code(code: str, day: dt.date, log: logging.Logger) -> DayStatus:
    kind = DAY_CODES.get(code)
    if kind is None:
        log.warning("UnrecognizedDayCode: undefined day type set - %r on %s", code, day)
        return DayStatus.undefined()
    if kind == DayKind.WORK:
        return DayStatus.work(dt.datetime.combine(day, _CODE_START))
    return DayStatus(kind=kind)
