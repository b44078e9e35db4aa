"""Exceptions raised by schedule_reader."""

from __future__ import annotations


class ScheduleReaderError(Exception):
    """Base class for all schedule_reader errors."""


class GridReadError(ScheduleReaderError):
    """The spreadsheet file could not be opened or decoded."""


class SheetNotFound(ScheduleReaderError):
    """The workbook has no sheet with the required name."""

    def __init__(self, sheet_name: str, available: list[str] | None = None) -> None:
        self.sheet_name = sheet_name
        self.available = available or []
        message = f"Cannot find sheet '{sheet_name}'"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)


class MissingScheduleBounds(ScheduleReaderError):
    """The start/end date header cells are absent or not dates."""


class InvalidScheduleRange(MissingScheduleBounds):
    """The end date lies before the start date."""


class FrameTooLarge(ScheduleReaderError):
    """A record does not fit in a 2-byte length-prefixed frame."""
