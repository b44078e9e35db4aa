"""Schedule-related data models."""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable, Iterator, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from schedule_reader.errors import InvalidScheduleRange
from schedule_reader.models.day import Day

EmployeeSelector = Callable[["Employee"], bool]


class Location(BaseModel):
    """Zero-based (row, column) position in the grid."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0)
    column: int = Field(ge=0)

    def __str__(self) -> str:
        return f"[{self.row:<2}, {self.column:<2}]"


class ScheduleRange(BaseModel):
    """Inclusive calendar-date interval covered by the schedule."""

    model_config = ConfigDict(frozen=True)

    start_date: dt.date
    end_date: dt.date

    @model_validator(mode="before")
    @classmethod
    def _check_order(cls, data: Any) -> Any:
        if isinstance(data, dict):
            start, end = data.get("start_date"), data.get("end_date")
            if isinstance(start, dt.date) and isinstance(end, dt.date) and end < start:
                raise InvalidScheduleRange(
                    f"Schedule end date {end} is before start date {start}"
                )
        return data

    @property
    def duration_days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def date_at(self, offset: int) -> dt.date:
        return self.start_date + dt.timedelta(days=offset)

    def dates(self) -> Iterator[dt.date]:
        for offset in range(self.duration_days):
            yield self.date_at(offset)

    def __contains__(self, day: dt.date) -> bool:
        return self.start_date <= day <= self.end_date


class DayRecords:
    """Restartable view over an employee's days as transport records.

    Each iteration walks the underlying day tuple from the start; the days
    themselves are never consumed.
    """

    def __init__(self, days: Sequence[Day]) -> None:
        self._days = days

    def __iter__(self) -> Iterator[dict[str, Any]]:
        for day in self._days:
            yield day.to_record()

    def __len__(self) -> int:
        return len(self._days)


class Employee(BaseModel):
    """An employee row discovered in the grid, with its classified days."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    location: Location = Field(description="Cell where the name was found")
    days: tuple[Day, ...] = Field(
        default=(), description="Classified days in schedule order"
    )

    def records(self) -> DayRecords:
        return DayRecords(self.days)

    def is_complete(self, schedule_range: ScheduleRange) -> bool:
        """True if there is exactly one day per date of the range, in order."""
        if len(self.days) != schedule_range.duration_days:
            return False
        return all(
            day.date == expected
            for day, expected in zip(self.days, schedule_range.dates())
        )

    def describe(self) -> str:
        lines = [f"Name: {self.name:10}", f"Location: {self.location} "]
        lines.extend(str(day) for day in self.days)
        return "\n".join(lines)


class Schedule(BaseModel):
    """Complete extraction result: range plus employees in row order."""

    model_config = ConfigDict(frozen=True)

    range: ScheduleRange
    employees: tuple[Employee, ...] = ()

    @model_validator(mode="after")
    def _check_days_in_range(self) -> Schedule:
        for employee in self.employees:
            for day in employee.days:
                if day.date not in self.range:
                    raise ValueError(
                        f"{employee.name}: day {day.date} outside schedule range"
                    )
        return self

    @property
    def duration_days(self) -> int:
        return self.range.duration_days

    def find(self, name: str) -> list[Employee]:
        """All employees whose name matches exactly (names may repeat)."""
        return [e for e in self.employees if e.name == name]

    def select(self, selector: EmployeeSelector) -> list[Employee]:
        return [e for e in self.employees if selector(e)]

    def describe(self) -> str:
        header = (
            f"start_date: {self.range.start_date} end_date: {self.range.end_date} "
            f"duration: {self.duration_days}\nEmployees:"
        )
        blocks = [header]
        blocks.extend(employee.describe() for employee in self.employees)
        return "\n\n".join(blocks) + "\n"
