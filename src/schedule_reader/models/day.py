"""Day status models and their transport records."""

from __future__ import annotations

import datetime as dt
import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Wire format for Work start times, e.g. "2022-02-19T14:00:00"
_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


class DayKind(str, Enum):
    """Closed set of day statuses."""

    OFF = "Off"
    VACATION = "Vacation"
    A_DAY = "ADay"
    WORK = "Work"
    UNDEFINED = "Undefined"


# Labels used in human readable output
_DISPLAY_LABELS = {
    DayKind.OFF: "Off",
    DayKind.VACATION: "Vacation",
    DayKind.A_DAY: "A Day",
    DayKind.UNDEFINED: "Undefined",
}


class DayStatus(BaseModel):
    """Status of one employee on one day.

    Only ``Work`` carries a start time.
    """

    model_config = ConfigDict(frozen=True)

    kind: DayKind
    start_time: dt.datetime | None = Field(
        default=None, description="Clock-in time, set only for Work days"
    )

    @model_validator(mode="after")
    def _check_start_time(self) -> DayStatus:
        if self.kind == DayKind.WORK and self.start_time is None:
            raise ValueError("Work status requires a start_time")
        if self.kind != DayKind.WORK and self.start_time is not None:
            raise ValueError(f"{self.kind.value} status cannot carry a start_time")
        return self

    @classmethod
    def off(cls) -> DayStatus:
        return cls(kind=DayKind.OFF)

    @classmethod
    def vacation(cls) -> DayStatus:
        return cls(kind=DayKind.VACATION)

    @classmethod
    def a_day(cls) -> DayStatus:
        return cls(kind=DayKind.A_DAY)

    @classmethod
    def work(cls, start_time: dt.datetime) -> DayStatus:
        return cls(kind=DayKind.WORK, start_time=start_time)

    @classmethod
    def undefined(cls) -> DayStatus:
        return cls(kind=DayKind.UNDEFINED)

    def to_tagged(self) -> str | dict[str, str]:
        """Tagged form: a bare name, or ``{"Work": "<iso datetime>"}``."""
        if self.kind == DayKind.WORK:
            return {DayKind.WORK.value: self.start_time.strftime(_DATETIME_FORMAT)}
        return self.kind.value

    @classmethod
    def from_tagged(cls, value: str | dict[str, str]) -> DayStatus:
        if isinstance(value, dict):
            if set(value) != {DayKind.WORK.value}:
                raise ValueError(f"Unknown tagged day type: {value!r}")
            return cls.work(dt.datetime.fromisoformat(value[DayKind.WORK.value]))
        kind = DayKind(value)
        if kind == DayKind.WORK:
            raise ValueError("Work day type must carry a start time")
        return cls(kind=kind)

    def __str__(self) -> str:
        if self.kind == DayKind.WORK:
            return f"Work - {self.start_time:%Y-%m-%d %H:%M}"
        return _DISPLAY_LABELS[self.kind]


class Day(BaseModel):
    """One classified calendar day of an employee's schedule."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    status: DayStatus

    def to_record(self) -> dict[str, Any]:
        return {"date": self.date.isoformat(), "day_type": self.status.to_tagged()}

    def to_json(self) -> str:
        return json.dumps(self.to_record(), separators=(",", ":"))

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Day:
        return cls(
            date=dt.date.fromisoformat(record["date"]),
            status=DayStatus.from_tagged(record["day_type"]),
        )

    def __str__(self) -> str:
        return f"{self.date.isoformat()} - {self.status}"
