"""Tests for building a full schedule from a grid."""

from __future__ import annotations

import datetime as dt

import pytest
from pydantic import ValidationError

from schedule_reader.core.builder import build_schedule
from schedule_reader.errors import MissingScheduleBounds
from schedule_reader.io.grid import Grid
from schedule_reader.models.day import DayKind, DayStatus


class TestBuildSchedule:
    def test_employees_in_row_order(self, schedule_grid: Grid):
        schedule = build_schedule(schedule_grid)
        assert [e.name for e in schedule.employees] == ["JENNY", "TOM"]

    def test_days_follow_range(self, schedule_grid: Grid):
        schedule = build_schedule(schedule_grid)
        for employee in schedule.employees:
            assert employee.is_complete(schedule.range)
            for i, day in enumerate(employee.days):
                assert day.date == dt.date(2022, 2, 1) + dt.timedelta(days=i)

    def test_jenny_days(self, schedule_grid: Grid):
        jenny = build_schedule(schedule_grid).find("JENNY")[0]
        assert [d.status for d in jenny.days] == [
            DayStatus.work(dt.datetime(2022, 2, 1, 9)),
            DayStatus.work(dt.datetime(2022, 2, 2, 14)),
            DayStatus.vacation(),
        ]

    def test_tom_days(self, schedule_grid: Grid):
        tom = build_schedule(schedule_grid).find("TOM")[0]
        assert [d.status.kind for d in tom.days] == [
            DayKind.WORK,
            DayKind.OFF,
            DayKind.UNDEFINED,
        ]

    def test_columns_beyond_grid_are_omitted(self):
        grid = Grid.from_rows(
            [[dt.date(2022, 2, 1)], [dt.date(2022, 2, 5)], ["JENNY", 9, 10]]
        )
        schedule = build_schedule(grid)
        jenny = schedule.employees[0]
        assert schedule.duration_days == 5
        assert [d.date.day for d in jenny.days] == [1, 2]
        assert not jenny.is_complete(schedule.range)

    def test_unusable_cells_are_skipped_not_off(self):
        grid = Grid.from_rows(
            [
                [dt.date(2022, 2, 1)],
                [dt.date(2022, 2, 3)],
                ["JENNY", 9, dt.datetime(2022, 2, 2), 10],
            ]
        )
        jenny = build_schedule(grid).employees[0]
        assert [d.date.day for d in jenny.days] == [1, 3]

    def test_schedule_is_immutable(self, schedule_grid: Grid):
        schedule = build_schedule(schedule_grid)
        with pytest.raises(ValidationError):
            schedule.employees[0].name = "SOMEONE"

    def test_missing_bounds_propagate(self):
        with pytest.raises(MissingScheduleBounds):
            build_schedule(Grid.from_rows([["JENNY", 9]]))
