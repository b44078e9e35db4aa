"""Tests for the command line entry point."""

from __future__ import annotations

import json

import pytest

from schedule_reader.cli import build_parser, main


class TestCli:
    def test_path_is_required(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code != 0
        assert "path" in capsys.readouterr().err

    def test_dry_run_writes_records(self, schedule_xlsx, capsys):
        code = main([str(schedule_xlsx), "--dry-run", "-e", "TOM", "--log-level", "ERROR"])
        assert code == 0
        lines = capsys.readouterr().out.splitlines()
        assert [json.loads(line)["day_type"] for line in lines] == [
            {"Work": "2022-02-01T12:00:00"},
            "Off",
            "Undefined",
        ]

    def test_print_schedule(self, schedule_xlsx, capsys):
        code = main([str(schedule_xlsx), "--dry-run", "--print", "--log-level", "ERROR"])
        assert code == 0
        err = capsys.readouterr().err
        assert "duration: 3" in err
        assert "Name: TOM" in err

    def test_missing_sheet_exits_nonzero(self, make_xlsx, schedule_rows):
        path = make_xlsx(schedule_rows, sheet_name="Other")
        assert main([str(path), "--dry-run", "--log-level", "ERROR"]) == 1

    def test_missing_file_exits_nonzero(self, tmp_path):
        assert main([str(tmp_path / "missing.xlsx"), "--dry-run", "--log-level", "ERROR"]) == 1

    def test_bad_log_level(self, schedule_xlsx):
        with pytest.raises(SystemExit) as exc_info:
            main([str(schedule_xlsx), "--log-level", "LOUD"])
        assert exc_info.value.code == 2

    def test_repeatable_employee_option(self):
        args = build_parser().parse_args(["x.xlsx", "-e", "JENNY", "-e", "TOM"])
        assert args.employee == ["JENNY", "TOM"]
