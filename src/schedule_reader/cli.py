"""Command line entry point."""

from __future__ import annotations

import argparse
import sys

from schedule_reader.errors import ScheduleReaderError
from schedule_reader.io.sink import JsonLinesSink
from schedule_reader.logging_config import get_logger, setup_logging
from schedule_reader.pipeline import run
from schedule_reader.settings import ReaderSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schedule-reader",
        description="Read a work schedule spreadsheet and send each day to a listener",
    )
    parser.add_argument("path", help="Excel file with the schedule on its first sheet")
    parser.add_argument("--sheet", default=None, help="Sheet name (default: Sheet1)")
    parser.add_argument(
        "-e",
        "--employee",
        action="append",
        default=None,
        help="Deliver only this employee; repeatable (default: everyone)",
    )
    parser.add_argument("--host", default=None, help="Listener host")
    parser.add_argument("--port", type=int, default=None, help="Listener port")
    parser.add_argument("--retries", type=int, default=None, help="Reconnect attempts per record")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Write records to stdout as JSON lines instead of sending them",
    )
    parser.add_argument(
        "--print", dest="print_schedule", action="store_true", help="Print the parsed schedule"
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    return parser


def _apply_overrides(settings: ReaderSettings, args: argparse.Namespace) -> ReaderSettings:
    overrides = {
        "sheet_name": args.sheet,
        "employees": args.employee,
        "sink_host": args.host,
        "sink_port": args.port,
        "sink_retries": args.retries,
        "log_level": args.log_level,
    }
    update = {key: value for key, value in overrides.items() if value is not None}
    return settings.model_copy(update=update)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = _apply_overrides(ReaderSettings(), args)
    try:
        setup_logging(settings.log_level, settings.log_format)
    except ValueError as exc:
        parser.error(str(exc))
    log = get_logger("schedule_reader")

    sink = JsonLinesSink(sys.stdout) if args.dry_run else None
    try:
        result = run(
            args.path,
            settings=settings,
            sink=sink,
            logger=log,
        )
    except ScheduleReaderError as exc:
        log.error("Application error: %s", exc)
        return 1

    if args.print_schedule:
        print(result.schedule.describe(), file=sys.stderr if args.dry_run else sys.stdout)
    if result.report.failed:
        log.warning(
            "%d of %d records were not delivered",
            result.report.failed,
            result.report.total,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
