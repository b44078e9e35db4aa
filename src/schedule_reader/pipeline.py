"""End-to-end run: read grid, build schedule, deliver selected employees."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel

from schedule_reader.core.builder import build_schedule
from schedule_reader.core.selection import selector_from_names
from schedule_reader.io.grid import read_grid
from schedule_reader.io.sink import DeliveryReport, Sink, TcpSink, deliver
from schedule_reader.models.schedule import EmployeeSelector, Schedule
from schedule_reader.settings import ReaderSettings

_log = logging.getLogger(__name__)


class PipelineResult(BaseModel):
    """Outcome of one run."""

    schedule: Schedule
    delivered_employees: list[str]
    report: DeliveryReport


def run(
    filepath: str | Path,
    settings: ReaderSettings | None = None,
    sink: Sink | None = None,
    selector: EmployeeSelector | None = None,
    logger: logging.Logger | None = None,
) -> PipelineResult:
    """Extract the schedule from ``filepath`` and deliver the selected records.

    Every employee is classified; only those matching ``selector`` (default:
    the names in ``settings.employees``, or everyone) are delivered. When no
    sink is given a TcpSink is built from settings and closed afterwards.

    Raises:
        GridReadError, SheetNotFound, MissingScheduleBounds: Structural
            problems that make the run meaningless.
    """
    settings = settings or ReaderSettings()
    log = logger or _log

    log.debug("Open and read %s of %s", settings.sheet_name, filepath)
    grid = read_grid(filepath, sheet_name=settings.sheet_name)
    schedule = build_schedule(grid, logger=log)
    log.info(
        "Extracted %d employees over %d days",
        len(schedule.employees),
        schedule.duration_days,
    )

    if selector is None:
        selector = selector_from_names(settings.employees)
    selected = schedule.select(selector)
    if not selected:
        log.warning("No employee matched the delivery selection")

    owns_sink = sink is None
    if sink is None:
        sink = TcpSink(
            settings.sink_host,
            settings.sink_port,
            timeout=settings.sink_timeout,
            retries=settings.sink_retries,
            retry_delay=settings.sink_retry_delay,
            logger=log,
        )

    report = DeliveryReport()
    try:
        for employee in selected:
            employee_report = deliver(employee.records(), sink, logger=log)
            log.info(
                "%s: %d records sent, %d failed",
                employee.name,
                employee_report.sent,
                employee_report.failed,
            )
            report.sent += employee_report.sent
            report.failed += employee_report.failed
    finally:
        if owns_sink:
            sink.close()

    return PipelineResult(
        schedule=schedule,
        delivered_employees=[e.name for e in selected],
        report=report,
    )
