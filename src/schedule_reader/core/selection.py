"""Employee selectors for choosing whose records get delivered."""

from __future__ import annotations

from collections.abc import Iterable

from schedule_reader.models.schedule import EmployeeSelector


def select_all() -> EmployeeSelector:
    return lambda employee: True


def select_by_names(names: Iterable[str]) -> EmployeeSelector:
    """Exact, case-sensitive name match. Every row with a listed name matches."""
    wanted = frozenset(names)
    return lambda employee: employee.name in wanted


def selector_from_names(names: Iterable[str] | None) -> EmployeeSelector:
    """Selector for a configured name list; an empty list selects everyone."""
    names = list(names or [])
    if not names:
        return select_all()
    return select_by_names(names)
