"""Filter selection state with views recomputed on every read."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from content_tracker.metrics import (
    ALL,
    compute_member_analytics,
    compute_summary,
    distinct_assignees,
    distinct_months,
    filter_tasks,
    tasks_for_day,
)
from content_tracker.schema import MemberAnalytics, StatsSummary, Task


class DashboardState:
    """Holds person/month/day selections over a read-only task collection.

    Every view is derived from the tasks and the current selection when it is
    read, so changing a selection never leaves a stale summary behind.
    """

    def __init__(self, tasks: Iterable[Task], today: Optional[date] = None):
        self._tasks = tuple(tasks)
        self.selected_person = ALL
        self.selected_month = ALL
        self.selected_day = (today or date.today()).isoformat()

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks

    def select_person(self, person: str) -> None:
        self.selected_person = person or ALL

    def select_month(self, month: str) -> None:
        self.selected_month = month or ALL

    def select_day(self, day: str) -> None:
        self.selected_day = day

    @property
    def people(self) -> list[str]:
        return distinct_assignees(self._tasks)

    @property
    def months(self) -> list[str]:
        return distinct_months(self._tasks)

    @property
    def filtered_tasks(self) -> list[Task]:
        return filter_tasks(self._tasks, person=self.selected_person, month=self.selected_month)

    @property
    def stats(self) -> StatsSummary:
        return compute_summary(self.filtered_tasks)

    @property
    def team_member_analytics(self) -> list[MemberAnalytics]:
        # Per-member rows ignore the person/month selection.
        return compute_member_analytics(self._tasks, self.people)

    @property
    def day_tasks(self) -> list[Task]:
        return tasks_for_day(self._tasks, self.selected_day)

    @property
    def day_stats(self) -> StatsSummary:
        return compute_summary(self.day_tasks)
