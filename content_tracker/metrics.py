"""Completion and approval analytics over flattened tasks."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from content_tracker.normalize import is_approved
from content_tracker.schema import MemberAnalytics, StatsSummary, Task

ALL = "all"

# Legacy labels are accepted alongside the canonical ones so summaries stay
# correct for records that bypassed normalization.
_COMPLETED_LABELS = frozenset({"Done", "Completed"})
_IN_PROGRESS_LABELS = frozenset({"In Progress", "Working"})
_PENDING_LABELS = frozenset({"Pending", "To Do"})


def _one_decimal(value: float) -> float:
    # Ties round up, matching the dashboard's fixed-point display.
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _percent(task: Task) -> int:
    try:
        return int(task.percent_complete or 0)
    except (TypeError, ValueError):
        return 0


def compute_summary(tasks: Iterable[Task]) -> StatsSummary:
    """Compute counts, average progress, approvals and completion rate."""

    tasks = list(tasks)
    total = len(tasks)
    completed = sum(1 for t in tasks if t.status in _COMPLETED_LABELS)
    in_progress = sum(1 for t in tasks if t.status in _IN_PROGRESS_LABELS)
    pending = sum(1 for t in tasks if not t.status or t.status in _PENDING_LABELS)
    avg_progress = sum(_percent(t) for t in tasks) / total if total else 0.0
    copy_approved = sum(1 for t in tasks if is_approved(t.copywriter_approval))
    creative_approved = sum(1 for t in tasks if is_approved(t.creative_director_approval))
    completion_rate = completed / total * 100.0 if total else 0.0

    return StatsSummary(
        total=total,
        completed=completed,
        in_progress=in_progress,
        pending=pending,
        avg_progress=_one_decimal(avg_progress),
        copy_approved=copy_approved,
        creative_approved=creative_approved,
        completion_rate=_one_decimal(completion_rate),
    )


def compute_member_analytics(tasks: Iterable[Task], members: Iterable[str]) -> list[MemberAnalytics]:
    """Summarize each member's own tasks, in the order members are given."""

    tasks = list(tasks)
    analytics = []
    for name in members:
        summary = compute_summary(t for t in tasks if t.assigned_to == name)
        analytics.append(
            MemberAnalytics(
                name=name,
                total=summary.total,
                completed=summary.completed,
                in_progress=summary.in_progress,
                pending=summary.pending,
                avg_progress=summary.avg_progress,
                completion_rate=summary.completion_rate,
                copy_approved=summary.copy_approved,
                creative_approved=summary.creative_approved,
            )
        )
    return analytics


def distinct_assignees(tasks: Iterable[Task]) -> list[str]:
    return sorted({t.assigned_to for t in tasks if t.assigned_to})


def distinct_months(tasks: Iterable[Task]) -> list[str]:
    return sorted({t.month_key for t in tasks if t.month_key})


def distinct_days(tasks: Iterable[Task]) -> list[str]:
    return sorted({t.day_iso for t in tasks if t.day_iso})


def filter_tasks(
    tasks: Iterable[Task],
    person: Optional[str] = ALL,
    month: Optional[str] = ALL,
) -> list[Task]:
    """Keep tasks matching both selections; ``ALL`` (or None) disables one."""

    def matches(task: Task) -> bool:
        person_ok = person in (None, ALL) or task.assigned_to == person
        month_ok = month in (None, ALL) or task.month_key == month
        return person_ok and month_ok

    return [t for t in tasks if matches(t)]


def tasks_for_day(tasks: Iterable[Task], day: str) -> list[Task]:
    """Tasks whose derived day key equals ``day`` (``YYYY-MM-DD``)."""

    return [t for t in tasks if t.day_iso and t.day_iso == day]
