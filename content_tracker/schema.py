"""Core data schema for flattened content tasks."""

from dataclasses import dataclass
from typing import Optional


STATUS_PENDING = "Pending"
STATUS_IN_PROGRESS = "In Progress"
STATUS_COMPLETED = "Completed"


@dataclass(frozen=True)
class Task:
    """Normalized sub-task record used by all modules."""

    main_task: str
    sub_task: str
    description: str
    assigned_to: str
    status: str
    percent_complete: int
    date: str
    schedule_date: str
    day_iso: Optional[str]
    month_key: Optional[str]
    copywriter_approval: str
    creative_director_approval: str
    sheet_name: str
    post_type: str
    post_format: str
    caption: str
    publishing_link: str = ""
    comments: str = ""


@dataclass(frozen=True)
class StatsSummary:
    total: int
    completed: int
    in_progress: int
    pending: int
    avg_progress: float
    copy_approved: int
    creative_approved: int
    completion_rate: float


@dataclass(frozen=True)
class MemberAnalytics:
    """Summary scoped to the tasks of one assignee."""

    name: str
    total: int
    completed: int
    in_progress: int
    pending: int
    avg_progress: float
    completion_rate: float
    copy_approved: int
    creative_approved: int
