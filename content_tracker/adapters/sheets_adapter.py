"""Sheet payload adapter: flattens nested sheets into normalized tasks."""

from __future__ import annotations

import json
from typing import Any

from content_tracker.dates import parse_date_keys
from content_tracker.normalize import normalize_percent, normalize_status
from content_tracker.schema import Task


def _entries(value: Any) -> list:
    return value if isinstance(value, list) else []


def _items(value: Any) -> list[dict]:
    return [item for item in _entries(value) if isinstance(item, dict)]


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _build_task(sheet: dict, post: dict, block: dict, sub: dict) -> Task:
    schedule_date = _text(sub.get("SchedualeDate")).strip()
    date = _text(sub.get("Date")).strip() or schedule_date
    day_iso, month_key = parse_date_keys(date)

    return Task(
        main_task=_text(block.get("Task")),
        sub_task=_text(sub.get("SubTask")),
        description=_text(sub.get("Description")),
        assigned_to=_text(sub.get("AssignedTo")),
        status=normalize_status(sub.get("Status")),
        percent_complete=normalize_percent(sub.get("PercentComplete")),
        date=date,
        schedule_date=schedule_date,
        day_iso=day_iso,
        month_key=month_key,
        copywriter_approval=_text(sub.get("CopywriterApproval")),
        creative_director_approval=_text(sub.get("CreativeDirectorApproval")),
        sheet_name=_text(sheet.get("SheetName")),
        post_type=_text(post.get("Type")),
        post_format=_text(post.get("Format")),
        caption=_text(post.get("CaptionAndHashtags")),
        publishing_link=_text(sub.get("PublishingLink")),
        comments=_text(sub.get("Comments")),
    )


def flatten(sheets: Any) -> list[Task]:
    """Emit one task per sheet/post/task-block/sub-task path.

    Missing or non-list arrays at any level contribute no tasks. Non-object
    entries are skipped, except inside a sub-task array where they become an
    empty sub-task record. Unassigned tasks are kept; callers publishing the
    collection drop them.
    """

    tasks: list[Task] = []
    for sheet in _items(sheets):
        for post in _items(sheet.get("Data")):
            for block in _items(post.get("Tasks")):
                # A null sub-task still yields a record under its block.
                for sub in _entries(block.get("SubTasks")):
                    tasks.append(_build_task(sheet, post, block, sub if isinstance(sub, dict) else {}))
    return tasks


def parse_payload(payload: Any) -> list[Task]:
    """Flatten an already decoded webhook payload."""

    if not isinstance(payload, list):
        raise ValueError("Sheet payload must be a list of sheet objects")
    return flatten(payload)


def parse(file_path: str) -> list[Task]:
    """Parse a saved JSON payload file into normalized tasks."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    return parse_payload(payload)
