"""Streamlit demo UI for content-tracker."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import asdict
from datetime import date
from functools import partial
from pathlib import Path
from typing import Any

from content_tracker.adapters.sheets_adapter import parse
from content_tracker.adapters.webhook import fetch_sheets
from content_tracker.cache import TaskCache, TaskLoadError, drop_unassigned
from content_tracker.config import load_settings
from content_tracker.dashboard import DashboardState
from content_tracker.metrics import ALL
from content_tracker.schema import Task

DEMO_DATASET = "examples/sample_sheets.json"

TASK_COLUMNS = [
    "main_task",
    "sub_task",
    "assigned_to",
    "status",
    "percent_complete",
    "day_iso",
    "copywriter_approval",
    "creative_director_approval",
    "sheet_name",
    "post_type",
]


def _parse_uploaded(uploaded_file) -> tuple[Task, ...]:
    with tempfile.NamedTemporaryFile(delete=False, suffix=".json") as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    try:
        return drop_unassigned(parse(temp_path))
    finally:
        os.unlink(temp_path)


def _demo_cache() -> TaskCache:
    raw = Path(DEMO_DATASET).read_text(encoding="utf-8")
    return TaskCache(lambda: json.loads(raw))


def _webhook_cache() -> TaskCache:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    return TaskCache(partial(fetch_sheets, settings.webhook_url, settings.timeout))


def _build_cache(use_demo: bool) -> TaskCache:
    return _demo_cache() if use_demo else _webhook_cache()


def _task_rows(tasks: list[Task]) -> list[dict[str, Any]]:
    return [{column: getattr(task, column) for column in TASK_COLUMNS} for task in tasks]


def _render_summary(st, summary) -> None:
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total tasks", summary.total)
    c2.metric("Completed", summary.completed)
    c3.metric("In progress", summary.in_progress)
    c4.metric("Pending", summary.pending)
    c5, c6, c7, c8 = st.columns(4)
    c5.metric("Avg progress", f"{summary.avg_progress:.1f}%")
    c6.metric("Completion rate", f"{summary.completion_rate:.1f}%")
    c7.metric("Copy approved", summary.copy_approved)
    c8.metric("Creative approved", summary.creative_approved)


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Content Tracker", layout="wide")
    st.title("Content Tracker Dashboard")

    # One cache per server process, shared by every session.
    get_cache = st.cache_resource(_build_cache)

    with st.sidebar:
        st.header("Source")
        uploaded = st.file_uploader("Upload sheet payload", type=["json"])
        use_demo = st.checkbox("Load demo dataset", value=True)

    try:
        if uploaded is not None:
            tasks = _parse_uploaded(uploaded)
            data_source = f"uploaded file ({uploaded.name})"
        else:
            tasks = get_cache(use_demo).load()
            data_source = f"demo dataset ({DEMO_DATASET})" if use_demo else "webhook"
    except TaskLoadError:
        st.error("Failed to load data")
        return
    except (ValueError, RuntimeError) as exc:
        st.error(f"Input error: {exc}")
        return

    if not tasks:
        st.error("No assigned tasks were found in the selected input.")
        return

    state = DashboardState(tasks)
    st.success(f"Loaded {len(tasks)} tasks from {data_source}.")

    with st.sidebar:
        st.header("Filters")
        state.select_person(st.selectbox("Person", options=[ALL] + state.people))
        state.select_month(st.selectbox("Month", options=[ALL] + state.months))
        state.select_day(st.date_input("Day", value=date.today()).isoformat())

    st.subheader("A) Summary")
    _render_summary(st, state.stats)
    st.dataframe(_task_rows(state.filtered_tasks), use_container_width=True)

    st.subheader("B) Team Members")
    st.table([asdict(member) for member in state.team_member_analytics])

    st.subheader(f"C) Tasks for {state.selected_day}")
    day_tasks = state.day_tasks
    if day_tasks:
        _render_summary(st, state.day_stats)
        st.dataframe(_task_rows(day_tasks), use_container_width=True)
    else:
        st.info("No tasks scheduled for this day.")


if __name__ == "__main__":
    main()
