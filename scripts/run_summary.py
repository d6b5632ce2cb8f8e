"""Print a JSON analytics report for the sheet tasks."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from functools import partial
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from content_tracker.adapters.sheets_adapter import parse
from content_tracker.adapters.webhook import fetch_sheets
from content_tracker.cache import TaskCache, TaskLoadError, drop_unassigned
from content_tracker.config import load_settings
from content_tracker.dashboard import DashboardState
from content_tracker.metrics import ALL


def _load_tasks(data: Path | None):
    if data is not None:
        logging.basicConfig(level=logging.INFO)
        return drop_unassigned(parse(str(data)))

    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    cache = TaskCache(partial(fetch_sheets, settings.webhook_url, settings.timeout))
    return cache.load()


def build_report(state: DashboardState, include_day: bool) -> dict:
    report = {
        "filters": {"person": state.selected_person, "month": state.selected_month},
        "summary": asdict(state.stats),
        "team": [asdict(member) for member in state.team_member_analytics],
        "people": state.people,
        "months": state.months,
    }
    if include_day:
        report["day"] = {"date": state.selected_day, "summary": asdict(state.day_stats)}
    return report


def main() -> None:
    parser = argparse.ArgumentParser(description="Summarize content tracker tasks")
    parser.add_argument("--data", type=Path, help="Path to a saved JSON sheet payload (defaults to the webhook)")
    parser.add_argument("--person", default=ALL, help="Only count tasks assigned to this person")
    parser.add_argument("--month", default=ALL, help="Only count tasks in this month (YYYY-MM)")
    parser.add_argument("--day", help="Also summarize tasks due on this day (YYYY-MM-DD)")
    args = parser.parse_args()

    try:
        tasks = _load_tasks(args.data)
    except (TaskLoadError, OSError, ValueError) as exc:
        parser.exit(1, f"error: {exc}\n")

    state = DashboardState(tasks)
    state.select_person(args.person)
    state.select_month(args.month)
    if args.day:
        state.select_day(args.day)

    print(json.dumps(build_report(state, include_day=bool(args.day)), indent=2))


if __name__ == "__main__":
    main()
