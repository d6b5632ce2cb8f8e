"""Demo script for content-tracker."""

import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from content_tracker.adapters.sheets_adapter import parse
from content_tracker.cache import TaskCache
from content_tracker.dashboard import DashboardState


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    sample = Path(__file__).with_name("sample_sheets.json")
    raw = sample.read_text(encoding="utf-8")

    cache = TaskCache(lambda: json.loads(raw))
    tasks = cache.load()
    print("Flattened:", len(parse(str(sample))), "Assigned:", len(tasks))

    state = DashboardState(cache.tasks)
    print("People:", state.people)
    print("Months:", state.months)
    print("Summary:", asdict(state.stats))
    for member in state.team_member_analytics:
        print("Member:", asdict(member))

    state.select_month("2024-01")
    print("January:", asdict(state.stats))


if __name__ == "__main__":
    main()
