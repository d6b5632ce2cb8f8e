import pytest

from content_tracker.schema import Task


def make_task(**overrides) -> Task:
    fields = {
        "main_task": "Post Creation",
        "sub_task": "",
        "description": "",
        "assigned_to": "Alice",
        "status": "Pending",
        "percent_complete": 0,
        "date": "",
        "schedule_date": "",
        "day_iso": None,
        "month_key": None,
        "copywriter_approval": "",
        "creative_director_approval": "",
        "sheet_name": "S1",
        "post_type": "Reel",
        "post_format": "",
        "caption": "",
    }
    fields.update(overrides)
    return Task(**fields)


@pytest.fixture
def sample_tasks():
    return [
        make_task(assigned_to="Alice", status="Completed", percent_complete=100, day_iso="2024-01-05",
                  month_key="2024-01", copywriter_approval="Yes", creative_director_approval="Approved"),
        make_task(assigned_to="Alice", status="In Progress", percent_complete=50, day_iso="2024-02-01",
                  month_key="2024-02"),
        make_task(assigned_to="Bob", status="Pending", percent_complete=0, day_iso="2024-01-05",
                  month_key="2024-01", copywriter_approval="yes"),
        make_task(assigned_to="Bob", status="Completed", percent_complete=80, creative_director_approval="Yes"),
    ]
