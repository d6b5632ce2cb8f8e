import json

import pytest

from content_tracker.adapters.sheets_adapter import flatten, parse, parse_payload


def example_payload():
    return [
        {
            "SheetName": "S1",
            "Data": [
                {
                    "Type": "Reel",
                    "Tasks": [
                        {
                            "Task": "Post Creation",
                            "SubTasks": [
                                {
                                    "SubTask": "Write caption",
                                    "AssignedTo": "Alice",
                                    "Status": "Published ✅",
                                    "PercentComplete": "100%",
                                    "Date": "05/03/2024",
                                }
                            ],
                        }
                    ],
                }
            ],
        }
    ]


def test_flatten_end_to_end_example():
    tasks = flatten(example_payload())
    assert len(tasks) == 1
    task = tasks[0]
    assert task.status == "Completed"
    assert task.percent_complete == 100
    assert task.day_iso == "2024-03-05"
    assert task.month_key == "2024-03"
    assert task.main_task == "Post Creation"
    assert task.assigned_to == "Alice"
    assert task.sheet_name == "S1"
    assert task.post_type == "Reel"
    assert task.post_format == ""
    assert task.caption == ""
    assert task.schedule_date == ""


def test_flatten_is_total_over_missing_branches():
    payload = [
        None,
        {"SheetName": "no data"},
        {"SheetName": "null data", "Data": None},
        {"SheetName": "bad data", "Data": "oops"},
        {"Data": [None, {"Tasks": None}, {"Tasks": [{"Task": "x"}, {"SubTasks": {"a": 1}}, 3]}]},
    ]
    assert flatten(payload) == []
    assert flatten(None) == []
    assert flatten({"SheetName": "not a list"}) == []


def test_null_sub_task_yields_empty_record():
    payload = [{"SheetName": "S1", "Data": [{"Type": "Reel", "Tasks": [{"Task": "Post Creation", "SubTasks": [None]}]}]}]
    tasks = flatten(payload)
    assert len(tasks) == 1
    task = tasks[0]
    assert task.main_task == "Post Creation"
    assert task.sheet_name == "S1"
    assert task.post_type == "Reel"
    assert task.assigned_to == ""
    assert task.status == "Pending"
    assert task.percent_complete == 0
    assert task.day_iso is None and task.month_key is None


def test_flatten_keeps_unassigned_tasks():
    payload = [{"Data": [{"Tasks": [{"Task": "T", "SubTasks": [{"SubTask": "a"}, {"AssignedTo": "Bob"}]}]}]}]
    tasks = flatten(payload)
    assert [t.assigned_to for t in tasks] == ["", "Bob"]
    assert tasks[0].status == "Pending"
    assert tasks[0].percent_complete == 0
    assert tasks[0].day_iso is None and tasks[0].month_key is None


def test_schedule_date_is_trimmed_and_used_as_date_fallback():
    payload = [{"Data": [{"Tasks": [{"SubTasks": [{"AssignedTo": "A", "SchedualeDate": "  7/4/24 "}]}]}]}]
    task = flatten(payload)[0]
    assert task.schedule_date == "7/4/24"
    assert task.date == "7/4/24"
    assert task.day_iso == "2024-04-07"
    assert task.month_key == "2024-04"


def test_primary_date_wins_over_schedule_date():
    payload = [
        {"Data": [{"Tasks": [{"SubTasks": [{"Date": " 1/2/2024 ", "SchedualeDate": "9/9/2024"}]}]}]}
    ]
    task = flatten(payload)[0]
    assert task.date == "1/2/2024"
    assert task.schedule_date == "9/9/2024"
    assert task.month_key == "2024-02"


def test_context_and_verbatim_fields_are_copied():
    payload = [
        {
            "SheetName": "Feb",
            "Data": [
                {
                    "Type": "Story",
                    "Format": "9:16",
                    "CaptionAndHashtags": "#spring",
                    "Tasks": [
                        {
                            "Task": "Review",
                            "SubTasks": [
                                {
                                    "AssignedTo": "Cara",
                                    "CopywriterApproval": "yes",
                                    "CreativeDirectorApproval": "Approved",
                                    "PublishingLink": "https://example.com/p/9",
                                    "Comments": "ok",
                                }
                            ],
                        }
                    ],
                }
            ],
        }
    ]
    task = flatten(payload)[0]
    assert (task.sheet_name, task.post_type, task.post_format, task.caption) == ("Feb", "Story", "9:16", "#spring")
    assert task.copywriter_approval == "yes"
    assert task.creative_director_approval == "Approved"
    assert task.publishing_link == "https://example.com/p/9"
    assert task.comments == "ok"


def test_flatten_is_idempotent():
    payload = example_payload()
    assert flatten(payload) == flatten(payload)


def test_parse_payload_rejects_non_list():
    with pytest.raises(ValueError):
        parse_payload({"SheetName": "S1"})


def test_json_parse_success(tmp_path):
    path = tmp_path / "sheets.json"
    path.write_text(json.dumps(example_payload()), encoding="utf-8")
    tasks = parse(str(path))
    assert len(tasks) == 1
    assert tasks[0].sub_task == "Write caption"


def test_json_parse_malformed(tmp_path):
    path = tmp_path / "sheets.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        parse(str(path))
