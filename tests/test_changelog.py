import sqlite3

import pytest

from taskboard import db
from taskboard.models import TaskCreate
from taskboard.services import tasks as task_service
from taskboard.services.changelog import format_change_details, list_task_logs, record_change


@pytest.mark.parametrize(
    "changes,expected",
    [
        ([], ""),
        (["A"], "A"),
        (["A", "B"], "A and B"),
        (["A", "B", "C"], "A, B, and C"),
        (["A", "B", "C", "D"], "A, B, C, and D"),
    ],
)
def test_format_change_details(changes: list[str], expected: str) -> None:
    assert format_change_details(changes) == expected


def test_format_change_details_with_real_fragments() -> None:
    changes = [
        "changed title to 'New title'",
        "changed status to 'Done'",
    ]
    assert format_change_details(changes) == (
        "changed title to 'New title' and changed status to 'Done'"
    )


def test_record_change_and_list_newest_first(alice: dict) -> None:
    task = task_service.create_task(TaskCreate(title="Write docs"), alice["id"])

    assert record_change(task["id"], alice["id"], "commented", "Added a comment") is True
    assert record_change(task["id"], alice["id"], "archived", "Archived task: Write docs") is True

    logs = list_task_logs(task["id"])
    assert [entry["action"] for entry in logs] == ["archived", "commented", "created"]
    assert logs[-1]["details"] == "Created task: Write docs"
    assert logs[0]["user_name"] == "alice"


def test_list_logs_for_unknown_task_is_empty(database) -> None:
    assert list_task_logs("does-not-exist") == []


def test_record_change_swallows_store_failures(alice: dict, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(*args, **kwargs):
        raise sqlite3.OperationalError("database is locked")

    monkeypatch.setattr(db, "create_change_log", broken)

    assert record_change("any", alice["id"], "updated", "changed title to 'x'") is False


def test_record_change_reports_missing_task(alice: dict) -> None:
    # the foreign key rejects entries for tasks that do not exist
    assert record_change("missing", alice["id"], "updated", "details") is False
