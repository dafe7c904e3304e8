import pytest

from taskboard import db
from taskboard.db.client import get_db
from taskboard.errors import ForbiddenError, NotFoundError, ValidationError
from taskboard.models import CommentCreate, CommentUpdate, TaskCreate
from taskboard.services import comments as comment_service
from taskboard.services import tasks as task_service
from taskboard.services.changelog import list_task_logs


@pytest.fixture()
def task(alice: dict) -> dict:
    return task_service.create_task(TaskCreate(title="Review PR"), alice["id"])


def _count_comments() -> int:
    with get_db() as conn:
        return conn.execute("SELECT COUNT(*) FROM comments").fetchone()[0]


def test_any_user_can_comment(task: dict, bob: dict) -> None:
    comment = comment_service.create_comment(task["id"], CommentCreate(content="LGTM"), bob["id"])

    assert comment["task_id"] == task["id"]
    assert comment["user_id"] == bob["id"]
    assert comment["user_name"] == "bob"
    assert comment["content"] == "LGTM"

    logs = list_task_logs(task["id"])
    assert logs[0]["action"] == "commented"
    assert logs[0]["details"] == "Added a comment"
    assert logs[0]["user_id"] == bob["id"]


def test_comment_on_missing_task_writes_nothing(alice: dict) -> None:
    with pytest.raises(NotFoundError):
        comment_service.create_comment("missing", CommentCreate(content="hello"), alice["id"])
    assert _count_comments() == 0


def test_comment_content_is_validated_before_lookup(alice: dict, monkeypatch: pytest.MonkeyPatch) -> None:
    def untouchable(*args, **kwargs):
        raise AssertionError("store must not be touched")

    monkeypatch.setattr(db, "task_exists", untouchable)

    with pytest.raises(ValidationError):
        comment_service.create_comment("any", CommentCreate(content="  "), alice["id"])


def test_list_comments_oldest_first(task: dict, alice: dict, bob: dict) -> None:
    first = comment_service.create_comment(task["id"], CommentCreate(content="one"), alice["id"])
    second = comment_service.create_comment(task["id"], CommentCreate(content="two"), bob["id"])

    comments = comment_service.list_comments(task["id"])
    assert [c["id"] for c in comments] == [first["id"], second["id"]]


def test_list_comments_of_missing_task(database) -> None:
    with pytest.raises(NotFoundError):
        comment_service.list_comments("missing")


def test_only_author_can_update(task: dict, alice: dict, bob: dict) -> None:
    comment = comment_service.create_comment(task["id"], CommentCreate(content="draft"), bob["id"])

    with pytest.raises(ForbiddenError):
        comment_service.update_comment(comment["id"], CommentUpdate(content="hijack"), alice["id"])
    with pytest.raises(NotFoundError):
        comment_service.update_comment("missing", CommentUpdate(content="x"), bob["id"])

    updated = comment_service.update_comment(comment["id"], CommentUpdate(content="final"), bob["id"])
    assert updated["content"] == "final"
    assert list_task_logs(task["id"])[0]["action"] == "updated_comment"
    assert list_task_logs(task["id"])[0]["details"] == "Updated a comment"


def test_only_author_can_delete(task: dict, alice: dict, bob: dict) -> None:
    comment = comment_service.create_comment(task["id"], CommentCreate(content="temp"), bob["id"])

    with pytest.raises(ForbiddenError):
        comment_service.delete_comment(comment["id"], alice["id"])

    comment_service.delete_comment(comment["id"], bob["id"])
    assert comment_service.list_comments(task["id"]) == []
    assert list_task_logs(task["id"])[0]["action"] == "deleted_comment"

    with pytest.raises(NotFoundError):
        comment_service.delete_comment(comment["id"], bob["id"])
