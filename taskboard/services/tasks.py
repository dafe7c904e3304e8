"""Task operations: creation, partial updates, archiving and deletion.

Every mutating operation checks ownership first, applies a conditional write
(``WHERE id = ? AND creator_id = ?``) and then records a change log entry
through ``record_change``. A write that matches no row is reported as
``NotFoundError``.
"""

import logging
import time

from ulid import ULID

from .. import db
from ..errors import NotFoundError, ValidationError
from ..models import TaskCreate, TaskStatus, TaskUpdate
from ..validators import validate_create_task, validate_pagination, validate_update_task
from .changelog import format_change_details, record_change
from .ownership import check_task_ownership

logger = logging.getLogger(__name__)


def list_tasks(limit: int, offset: int) -> list[dict]:
    """Get one page of active tasks, newest first."""
    validate_pagination(limit, offset)
    return db.get_tasks(archived=False, limit=limit, offset=offset)


def list_archived_tasks(limit: int, offset: int) -> list[dict]:
    """Get one page of archived tasks, most recently updated first."""
    validate_pagination(limit, offset)
    return db.get_tasks(archived=True, limit=limit, offset=offset)


def get_task(task_id: str) -> dict:
    task = db.get_task_by_id(task_id)
    if task is None:
        raise NotFoundError("Task not found")
    return task


def create_task(req: TaskCreate, user_id: int) -> dict:
    """Create a task owned by ``user_id``."""
    validate_create_task(req)

    task = db.create_task(
        task_id=str(ULID()),
        title=req.title,
        description=req.description or "",
        status=req.status or TaskStatus.TODO.value,
        creator_id=user_id,
        due_date=req.due_date.isoformat() if req.due_date else None,
        created_at=int(time.time()),
    )
    logger.info("Task created id=%s user=%s", task["id"], user_id)
    record_change(task["id"], user_id, "created", f"Created task: {task['title']}")
    return task


def build_task_changes(req: TaskUpdate) -> tuple[dict, list[str]]:
    """Collect the columns to write and one change fragment per present field.

    Fragments come out in the order title, description, status, due date.
    """
    present = req.model_fields_set
    fields: dict = {}
    changes: list[str] = []

    if "title" in present:
        fields["title"] = req.title
        changes.append(f"changed title to '{req.title}'")
    if "description" in present:
        fields["description"] = req.description
        changes.append("updated description")
    if "status" in present:
        fields["status"] = req.status
        changes.append(f"changed status to '{req.status}'")
    if "due_date" in present:
        due_date = req.due_date.isoformat() if req.due_date else None
        fields["due_date"] = due_date
        if due_date:
            changes.append(f"changed due date to '{due_date}'")
        else:
            changes.append("cleared due date")

    return fields, changes


def update_task(task_id: str, req: TaskUpdate, user_id: int) -> tuple[dict, list[str]]:
    """Apply a partial update and return the refreshed task with its change fragments."""
    if not req.model_fields_set:
        raise ValidationError(None, "no fields to update")
    validate_update_task(req)

    check_task_ownership(task_id, user_id)

    fields, changes = build_task_changes(req)
    task = db.update_task(task_id, user_id, fields, int(time.time()))
    if task is None:
        raise NotFoundError("Task not found")

    logger.info("Task updated id=%s user=%s fields=%s", task_id, user_id, list(fields))
    record_change(task_id, user_id, "updated", format_change_details(changes))
    return task, changes


def _set_archived(task_id: str, user_id: int, archived: bool) -> dict:
    owner = check_task_ownership(task_id, user_id)

    task = db.update_task(task_id, user_id, {"archived": int(archived)}, int(time.time()))
    if task is None:
        raise NotFoundError("Task not found")

    if archived:
        record_change(task_id, user_id, "archived", f"Archived task: {owner['title']}")
    else:
        record_change(task_id, user_id, "unarchived", f"Restored task: {owner['title']}")
    return task


def archive_task(task_id: str, user_id: int) -> dict:
    return _set_archived(task_id, user_id, True)


def unarchive_task(task_id: str, user_id: int) -> dict:
    return _set_archived(task_id, user_id, False)


def delete_task(task_id: str, user_id: int) -> str:
    """Delete a task and return its title.

    The deletion is logged before the row goes away; the cascade then
    removes that entry together with the rest of the task's history.
    """
    owner = check_task_ownership(task_id, user_id)

    record_change(task_id, user_id, "deleted", f"Deleted task: {owner['title']}")
    if not db.delete_task(task_id, user_id):
        raise NotFoundError("Task not found")

    logger.info("Task deleted id=%s user=%s", task_id, user_id)
    return owner["title"]
