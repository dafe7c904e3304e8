"""Comment operations."""

import logging
import sqlite3
import time

from ulid import ULID

from .. import db
from ..errors import NotFoundError
from ..models import CommentCreate, CommentUpdate
from ..validators import validate_comment
from .changelog import record_change
from .ownership import check_comment_ownership

logger = logging.getLogger(__name__)


def list_comments(task_id: str) -> list[dict]:
    if not db.task_exists(task_id):
        raise NotFoundError("Task not found")
    return db.get_comments(task_id)


def create_comment(task_id: str, req: CommentCreate, user_id: int) -> dict:
    """Add a comment to an existing task. Any authenticated user may comment."""
    validate_comment(req)
    if not db.task_exists(task_id):
        raise NotFoundError("Task not found")

    try:
        comment = db.create_comment(
            comment_id=str(ULID()),
            task_id=task_id,
            user_id=user_id,
            content=req.content,
            created_at=int(time.time()),
        )
    except sqlite3.IntegrityError as e:
        # task deleted between the existence check and the insert
        raise NotFoundError("Task not found") from e

    logger.info("Comment created id=%s task=%s user=%s", comment["id"], task_id, user_id)
    record_change(task_id, user_id, "commented", "Added a comment")
    return comment


def update_comment(comment_id: str, req: CommentUpdate, user_id: int) -> dict:
    validate_comment(req)
    owner = check_comment_ownership(comment_id, user_id)

    comment = db.update_comment(comment_id, user_id, req.content, int(time.time()))
    if comment is None:
        raise NotFoundError("Comment not found")

    record_change(owner["task_id"], user_id, "updated_comment", "Updated a comment")
    return comment


def delete_comment(comment_id: str, user_id: int) -> None:
    owner = check_comment_ownership(comment_id, user_id)

    if not db.delete_comment(comment_id, user_id):
        raise NotFoundError("Comment not found")

    logger.info("Comment deleted id=%s user=%s", comment_id, user_id)
    record_change(owner["task_id"], user_id, "deleted_comment", "Deleted a comment")
