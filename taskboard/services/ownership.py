"""Ownership checks for tasks and comments."""

from .. import db
from ..errors import ForbiddenError, NotFoundError


def check_task_ownership(task_id: str, user_id: int) -> dict:
    """Return the task's ``id``, ``creator_id`` and ``title`` if ``user_id`` owns it."""
    owner = db.get_task_owner(task_id)
    if owner is None:
        raise NotFoundError("Task not found")
    if owner["creator_id"] != user_id:
        raise ForbiddenError("You can only modify your own tasks")
    return owner


def check_comment_ownership(comment_id: str, user_id: int) -> dict:
    """Return the comment's ``id``, ``task_id`` and ``user_id`` if ``user_id`` wrote it."""
    owner = db.get_comment_owner(comment_id)
    if owner is None:
        raise NotFoundError("Comment not found")
    if owner["user_id"] != user_id:
        raise ForbiddenError("You can only modify your own comments")
    return owner
