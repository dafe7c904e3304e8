"""Database package."""

from .client import (
    create_change_log,
    create_comment,
    create_task,
    create_user,
    delete_comment,
    delete_task,
    get_change_logs,
    get_comment_by_id,
    get_comment_owner,
    get_comments,
    get_task_by_id,
    get_task_owner,
    get_tasks,
    get_user_by_token,
    init_db,
    task_exists,
    update_comment,
    update_task,
)

__all__ = [
    "init_db",
    "create_user",
    "get_user_by_token",
    "create_task",
    "get_tasks",
    "get_task_by_id",
    "get_task_owner",
    "task_exists",
    "update_task",
    "delete_task",
    "create_comment",
    "get_comments",
    "get_comment_by_id",
    "get_comment_owner",
    "update_comment",
    "delete_comment",
    "create_change_log",
    "get_change_logs",
]
