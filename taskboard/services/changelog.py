"""Change log recording and formatting."""

import logging
import sqlite3
import time

from .. import db

logger = logging.getLogger(__name__)


def format_change_details(changes: list[str]) -> str:
    """Join change fragments into one sentence.

    >>> format_change_details(["A", "B", "C"])
    'A, B, and C'
    """
    if not changes:
        return ""
    if len(changes) == 1:
        return changes[0]
    if len(changes) == 2:
        return f"{changes[0]} and {changes[1]}"
    return f"{', '.join(changes[:-1])}, and {changes[-1]}"


def record_change(task_id: str, user_id: int, action: str, details: str) -> bool:
    """Append a change log entry after the primary write has committed.

    Best effort: a store failure is logged and reported as False, never raised.
    """
    try:
        db.create_change_log(task_id, user_id, action, details, int(time.time()))
    except sqlite3.Error:
        logger.warning(
            "Failed to record change task=%s user=%s action=%s",
            task_id, user_id, action, exc_info=True,
        )
        return False
    return True


def list_task_logs(task_id: str) -> list[dict]:
    return db.get_change_logs(task_id)
