"""SQLite database operations for users, tasks, comments and change logs."""

import logging
import sqlite3
import time
from contextlib import contextmanager
from typing import Any, Iterator

from ..config import settings

logger = logging.getLogger(__name__)

DATABASE_PATH = settings.database_path

SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        token TEXT NOT NULL UNIQUE,
        created_at INTEGER NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS tasks (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        description TEXT,
        status TEXT NOT NULL DEFAULT 'To Do'
            CHECK (status IN ('To Do', 'In Progress', 'Done')),
        creator_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
        due_date TEXT,
        archived INTEGER NOT NULL DEFAULT 0,
        created_at INTEGER NOT NULL,
        updated_at INTEGER NOT NULL,
        updated_at_ns INTEGER NOT NULL DEFAULT 0
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS comments (
        id TEXT PRIMARY KEY,
        task_id TEXT NOT NULL REFERENCES tasks(id) ON DELETE CASCADE,
        user_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
        content TEXT NOT NULL,
        created_at INTEGER NOT NULL,
        updated_at INTEGER NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS change_logs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        task_id TEXT NOT NULL REFERENCES tasks(id) ON DELETE CASCADE,
        user_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
        action TEXT NOT NULL,
        details TEXT NOT NULL DEFAULT '',
        created_at INTEGER NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_tasks_creator_id ON tasks(creator_id)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_status ON tasks(status)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_archived ON tasks(archived)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_created_at ON tasks(created_at)",
    "CREATE INDEX IF NOT EXISTS idx_comments_task_id ON comments(task_id)",
    "CREATE INDEX IF NOT EXISTS idx_comments_user_id ON comments(user_id)",
    "CREATE INDEX IF NOT EXISTS idx_change_logs_task_id ON change_logs(task_id)",
]

TASK_SELECT = """
    SELECT t.id, t.title, t.description, t.status, t.creator_id,
           u.name AS creator_name, t.due_date, t.archived,
           t.created_at, t.updated_at
    FROM tasks t
    LEFT JOIN users u ON u.id = t.creator_id
"""

COMMENT_SELECT = """
    SELECT c.id, c.task_id, c.user_id, u.name AS user_name,
           c.content, c.created_at, c.updated_at
    FROM comments c
    LEFT JOIN users u ON u.id = c.user_id
"""

CHANGE_LOG_SELECT = """
    SELECT cl.id, cl.task_id, cl.user_id, u.name AS user_name,
           cl.action, cl.details, cl.created_at
    FROM change_logs cl
    LEFT JOIN users u ON u.id = cl.user_id
"""


def get_connection() -> sqlite3.Connection:
    """Get a database connection with WAL mode and foreign keys enabled."""
    conn = sqlite3.connect(DATABASE_PATH)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


@contextmanager
def get_db() -> Iterator[sqlite3.Connection]:
    """Context manager for database connections."""
    conn = get_connection()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db() -> None:
    """Initialize the database schema."""
    with get_db() as conn:
        for statement in SCHEMA:
            conn.execute(statement)
        _ensure_column(conn, "tasks", "updated_at_ns", "INTEGER NOT NULL DEFAULT 0")
    logger.info("Database ready path=%s", DATABASE_PATH)


def _ensure_column(conn: sqlite3.Connection, table: str, column: str, ddl: str) -> None:
    """Add a column to a database created before it existed."""
    columns = {row["name"] for row in conn.execute(f"PRAGMA table_info({table})")}
    if column not in columns:
        conn.execute(f"ALTER TABLE {table} ADD COLUMN {column} {ddl}")
        logger.info("Added column %s.%s", table, column)


def _row_to_task(row: sqlite3.Row) -> dict[str, Any]:
    task = dict(row)
    task["archived"] = bool(task["archived"])
    return task


# =============================================================================
# Users
# =============================================================================


def create_user(name: str, token: str, created_at: int) -> dict:
    """Create a user and return it with its token."""
    with get_db() as conn:
        cursor = conn.execute(
            "INSERT INTO users (name, token, created_at) VALUES (?, ?, ?)",
            (name, token, created_at),
        )
        user_id = cursor.lastrowid
    return {"id": user_id, "name": name, "token": token}


def get_user_by_token(token: str) -> dict | None:
    """Resolve a bearer token to its user."""
    with get_db() as conn:
        cursor = conn.execute(
            "SELECT id, name FROM users WHERE token = ?", (token,)
        )
        row = cursor.fetchone()
        return dict(row) if row else None


# =============================================================================
# Tasks
# =============================================================================


def create_task(
    task_id: str,
    title: str,
    description: str,
    status: str,
    creator_id: int,
    due_date: str | None,
    created_at: int,
) -> dict:
    """Create a new task."""
    with get_db() as conn:
        conn.execute(
            """
            INSERT INTO tasks (id, title, description, status, creator_id,
                               due_date, archived, created_at, updated_at,
                               updated_at_ns)
            VALUES (?, ?, ?, ?, ?, ?, 0, ?, ?, ?)
            """,
            (task_id, title, description, status, creator_id, due_date,
             created_at, created_at, time.time_ns()),
        )
    return get_task_by_id(task_id)


def get_tasks(archived: bool, limit: int, offset: int) -> list[dict]:
    """Get one page of tasks filtered by the archived flag.

    Active tasks are ordered newest created first, archived tasks most
    recently updated first (sub-second ties resolved by ``updated_at_ns``).
    """
    order = "t.updated_at DESC, t.updated_at_ns DESC" if archived else "t.created_at DESC"
    with get_db() as conn:
        cursor = conn.execute(
            f"{TASK_SELECT} WHERE t.archived = ? "
            f"ORDER BY {order}, t.rowid DESC LIMIT ? OFFSET ?",
            (int(archived), limit, offset),
        )
        return [_row_to_task(row) for row in cursor.fetchall()]


def get_task_by_id(task_id: str) -> dict | None:
    """Get a task by ID."""
    with get_db() as conn:
        cursor = conn.execute(f"{TASK_SELECT} WHERE t.id = ?", (task_id,))
        row = cursor.fetchone()
        return _row_to_task(row) if row else None


def get_task_owner(task_id: str) -> dict | None:
    """Get a task's creator and title in one lookup."""
    with get_db() as conn:
        cursor = conn.execute(
            "SELECT id, creator_id, title FROM tasks WHERE id = ?", (task_id,)
        )
        row = cursor.fetchone()
        return dict(row) if row else None


def task_exists(task_id: str) -> bool:
    with get_db() as conn:
        cursor = conn.execute("SELECT 1 FROM tasks WHERE id = ?", (task_id,))
        return cursor.fetchone() is not None


def update_task(
    task_id: str, creator_id: int, fields: dict[str, Any], updated_at: int
) -> dict | None:
    """Apply the given columns to a task owned by ``creator_id``.

    Returns None when no row matched.
    """
    with get_db() as conn:
        updates = []
        params: list[Any] = []

        for column, value in fields.items():
            updates.append(f"{column} = ?")
            params.append(value)

        updates.append("updated_at = ?")
        params.append(updated_at)
        updates.append("updated_at_ns = ?")
        params.append(time.time_ns())
        params.append(task_id)
        params.append(creator_id)

        cursor = conn.execute(
            f"UPDATE tasks SET {', '.join(updates)} WHERE id = ? AND creator_id = ?",
            params,
        )
        if cursor.rowcount == 0:
            return None
    return get_task_by_id(task_id)


def delete_task(task_id: str, creator_id: int) -> bool:
    """Delete a task owned by ``creator_id``; comments and logs cascade."""
    with get_db() as conn:
        cursor = conn.execute(
            "DELETE FROM tasks WHERE id = ? AND creator_id = ?",
            (task_id, creator_id),
        )
        return cursor.rowcount > 0


# =============================================================================
# Comments
# =============================================================================


def create_comment(
    comment_id: str, task_id: str, user_id: int, content: str, created_at: int
) -> dict:
    """Create a comment on a task."""
    with get_db() as conn:
        conn.execute(
            """
            INSERT INTO comments (id, task_id, user_id, content, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (comment_id, task_id, user_id, content, created_at, created_at),
        )
    return get_comment_by_id(comment_id)


def get_comments(task_id: str) -> list[dict]:
    """Get all comments on a task, oldest first."""
    with get_db() as conn:
        cursor = conn.execute(
            f"{COMMENT_SELECT} WHERE c.task_id = ? ORDER BY c.created_at ASC, c.rowid ASC",
            (task_id,),
        )
        return [dict(row) for row in cursor.fetchall()]


def get_comment_by_id(comment_id: str) -> dict | None:
    with get_db() as conn:
        cursor = conn.execute(f"{COMMENT_SELECT} WHERE c.id = ?", (comment_id,))
        row = cursor.fetchone()
        return dict(row) if row else None


def get_comment_owner(comment_id: str) -> dict | None:
    """Get a comment's author and parent task in one lookup."""
    with get_db() as conn:
        cursor = conn.execute(
            "SELECT id, task_id, user_id FROM comments WHERE id = ?", (comment_id,)
        )
        row = cursor.fetchone()
        return dict(row) if row else None


def update_comment(
    comment_id: str, user_id: int, content: str, updated_at: int
) -> dict | None:
    """Replace a comment's content; returns None when no row matched."""
    with get_db() as conn:
        cursor = conn.execute(
            "UPDATE comments SET content = ?, updated_at = ? WHERE id = ? AND user_id = ?",
            (content, updated_at, comment_id, user_id),
        )
        if cursor.rowcount == 0:
            return None
    return get_comment_by_id(comment_id)


def delete_comment(comment_id: str, user_id: int) -> bool:
    with get_db() as conn:
        cursor = conn.execute(
            "DELETE FROM comments WHERE id = ? AND user_id = ?",
            (comment_id, user_id),
        )
        return cursor.rowcount > 0


# =============================================================================
# Change logs
# =============================================================================


def create_change_log(
    task_id: str, user_id: int, action: str, details: str, created_at: int
) -> int:
    """Append a change log entry and return its id."""
    with get_db() as conn:
        cursor = conn.execute(
            """
            INSERT INTO change_logs (task_id, user_id, action, details, created_at)
            VALUES (?, ?, ?, ?, ?)
            """,
            (task_id, user_id, action, details, created_at),
        )
        return cursor.lastrowid


def get_change_logs(task_id: str) -> list[dict]:
    """Get all change log entries for a task, newest first."""
    with get_db() as conn:
        cursor = conn.execute(
            f"{CHANGE_LOG_SELECT} WHERE cl.task_id = ? "
            "ORDER BY cl.created_at DESC, cl.id DESC",
            (task_id,),
        )
        return [dict(row) for row in cursor.fetchall()]
