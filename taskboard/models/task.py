"""Pydantic models for task API."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class TaskStatus(str, Enum):
    """Task status enumeration."""

    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"


class TaskCreate(BaseModel):
    """Request model for creating a task.

    Length and status rules are checked by ``taskboard.validators`` so that
    failures come back as 400 with the offending field.
    """

    title: str
    description: str | None = None
    status: str | None = None
    due_date: datetime | None = None


class TaskUpdate(BaseModel):
    """Request model for a partial task update.

    Only fields present in the request body are applied; presence is read
    from ``model_fields_set``.
    """

    title: str | None = None
    description: str | None = None
    status: str | None = None
    due_date: datetime | None = None


class TaskResponse(BaseModel):
    """Response model for a task."""

    id: str
    title: str
    description: str | None = None
    status: TaskStatus
    creator_id: int
    creator_name: str | None = None
    due_date: datetime | None = None
    archived: bool
    created_at: int
    updated_at: int


class MessageResponse(BaseModel):
    """Response model for operations that only report success."""

    message: str
