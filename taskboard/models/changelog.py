"""Pydantic models for change log API."""

from pydantic import BaseModel


class ChangeLogResponse(BaseModel):
    """Response model for a change log entry."""

    id: int
    task_id: str
    user_id: int
    user_name: str | None = None
    action: str
    details: str
    created_at: int
