"""Pydantic models for comment API."""

from pydantic import BaseModel


class CommentCreate(BaseModel):
    """Request model for creating a comment."""

    content: str


class CommentUpdate(BaseModel):
    """Request model for updating a comment."""

    content: str


class CommentResponse(BaseModel):
    """Response model for a comment."""

    id: str
    task_id: str
    user_id: int
    user_name: str | None = None
    content: str
    created_at: int
    updated_at: int
