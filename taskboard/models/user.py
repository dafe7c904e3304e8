"""Pydantic models for user registration."""

from pydantic import BaseModel, Field


class UserRegister(BaseModel):
    """Request model for registering a user."""

    name: str = Field(..., min_length=1, max_length=255)


class UserResponse(BaseModel):
    """Response model for a registered user, including its bearer token."""

    id: int
    name: str
    token: str
