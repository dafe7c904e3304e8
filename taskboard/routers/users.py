"""User registration router."""

from fastapi import APIRouter, status

from ..models import UserRegister, UserResponse
from ..services import users as user_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserRegister):
    """Register a user and return its bearer token."""
    return UserResponse(**user_service.register_user(user_data.name))
