"""Models package."""

from .changelog import ChangeLogResponse
from .comment import CommentCreate, CommentResponse, CommentUpdate
from .task import MessageResponse, TaskCreate, TaskResponse, TaskStatus, TaskUpdate
from .user import UserRegister, UserResponse

__all__ = [
    "TaskStatus",
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
    "MessageResponse",
    "CommentCreate",
    "CommentUpdate",
    "CommentResponse",
    "ChangeLogResponse",
    "UserRegister",
    "UserResponse",
]
