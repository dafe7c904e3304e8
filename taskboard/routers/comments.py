"""Comment API router."""

from fastapi import APIRouter, Depends, status

from ..auth import get_current_user_id
from ..models import CommentCreate, CommentResponse, CommentUpdate, MessageResponse
from ..services import comments as comment_service

router = APIRouter(
    prefix="/api",
    tags=["comments"],
    dependencies=[Depends(get_current_user_id)],
)


@router.get("/tasks/{task_id}/comments", response_model=list[CommentResponse])
def list_comments(task_id: str):
    """Get all comments on a task, oldest first."""
    comments = comment_service.list_comments(task_id)
    return [CommentResponse(**comment) for comment in comments]


@router.post(
    "/tasks/{task_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_comment_endpoint(
    task_id: str,
    comment_data: CommentCreate,
    user_id: int = Depends(get_current_user_id),
):
    comment = comment_service.create_comment(task_id, comment_data, user_id)
    return CommentResponse(**comment)


@router.put("/comments/{comment_id}", response_model=CommentResponse)
def update_comment_endpoint(
    comment_id: str,
    comment_data: CommentUpdate,
    user_id: int = Depends(get_current_user_id),
):
    """Replace a comment's content. Only the author may update."""
    comment = comment_service.update_comment(comment_id, comment_data, user_id)
    return CommentResponse(**comment)


@router.delete("/comments/{comment_id}", response_model=MessageResponse)
def delete_comment_endpoint(
    comment_id: str, user_id: int = Depends(get_current_user_id)
):
    comment_service.delete_comment(comment_id, user_id)
    return MessageResponse(message="Comment deleted successfully")
