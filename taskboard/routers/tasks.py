"""Task API router."""

from fastapi import APIRouter, Depends, Query, status

from ..auth import get_current_user_id
from ..models import (
    ChangeLogResponse,
    MessageResponse,
    TaskCreate,
    TaskResponse,
    TaskUpdate,
)
from ..services import changelog as changelog_service
from ..services import tasks as task_service

router = APIRouter(
    prefix="/api/tasks",
    tags=["tasks"],
    dependencies=[Depends(get_current_user_id)],
)


# =============================================================================
# Listings - Must be defined BEFORE /{task_id} routes
# =============================================================================


@router.get("", response_model=list[TaskResponse])
def list_tasks(limit: int = Query(10), offset: int = Query(0)):
    """Get active tasks, newest first."""
    tasks = task_service.list_tasks(limit, offset)
    return [TaskResponse(**task) for task in tasks]


@router.get("/archived", response_model=list[TaskResponse])
def list_archived_tasks(limit: int = Query(10), offset: int = Query(0)):
    """Get archived tasks, most recently updated first."""
    tasks = task_service.list_archived_tasks(limit, offset)
    return [TaskResponse(**task) for task in tasks]


# =============================================================================
# Single task
# =============================================================================


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: str):
    """Get a task by ID."""
    return TaskResponse(**task_service.get_task(task_id))


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task_endpoint(
    task_data: TaskCreate, user_id: int = Depends(get_current_user_id)
):
    """Create a new task owned by the caller."""
    task = task_service.create_task(task_data, user_id)
    return TaskResponse(**task)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task_endpoint(
    task_id: str, task_data: TaskUpdate, user_id: int = Depends(get_current_user_id)
):
    """Update the fields present in the body. Only the creator may update."""
    task, _ = task_service.update_task(task_id, task_data, user_id)
    return TaskResponse(**task)


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task_endpoint(task_id: str, user_id: int = Depends(get_current_user_id)):
    """Delete a task together with its comments and change logs."""
    task_service.delete_task(task_id, user_id)
    return MessageResponse(message="Task deleted successfully")


@router.post("/{task_id}/archive", response_model=TaskResponse)
def archive_task_endpoint(task_id: str, user_id: int = Depends(get_current_user_id)):
    task = task_service.archive_task(task_id, user_id)
    return TaskResponse(**task)


@router.post("/{task_id}/unarchive", response_model=TaskResponse)
def unarchive_task_endpoint(task_id: str, user_id: int = Depends(get_current_user_id)):
    task = task_service.unarchive_task(task_id, user_id)
    return TaskResponse(**task)


@router.get("/{task_id}/logs", response_model=list[ChangeLogResponse])
def list_task_logs(task_id: str):
    """Get a task's change log, newest first."""
    logs = changelog_service.list_task_logs(task_id)
    return [ChangeLogResponse(**entry) for entry in logs]
