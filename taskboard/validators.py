"""Request validation rules.

Every check raises ``ValidationError`` naming the offending field and returns
None when the input is acceptable. None of these touch the database.
"""

from .errors import ValidationError
from .models import CommentCreate, CommentUpdate, TaskCreate, TaskStatus, TaskUpdate

MAX_TITLE_LENGTH = 500
MAX_COMMENT_LENGTH = 5000
MIN_LIMIT = 1
MAX_LIMIT = 100

VALID_STATUSES = frozenset(s.value for s in TaskStatus)


def validate_status(status: str | None) -> None:
    if status not in VALID_STATUSES:
        raise ValidationError(
            "status", "invalid status: must be 'To Do', 'In Progress', or 'Done'"
        )


def validate_title(title: str | None) -> None:
    if title is None or not title.strip():
        raise ValidationError("title", "title is required")
    if len(title) > MAX_TITLE_LENGTH:
        raise ValidationError(
            "title", f"title must be at most {MAX_TITLE_LENGTH} characters"
        )


def validate_create_task(req: TaskCreate) -> None:
    """Validate a task creation request. An empty status means 'not provided'."""
    validate_title(req.title)
    if req.status:
        validate_status(req.status)


def validate_update_task(req: TaskUpdate) -> None:
    """Validate the fields present in a partial update.

    Absent fields are skipped; an explicit null title or status is rejected.
    """
    present = req.model_fields_set
    if "title" in present:
        validate_title(req.title)
    if "status" in present:
        validate_status(req.status)


def validate_pagination(limit: int, offset: int) -> None:
    if limit < MIN_LIMIT or limit > MAX_LIMIT:
        raise ValidationError(
            "limit", f"limit must be between {MIN_LIMIT} and {MAX_LIMIT}"
        )
    if offset < 0:
        raise ValidationError("offset", "offset must be >= 0")


def validate_comment_content(content: str | None) -> None:
    if content is None or not content.strip():
        raise ValidationError("content", "comment content is required")
    if len(content) > MAX_COMMENT_LENGTH:
        raise ValidationError(
            "content", f"comment must be at most {MAX_COMMENT_LENGTH} characters"
        )


def validate_comment(req: CommentCreate | CommentUpdate) -> None:
    validate_comment_content(req.content)
