"""User registration and bearer token lookup."""

import logging
import secrets
import time

from .. import db

logger = logging.getLogger(__name__)


def register_user(name: str) -> dict:
    """Create a user with a fresh opaque bearer token."""
    user = db.create_user(name, secrets.token_urlsafe(32), int(time.time()))
    logger.info("User registered id=%s", user["id"])
    return user


def resolve_token(token: str) -> int | None:
    user = db.get_user_by_token(token)
    return user["id"] if user else None
