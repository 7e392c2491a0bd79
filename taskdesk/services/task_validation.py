"""Title rules for tasks. Other fields accept any value, null included."""

from typing import Optional

from taskdesk.core.errors import LengthExceededError, RequiredFieldError
from taskdesk.models.task import TITLE_MAX_LENGTH


def validate_title(title: Optional[str]) -> str:
    """Return the trimmed title, or raise if it is blank or too long."""
    trimmed = (title or "").strip()
    if not trimmed:
        raise RequiredFieldError("title", "Title is required.")
    if len(trimmed) > TITLE_MAX_LENGTH:
        raise LengthExceededError("title", f"Title must be at most {TITLE_MAX_LENGTH} characters.")
    return trimmed
