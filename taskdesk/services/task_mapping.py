"""Translation between request payloads, Task entities and responses."""

from typing import Optional

from taskdesk.models.task import Task
from taskdesk.schemas.task import FilterValuesResponse, TaskCreate, TaskResponse, TaskUpdate
from taskdesk.services.task_query import FilterValues, to_naive_utc
from taskdesk.services.task_validation import validate_title


def _text_or_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value


def _label_or_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


def task_from_create(payload: TaskCreate) -> Task:
    # raises before anything touches the store
    title = validate_title(payload.title)
    return Task(
        title=title,
        description=_text_or_none(payload.description),
        is_completed=False,
        due_date=to_naive_utc(payload.due_date),
        created_by=_label_or_none(payload.created_by),
        assigned_to=_label_or_none(payload.assigned_to),
    )


def check_update(payload: TaskUpdate) -> str:
    """Validate an update payload without an entity, returns the trimmed title."""
    return validate_title(payload.title)


def apply_update(task: Task, payload: TaskUpdate) -> Task:
    """Full replace: every mutable field is overwritten, blanks become None."""
    task.title = validate_title(payload.title)
    task.description = _text_or_none(payload.description)
    task.is_completed = payload.is_completed
    task.due_date = to_naive_utc(payload.due_date)
    task.created_by = _label_or_none(payload.created_by)
    task.assigned_to = _label_or_none(payload.assigned_to)
    return task


def to_response(task: Task) -> TaskResponse:
    return TaskResponse.model_validate(task)


def to_filter_values_response(values: FilterValues) -> FilterValuesResponse:
    return FilterValuesResponse(created_by=values.created_by, assigned_to=values.assigned_to)
