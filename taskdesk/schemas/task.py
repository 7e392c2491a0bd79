"""Pydantic schemas for task request/response validation."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional, List


class CamelModel(BaseModel):
    """JSON keys are camelCase; snake_case is accepted on input too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskCreate(CamelModel):
    # title is checked by validate_title so a missing one reports like an empty one
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    created_by: Optional[str] = None
    assigned_to: Optional[str] = None


class TaskUpdate(CamelModel):
    """Full replacement of the mutable fields; is_completed must always be sent."""

    title: Optional[str] = None
    description: Optional[str] = None
    is_completed: bool
    due_date: Optional[datetime] = None
    created_by: Optional[str] = None
    assigned_to: Optional[str] = None


class TaskResponse(CamelModel):
    id: int
    title: str
    description: Optional[str]
    is_completed: bool
    due_date: Optional[datetime]
    created_at: datetime
    updated_at: datetime
    created_by: Optional[str]
    assigned_to: Optional[str]

    model_config = ConfigDict(from_attributes=True)


class FilterValuesResponse(CamelModel):
    created_by: List[str]
    assigned_to: List[str]
