"""Task Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - TaskRequest.title: 1-255 chars, not blank (whitespace-only rejected), kept verbatim
    - TaskRequest.description: optional, at most 5000 chars
    - status / priority left as None when omitted (service applies defaults or keeps stored values)
    - TaskResponse mirrors every Task column 1:1

Design Decisions:
    - camelCase aliases (dueDate, createdAt, updatedAt) match the browser client;
      populate_by_name keeps snake_case accepted for scripts and tests
    - One request schema for create and update: PUT replaces title/description/dueDate
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ticktask.core.domain_types import (
    DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, Priority, TaskStatus,
)
from ticktask.models.task import Task


class TaskRequest(BaseModel):
    """Create/update payload — validates title and description bounds."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus | None = None
    priority: Priority | None = None
    due_date: date | None = None

    @field_validator("title")
    @classmethod
    def reject_blank_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title cannot be empty or whitespace")
        return v


class TaskResponse(BaseModel):
    """Task response — public-facing view of a stored task."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    description: str | None = None
    status: TaskStatus
    priority: Priority
    due_date: date | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        """Project a stored entity onto the wire schema, field for field."""
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            priority=task.priority,
            due_date=task.due_date,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
