"""Task Schemas — boundary validation and the entity-to-response projection.

Tests cover:
    - Title: required, non-blank, 1-255 chars, kept verbatim
    - Description: optional, at most 5000 chars
    - Enum fields reject unknown members; omitted enums stay None
    - camelCase and snake_case keys both accepted; responses dump camelCase
    - from_entity copies every field 1:1
"""

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from ticktask.core.domain_types import Priority, TaskStatus
from ticktask.models.task import Task
from ticktask.schemas.task import TaskRequest, TaskResponse


def test_minimal_request_leaves_optional_fields_unset():
    req = TaskRequest(title="Minimal Task")
    assert req.description is None
    assert req.status is None
    assert req.priority is None
    assert req.due_date is None


def test_blank_title_rejected():
    with pytest.raises(ValidationError):
        TaskRequest(title="")


def test_whitespace_title_rejected():
    with pytest.raises(ValidationError, match="empty or whitespace"):
        TaskRequest(title="   ")


def test_missing_title_rejected():
    with pytest.raises(ValidationError):
        TaskRequest.model_validate({"description": "no title"})


def test_title_length_bounds():
    assert len(TaskRequest(title="a" * 255).title) == 255
    with pytest.raises(ValidationError):
        TaskRequest(title="a" * 256)


def test_title_kept_verbatim():
    assert TaskRequest(title="  padded  ").title == "  padded  "


def test_description_length_bound():
    assert TaskRequest(title="t", description="d" * 5000).description
    with pytest.raises(ValidationError):
        TaskRequest(title="t", description="d" * 5001)


def test_unknown_status_rejected():
    with pytest.raises(ValidationError):
        TaskRequest.model_validate({"title": "t", "status": "PENDING"})


def test_unknown_priority_rejected():
    with pytest.raises(ValidationError):
        TaskRequest.model_validate({"title": "t", "priority": "URGENT"})


def test_camel_case_payload_accepted():
    req = TaskRequest.model_validate({
        "title": "t", "status": "IN_PROGRESS",
        "priority": "HIGH", "dueDate": "2026-12-31",
    })
    assert req.status is TaskStatus.IN_PROGRESS
    assert req.priority is Priority.HIGH
    assert req.due_date == date(2026, 12, 31)


def test_snake_case_payload_accepted():
    req = TaskRequest.model_validate({"title": "t", "due_date": "2026-01-02"})
    assert req.due_date == date(2026, 1, 2)


def test_due_date_rejects_garbage():
    with pytest.raises(ValidationError):
        TaskRequest.model_validate({"title": "t", "dueDate": "next tuesday"})


def _entity() -> Task:
    created = datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)
    return Task(
        id=5,
        title="Write report",
        description="Quarterly numbers",
        status=TaskStatus.DONE,
        priority=Priority.LOW,
        due_date=date(2026, 2, 1),
        created_at=created,
        updated_at=created.replace(hour=10),
    )


def test_from_entity_copies_every_field():
    task = _entity()
    view = TaskResponse.from_entity(task)
    assert view.id == task.id
    assert view.title == task.title
    assert view.description == task.description
    assert view.status is task.status
    assert view.priority is task.priority
    assert view.due_date == task.due_date
    assert view.created_at == task.created_at
    assert view.updated_at == task.updated_at


def test_response_dumps_camel_case_keys():
    data = TaskResponse.from_entity(_entity()).model_dump(mode="json", by_alias=True)
    assert set(data) == {
        "id", "title", "description", "status", "priority",
        "dueDate", "createdAt", "updatedAt",
    }
    assert data["status"] == "DONE"
    assert data["dueDate"] == "2026-02-01"
