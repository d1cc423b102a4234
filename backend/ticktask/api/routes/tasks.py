"""Task Routes — HTTP JSON surface for Task CRUD.

Invariants:
    - Request bodies validated by Pydantic before the service runs (400 on failure)
    - Unknown ids surface as 404 via the TickTaskError handler
    - GET /api/tasks accepts at most one filter (status, priority or title)
    - Path ids outside the signed 64-bit range are a 400; in-range unknown ids a 404

Design Decisions:
    - Service built per request from the request-scoped session (no shared state)
    - DELETE returns 204 with an empty body
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ticktask.core.domain_types import (
    TASK_ID_MAX, TASK_ID_MIN, Priority, TaskId, TaskStatus,
)
from ticktask.core.errors import TaskValidationError
from ticktask.infrastructure.database import get_db
from ticktask.infrastructure.task_repository import SqlAlchemyTaskRepository
from ticktask.schemas.task import TaskRequest, TaskResponse
from ticktask.services.task_service import TaskService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/tasks", tags=["tasks"])

# Ids outside the 64-bit column range are rejected at the boundary (400)
TaskIdPath = Annotated[int, Path(ge=TASK_ID_MIN, le=TASK_ID_MAX)]


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    """FastAPI dependency: TaskService bound to this request's session."""
    return TaskService(SqlAlchemyTaskRepository(db))


@router.post(
    "", response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: TaskRequest, service: TaskService = Depends(get_task_service),
):
    """Create a task. Missing status/priority default to TODO/MEDIUM."""
    return await service.create_task(body)


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    status_filter: TaskStatus | None = Query(None, alias="status"),
    priority: Priority | None = Query(None),
    title: str | None = Query(None, min_length=1),
    service: TaskService = Depends(get_task_service),
):
    """List tasks in id order, optionally narrowed by one filter."""
    given = [
        name for name, value in (
            ("status", status_filter), ("priority", priority), ("title", title),
        )
        if value is not None
    ]
    if len(given) > 1:
        raise TaskValidationError(
            f"Only one filter may be used at a time, got: {', '.join(given)}",
            field="query",
        )
    if status_filter is not None:
        return await service.get_tasks_by_status(status_filter)
    if priority is not None:
        return await service.get_tasks_by_priority(priority)
    if title is not None:
        return await service.search_tasks(title)
    return await service.get_all_tasks()


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: TaskIdPath, service: TaskService = Depends(get_task_service),
):
    return await service.get_task(TaskId(task_id))


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: TaskIdPath,
    body: TaskRequest,
    service: TaskService = Depends(get_task_service),
):
    """Replace title/description/dueDate; status/priority only when given."""
    return await service.update_task(TaskId(task_id), body)


@router.delete(
    "/{task_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_task(
    task_id: TaskIdPath, service: TaskService = Depends(get_task_service),
) -> Response:
    """Hard delete. 404 when the task does not exist."""
    await service.delete_task(TaskId(task_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
