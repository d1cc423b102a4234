"""Task Service — create, read, update, delete for Task records.

Invariants:
    - create: status defaults to TODO, priority to MEDIUM; other fields copied verbatim
    - update: title, description, due_date always overwritten (even with None);
      status and priority overwritten only when the request supplies them
    - get / update / delete: existence checked before any write; unknown id -> TaskNotFoundError
    - delete never calls delete_by_id for an absent id
    - Status has no transition rules: any value may replace any other

Design Decisions:
    - Repository injected through the constructor: the route builds it per request,
      unit tests pass an AsyncMock
    - Returns TaskResponse views, never ORM entities (wire schema decoupled from storage)
"""

import logging

from ticktask.core.domain_types import (
    DEFAULT_PRIORITY, DEFAULT_STATUS, Priority, TaskId, TaskStatus,
)
from ticktask.core.errors import TaskNotFoundError
from ticktask.core.repository_protocols import TaskRepository
from ticktask.models.task import Task
from ticktask.schemas.task import TaskRequest, TaskResponse

logger = logging.getLogger(__name__)


class TaskService:
    """Task use cases over a TaskRepository."""

    def __init__(self, repository: TaskRepository):
        self.repository = repository

    async def create_task(self, request: TaskRequest) -> TaskResponse:
        """Create a new task, filling in default status and priority."""
        task = Task(
            title=request.title,
            description=request.description,
            status=request.status or DEFAULT_STATUS,
            priority=request.priority or DEFAULT_PRIORITY,
            due_date=request.due_date,
        )
        saved = await self.repository.save(task)
        logger.info("Task created", extra={"task_id": saved.id})
        return TaskResponse.from_entity(saved)

    async def get_task(self, task_id: TaskId) -> TaskResponse:
        task = await self._get_or_raise(task_id)
        return TaskResponse.from_entity(task)

    async def get_all_tasks(self) -> list[TaskResponse]:
        tasks = await self.repository.find_all()
        return [TaskResponse.from_entity(t) for t in tasks]

    async def update_task(
        self, task_id: TaskId, request: TaskRequest,
    ) -> TaskResponse:
        """Apply a request to an existing task (partial for status/priority)."""
        task = await self._get_or_raise(task_id)

        task.title = request.title
        task.description = request.description
        if request.status is not None:
            task.status = request.status
        if request.priority is not None:
            task.priority = request.priority
        task.due_date = request.due_date

        updated = await self.repository.save(task)
        logger.info("Task updated", extra={"task_id": updated.id})
        return TaskResponse.from_entity(updated)

    async def delete_task(self, task_id: TaskId) -> None:
        if not await self.repository.exists_by_id(task_id):
            raise TaskNotFoundError(task_id)
        await self.repository.delete_by_id(task_id)
        logger.info("Task deleted", extra={"task_id": task_id})

    # --- Filtered lookups ----------------------------------------------------

    async def get_tasks_by_status(self, status: TaskStatus) -> list[TaskResponse]:
        tasks = await self.repository.find_by_status(status)
        return [TaskResponse.from_entity(t) for t in tasks]

    async def get_tasks_by_priority(
        self, priority: Priority,
    ) -> list[TaskResponse]:
        tasks = await self.repository.find_by_priority(priority)
        return [TaskResponse.from_entity(t) for t in tasks]

    async def search_tasks(self, title: str) -> list[TaskResponse]:
        """Case-insensitive substring match on title."""
        tasks = await self.repository.find_by_title_containing(title)
        return [TaskResponse.from_entity(t) for t in tasks]

    async def _get_or_raise(self, task_id: TaskId) -> Task:
        task = await self.repository.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task
