"""Task Store — SQLAlchemy implementation of the TaskRepository protocol.

Invariants:
    - Every write commits before returning (one call = one unit of work)
    - save() always refreshes updated_at for rows that already exist
    - Lookups return rows ordered by id ascending (insertion order)
    - Title search is case-insensitive; % and _ in the fragment match literally
    - SQLAlchemy failures leave this module as StoreError, never raw driver errors

Design Decisions:
    - Bound to the request-scoped AsyncSession (no session creation here)
    - Concurrency control left entirely to the database: no locks, no retries
    - Errors mapped at the call site: the request's session teardown may run
      after the response is chosen, so it cannot be the only place they are mapped
"""

import logging

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ticktask.core.domain_types import Priority, TaskId, TaskStatus
from ticktask.infrastructure.database import store_errors
from ticktask.models.task import Task, utc_now

logger = logging.getLogger(__name__)


class SqlAlchemyTaskRepository:
    """Task persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, task: Task) -> Task:
        """Insert a new task or persist changes to an existing one."""
        if task.id is not None:
            task.updated_at = utc_now()
        with store_errors():
            self.db.add(task)
            await self.db.commit()
            await self.db.refresh(task)
        logger.debug("Task saved", extra={"task_id": task.id})
        return task

    async def find_by_id(self, task_id: TaskId) -> Task | None:
        with store_errors():
            result = await self.db.execute(
                select(Task).where(Task.id == task_id),
            )
            return result.scalar_one_or_none()

    async def find_all(self) -> list[Task]:
        return await self._list(select(Task).order_by(Task.id))

    async def exists_by_id(self, task_id: TaskId) -> bool:
        with store_errors():
            result = await self.db.execute(
                select(Task.id).where(Task.id == task_id),
            )
            return result.scalar_one_or_none() is not None

    async def delete_by_id(self, task_id: TaskId) -> None:
        with store_errors():
            await self.db.execute(delete(Task).where(Task.id == task_id))
            await self.db.commit()
        logger.debug("Task deleted", extra={"task_id": task_id})

    async def find_by_status(self, status: TaskStatus) -> list[Task]:
        return await self._list(
            select(Task).where(Task.status == status).order_by(Task.id),
        )

    async def find_by_priority(self, priority: Priority) -> list[Task]:
        return await self._list(
            select(Task).where(Task.priority == priority).order_by(Task.id),
        )

    async def find_by_title_containing(self, fragment: str) -> list[Task]:
        return await self._list(
            select(Task)
            .where(Task.title.icontains(fragment, autoescape=True))
            .order_by(Task.id),
        )

    async def _list(self, stmt: Select) -> list[Task]:
        with store_errors():
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
