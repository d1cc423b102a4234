"""Boundary Protocols — contracts between the task service and the store.

Invariants:
    - Service code NEVER imports a concrete store — it depends on TaskRepository only
    - find_* lookups return entities in ascending id order
    - delete_by_id is only called for ids known to exist

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO against an async engine
"""

from typing import TYPE_CHECKING, Protocol

from ticktask.core.domain_types import Priority, TaskId, TaskStatus

if TYPE_CHECKING:
    from ticktask.models.task import Task


class TaskRepository(Protocol):
    """Contract for task persistence — implemented by infrastructure."""
    async def save(self, task: "Task") -> "Task": ...
    async def find_by_id(self, task_id: TaskId) -> "Task | None": ...
    async def find_all(self) -> list["Task"]: ...
    async def exists_by_id(self, task_id: TaskId) -> bool: ...
    async def delete_by_id(self, task_id: TaskId) -> None: ...
    async def find_by_status(self, status: TaskStatus) -> list["Task"]: ...
    async def find_by_priority(self, priority: Priority) -> list["Task"]: ...
    async def find_by_title_containing(self, fragment: str) -> list["Task"]: ...
