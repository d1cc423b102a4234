"""Task ORM — persists one tracked unit of work per row.

Invariants:
    - id is an autoincrement 64-bit primary key, assigned once by the store
    - title is non-nullable, at most 255 chars
    - status and priority are never null (Python-side defaults TODO / MEDIUM)
    - created_at set on insert; updated_at set on insert and on every UPDATE

Design Decisions:
    - Enum columns with native_enum=False: stored as VARCHAR, portable across
      PostgreSQL and SQLite without a CREATE TYPE migration
    - Timestamps are timezone-aware UTC, generated in Python; UTCDateTime
      re-attaches the offset that SQLite drops, so both stores return aware values
    - id is 64-bit (BIGINT on PostgreSQL, INTEGER rowid alias on SQLite)
"""

from datetime import date, datetime, timezone

from sqlalchemy import Date, Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ticktask.core.domain_types import (
    DEFAULT_PRIORITY, DEFAULT_STATUS, TITLE_MAX_LENGTH, Priority, TaskStatus,
)
from ticktask.db.base import Base
from ticktask.db.types import BigIntPrimaryKey, UTCDateTime


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Task(Base):
    """Task record — flat, single-table entity."""
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(
        BigIntPrimaryKey, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH), nullable=False,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[TaskStatus] = mapped_column(
        Enum(TaskStatus, native_enum=False, length=20),
        nullable=False, default=DEFAULT_STATUS, index=True,
    )
    priority: Mapped[Priority] = mapped_column(
        Enum(Priority, native_enum=False, length=20),
        nullable=False, default=DEFAULT_PRIORITY, index=True,
    )
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False,
        default=utc_now, onupdate=utc_now,
    )

    def __repr__(self) -> str:
        return f"<Task id={self.id} status={self.status} title={self.title!r}>"
