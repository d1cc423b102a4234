"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness endpoint sees the test engine

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency
      (PostgreSQL-specific features not exercised)
    - Environment set before the app is imported: Settings are read at import time
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

from ticktask.db.base import Base  # noqa: E402
from ticktask.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
from ticktask.infrastructure.task_repository import SqlAlchemyTaskRepository  # noqa: E402
from ticktask.core.domain_types import Priority, TaskStatus  # noqa: E402
from ticktask.models.task import Task  # noqa: E402
import ticktask.infrastructure.database as db_module  # noqa: E402
from ticktask.main import app  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def repository(test_db):
    return SqlAlchemyTaskRepository(test_db)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_task(test_db):
    """Insert a TODO/MEDIUM task directly into the test DB."""
    task = Task(
        title="Seeded task",
        description="Seeded description",
        status=TaskStatus.TODO,
        priority=Priority.MEDIUM,
    )
    test_db.add(task)
    await test_db.commit()
    await test_db.refresh(task)
    return task
