"""Service test fixtures — async DB, FastAPI test client and entity factories.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test engine
    - db_manager patched so the readiness check sees the test engine
    - Factories and fetch() each use their own short-lived session, so
      assertions never read a stale identity map

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so every
      session sees the same database
    - Factories insert through the ORM directly, bypassing the services:
      tests can build states (dangling references) the API would refuse
"""

from uuid import uuid4

import pytest
from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from tracker.db.base import Base
from tracker.infrastructure.database import get_db, DatabaseSessionManager
from tracker.models import Project, Task, Team, User, team_members
import tracker.infrastructure.database as db_module
from tracker.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
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


# ─── Factories ───────────────────────────────────────────────────


@pytest.fixture
def make_user(test_session_factory):
    async def _make(**overrides) -> User:
        values = {
            "name": "Ada Lovelace",
            "email": f"ada-{uuid4().hex[:8]}@example.com",
        } | overrides
        async with test_session_factory() as db:
            user = User(**values)
            db.add(user)
            await db.commit()
            return user
    return _make


@pytest.fixture
def make_project(test_session_factory):
    async def _make(**overrides) -> Project:
        values = {"project_name": f"project-{uuid4().hex[:8]}"} | overrides
        async with test_session_factory() as db:
            project = Project(**values)
            db.add(project)
            await db.commit()
            return project
    return _make


@pytest.fixture
def make_task(test_session_factory, make_user):
    async def _make(**overrides) -> Task:
        values = {"title": f"Task {uuid4().hex[:6]}", "status": "todo"} | overrides
        if "creator" not in values:
            values["creator"] = (await make_user()).id
        if "assigned_primary" not in values:
            values["assigned_primary"] = (await make_user()).id
        async with test_session_factory() as db:
            task = Task(**values)
            db.add(task)
            await db.commit()
            return task
    return _make


@pytest.fixture
def make_team(test_session_factory):
    async def _make(members=(), **overrides) -> Team:
        values = {"name": f"team-{uuid4().hex[:6]}"} | overrides
        async with test_session_factory() as db:
            team = Team(**values)
            db.add(team)
            await db.flush()
            for user_id in members:
                await db.execute(
                    insert(team_members).values(team_id=team.id, user_id=user_id),
                )
            await db.commit()
            return team
    return _make


@pytest.fixture
def remove(test_session_factory):
    """Delete a row behind the API's back (to create dangling references)."""
    async def _remove(entity) -> None:
        async with test_session_factory() as db:
            row = await db.get(type(entity), entity.id)
            await db.delete(row)
            await db.commit()
    return _remove


@pytest.fixture
def fetch(test_session_factory):
    async def _fetch(model, key):
        async with test_session_factory() as db:
            return await db.get(model, key)
    return _fetch


@pytest.fixture
def count(test_session_factory):
    async def _count(model) -> int:
        async with test_session_factory() as db:
            result = await db.execute(select(model))
            return len(result.scalars().all())
    return _count


@pytest.fixture
def members_of(test_session_factory):
    async def _members_of(team_id) -> set:
        async with test_session_factory() as db:
            result = await db.execute(
                select(team_members.c.user_id).where(team_members.c.team_id == team_id),
            )
            return set(result.scalars().all())
    return _members_of
