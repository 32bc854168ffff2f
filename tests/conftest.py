from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Callable
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from kambaz.config.settings import Settings
from kambaz.domain.value_objects.role import Role
from kambaz.infrastructure.db.base import Base
from kambaz.infrastructure.db.orm import course, enrollment, user  # noqa: F401
from kambaz.infrastructure.db.orm.course import CourseORM
from kambaz.infrastructure.db.orm.user import UserORM
from kambaz.infrastructure.db.session import SQLAlchemyUnitOfWork
from kambaz.interfaces.http.main import create_app


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def session_factory(app):
    engine = app.state.engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield app.state.session_factory
    await engine.dispose()


@pytest.fixture()
def make_uow(session_factory) -> Callable[[], SQLAlchemyUnitOfWork]:
    return lambda: SQLAlchemyUnitOfWork(session_factory)


@pytest.fixture()
async def client(app, session_factory) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture()
async def seeded_catalog(session_factory) -> dict[str, list[str]]:
    async with session_factory() as session:
        session.add_all(
            [
                UserORM(id="student1", username="student1", first_name="Ada", role=Role.STUDENT),
                UserORM(id="student2", username="student2", first_name="Alan", role=Role.STUDENT),
                UserORM(id="faculty1", username="faculty1", role=Role.FACULTY),
                CourseORM(id="RS101", name="Rocket Propulsion", number="RS4550", credits=4),
                CourseORM(id="RS102", name="Aerodynamics", number="RS4560", credits=3),
            ]
        )
        await session.commit()
    return {"users": ["student1", "student2", "faculty1"], "courses": ["RS101", "RS102"]}
