#!/usr/bin/env python3
"""
Seed the database with the demo Kambaz catalog.

This script:
1. Optionally creates the tables (for local SQLite databases without alembic)
2. Creates the demo courses and users, skipping the ones that already exist
3. Enrolls every demo user in their courses (repeat runs are no-ops)

Usage:
  python scripts/seed_catalog.py [--create-tables]
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from kambaz.application.errors import ConflictError
from kambaz.application.use_cases.courses import create_course
from kambaz.application.use_cases.enrollments import enroll
from kambaz.application.use_cases.users import create_user
from kambaz.config.settings import get_settings
from kambaz.domain.value_objects.role import Role
from kambaz.infrastructure.db.base import Base
from kambaz.infrastructure.db.orm import course, enrollment, user  # noqa: F401
from kambaz.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)

DEMO_COURSES = [
    create_course.CreateCourseInput(
        id="RS101",
        name="Rocket Propulsion",
        number="RS4550",
        department="D123",
        credits=4,
        description="Fundamentals of rocket propulsion systems.",
    ),
    create_course.CreateCourseInput(
        id="RS102",
        name="Aerodynamics",
        number="RS4560",
        department="D123",
        credits=3,
        description="Flow around bodies and lift generation.",
    ),
    create_course.CreateCourseInput(
        id="RS103",
        name="Spacecraft Design",
        number="RS4570",
        department="D123",
        credits=4,
        description="Design constraints for spacecraft.",
    ),
]

DEMO_USERS = [
    create_user.CreateUserInput(
        id="123", username="iron_man", first_name="Tony", last_name="Stark", role=Role.FACULTY
    ),
    create_user.CreateUserInput(
        id="234", username="dark_knight", first_name="Bruce", last_name="Wayne"
    ),
    create_user.CreateUserInput(
        id="345", username="black_widow", first_name="Natasha", last_name="Romanoff", role=Role.TA
    ),
]

DEMO_ENROLLMENTS = [
    ("123", "RS101"),
    ("234", "RS101"),
    ("345", "RS101"),
    ("234", "RS102"),
    ("123", "RS103"),
]


async def seed(create_tables: bool) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)

    try:
        if create_tables:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            print("🧱 Tables created")

        for payload in DEMO_COURSES:
            async with SQLAlchemyUnitOfWork(session_factory) as uow:
                try:
                    created = await create_course.execute(uow, payload)
                    print(f"📚 Course {created.id}: {created.name}")
                except ConflictError:
                    print(f"ℹ️  Course {payload.id} already exists")

        for payload in DEMO_USERS:
            async with SQLAlchemyUnitOfWork(session_factory) as uow:
                try:
                    created = await create_user.execute(uow, payload)
                    print(f"👤 User {created.id}: {created.username} ({created.role.value})")
                except ConflictError:
                    print(f"ℹ️  User {payload.username} already exists")

        for user_id, course_id in DEMO_ENROLLMENTS:
            async with SQLAlchemyUnitOfWork(session_factory) as uow:
                result = await enroll.execute(uow, user_id, course_id)
                marker = "✅" if result.created else "ℹ️ "
                print(f"{marker} {result.enrollment.id}")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Seed the demo Kambaz catalog")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create tables from the ORM metadata before seeding",
    )
    args = parser.parse_args()

    print("=" * 60)
    print("🚀 Kambaz demo seed")
    print("=" * 60)

    asyncio.run(seed(args.create_tables))

    print("\n" + "=" * 60)
    print("✨ Process completed")
    print("=" * 60)
