from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from kambaz.application.errors import ConflictError
from kambaz.application.interfaces.repositories.courses import CourseRepository
from kambaz.domain.models.course import Course
from kambaz.infrastructure.db.orm.course import CourseORM
from kambaz.infrastructure.repos.errors import storage_errors


def to_domain(orm: CourseORM) -> Course:
    return Course(
        id=orm.id,
        name=orm.name,
        number=orm.number,
        department=orm.department,
        credits=orm.credits,
        description=orm.description,
        start_date=orm.start_date,
        end_date=orm.end_date,
    )


class CoursesSQLAlchemyRepository(CourseRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, course: Course) -> Course:
        orm = CourseORM(
            id=course.id,
            name=course.name,
            number=course.number,
            department=course.department,
            credits=course.credits,
            description=course.description,
            start_date=course.start_date,
            end_date=course.end_date,
        )
        self.session.add(orm)
        with storage_errors("creating course"):
            try:
                await self.session.flush()
            except IntegrityError as exc:
                raise ConflictError("Failed to create course") from exc
        return to_domain(orm)

    async def get(self, course_id: str) -> Course | None:
        stmt = select(CourseORM).where(CourseORM.id == course_id)
        with storage_errors("loading course"):
            res = await self.session.execute(stmt)
        orm = res.scalar_one_or_none()
        return to_domain(orm) if orm else None

    async def list(self) -> list[Course]:
        stmt = select(CourseORM).order_by(CourseORM.number, CourseORM.name)
        with storage_errors("listing courses"):
            res = await self.session.execute(stmt)
        return [to_domain(x) for x in res.scalars().all()]

    async def delete(self, course_id: str) -> bool:
        stmt = delete(CourseORM).where(CourseORM.id == course_id)
        with storage_errors("deleting course"):
            res = await self.session.execute(stmt)
        return (res.rowcount or 0) > 0
