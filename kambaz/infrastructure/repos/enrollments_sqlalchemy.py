from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from kambaz.application.errors import DuplicateMembership
from kambaz.application.interfaces.repositories.enrollments import (
    EnrolledCourse,
    EnrollmentRepository,
)
from kambaz.domain.models.enrollment import Enrollment
from kambaz.domain.models.user import User
from kambaz.infrastructure.db.orm.course import CourseORM
from kambaz.infrastructure.db.orm.enrollment import EnrollmentORM
from kambaz.infrastructure.db.orm.user import UserORM
from kambaz.infrastructure.repos import courses_sqlalchemy, users_sqlalchemy
from kambaz.infrastructure.repos.errors import storage_errors


class EnrollmentsSQLAlchemyRepository(EnrollmentRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_domain(orm: EnrollmentORM) -> Enrollment:
        return Enrollment(id=orm.id, user_id=orm.user_id, course_id=orm.course_id)

    async def add(self, enrollment: Enrollment) -> Enrollment:
        orm = EnrollmentORM(
            id=enrollment.id,
            user_id=enrollment.user_id,
            course_id=enrollment.course_id,
        )
        self.session.add(orm)
        with storage_errors("enrolling user"):
            try:
                await self.session.flush()
            except IntegrityError as exc:
                raise DuplicateMembership(
                    "User already enrolled in course",
                    details={"userId": enrollment.user_id, "courseId": enrollment.course_id},
                ) from exc
        return self._to_domain(orm)

    async def get(self, user_id: str, course_id: str) -> Enrollment | None:
        stmt = select(EnrollmentORM).where(
            EnrollmentORM.user_id == user_id, EnrollmentORM.course_id == course_id
        )
        with storage_errors("loading enrollment"):
            result = await self.session.execute(stmt)
        row = result.scalar_one_or_none()
        return self._to_domain(row) if row else None

    async def remove(self, user_id: str, course_id: str) -> int:
        stmt = delete(EnrollmentORM).where(
            EnrollmentORM.user_id == user_id, EnrollmentORM.course_id == course_id
        )
        with storage_errors("unenrolling user"):
            result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def delete_all_for_course(self, course_id: str) -> int:
        stmt = delete(EnrollmentORM).where(EnrollmentORM.course_id == course_id)
        with storage_errors("deleting course enrollments"):
            result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def delete_all_for_user(self, user_id: str) -> int:
        stmt = delete(EnrollmentORM).where(EnrollmentORM.user_id == user_id)
        with storage_errors("deleting user enrollments"):
            result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def list_by_user(self, user_id: str) -> list[EnrolledCourse]:
        stmt = (
            select(EnrollmentORM, CourseORM)
            .outerjoin(CourseORM, CourseORM.id == EnrollmentORM.course_id)
            .where(EnrollmentORM.user_id == user_id)
            .order_by(EnrollmentORM.course_id)
        )
        with storage_errors("listing enrollments for user"):
            result = await self.session.execute(stmt)
        return [
            EnrolledCourse(
                enrollment=self._to_domain(enrollment),
                course=courses_sqlalchemy.to_domain(course) if course is not None else None,
            )
            for enrollment, course in result.all()
        ]

    async def list_by_course(self, course_id: str) -> list[User]:
        stmt = (
            select(UserORM)
            .join(EnrollmentORM, EnrollmentORM.user_id == UserORM.id)
            .where(EnrollmentORM.course_id == course_id)
            .order_by(UserORM.username)
        )
        with storage_errors("listing enrollments for course"):
            result = await self.session.execute(stmt)
        return [users_sqlalchemy.to_domain(row) for row in result.scalars().all()]

    async def list_all(self) -> list[Enrollment]:
        stmt = select(EnrollmentORM).order_by(EnrollmentORM.id)
        with storage_errors("listing enrollments"):
            result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]
