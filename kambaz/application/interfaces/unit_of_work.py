from __future__ import annotations

from typing import Protocol

from kambaz.application.interfaces.repositories.courses import CourseRepository
from kambaz.application.interfaces.repositories.enrollments import EnrollmentRepository
from kambaz.application.interfaces.repositories.users import UserRepository


class UnitOfWork(Protocol):
    enrollments: EnrollmentRepository
    courses: CourseRepository
    users: UserRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
