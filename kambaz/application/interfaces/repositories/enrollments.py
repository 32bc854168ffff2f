from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from kambaz.domain.models.course import Course
from kambaz.domain.models.enrollment import Enrollment
from kambaz.domain.models.user import User


@dataclass(slots=True, frozen=True)
class EnrolledCourse:
    enrollment: Enrollment
    # None when the course row was deleted outside the cascade
    course: Course | None


class EnrollmentRepository(Protocol):
    async def add(self, enrollment: Enrollment) -> Enrollment: ...

    async def get(self, user_id: str, course_id: str) -> Enrollment | None: ...

    async def remove(self, user_id: str, course_id: str) -> int: ...

    async def delete_all_for_course(self, course_id: str) -> int: ...

    async def delete_all_for_user(self, user_id: str) -> int: ...

    async def list_by_user(self, user_id: str) -> list[EnrolledCourse]: ...

    async def list_by_course(self, course_id: str) -> list[User]: ...

    async def list_all(self) -> list[Enrollment]: ...
