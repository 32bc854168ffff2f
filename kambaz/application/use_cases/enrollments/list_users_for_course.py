from __future__ import annotations

from kambaz.application.interfaces.unit_of_work import UnitOfWork
from kambaz.application.validation import require_id
from kambaz.domain.models.user import User


async def execute(uow: UnitOfWork, course_id: str) -> list[User]:
    course_id = require_id(course_id, "courseId")
    return await uow.enrollments.list_by_course(course_id)
