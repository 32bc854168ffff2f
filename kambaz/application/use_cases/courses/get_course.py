from __future__ import annotations

from kambaz.application.errors import NotFound
from kambaz.application.interfaces.unit_of_work import UnitOfWork
from kambaz.domain.models.course import Course


async def execute(uow: UnitOfWork, course_id: str) -> Course:
    course = await uow.courses.get(course_id)
    if course is None:
        raise NotFound("Course not found")
    return course
