from __future__ import annotations

from kambaz.application.errors import NotFound
from kambaz.application.interfaces.unit_of_work import UnitOfWork
from kambaz.application.use_cases.enrollments import cascade


async def execute(uow: UnitOfWork, course_id: str) -> int:
    """Delete a course and its enrollments; returns the number of enrollments removed."""
    deleted = await uow.courses.delete(course_id)
    if not deleted:
        raise NotFound("Course not found")
    removed = await cascade.on_course_deleted(uow, course_id)
    await uow.commit()
    return removed
