from __future__ import annotations

import logging

from kambaz.application.interfaces.unit_of_work import UnitOfWork
from kambaz.application.validation import require_id
from kambaz.domain.models.course import Course

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, user_id: str) -> list[Course]:
    user_id = require_id(user_id, "userId")
    courses: list[Course] = []
    for row in await uow.enrollments.list_by_user(user_id):
        if row.course is None:
            logger.warning(
                "Enrollment %s references missing course %s",
                row.enrollment.id,
                row.enrollment.course_id,
            )
            continue
        courses.append(row.course)
    return courses
