from __future__ import annotations

import logging

from kambaz.application.interfaces.unit_of_work import UnitOfWork
from kambaz.application.validation import require_id

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, user_id: str, course_id: str) -> int:
    user_id = require_id(user_id, "userId")
    course_id = require_id(course_id, "courseId")
    removed = await uow.enrollments.remove(user_id, course_id)
    await uow.commit()
    logger.info("Unenrolled user %s from course %s (removed=%d)", user_id, course_id, removed)
    return removed
