from __future__ import annotations

import logging
from dataclasses import dataclass

from kambaz.application.errors import ConflictError, DuplicateMembership, NotFound
from kambaz.application.interfaces.unit_of_work import UnitOfWork
from kambaz.application.validation import require_id
from kambaz.domain.models.enrollment import Enrollment

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EnrollResult:
    enrollment: Enrollment
    created: bool


async def ensure_references_exist(uow: UnitOfWork, user_id: str, course_id: str) -> None:
    if await uow.users.get(user_id) is None:
        raise NotFound("User not found", details={"userId": user_id})
    if await uow.courses.get(course_id) is None:
        raise NotFound("Course not found", details={"courseId": course_id})


async def execute(
    uow: UnitOfWork,
    user_id: str,
    course_id: str,
    *,
    verify_references: bool = True,
) -> EnrollResult:
    """Enroll a user in a course.

    Enrolling an already enrolled user is not an error: the stored
    membership is returned with ``created=False``. This also covers the
    writer that loses a race on the primary key.
    """
    user_id = require_id(user_id, "userId")
    course_id = require_id(course_id, "courseId")
    if verify_references:
        await ensure_references_exist(uow, user_id, course_id)

    existing = await uow.enrollments.get(user_id, course_id)
    if existing is not None:
        logger.info("User %s already enrolled in course %s", user_id, course_id)
        return EnrollResult(enrollment=existing, created=False)

    try:
        enrollment = await uow.enrollments.add(Enrollment.create(user_id, course_id))
        await uow.commit()
    except DuplicateMembership:
        await uow.rollback()
        stored = await uow.enrollments.get(user_id, course_id)
        if stored is None:
            # The derived id belongs to a different pair, e.g. ("a-b", "c") vs ("a", "b-c")
            raise ConflictError(
                "Enrollment id collides with another membership",
                details={"userId": user_id, "courseId": course_id},
            )
        logger.info(
            "Concurrent enroll of user %s in course %s already stored", user_id, course_id
        )
        return EnrollResult(enrollment=stored, created=False)

    logger.info("Enrolled user %s in course %s", user_id, course_id)
    return EnrollResult(enrollment=enrollment, created=True)
