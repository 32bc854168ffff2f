"""Cleanup hooks run when a course or a user leaves the system.

Both hooks only stage the bulk delete; the caller owns the transaction and
commits it together with the deletion that triggered the cascade.
"""

from __future__ import annotations

import logging

from kambaz.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def on_course_deleted(uow: UnitOfWork, course_id: str) -> int:
    removed = await uow.enrollments.delete_all_for_course(course_id)
    logger.info("Removed %d enrollments for deleted course %s", removed, course_id)
    return removed


async def on_user_deleted(uow: UnitOfWork, user_id: str) -> int:
    removed = await uow.enrollments.delete_all_for_user(user_id)
    logger.info("Removed %d enrollments for deleted user %s", removed, user_id)
    return removed
