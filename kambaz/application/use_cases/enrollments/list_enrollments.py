from __future__ import annotations

from kambaz.application.interfaces.unit_of_work import UnitOfWork
from kambaz.domain.models.enrollment import Enrollment


async def execute(uow: UnitOfWork) -> list[Enrollment]:
    return await uow.enrollments.list_all()
