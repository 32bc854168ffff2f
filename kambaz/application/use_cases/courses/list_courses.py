from __future__ import annotations

from kambaz.application.interfaces.unit_of_work import UnitOfWork
from kambaz.domain.models.course import Course


async def execute(uow: UnitOfWork) -> list[Course]:
    return await uow.courses.list()
