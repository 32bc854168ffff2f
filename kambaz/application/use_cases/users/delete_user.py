from __future__ import annotations

from kambaz.application.errors import NotFound
from kambaz.application.interfaces.unit_of_work import UnitOfWork
from kambaz.application.use_cases.enrollments import cascade


async def execute(uow: UnitOfWork, user_id: str) -> int:
    deleted = await uow.users.delete(user_id)
    if not deleted:
        raise NotFound("User not found")
    removed = await cascade.on_user_deleted(uow, user_id)
    await uow.commit()
    return removed
