from __future__ import annotations

from kambaz.application.errors import NotFound
from kambaz.application.interfaces.unit_of_work import UnitOfWork
from kambaz.domain.models.user import User


async def execute(uow: UnitOfWork, user_id: str) -> User:
    user = await uow.users.get(user_id)
    if user is None:
        raise NotFound("User not found")
    return user
