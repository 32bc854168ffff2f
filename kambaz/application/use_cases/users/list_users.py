from __future__ import annotations

from kambaz.application.interfaces.unit_of_work import UnitOfWork
from kambaz.domain.models.user import User
from kambaz.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, *, role: Role | None = None) -> list[User]:
    return await uow.users.list(role=role)
