from __future__ import annotations

from dataclasses import dataclass

from kambaz.application.errors import ConflictError, ValidationError
from kambaz.application.interfaces.unit_of_work import UnitOfWork
from kambaz.domain.models.user import User
from kambaz.domain.value_objects.role import Role


@dataclass(slots=True)
class CreateUserInput:
    username: str
    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    role: Role = Role.STUDENT


async def execute(uow: UnitOfWork, payload: CreateUserInput) -> User:
    username = payload.username.strip()
    if not username:
        raise ValidationError("username is required")
    if await uow.users.get_by_username(username) is not None:
        raise ConflictError("Username already taken", details={"username": username})
    user_id = payload.id.strip() if payload.id else None
    if user_id and await uow.users.get(user_id) is not None:
        raise ConflictError("User already exists", details={"userId": user_id})

    user = User.create(
        username,
        id=user_id,
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        role=payload.role,
    )
    created = await uow.users.add(user)
    await uow.commit()
    return created
