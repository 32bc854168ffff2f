from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from kambaz.application.errors import ConflictError
from kambaz.application.interfaces.repositories.users import UserRepository
from kambaz.domain.models.user import User
from kambaz.domain.value_objects.role import Role
from kambaz.infrastructure.db.orm.user import UserORM
from kambaz.infrastructure.repos.errors import storage_errors


def to_domain(orm: UserORM) -> User:
    return User(
        id=orm.id,
        username=orm.username,
        first_name=orm.first_name,
        last_name=orm.last_name,
        email=orm.email,
        role=orm.role,
    )


class UsersSQLAlchemyRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, user: User) -> User:
        orm = UserORM(
            id=user.id,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            role=user.role,
        )
        self.session.add(orm)
        with storage_errors("creating user"):
            try:
                await self.session.flush()
            except IntegrityError as exc:
                raise ConflictError("Username already taken") from exc
        return to_domain(orm)

    async def get(self, user_id: str) -> User | None:
        stmt = select(UserORM).where(UserORM.id == user_id)
        with storage_errors("loading user"):
            result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return to_domain(orm) if orm else None

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(UserORM).where(UserORM.username == username)
        with storage_errors("loading user"):
            result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return to_domain(orm) if orm else None

    async def list(self, *, role: Role | None = None) -> list[User]:
        stmt = select(UserORM).order_by(UserORM.username)
        if role is not None:
            stmt = stmt.where(UserORM.role == role)
        with storage_errors("listing users"):
            result = await self.session.execute(stmt)
        return [to_domain(x) for x in result.scalars().all()]

    async def delete(self, user_id: str) -> bool:
        stmt = delete(UserORM).where(UserORM.id == user_id)
        with storage_errors("deleting user"):
            result = await self.session.execute(stmt)
        return (result.rowcount or 0) > 0
