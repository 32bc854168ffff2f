from __future__ import annotations

from typing import Protocol

from kambaz.domain.models.user import User
from kambaz.domain.value_objects.role import Role


class UserRepository(Protocol):
    async def add(self, user: User) -> User: ...

    async def get(self, user_id: str) -> User | None: ...

    async def get_by_username(self, username: str) -> User | None: ...

    async def list(self, *, role: Role | None = None) -> list[User]: ...

    async def delete(self, user_id: str) -> bool: ...
