from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4

from kambaz.domain.value_objects.role import Role


@dataclass(slots=True)
class User:
    id: str
    username: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    role: Role = Role.STUDENT

    @classmethod
    def create(
        cls,
        username: str,
        *,
        id: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        role: Role = Role.STUDENT,
    ) -> User:
        return cls(
            id=id or uuid4().hex,
            username=username.strip(),
            first_name=first_name,
            last_name=last_name,
            email=email.lower() if email else None,
            role=role,
        )
