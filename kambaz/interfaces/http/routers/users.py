from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from kambaz.application.use_cases.users import create_user, delete_user, get_user, list_users
from kambaz.domain.value_objects.role import Role
from kambaz.infrastructure.db.session import SQLAlchemyUnitOfWork
from kambaz.interfaces.http.deps import get_uow
from kambaz.interfaces.http.schemas.users import UserCreate, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def get_users(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    role: Role | None = Query(None),
):
    users = await list_users.execute(uow, role=role)
    return [UserResponse.from_domain(u) for u in users]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def post_user(payload: UserCreate, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    created = await create_user.execute(
        uow,
        create_user.CreateUserInput(
            username=payload.username,
            id=payload.id,
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            role=payload.role,
        ),
    )
    return UserResponse.from_domain(created)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user_by_id(user_id: str, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    user = await get_user.execute(uow, user_id)
    return UserResponse.from_domain(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_user(user_id: str, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await delete_user.execute(uow, user_id)
    return None
