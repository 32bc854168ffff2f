from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from kambaz.application.use_cases.enrollments import (
    enroll,
    list_courses_for_user,
    list_enrollments,
    list_users_for_course,
    unenroll,
)
from kambaz.config.settings import Settings
from kambaz.infrastructure.db.session import SQLAlchemyUnitOfWork
from kambaz.interfaces.http.deps import get_app_settings, get_uow
from kambaz.interfaces.http.schemas.courses import CourseResponse
from kambaz.interfaces.http.schemas.enrollments import (
    EnrollmentCreate,
    EnrollmentResponse,
    UnenrollResponse,
)
from kambaz.interfaces.http.schemas.users import UserResponse

router = APIRouter(tags=["enrollments"])


async def _enroll(
    uow: SQLAlchemyUnitOfWork, settings: Settings, response: Response, user_id: str, course_id: str
) -> EnrollmentResponse:
    result = await enroll.execute(
        uow,
        user_id,
        course_id,
        verify_references=settings.verify_enrollment_references,
    )
    if not result.created:
        response.status_code = status.HTTP_200_OK
    return EnrollmentResponse.from_domain(result.enrollment)


@router.get("/enrollments", response_model=list[EnrollmentResponse])
async def get_all_enrollments(*, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    items = await list_enrollments.execute(uow)
    return [EnrollmentResponse.from_domain(x) for x in items]


@router.post(
    "/enrollments", response_model=EnrollmentResponse, status_code=status.HTTP_201_CREATED
)
async def create_enrollment(
    payload: EnrollmentCreate,
    response: Response,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
):
    return await _enroll(uow, settings, response, payload.user_id, payload.course_id)


@router.post(
    "/users/{user_id}/courses/{course_id}",
    response_model=EnrollmentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def enroll_user_in_course(
    user_id: str,
    course_id: str,
    response: Response,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
):
    return await _enroll(uow, settings, response, user_id, course_id)


@router.delete("/users/{user_id}/courses/{course_id}", response_model=UnenrollResponse)
async def unenroll_user_from_course(
    user_id: str,
    course_id: str,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
):
    removed = await unenroll.execute(uow, user_id, course_id)
    return UnenrollResponse(removed=removed)


@router.get("/users/{user_id}/courses", response_model=list[CourseResponse])
async def get_courses_for_user(user_id: str, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    courses = await list_courses_for_user.execute(uow, user_id)
    return [CourseResponse.from_domain(c) for c in courses]


@router.get("/courses/{course_id}/users", response_model=list[UserResponse])
async def get_users_for_course(course_id: str, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    users = await list_users_for_course.execute(uow, course_id)
    return [UserResponse.from_domain(u) for u in users]
