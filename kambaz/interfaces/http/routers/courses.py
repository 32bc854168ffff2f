from __future__ import annotations

from fastapi import APIRouter, Depends, status

from kambaz.application.use_cases.courses import (
    create_course,
    delete_course,
    get_course,
    list_courses,
)
from kambaz.infrastructure.db.session import SQLAlchemyUnitOfWork
from kambaz.interfaces.http.deps import get_uow
from kambaz.interfaces.http.schemas.courses import CourseCreate, CourseResponse

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=list[CourseResponse])
async def get_courses(*, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    courses = await list_courses.execute(uow)
    return [CourseResponse.from_domain(c) for c in courses]


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
async def post_course(payload: CourseCreate, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    created = await create_course.execute(
        uow,
        create_course.CreateCourseInput(
            name=payload.name,
            id=payload.id,
            number=payload.number,
            department=payload.department,
            credits=payload.credits,
            description=payload.description,
            start_date=payload.start_date,
            end_date=payload.end_date,
        ),
    )
    return CourseResponse.from_domain(created)


@router.get("/{course_id}", response_model=CourseResponse)
async def get_course_by_id(course_id: str, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    course = await get_course.execute(uow, course_id)
    return CourseResponse.from_domain(course)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_course(course_id: str, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await delete_course.execute(uow, course_id)
    return None
