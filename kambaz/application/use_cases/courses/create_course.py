from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from kambaz.application.errors import ConflictError, ValidationError
from kambaz.application.interfaces.unit_of_work import UnitOfWork
from kambaz.domain.models.course import Course


@dataclass(slots=True)
class CreateCourseInput:
    name: str
    id: str | None = None
    number: str | None = None
    department: str | None = None
    credits: int | None = None
    description: str | None = None
    start_date: date | None = None
    end_date: date | None = None


async def execute(uow: UnitOfWork, payload: CreateCourseInput) -> Course:
    name = payload.name.strip()
    if not name:
        raise ValidationError("Course name is required")
    if payload.credits is not None and payload.credits < 0:
        raise ValidationError("credits must be non-negative")
    if payload.start_date and payload.end_date and payload.end_date < payload.start_date:
        raise ValidationError("endDate must not be before startDate")
    course_id = payload.id.strip() if payload.id else None
    if course_id and await uow.courses.get(course_id) is not None:
        raise ConflictError("Course already exists", details={"courseId": course_id})

    course = Course.create(
        name,
        id=course_id,
        number=payload.number,
        department=payload.department,
        credits=payload.credits,
        description=payload.description,
        start_date=payload.start_date,
        end_date=payload.end_date,
    )
    created = await uow.courses.add(course)
    await uow.commit()
    return created
