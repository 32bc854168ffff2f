from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from kambaz.domain.models.course import Course


class CourseCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(default=None, alias="_id")
    name: str
    number: str | None = None
    department: str | None = None
    credits: int | None = None
    description: str | None = None
    start_date: date | None = Field(default=None, alias="startDate")
    end_date: date | None = Field(default=None, alias="endDate")


class CourseResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    number: str | None = None
    department: str | None = None
    credits: int | None = None
    description: str | None = None
    start_date: date | None = Field(default=None, alias="startDate")
    end_date: date | None = Field(default=None, alias="endDate")

    @classmethod
    def from_domain(cls, course: Course) -> CourseResponse:
        return cls(
            id=course.id,
            name=course.name,
            number=course.number,
            department=course.department,
            credits=course.credits,
            description=course.description,
            start_date=course.start_date,
            end_date=course.end_date,
        )
