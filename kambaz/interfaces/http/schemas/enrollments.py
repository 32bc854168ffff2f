from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from kambaz.domain.models.enrollment import Enrollment


class EnrollmentCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId", min_length=1)
    course_id: str = Field(alias="courseId", min_length=1)


class EnrollmentResponse(BaseModel):
    # Wire names follow the documents the frontend already consumes
    id: str = Field(serialization_alias="_id")
    user: str
    course: str

    @classmethod
    def from_domain(cls, enrollment: Enrollment) -> EnrollmentResponse:
        return cls(id=enrollment.id, user=enrollment.user_id, course=enrollment.course_id)


class UnenrollResponse(BaseModel):
    removed: int
