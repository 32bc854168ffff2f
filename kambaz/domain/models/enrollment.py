from __future__ import annotations

from dataclasses import dataclass


def enrollment_id(user_id: str, course_id: str) -> str:
    return f"{user_id}-{course_id}"


@dataclass(slots=True, frozen=True)
class Enrollment:
    """A user's membership in a course.

    The identifier is derived from the pair so that a second insert for the
    same user and course collides on the primary key.
    """

    id: str
    user_id: str
    course_id: str

    @classmethod
    def create(cls, user_id: str, course_id: str) -> Enrollment:
        return cls(id=enrollment_id(user_id, course_id), user_id=user_id, course_id=course_id)
