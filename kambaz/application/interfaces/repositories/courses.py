from __future__ import annotations

from typing import Protocol

from kambaz.domain.models.course import Course


class CourseRepository(Protocol):
    async def add(self, course: Course) -> Course: ...

    async def get(self, course_id: str) -> Course | None: ...

    async def list(self) -> list[Course]: ...

    async def delete(self, course_id: str) -> bool: ...
