from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import uuid4


@dataclass(slots=True)
class Course:
    id: str
    name: str
    number: str | None = None
    department: str | None = None
    credits: int | None = None
    description: str | None = None
    start_date: date | None = None
    end_date: date | None = None

    @classmethod
    def create(
        cls,
        name: str,
        *,
        id: str | None = None,
        number: str | None = None,
        department: str | None = None,
        credits: int | None = None,
        description: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> Course:
        return cls(
            id=id or uuid4().hex,
            name=name,
            number=number,
            department=department,
            credits=credits,
            description=description,
            start_date=start_date,
            end_date=end_date,
        )
