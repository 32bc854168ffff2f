from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from kambaz.infrastructure.db.base import Base


class EnrollmentORM(Base):
    __tablename__ = "enrollments"
    # No foreign keys: users and courses are referenced by opaque id and
    # cleaned up through the cascade hooks

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(120), nullable=False, index=True)
    course_id: Mapped[str] = mapped_column(String(120), nullable=False, index=True)
