from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    STUDENT = "STUDENT"
    TA = "TA"
    FACULTY = "FACULTY"
    ADMIN = "ADMIN"
