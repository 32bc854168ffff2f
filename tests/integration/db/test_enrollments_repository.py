from __future__ import annotations

import pytest

from kambaz.application.errors import DuplicateMembership
from kambaz.application.use_cases.enrollments import enroll
from kambaz.domain.models.enrollment import Enrollment


async def test_add_rejects_duplicate_pair(make_uow, seeded_catalog):
    async with make_uow() as uow:
        await uow.enrollments.add(Enrollment.create("student1", "RS101"))
        await uow.commit()

    async with make_uow() as uow:
        with pytest.raises(DuplicateMembership):
            await uow.enrollments.add(Enrollment.create("student1", "RS101"))
        await uow.rollback()
        assert [e.id for e in await uow.enrollments.list_all()] == ["student1-RS101"]


async def test_remove_reports_affected_rows(make_uow, seeded_catalog):
    async with make_uow() as uow:
        await uow.enrollments.add(Enrollment.create("student1", "RS101"))
        await uow.commit()
        assert await uow.enrollments.remove("student1", "RS101") == 1
        assert await uow.enrollments.remove("student1", "RS101") == 0
        await uow.commit()
        assert await uow.enrollments.list_all() == []


async def test_list_by_user_populates_courses(make_uow, seeded_catalog):
    async with make_uow() as uow:
        await uow.enrollments.add(Enrollment.create("student1", "RS101"))
        await uow.enrollments.add(Enrollment.create("student1", "GONE1"))
        await uow.enrollments.add(Enrollment.create("student2", "RS102"))
        await uow.commit()

        rows = await uow.enrollments.list_by_user("student1")

    assert [r.enrollment.course_id for r in rows] == ["GONE1", "RS101"]
    assert rows[0].course is None
    assert rows[1].course is not None
    assert rows[1].course.name == "Rocket Propulsion"


async def test_bulk_deletes_are_scoped(make_uow, seeded_catalog):
    async with make_uow() as uow:
        for user_id, course_id in [
            ("student1", "RS101"),
            ("student2", "RS101"),
            ("student1", "RS102"),
        ]:
            await uow.enrollments.add(Enrollment.create(user_id, course_id))
        await uow.commit()

        assert await uow.enrollments.delete_all_for_course("RS101") == 2
        assert await uow.enrollments.delete_all_for_user("student2") == 0
        await uow.commit()
        remaining = await uow.enrollments.list_all()

    assert [(e.user_id, e.course_id) for e in remaining] == [("student1", "RS102")]


async def test_list_by_course_returns_roster(make_uow, seeded_catalog):
    async with make_uow() as uow:
        await uow.enrollments.add(Enrollment.create("student2", "RS101"))
        await uow.enrollments.add(Enrollment.create("faculty1", "RS101"))
        await uow.enrollments.add(Enrollment.create("student1", "RS102"))
        await uow.commit()
        roster = await uow.enrollments.list_by_course("RS101")

    assert [u.username for u in roster] == ["faculty1", "student2"]


async def test_enroll_losing_writer_sees_stored_membership(make_uow, seeded_catalog):
    async with make_uow() as winner:
        first = await enroll.execute(winner, "student1", "RS101")
    assert first.created

    async with make_uow() as loser:
        real_get = loser.enrollments.get
        calls = {"n": 0}

        async def stale_get(user_id, course_id):
            # First lookup happened before the winner committed
            calls["n"] += 1
            if calls["n"] == 1:
                return None
            return await real_get(user_id, course_id)

        loser.enrollments.get = stale_get  # type: ignore
        second = await enroll.execute(loser, "student1", "RS101")

    assert not second.created
    assert second.enrollment.id == "student1-RS101"

    async with make_uow() as uow:
        stored = await uow.enrollments.list_all()
    assert [e.id for e in stored] == ["student1-RS101"]
