from __future__ import annotations


async def _enroll(client, user_id: str, course_id: str) -> None:
    response = await client.post(
        "/api/enrollments", json={"userId": user_id, "courseId": course_id}
    )
    assert response.status_code == 201


async def test_course_crud_uses_frontend_field_names(client, session_factory):
    payload = {
        "_id": "RS103",
        "name": "Spacecraft Design",
        "number": "RS4570",
        "department": "D123",
        "credits": 4,
        "startDate": "2026-01-10",
        "endDate": "2026-05-15",
    }
    created = await client.post("/api/courses", json=payload)
    assert created.status_code == 201
    assert created.json()["_id"] == "RS103"
    assert created.json()["startDate"] == "2026-01-10"

    duplicate = await client.post("/api/courses", json=payload)
    assert duplicate.status_code == 409
    assert duplicate.json()["code"] == "conflict"

    fetched = await client.get("/api/courses/RS103")
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Spacecraft Design"

    listing = await client.get("/api/courses")
    assert [c["_id"] for c in listing.json()] == ["RS103"]

    missing = await client.get("/api/courses/NOPE")
    assert missing.status_code == 404


async def test_user_directory(client, session_factory):
    created = await client.post(
        "/api/users",
        json={"username": "iron_man", "firstName": "Tony", "lastName": "Stark", "role": "FACULTY"},
    )
    assert created.status_code == 201
    user = created.json()
    assert user["firstName"] == "Tony"
    assert user["role"] == "FACULTY"

    taken = await client.post("/api/users", json={"username": "iron_man"})
    assert taken.status_code == 409

    faculty = await client.get("/api/users", params={"role": "FACULTY"})
    assert [u["_id"] for u in faculty.json()] == [user["_id"]]
    students = await client.get("/api/users", params={"role": "STUDENT"})
    assert students.json() == []


async def test_deleting_course_cascades_to_its_enrollments(client, seeded_catalog):
    await _enroll(client, "student1", "RS101")
    await _enroll(client, "student2", "RS101")
    await _enroll(client, "student1", "RS102")

    deleted = await client.delete("/api/courses/RS101")
    assert deleted.status_code == 204

    remaining = (await client.get("/api/enrollments")).json()
    assert [(e["user"], e["course"]) for e in remaining] == [("student1", "RS102")]

    again = await client.delete("/api/courses/RS101")
    assert again.status_code == 404


async def test_deleting_user_cascades_to_their_enrollments(client, seeded_catalog):
    await _enroll(client, "student1", "RS101")
    await _enroll(client, "student2", "RS101")
    await _enroll(client, "student1", "RS102")

    deleted = await client.delete("/api/users/student1")
    assert deleted.status_code == 204

    remaining = (await client.get("/api/enrollments")).json()
    assert [e["_id"] for e in remaining] == ["student2-RS101"]

    roster = (await client.get("/api/courses/RS101/users")).json()
    assert [u["_id"] for u in roster] == ["student2"]

    missing = await client.get("/api/users/student1")
    assert missing.status_code == 404


async def test_health(client):
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
