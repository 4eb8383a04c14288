from fastapi.testclient import TestClient

from tests.helpers.asserts import api_call, assert_error
from tests.helpers.contract import assert_exact_keys


def test_class_detail_contract(client: TestClient, course_factory, lesson_factory):
    course = course_factory()
    lesson = lesson_factory(course, name="Hooks", video_url="https://www.youtube.com/watch?v=dQw4w9WgXcQ", duration=15)

    data = api_call(client, "GET", f"/classes/{lesson.id}").json()

    assert_exact_keys(data, {"id", "title", "description", "slug", "video", "duration", "thumbnail"})
    assert data["title"] == "Hooks"
    assert data["video"] == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    assert data["duration"] == 15
    assert data["thumbnail"] == "https://img.youtube.com/vi/dQw4w9WgXcQ/hqdefault.jpg"


def test_class_detail_not_found(client: TestClient):
    assert_error(client.get("/classes/999"), 404, "NOT_FOUND")


def test_create_class(client: TestClient, course_factory):
    course = course_factory(slug="curso-de-sql")

    created = api_call(
        client, "POST", f"/courses/{course.id}/classes",
        json={"name": "Joins", "description": "Inner and outer", "video_url": "https://youtu.be/dQw4w9WgXcQ", "duration": 20},
        expected_status=201
    ).json()

    assert created["slug"] == "joins"
    detail = api_call(client, "GET", "/courses/curso-de-sql").json()
    assert [c["id"] for c in detail["classes"]] == [created["id"]]
    assert_error(client.post("/courses/999/classes", json={"name": "Orphan"}), 404, "NOT_FOUND")
