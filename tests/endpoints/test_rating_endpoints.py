from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.crud.course_rating import course_rating as crud_rating
from app.schemas.course_rating import CourseRating
from tests.helpers.asserts import api_call, assert_error
from tests.helpers.contract import assert_exact_keys, validate_response_schema

RATING_KEYS = {"id", "course_id", "user_id", "rating", "created_at", "updated_at"}


def test_post_rating_creates_then_upserts(client: TestClient, db_session: Session, course_factory):
    course = course_factory()

    r1 = api_call(client, "POST", f"/courses/{course.id}/ratings", json={"user_id": 1, "rating": 3}, expected_status=201)
    r2 = api_call(client, "POST", f"/courses/{course.id}/ratings", json={"user_id": 1, "rating": 5}, expected_status=201)

    first, second = r1.json(), r2.json()
    assert_exact_keys(first, RATING_KEYS)
    validate_response_schema(second, CourseRating)
    assert second["id"] == first["id"]
    assert second["created_at"] == first["created_at"]
    assert second["rating"] == 5
    assert len(crud_rating.get_history(db_session, course_id=course.id, user_id=1)) == 1


def test_post_rating_out_of_range(client: TestClient, course_factory):
    course = course_factory()

    for value in (0, 6):
        response = client.post(f"/courses/{course.id}/ratings", json={"user_id": 1, "rating": value})
        body = assert_error(response, 422, "VALIDATION_ERROR")
        assert body["error"]["details"]["validation_errors"]


def test_post_rating_unknown_course(client: TestClient):
    response = client.post("/courses/999/ratings", json={"user_id": 1, "rating": 4})
    body = assert_error(response, 404, "NOT_FOUND")
    assert body["error"]["message"] == "Course not found."


def test_list_ratings_newest_first(client: TestClient, course_factory, rating_factory):
    course = course_factory()
    created = rating_factory(course, [2, 4, 5])
    created_ids = [r.id for r in created]

    response = api_call(client, "GET", f"/courses/{course.id}/ratings")

    data = response.json()
    validate_response_schema(data, CourseRating)
    assert [r["id"] for r in data] == list(reversed(created_ids))


def test_rating_stats(client: TestClient, course_factory, rating_factory):
    course = course_factory()
    rating_factory(course, [5, 5, 4, 3, 3])

    data = api_call(client, "GET", f"/courses/{course.id}/ratings/stats").json()

    assert data == {
        "average_rating": 4.0,
        "total_ratings": 5,
        "rating_distribution": {"1": 0, "2": 0, "3": 2, "4": 1, "5": 2},
    }


def test_rating_stats_empty(client: TestClient, course_factory):
    course = course_factory()

    data = api_call(client, "GET", f"/courses/{course.id}/ratings/stats").json()

    assert data["average_rating"] == 0.0
    assert data["total_ratings"] == 0
    assert data["rating_distribution"] == {"1": 0, "2": 0, "3": 0, "4": 0, "5": 0}


def test_user_rating_present_and_absent(client: TestClient, course_factory, rating_factory):
    course = course_factory()
    rating_factory(course, [4], first_user_id=8)

    present = api_call(client, "GET", f"/courses/{course.id}/ratings/user/8")
    assert present.json()["rating"] == 4

    absent = api_call(client, "GET", f"/courses/{course.id}/ratings/user/9", expected_status=204)
    assert absent.content == b""


def test_put_rating(client: TestClient, course_factory, rating_factory):
    course = course_factory()
    created = rating_factory(course, [2], first_user_id=5)[0]
    created_id = created.id

    response = api_call(client, "PUT", f"/courses/{course.id}/ratings/5", json={"user_id": 5, "rating": 4})

    assert response.json()["id"] == created_id
    assert response.json()["rating"] == 4


def test_put_rating_without_active_rating(client: TestClient, db_session: Session, course_factory):
    course = course_factory()

    response = client.put(f"/courses/{course.id}/ratings/5", json={"user_id": 5, "rating": 4})

    assert_error(response, 404, "NOT_FOUND")
    assert crud_rating.get_history(db_session, course_id=course.id, user_id=5) == []


def test_put_rating_user_mismatch(client: TestClient, course_factory, rating_factory):
    course = course_factory()
    rating_factory(course, [2], first_user_id=5)

    response = client.put(f"/courses/{course.id}/ratings/5", json={"user_id": 6, "rating": 4})

    assert_error(response, 400, "VALIDATION_ERROR")


def test_delete_rating(client: TestClient, db_session: Session, course_factory, rating_factory):
    course = course_factory()
    rating_factory(course, [2], first_user_id=5)

    api_call(client, "DELETE", f"/courses/{course.id}/ratings/5", expected_status=204)
    api_call(client, "GET", f"/courses/{course.id}/ratings/user/5", expected_status=204)
    assert_error(client.delete(f"/courses/{course.id}/ratings/5"), 404, "NOT_FOUND")

    history = crud_rating.get_history(db_session, course_id=course.id, user_id=5)
    assert len(history) == 1
    assert history[0].deleted_at is not None
