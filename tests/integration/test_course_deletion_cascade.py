from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from app.crud.lesson import lesson as crud_lesson
from app.crud.teacher import teacher as crud_teacher


def test_course_deletion_cascade(client: TestClient, db_session: Session):
    """
    Deleting a course hides it, its classes and its teacher links.
    Teachers themselves and rating history survive.
    """
    print("\n[TEST] Course deletion cascade")

    print("[1] Creating course, class and teacher")
    r_course = client.post("/courses", json={"name": "Curso de Kotlin", "description": "Android"})
    assert r_course.status_code == 201, r_course.text
    course_id = r_course.json()["id"]

    r_class = client.post(
        f"/courses/{course_id}/classes",
        json={"name": "Intro", "video_url": "https://youtu.be/dQw4w9WgXcQ", "duration": 12}
    )
    assert r_class.status_code == 201, r_class.text
    class_id = r_class.json()["id"]

    r_teacher = client.post("/teachers", json={"name": "Marta", "email": "marta@test.com"})
    assert r_teacher.status_code == 201, r_teacher.text
    teacher_id = r_teacher.json()["id"]

    assert client.put(f"/courses/{course_id}/teachers/{teacher_id}").status_code == 204
    assert client.post(f"/courses/{course_id}/ratings", json={"user_id": 3, "rating": 5}).status_code == 201
    print("[OK] Catalog populated")

    print("[2] Delete course")
    r_delete = client.delete(f"/courses/{course_id}")
    assert r_delete.status_code == 204, r_delete.text
    print("[OK] Course deleted")

    print("[3] Verify course and its children are hidden")
    assert client.get("/courses/curso-de-kotlin").status_code == 404
    assert course_id not in [c["id"] for c in client.get("/courses").json()]
    assert client.get(f"/classes/{class_id}").status_code == 404
    assert client.get(f"/courses/{course_id}/ratings/stats").status_code == 404
    assert client.post(f"/courses/{course_id}/ratings", json={"user_id": 3, "rating": 1}).status_code == 404
    print("[OK] Course, classes and ratings unreachable")

    print("[4] Verify rows were soft deleted")
    db_session.expire_all()
    deleted_class = crud_lesson.get(db_session, id=class_id, include_deleted=True)
    assert deleted_class is not None
    assert deleted_class.deleted_at is not None
    assert crud_teacher.get(db_session, id=teacher_id) is not None
    assert [t["id"] for t in client.get("/teachers").json()] == [teacher_id]
    print("[OK] Teacher kept, class retained as history")
