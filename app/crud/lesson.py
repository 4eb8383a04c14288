from sqlalchemy.orm import Session
from typing import Any, Optional

from app.crud.base import CRUDBase
from app.models.course import Course
from app.models.lesson import Lesson
from app.schemas.lesson import LessonCreate, LessonUpdate

class CRUDLesson(CRUDBase[Lesson, LessonCreate, LessonUpdate]):
    def get(self, db: Session, id: Any, *, include_deleted: bool = False) -> Optional[Lesson]:
        query = self.query(db, include_deleted=include_deleted).filter(Lesson.id == id)
        if not include_deleted:
            # A lesson is only reachable while its course is.
            query = query.join(Course, Course.id == Lesson.course_id).filter(Course.deleted_at.is_(None))
        return query.first()

    def get_by_course_and_slug(
        self, db: Session, *, course_id: int, slug: str, include_deleted: bool = False
    ) -> Optional[Lesson]:
        return self.query(db, include_deleted=include_deleted).filter(Lesson.course_id == course_id, Lesson.slug == slug).first()

lesson = CRUDLesson(Lesson)
