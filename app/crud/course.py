from sqlalchemy.orm import Session, selectinload
from typing import Optional

from app.crud.base import CRUDBase
from app.crud.course_teacher import course_teacher as crud_course_teacher
from app.crud.lesson import lesson as crud_lesson
from app.models.course import Course
from app.models.course_teacher import CourseTeacher
from app.models.lesson import Lesson
from app.models.mixins import utcnow
from app.models.teacher import Teacher
from app.schemas.course import CourseCreate, CourseUpdate


class CRUDCourse(CRUDBase[Course, CourseCreate, CourseUpdate]):

    def _query_with_relationships(self, db: Session):
        return self.query(db).options(
            selectinload(Course.teachers),
            selectinload(Course.lessons),
        )

    def get_by_slug(self, db: Session, slug: str, *, include_deleted: bool = False) -> Optional[Course]:
        return self.query(db, include_deleted=include_deleted).filter(Course.slug == slug).first()

    def get_detail_by_slug(self, db: Session, slug: str) -> Optional[Course]:
        return self._query_with_relationships(db).filter(Course.slug == slug).first()

    def add_teacher_to_course(self, db: Session, *, course: Course, teacher: Teacher, commit: bool = True) -> CourseTeacher:
        link = crud_course_teacher.get_link(db, course_id=course.id, teacher_id=teacher.id)
        if not link:
            link = crud_course_teacher.create(
                db, obj_in={"course_id": course.id, "teacher_id": teacher.id}, commit=commit
            )
        elif commit:
            db.commit()
        return link

    def remove_teacher_from_course(self, db: Session, *, course: Course, teacher: Teacher, commit: bool = True) -> bool:
        link = crud_course_teacher.get_link(db, course_id=course.id, teacher_id=teacher.id)
        if not link:
            return False
        crud_course_teacher.soft_delete(db, db_obj=link, commit=commit)
        return True

    def soft_delete_cascade(self, db: Session, *, db_obj: Course, commit: bool = True) -> Course:
        """Retire a course together with its lessons and teacher links."""
        now = utcnow()
        (
            crud_lesson.query(db)
            .filter(Lesson.course_id == db_obj.id)
            .update({Lesson.deleted_at: now, Lesson.updated_at: now}, synchronize_session=False)
        )
        (
            crud_course_teacher.query(db)
            .filter(CourseTeacher.course_id == db_obj.id)
            .update({CourseTeacher.deleted_at: now, CourseTeacher.updated_at: now}, synchronize_session=False)
        )
        db_obj.deleted_at = now
        db.add(db_obj)
        db.flush()
        if commit:
            db.commit()
        db.refresh(db_obj)
        return db_obj


course = CRUDCourse(Course)
