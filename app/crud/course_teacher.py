from pydantic import BaseModel
from sqlalchemy.orm import Session
from typing import Optional

from app.crud.base import CRUDBase
from app.models.course_teacher import CourseTeacher


class CRUDCourseTeacher(CRUDBase[CourseTeacher, BaseModel, BaseModel]):
    def get_link(self, db: Session, *, course_id: int, teacher_id: int) -> Optional[CourseTeacher]:
        return (
            self.query(db)
            .filter(CourseTeacher.course_id == course_id)
            .filter(CourseTeacher.teacher_id == teacher_id)
            .first()
        )


course_teacher = CRUDCourseTeacher(CourseTeacher)
