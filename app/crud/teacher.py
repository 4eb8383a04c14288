from sqlalchemy.orm import Session
from typing import Optional

from app.crud.base import CRUDBase
from app.models.teacher import Teacher
from app.schemas.teacher import TeacherCreate, TeacherUpdate


class CRUDTeacher(CRUDBase[Teacher, TeacherCreate, TeacherUpdate]):
    def get_by_email(self, db: Session, email: str, *, include_deleted: bool = False) -> Optional[Teacher]:
        return self.query(db, include_deleted=include_deleted).filter(Teacher.email == email).first()


teacher = CRUDTeacher(Teacher)
