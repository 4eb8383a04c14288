from typing import List
import logging
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError
from app.crud.teacher import teacher as crud_teacher
from app.models.teacher import Teacher
from app.schemas.teacher import TeacherCreate

logger = logging.getLogger(__name__)


class TeacherService:

    def get_teacher(self, db: Session, teacher_id: int) -> Teacher:
        teacher = crud_teacher.get(db, id=teacher_id)
        if not teacher:
            raise NotFoundError("Teacher not found.")
        return teacher

    def list_teachers(self, db: Session) -> List[Teacher]:
        return crud_teacher.get_multi(db)

    def create_teacher(self, db: Session, teacher_in: TeacherCreate) -> Teacher:
        if crud_teacher.get_by_email(db, email=teacher_in.email, include_deleted=True):
            raise ConflictError("A teacher with this email already exists.")

        teacher = crud_teacher.create_unique(
            db, obj_in=teacher_in, conflict_message="A teacher with this email already exists."
        )
        logger.info(f"Teacher {teacher.id} created")
        return teacher


teacher_service = TeacherService()
