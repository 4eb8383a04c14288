from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.utils import deps
from app.schemas.lesson import LessonCreate, LessonDetail
from app.services.lesson import lesson_service

router = APIRouter()


@router.get("/classes/{class_id}", response_model=LessonDetail)
def read_class(
    *,
    db: Session = Depends(deps.get_db),
    class_id: int
):
    return lesson_service.get_lesson(db, lesson_id=class_id)


@router.post("/courses/{course_id}/classes", response_model=LessonDetail, status_code=status.HTTP_201_CREATED)
def create_class(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    lesson_in: LessonCreate
):
    return lesson_service.create_lesson(db, course_id=course_id, lesson_in=lesson_in)
