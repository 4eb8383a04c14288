from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.utils import deps
from app.schemas.teacher import Teacher, TeacherCreate
from app.services.teacher import teacher_service

router = APIRouter()


@router.get("/teachers", response_model=List[Teacher])
def list_teachers(db: Session = Depends(deps.get_db)):
    return [Teacher.model_validate(t) for t in teacher_service.list_teachers(db)]


@router.post("/teachers", response_model=Teacher, status_code=status.HTTP_201_CREATED)
def create_teacher(
    *,
    db: Session = Depends(deps.get_transactional_db),
    teacher_in: TeacherCreate
):
    teacher = teacher_service.create_teacher(db, teacher_in=teacher_in)
    return Teacher.model_validate(teacher)
