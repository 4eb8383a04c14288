from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.utils import deps
from app.schemas.course import CourseCreate, CourseDetail, CourseListItem
from app.services.course import course_service

router = APIRouter()


@router.get("/courses", response_model=List[CourseListItem])
def list_courses(db: Session = Depends(deps.get_db)):
    return course_service.list_courses(db)


@router.post("/courses", response_model=CourseListItem, status_code=status.HTTP_201_CREATED)
def create_course(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_in: CourseCreate
):
    return course_service.create_course(db, course_in=course_in)


@router.get("/courses/{slug}", response_model=CourseDetail)
def read_course_by_slug(
    *,
    db: Session = Depends(deps.get_db),
    slug: str
):
    return course_service.get_course_by_slug(db, slug=slug)


@router.delete("/courses/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int
):
    course_service.delete_course(db, course_id=course_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/courses/{course_id}/teachers/{teacher_id}", status_code=status.HTTP_204_NO_CONTENT)
def assign_teacher(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    teacher_id: int
):
    course_service.assign_teacher(db, course_id=course_id, teacher_id=teacher_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/courses/{course_id}/teachers/{teacher_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_teacher(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    teacher_id: int
):
    course_service.remove_teacher(db, course_id=course_id, teacher_id=teacher_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
