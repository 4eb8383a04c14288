from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.utils import deps
from app.schemas.course_rating import CourseRating, CourseRatingCreate, CourseRatingUpdate, CourseRatingStats
from app.services.rating import rating_service

router = APIRouter()


@router.post("/courses/{course_id}/ratings", response_model=CourseRating, status_code=status.HTTP_201_CREATED)
def submit_course_rating(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    rating_in: CourseRatingCreate
):
    rating = rating_service.submit_rating(
        db, course_id=course_id, user_id=rating_in.user_id, value=rating_in.rating
    )
    return CourseRating.model_validate(rating)


@router.get("/courses/{course_id}/ratings", response_model=List[CourseRating])
def list_course_ratings(
    *,
    db: Session = Depends(deps.get_db),
    course_id: int
):
    ratings = rating_service.list_ratings(db, course_id=course_id)
    return [CourseRating.model_validate(r) for r in ratings]


@router.get("/courses/{course_id}/ratings/stats", response_model=CourseRatingStats)
def get_course_rating_stats(
    *,
    db: Session = Depends(deps.get_db),
    course_id: int
):
    return rating_service.get_rating_stats(db, course_id=course_id)


@router.get(
    "/courses/{course_id}/ratings/user/{user_id}",
    response_model=CourseRating,
    responses={status.HTTP_204_NO_CONTENT: {"description": "The user has no active rating for this course"}}
)
def get_user_course_rating(
    *,
    db: Session = Depends(deps.get_db),
    course_id: int,
    user_id: int
):
    rating = rating_service.get_user_rating(db, course_id=course_id, user_id=user_id)
    if not rating:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return CourseRating.model_validate(rating)


@router.put("/courses/{course_id}/ratings/{user_id}", response_model=CourseRating)
def update_course_rating(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    user_id: int,
    rating_in: CourseRatingUpdate
):
    rating = rating_service.update_rating(
        db,
        course_id=course_id,
        user_id=user_id,
        value=rating_in.rating,
        acting_user_id=rating_in.user_id
    )
    return CourseRating.model_validate(rating)


@router.delete("/courses/{course_id}/ratings/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course_rating(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    user_id: int
):
    rating_service.delete_rating(db, course_id=course_id, user_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
