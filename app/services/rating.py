from typing import List, Optional
import logging
from sqlalchemy.orm import Session

from app.core.constants import RATING_MIN, RATING_MAX
from app.core.exceptions import AppException, ConflictError, NotFoundError, ValidationError
from app.crud.course import course as crud_course
from app.crud.course_rating import course_rating as crud_rating
from app.models.course import Course
from app.models.course_rating import CourseRating
from app.models.mixins import utcnow
from app.schemas.course_rating import CourseRatingStats
from app.services.rating_stats import rating_stats_service

logger = logging.getLogger(__name__)


class RatingService:
    """Rating ledger: at most one active rating per (course, user)."""

    def _validate_rating_value(self, value) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or not RATING_MIN <= value <= RATING_MAX:
            raise ValidationError(f"Rating must be an integer between {RATING_MIN} and {RATING_MAX}.")

    def _get_course(self, db: Session, course_id: int) -> Course:
        course = crud_course.get(db, id=course_id)
        if not course:
            raise NotFoundError("Course not found.")
        return course

    def _get_active_rating(self, db: Session, course_id: int, user_id: int) -> CourseRating:
        rating = crud_rating.get_by_user_and_course(db, user_id=user_id, course_id=course_id)
        if not rating:
            raise NotFoundError("Rating not found.")
        return rating

    def _apply_value(self, db: Session, rating: CourseRating, value: int) -> CourseRating:
        # updated_at is bumped even when the value is unchanged.
        return crud_rating.update(db, db_obj=rating, obj_in={"rating": value, "updated_at": utcnow()})

    def submit_rating(self, db: Session, course_id: int, user_id: int, value: int) -> CourseRating:
        self._validate_rating_value(value)
        self._get_course(db, course_id)

        existing = crud_rating.get_by_user_and_course(db, user_id=user_id, course_id=course_id)
        if existing:
            rating = self._apply_value(db, existing, value)
            logger.info(f"Rating {rating.id} updated to {value} for course {course_id} user {user_id}")
        else:
            try:
                rating = crud_rating.create_active(db, course_id=course_id, user_id=user_id, rating=value)
                logger.info(f"Rating {rating.id} created with {value} for course {course_id} user {user_id}")
            except ConflictError as conflict:
                # A concurrent submit won the insert; fold ours into its row.
                existing = crud_rating.get_by_user_and_course(db, user_id=user_id, course_id=course_id)
                if not existing:
                    logger.error(f"Rating conflict for course {course_id} user {user_id} could not be resolved")
                    raise AppException("Rating could not be saved.") from conflict
                rating = self._apply_value(db, existing, value)
                logger.warning(f"Rating {rating.id} updated after insert conflict for course {course_id} user {user_id}")

        rating_stats_service.invalidate(course_id)
        return rating

    def update_rating(
        self, db: Session, course_id: int, user_id: int, value: int, acting_user_id: int
    ) -> CourseRating:
        if acting_user_id != user_id:
            raise ValidationError("user_id does not match the owner of the rating.")
        self._validate_rating_value(value)
        self._get_course(db, course_id)

        rating = self._get_active_rating(db, course_id, user_id)
        rating = self._apply_value(db, rating, value)
        logger.info(f"Rating {rating.id} updated to {value} for course {course_id} user {user_id}")

        rating_stats_service.invalidate(course_id)
        return rating

    def delete_rating(self, db: Session, course_id: int, user_id: int) -> CourseRating:
        self._get_course(db, course_id)

        rating = self._get_active_rating(db, course_id, user_id)
        rating = crud_rating.soft_delete(db, db_obj=rating)
        logger.info(f"Rating {rating.id} deleted for course {course_id} user {user_id}")

        rating_stats_service.invalidate(course_id)
        return rating

    def get_user_rating(self, db: Session, course_id: int, user_id: int) -> Optional[CourseRating]:
        self._get_course(db, course_id)
        return crud_rating.get_by_user_and_course(db, user_id=user_id, course_id=course_id)

    def list_ratings(self, db: Session, course_id: int) -> List[CourseRating]:
        self._get_course(db, course_id)
        return crud_rating.get_by_course(db, course_id=course_id)

    def get_rating_stats(self, db: Session, course_id: int) -> CourseRatingStats:
        self._get_course(db, course_id)
        return rating_stats_service.compute_statistics(db, course_id=course_id)


rating_service = RatingService()
