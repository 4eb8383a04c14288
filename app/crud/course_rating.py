from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import Dict, Iterable, List, Optional

from app.crud.base import CRUDBase
from app.models.course_rating import CourseRating
from app.schemas.course_rating import CourseRatingCreate, CourseRatingUpdate


class CRUDCourseRating(CRUDBase[CourseRating, CourseRatingCreate, CourseRatingUpdate]):

    def get_by_user_and_course(self, db: Session, user_id: int, course_id: int) -> Optional[CourseRating]:
        return (
            self.query(db)
            .filter(CourseRating.user_id == user_id)
            .filter(CourseRating.course_id == course_id)
            .first()
        )

    def get_by_course(self, db: Session, course_id: int) -> List[CourseRating]:
        return (
            self.query(db)
            .filter(CourseRating.course_id == course_id)
            .order_by(CourseRating.created_at.desc(), CourseRating.id.desc())
            .all()
        )

    def get_history(self, db: Session, *, course_id: int, user_id: int) -> List[CourseRating]:
        """Every row for the pair, soft-deleted ones included."""
        return (
            self.query(db, include_deleted=True)
            .filter(CourseRating.course_id == course_id)
            .filter(CourseRating.user_id == user_id)
            .order_by(CourseRating.id)
            .all()
        )

    def create_active(
        self, db: Session, *, course_id: int, user_id: int, rating: int, commit: bool = True
    ) -> CourseRating:
        """Insert an active rating inside a SAVEPOINT.

        Raises ConflictError when the partial unique index reports another
        active row for the pair; the outer transaction stays usable.
        """
        return self.create_unique(
            db,
            obj_in={"course_id": course_id, "user_id": user_id, "rating": rating},
            conflict_message="An active rating already exists for this user and course.",
            commit=commit,
        )

    def get_value_counts(self, db: Session, course_id: int) -> Dict[int, int]:
        rows = (
            self.query(db)
            .filter(CourseRating.course_id == course_id)
            .with_entities(CourseRating.rating, func.count(CourseRating.id))
            .group_by(CourseRating.rating)
            .all()
        )
        return {int(value): count for value, count in rows}

    def get_value_counts_for_courses(self, db: Session, course_ids: Iterable[int]) -> Dict[int, Dict[int, int]]:
        course_ids = list(course_ids)
        if not course_ids:
            return {}

        rows = (
            self.query(db)
            .filter(CourseRating.course_id.in_(course_ids))
            .with_entities(CourseRating.course_id, CourseRating.rating, func.count(CourseRating.id))
            .group_by(CourseRating.course_id, CourseRating.rating)
            .all()
        )

        counts: Dict[int, Dict[int, int]] = {course_id: {} for course_id in course_ids}
        for course_id, value, count in rows:
            counts[course_id][int(value)] = count
        return counts


course_rating = CRUDCourseRating(CourseRating)
