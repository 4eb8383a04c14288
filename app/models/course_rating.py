from sqlalchemy import Column, Integer, ForeignKey, Index, CheckConstraint, text
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.core.constants import RATING_MIN, RATING_MAX
from app.models.mixins import TimestampMixin


class CourseRating(TimestampMixin, Base):
    __tablename__ = "course_ratings"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False)
    # Issued by the external identity provider, no local users table.
    user_id = Column(Integer, nullable=False, index=True)
    rating = Column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint(f"rating >= {RATING_MIN} AND rating <= {RATING_MAX}", name="ck_course_rating_range"),
        # One active rating per (course, user); soft-deleted rows are history.
        Index(
            "uq_course_rating_active_user",
            "course_id",
            "user_id",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    course = relationship("Course", back_populates="ratings")
