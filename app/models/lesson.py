from sqlalchemy import Column, Integer, String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.mixins import TimestampMixin


class Lesson(TimestampMixin, Base):
    __tablename__ = "lessons"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    slug = Column(String(255), nullable=False)
    video_url = Column(String(512), nullable=False, default="")
    duration = Column(Integer, nullable=False, default=0) # Duration in minutes

    __table_args__ = (
        UniqueConstraint("course_id", "slug", name="unique_course_lesson_slug"),
    )

    course = relationship("Course")
