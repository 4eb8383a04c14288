from sqlalchemy import Column, Integer, ForeignKey, Index, text
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.mixins import TimestampMixin


class CourseTeacher(TimestampMixin, Base):
    __tablename__ = "course_teachers"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False)
    teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=False)

    __table_args__ = (
        Index(
            "uq_course_teacher_active",
            "course_id",
            "teacher_id",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    course = relationship("Course", back_populates="teacher_links")
    teacher = relationship("Teacher", back_populates="course_links")
