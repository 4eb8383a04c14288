from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.mixins import TimestampMixin


class Course(TimestampMixin, Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), index=True, nullable=False)
    description = Column(Text, nullable=False, default="")
    thumbnail = Column(String(512), nullable=False, default="")
    slug = Column(String(255), unique=True, index=True, nullable=False)

    lessons = relationship(
        "Lesson",
        primaryjoin="and_(Course.id == Lesson.course_id, Lesson.deleted_at == None)",
        order_by="Lesson.id",
        viewonly=True,
    )
    teacher_links = relationship("CourseTeacher", back_populates="course")
    teachers = relationship(
        "Teacher",
        secondary="course_teachers",
        primaryjoin="and_(Course.id == CourseTeacher.course_id, CourseTeacher.deleted_at == None)",
        secondaryjoin="and_(Teacher.id == CourseTeacher.teacher_id, Teacher.deleted_at == None)",
        order_by="Teacher.id",
        viewonly=True,
    )
    ratings = relationship("CourseRating", back_populates="course")

    def __repr__(self):
        return f"<Course(id={self.id}, slug={self.slug})>"
