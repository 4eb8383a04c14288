import logging
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.crud.lesson import lesson as crud_lesson
from app.models.lesson import Lesson
from app.schemas.lesson import LessonCreate, LessonDetail
from app.services.course import course_service
from app.utils.slug import slugify
from app.utils.youtube import extract_thumbnail_url

logger = logging.getLogger(__name__)


class LessonService:

    def to_detail(self, lesson: Lesson) -> LessonDetail:
        return LessonDetail(
            id=lesson.id,
            title=lesson.name,
            description=lesson.description,
            slug=lesson.slug,
            video=lesson.video_url,
            duration=lesson.duration,
            thumbnail=extract_thumbnail_url(lesson.video_url),
        )

    def get_lesson(self, db: Session, lesson_id: int) -> LessonDetail:
        lesson = crud_lesson.get(db, id=lesson_id)
        if not lesson:
            raise NotFoundError("Class not found.")
        return self.to_detail(lesson)

    def create_lesson(self, db: Session, course_id: int, lesson_in: LessonCreate) -> LessonDetail:
        course_service.get_course(db, course_id)

        slug = slugify(lesson_in.slug or lesson_in.name)
        if not slug:
            raise ValidationError("Class slug must contain at least one letter or digit.")

        if crud_lesson.get_by_course_and_slug(db, course_id=course_id, slug=slug, include_deleted=True):
            raise ConflictError(f"A class with slug '{slug}' already exists in this course.")

        lesson_data = lesson_in.model_dump()
        lesson_data.update({"slug": slug, "course_id": course_id})
        lesson = crud_lesson.create_unique(
            db, obj_in=lesson_data, conflict_message=f"A class with slug '{slug}' already exists in this course."
        )
        logger.info(f"Class {lesson.id} created in course {course_id}")
        return self.to_detail(lesson)


lesson_service = LessonService()
