from typing import List
import logging
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.crud.course import course as crud_course
from app.models.course import Course as CourseModel
from app.schemas.course import CourseCreate, CourseDetail, CourseListItem
from app.schemas.course_rating import CourseRatingStats
from app.schemas.lesson import LessonSummary
from app.schemas.teacher import Teacher
from app.services.rating_stats import rating_stats_service, build_rating_stats
from app.services.teacher import teacher_service
from app.utils.slug import slugify

logger = logging.getLogger(__name__)


class CourseService:

    def _list_item(self, course: CourseModel, stats: CourseRatingStats) -> CourseListItem:
        return CourseListItem(
            id=course.id,
            name=course.name,
            description=course.description,
            thumbnail=course.thumbnail,
            slug=course.slug,
            average_rating=stats.average_rating,
            total_ratings=stats.total_ratings,
        )

    def get_course(self, db: Session, course_id: int) -> CourseModel:
        course = crud_course.get(db, id=course_id)
        if not course:
            raise NotFoundError("Course not found.")
        return course

    def list_courses(self, db: Session) -> List[CourseListItem]:
        courses = crud_course.get_multi(db)
        summaries = rating_stats_service.summaries_for_courses(db, [c.id for c in courses])
        return [
            self._list_item(course, summaries.get(course.id) or build_rating_stats({}))
            for course in courses
        ]

    def get_course_by_slug(self, db: Session, slug: str) -> CourseDetail:
        course = crud_course.get_detail_by_slug(db, slug=slug)
        if not course:
            raise NotFoundError("Course not found.")

        stats = rating_stats_service.compute_statistics(db, course_id=course.id)
        item = self._list_item(course, stats)
        return CourseDetail(
            **item.model_dump(),
            rating_distribution=stats.rating_distribution,
            teachers=[Teacher.model_validate(t) for t in course.teachers],
            classes=[LessonSummary.model_validate(lesson) for lesson in course.lessons],
        )

    def create_course(self, db: Session, course_in: CourseCreate) -> CourseListItem:
        slug = slugify(course_in.slug or course_in.name)
        if not slug:
            raise ValidationError("Course slug must contain at least one letter or digit.")

        if crud_course.get_by_slug(db, slug=slug, include_deleted=True):
            raise ConflictError(f"A course with slug '{slug}' already exists.")

        course_data = course_in.model_dump()
        course_data["slug"] = slug
        course = crud_course.create_unique(
            db, obj_in=course_data, conflict_message=f"A course with slug '{slug}' already exists."
        )
        logger.info(f"Course {course.id} created with slug '{slug}'")
        return self._list_item(course, build_rating_stats({}))

    def delete_course(self, db: Session, course_id: int) -> CourseModel:
        course = self.get_course(db, course_id)
        deleted_course = crud_course.soft_delete_cascade(db, db_obj=course)
        rating_stats_service.invalidate(course_id)
        logger.info(f"Course {course_id} deleted with its classes and teacher links")
        return deleted_course

    def assign_teacher(self, db: Session, course_id: int, teacher_id: int) -> None:
        course = self.get_course(db, course_id)
        teacher = teacher_service.get_teacher(db, teacher_id)
        crud_course.add_teacher_to_course(db, course=course, teacher=teacher)
        logger.info(f"Teacher {teacher_id} assigned to course {course_id}")

    def remove_teacher(self, db: Session, course_id: int, teacher_id: int) -> None:
        course = self.get_course(db, course_id)
        teacher = teacher_service.get_teacher(db, teacher_id)
        if not crud_course.remove_teacher_from_course(db, course=course, teacher=teacher):
            raise NotFoundError("Teacher is not assigned to this course.")
        logger.info(f"Teacher {teacher_id} removed from course {course_id}")


course_service = CourseService()
