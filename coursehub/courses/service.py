"""Course catalog service layer.

Read-side business logic for categories, courses and lessons. Writes go
straight through :class:`StorageService`.
"""

from coursehub.progress.aggregator import lesson_navigation
from coursehub.store import NotFoundError, StorageService
from coursehub.store.models import Category, Course

from .schemas import (
    CourseDetailResponse,
    CourseResponse,
    LessonDetailResponse,
    LessonResponse,
)


class CatalogService:
    """Service for browsing the course catalog."""

    def __init__(self, storage: StorageService):
        self.storage = storage

    def list_categories(self) -> list[Category]:
        """List all categories."""
        return self.storage.list_categories()

    def list_courses(self, category_id: int | None = None) -> list[Course]:
        """List courses, optionally limited to one category."""
        if category_id is None:
            return self.storage.list_courses()
        return self.storage.list_courses_by_category(category_id)

    def get_course_detail(self, course_id: int) -> CourseDetailResponse:
        """Course with its lessons in display order.

        Raises:
            NotFoundError: If the course does not exist
        """
        course = self.storage.get_course(course_id)
        if course is None:
            raise NotFoundError("Course not found")

        lessons = self.storage.list_lessons_by_course(course_id)
        return CourseDetailResponse(
            **course.to_dict(),
            lessons=[LessonResponse.model_validate(lesson) for lesson in lessons],
        )

    def get_lesson_detail(self, lesson_id: int) -> LessonDetailResponse:
        """Lesson with its course and previous/next lessons.

        A lesson whose course is missing is still returned, with ``course``
        unset.

        Raises:
            NotFoundError: If the lesson does not exist
        """
        lesson = self.storage.get_lesson(lesson_id)
        if lesson is None:
            raise NotFoundError("Lesson not found")

        course = self.storage.get_course(lesson.course_id)
        lessons = self.storage.list_lessons_by_course(lesson.course_id)
        return LessonDetailResponse(
            **lesson.to_dict(),
            course=CourseResponse.model_validate(course) if course else None,
            navigation=lesson_navigation(lessons, lesson.id),
        )
