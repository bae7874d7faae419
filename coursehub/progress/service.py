"""Student progress service layer.

Business logic for:
- Course enrollment
- Lesson completion (mark complete / incomplete)
- Course progress and enrollment-with-progress views
"""

import structlog

from coursehub.store import StorageService
from coursehub.store.models import Enrollment, LessonProgress
from coursehub.store.schemas import LessonProgressUpdate, NewEnrollment

from .aggregator import build_enrollment_view, summarize_course_progress
from .schemas import CourseProgressResponse, EnrollmentWithProgressResponse


logger = structlog.get_logger(__name__)


class ProgressService:
    """Service for enrollment and lesson progress tracking."""

    def __init__(self, storage: StorageService):
        self.storage = storage

    # ==========================================================================
    # Enrollment Operations
    # ==========================================================================

    def enroll_user(self, user_id: int, course_id: int) -> Enrollment:
        """Enroll user in a course.

        Raises:
            ConflictError: If user already enrolled
            NotFoundError: If the course does not exist
        """
        return self.storage.create_enrollment(
            NewEnrollment(user_id=user_id, course_id=course_id)
        )

    def get_user_enrollments(
        self, user_id: int
    ) -> list[EnrollmentWithProgressResponse]:
        """Enrollments of a user, each joined with course and progress."""
        views = []
        for enrollment in self.storage.list_enrollments_by_user(user_id):
            course = self.storage.get_course(enrollment.course_id)
            if course is None:
                logger.warning(
                    "enrollment_course_missing",
                    enrollment_id=enrollment.id,
                    course_id=enrollment.course_id,
                )
            views.append(
                build_enrollment_view(
                    enrollment,
                    course,
                    self.storage.list_lessons_by_course(enrollment.course_id),
                    self.storage.list_user_course_progress(
                        user_id, enrollment.course_id
                    ),
                )
            )
        return views

    # ==========================================================================
    # Lesson Progress Operations
    # ==========================================================================

    def get_lesson_progress(
        self, user_id: int, lesson_id: int
    ) -> LessonProgress | None:
        """Stored progress for a lesson, or None when never submitted."""
        return self.storage.get_lesson_progress(user_id, lesson_id)

    def set_lesson_completed(
        self, user_id: int, lesson_id: int, completed: bool
    ) -> LessonProgress:
        """Mark a lesson complete or incomplete.

        Raises:
            NotFoundError: If the lesson does not exist
        """
        return self.storage.upsert_lesson_progress(
            LessonProgressUpdate(
                user_id=user_id, lesson_id=lesson_id, completed=completed
            )
        )

    # ==========================================================================
    # Course Progress Queries
    # ==========================================================================

    def get_course_progress(
        self, user_id: int, course_id: int
    ) -> CourseProgressResponse:
        """Lessons of a course annotated with the user's completion.

        An unknown course has no lessons and yields an empty view.
        """
        return summarize_course_progress(
            self.storage.list_lessons_by_course(course_id),
            self.storage.list_user_course_progress(user_id, course_id),
        )
