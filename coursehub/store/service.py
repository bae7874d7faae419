"""Access layer over the in-memory store.

:class:`StorageService` is the only sanctioned way to reach a
:class:`MemoryStore`. It provides:
- Point lookups and filtering scans per entity kind
- Creation with store-assigned ids
- Enrollment creation guarded by the (user, course) uniqueness check
- Lesson progress upsert keyed on (user, lesson)

Lookups return ``None`` for unknown ids. Ids that are not positive integers
are treated as unknown rather than coerced.
"""

import structlog

from .memory import MemoryStore
from .models import (
    Category,
    Course,
    EntityKind,
    Enrollment,
    Lesson,
    LessonProgress,
    User,
    utcnow,
)
from .schemas import (
    LessonProgressUpdate,
    NewCategory,
    NewCourse,
    NewEnrollment,
    NewLesson,
    NewUser,
)


logger = structlog.get_logger(__name__)


# ==============================================================================
# Custom Exceptions
# ==============================================================================


class StorageError(Exception):
    """Base storage error."""

    def __init__(self, message: str, code: str = "storage_error"):
        self.message = message
        self.code = code
        super().__init__(message)


class NotFoundError(StorageError):
    """Referenced entity does not exist."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message, "not_found")


class ConflictError(StorageError):
    """Uniqueness invariant would be violated."""

    def __init__(self, message: str = "Conflict"):
        super().__init__(message, "conflict")


def is_valid_id(value: object) -> bool:
    """Check that ``value`` can be a stored id (positive int, not bool)."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


# ==============================================================================
# Storage Service
# ==============================================================================


class StorageService:
    """Catalog, enrollment and progress operations over a :class:`MemoryStore`."""

    def __init__(self, store: MemoryStore):
        self.store = store

    def _get(self, kind: EntityKind, entity_id: object):
        if not is_valid_id(entity_id):
            return None
        return self.store.get(kind, entity_id)

    # ==========================================================================
    # Users
    # ==========================================================================

    def get_user(self, user_id: int) -> User | None:
        """Get user by id."""
        return self._get(EntityKind.USER, user_id)

    def get_user_by_username(self, username: str) -> User | None:
        """Get user by exact username."""
        for user in self.store.list(EntityKind.USER):
            if user.username == username:
                return user
        return None

    def create_user(self, data: NewUser) -> User:
        """Create a user.

        Raises:
            ConflictError: If the username is taken
        """
        with self.store.locked():
            if self.get_user_by_username(data.username) is not None:
                raise ConflictError("Username already taken")

            user = User(id=self.store.next_id(EntityKind.USER), **data.model_dump())
            self.store.put(EntityKind.USER, user)

        logger.info("user_created", user_id=user.id, username=user.username)
        return user

    # ==========================================================================
    # Categories
    # ==========================================================================

    def list_categories(self) -> list[Category]:
        """List all categories."""
        return self.store.list(EntityKind.CATEGORY)

    def get_category(self, category_id: int) -> Category | None:
        """Get category by id."""
        return self._get(EntityKind.CATEGORY, category_id)

    def create_category(self, data: NewCategory) -> Category:
        """Create a category."""
        category = Category(
            id=self.store.next_id(EntityKind.CATEGORY), **data.model_dump()
        )
        self.store.put(EntityKind.CATEGORY, category)
        logger.info("category_created", category_id=category.id)
        return category

    # ==========================================================================
    # Courses
    # ==========================================================================

    def list_courses(self) -> list[Course]:
        """List all courses."""
        return self.store.list(EntityKind.COURSE)

    def get_course(self, course_id: int) -> Course | None:
        """Get course by id."""
        return self._get(EntityKind.COURSE, course_id)

    def list_courses_by_category(self, category_id: int) -> list[Course]:
        """List courses whose ``category_id`` matches."""
        if not is_valid_id(category_id):
            return []
        return [
            course
            for course in self.store.list(EntityKind.COURSE)
            if course.category_id == category_id
        ]

    def create_course(self, data: NewCourse) -> Course:
        """Create a course. The category is not required to exist."""
        course = Course(id=self.store.next_id(EntityKind.COURSE), **data.model_dump())
        self.store.put(EntityKind.COURSE, course)
        logger.info(
            "course_created", course_id=course.id, category_id=course.category_id
        )
        return course

    # ==========================================================================
    # Lessons
    # ==========================================================================

    def list_lessons_by_course(self, course_id: int) -> list[Lesson]:
        """List a course's lessons ordered by ``order_index``.

        ``sorted`` is stable, so lessons sharing an ``order_index`` keep their
        insertion order.
        """
        if not is_valid_id(course_id):
            return []
        lessons = [
            lesson
            for lesson in self.store.list(EntityKind.LESSON)
            if lesson.course_id == course_id
        ]
        return sorted(lessons, key=lambda lesson: lesson.order_index)

    def get_lesson(self, lesson_id: int) -> Lesson | None:
        """Get lesson by id."""
        return self._get(EntityKind.LESSON, lesson_id)

    def create_lesson(self, data: NewLesson) -> Lesson:
        """Create a lesson. The course is not required to exist."""
        lesson = Lesson(id=self.store.next_id(EntityKind.LESSON), **data.model_dump())
        self.store.put(EntityKind.LESSON, lesson)
        logger.info(
            "lesson_created",
            lesson_id=lesson.id,
            course_id=lesson.course_id,
            order_index=lesson.order_index,
        )
        return lesson

    # ==========================================================================
    # Enrollments
    # ==========================================================================

    def list_enrollments_by_user(self, user_id: int) -> list[Enrollment]:
        """List all enrollments of a user."""
        if not is_valid_id(user_id):
            return []
        return [
            enrollment
            for enrollment in self.store.list(EntityKind.ENROLLMENT)
            if enrollment.user_id == user_id
        ]

    def get_enrollment(self, user_id: int, course_id: int) -> Enrollment | None:
        """Get the enrollment for a (user, course) pair."""
        if not (is_valid_id(user_id) and is_valid_id(course_id)):
            return None
        for enrollment in self.store.list(EntityKind.ENROLLMENT):
            if enrollment.user_id == user_id and enrollment.course_id == course_id:
                return enrollment
        return None

    def create_enrollment(self, data: NewEnrollment) -> Enrollment:
        """Enroll a user in a course.

        Args:
            data: User and course ids

        Returns:
            The new enrollment, stamped with the current time

        Raises:
            ConflictError: If the user is already enrolled
            NotFoundError: If the course does not exist, or the user id is
                malformed
        """
        if not is_valid_id(data.user_id):
            raise NotFoundError("User not found")

        with self.store.locked():
            if self.get_enrollment(data.user_id, data.course_id) is not None:
                raise ConflictError("Already enrolled in this course")

            if self.get_course(data.course_id) is None:
                raise NotFoundError("Course not found")

            enrollment = Enrollment(
                id=self.store.next_id(EntityKind.ENROLLMENT),
                user_id=data.user_id,
                course_id=data.course_id,
                enrolled_at=utcnow(),
            )
            self.store.put(EntityKind.ENROLLMENT, enrollment)

        logger.info(
            "enrollment_created",
            enrollment_id=enrollment.id,
            user_id=enrollment.user_id,
            course_id=enrollment.course_id,
        )
        return enrollment

    # ==========================================================================
    # Lesson Progress
    # ==========================================================================

    def get_lesson_progress(
        self, user_id: int, lesson_id: int
    ) -> LessonProgress | None:
        """Get the progress record for a (user, lesson) pair, if any."""
        if not (is_valid_id(user_id) and is_valid_id(lesson_id)):
            return None
        for progress in self.store.list(EntityKind.LESSON_PROGRESS):
            if progress.user_id == user_id and progress.lesson_id == lesson_id:
                return progress
        return None

    def list_user_course_progress(
        self, user_id: int, course_id: int
    ) -> list[LessonProgress]:
        """Progress records of a user for the lessons of a course."""
        if not is_valid_id(user_id):
            return []
        lesson_ids = {lesson.id for lesson in self.list_lessons_by_course(course_id)}
        return [
            progress
            for progress in self.store.list(EntityKind.LESSON_PROGRESS)
            if progress.user_id == user_id and progress.lesson_id in lesson_ids
        ]

    def upsert_lesson_progress(self, data: LessonProgressUpdate) -> LessonProgress:
        """Create or update the progress record for a (user, lesson) pair.

        An existing record keeps its id; only ``completed`` and
        ``completed_at`` change. Submitting ``completed=True`` again refreshes
        ``completed_at``.

        Raises:
            NotFoundError: If the lesson does not exist, or the user id is
                malformed
        """
        if not is_valid_id(data.user_id):
            raise NotFoundError("User not found")

        with self.store.locked():
            if self.get_lesson(data.lesson_id) is None:
                raise NotFoundError("Lesson not found")

            now = utcnow()
            progress = self.get_lesson_progress(data.user_id, data.lesson_id)
            created = progress is None

            if progress is None:
                progress = LessonProgress(
                    id=self.store.next_id(EntityKind.LESSON_PROGRESS),
                    user_id=data.user_id,
                    lesson_id=data.lesson_id,
                    completed=data.completed,
                    completed_at=now,
                )
            else:
                progress.apply_completed(data.completed, now)

            self.store.put(EntityKind.LESSON_PROGRESS, progress)

        logger.info(
            "lesson_progress_upserted",
            progress_id=progress.id,
            user_id=progress.user_id,
            lesson_id=progress.lesson_id,
            completed=progress.completed,
            created=created,
        )
        return progress
