"""Pydantic schemas for enrollment and lesson progress.

Request bodies live with the store (``NewEnrollment``,
``LessonProgressUpdate``); this module holds the response shapes:
- Enrollments, plain and joined with course progress
- Lesson progress records
- Course progress (lessons annotated with completion)
"""

from datetime import datetime

from pydantic import Field

from coursehub.core.schemas import CamelModel
from coursehub.courses.schemas import CourseResponse, LessonResponse


# ==============================================================================
# Enrollment Schemas
# ==============================================================================


class EnrollmentResponse(CamelModel):
    """Enrollment response."""

    id: int
    user_id: int
    course_id: int
    enrolled_at: datetime


class EnrollmentWithProgressResponse(EnrollmentResponse):
    """Enrollment joined with its course and completion figures.

    ``course`` is null when the enrolled course no longer resolves.
    """

    course: CourseResponse | None = None
    progress: int = Field(0, ge=0, le=100, description="Rounded completion percent")
    completed_lessons: int = 0
    total_lessons: int = 0


# ==============================================================================
# Lesson Progress Schemas
# ==============================================================================


class LessonProgressResponse(CamelModel):
    """Stored lesson progress record."""

    id: int
    user_id: int
    lesson_id: int
    completed: bool
    completed_at: datetime | None = None


class LessonProgressDefault(CamelModel):
    """Returned when a user has no progress record for a lesson."""

    completed: bool = False


# ==============================================================================
# Course Progress Schemas
# ==============================================================================


class LessonWithProgress(LessonResponse):
    """Lesson annotated with the user's completion state."""

    completed: bool = False
    completed_at: datetime | None = None


class CourseProgressResponse(CamelModel):
    """A user's progress through one course."""

    lessons: list[LessonWithProgress] = []
    progress: int = Field(0, ge=0, le=100, description="Rounded completion percent")
    completed_lessons: int = 0
    total_lessons: int = 0
