"""Pydantic schemas for the course catalog.

Response models for:
- Categories
- Courses (list and detail with lessons)
- Lessons (detail with parent course and navigation)
"""

from pydantic import Field

from coursehub.core.schemas import CamelModel


# ==============================================================================
# Category Schemas
# ==============================================================================


class CategoryResponse(CamelModel):
    """Category response."""

    id: int
    name: str
    color: str


# ==============================================================================
# Course Schemas
# ==============================================================================


class CourseResponse(CamelModel):
    """Course response."""

    id: int
    title: str
    description: str
    full_description: str
    instructor: str
    category_id: int
    price: str
    duration: str
    level: str
    rating: str
    student_count: str
    image_url: str
    features: list[str] = []


# ==============================================================================
# Lesson Schemas
# ==============================================================================


class LessonResponse(CamelModel):
    """Lesson response."""

    id: int
    course_id: int
    title: str
    duration: str
    video_url: str | None = None
    content: str
    order_index: int


class LessonSummary(CamelModel):
    """Compact lesson reference for navigation links."""

    id: int
    title: str
    order_index: int


class LessonNavigation(CamelModel):
    """Where a lesson sits within its course."""

    position: int = Field(0, description="1-based position, 0 if not in the course")
    total: int = Field(0, description="Number of lessons in the course")
    previous: LessonSummary | None = None
    next: LessonSummary | None = None


class CourseDetailResponse(CourseResponse):
    """Course with its lessons in display order."""

    lessons: list[LessonResponse] = []


class LessonDetailResponse(LessonResponse):
    """Lesson with its course and neighbours.

    ``course`` is null when the lesson points at a course that does not exist.
    """

    course: CourseResponse | None = None
    navigation: LessonNavigation = Field(default_factory=LessonNavigation)
