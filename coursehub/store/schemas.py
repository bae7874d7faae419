"""Pydantic schemas for creating and updating stored entities.

These mirror the entity classes minus the store-assigned fields (``id`` and
server-side timestamps). They double as request bodies for the write
endpoints.
"""

from pydantic import Field

from coursehub.core.schemas import CamelModel


class NewUser(CamelModel):
    """User creation payload."""

    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)


class NewCategory(CamelModel):
    """Category creation payload."""

    name: str = Field(..., min_length=1, max_length=100)
    color: str = Field(..., min_length=1, max_length=50, description="UI color tag")


class NewCourse(CamelModel):
    """Course creation payload.

    ``category_id`` is not checked against stored categories.
    """

    title: str = Field(..., min_length=1, max_length=200)
    description: str
    full_description: str
    instructor: str
    category_id: int = Field(..., gt=0)
    price: str
    duration: str
    level: str
    rating: str
    student_count: str
    image_url: str
    features: list[str] = Field(default_factory=list)


class NewLesson(CamelModel):
    """Lesson creation payload."""

    course_id: int = Field(..., gt=0)
    title: str = Field(..., min_length=1, max_length=200)
    duration: str
    video_url: str | None = None
    content: str
    order_index: int = Field(..., description="Position within the course")


class NewEnrollment(CamelModel):
    """Enrollment request."""

    user_id: int = Field(..., gt=0, description="Enrolling user")
    course_id: int = Field(..., gt=0, description="Course to enroll in")


class LessonProgressUpdate(CamelModel):
    """Mark a lesson complete or incomplete for a user."""

    user_id: int = Field(..., gt=0)
    lesson_id: int = Field(..., gt=0)
    completed: bool = Field(False, description="New completion state")
