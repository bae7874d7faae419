"""Entity models for the in-memory catalog store.

Six entity kinds live in the store:
- Users: demo identity (no authentication)
- Categories: flat list of course topics
- Courses: catalog entries, soft-linked to a category
- Lessons: ordered content of a course (``order_index``)
- Enrollments: one per (user, course)
- Lesson progress: one per (user, lesson), the only mutable entity

All identifiers are positive integers handed out by the store.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any


class EntityKind(str, Enum):
    """Entity collections held by the store."""

    USER = "user"
    CATEGORY = "category"
    COURSE = "course"
    LESSON = "lesson"
    ENROLLMENT = "enrollment"
    LESSON_PROGRESS = "lesson_progress"


class LessonProgressStatus(str, Enum):
    """Lesson progress state."""

    INCOMPLETE = "incomplete"  # Initial state, completed_at is None
    COMPLETE = "complete"  # completed_at holds the transition time


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


# ==============================================================================
# Entity Classes
# ==============================================================================


class User:
    """Catalog user.

    Passwords are stored as given; there is no authentication in this service.
    """

    kind = EntityKind.USER

    def __init__(self, id: int, username: str, password: str, name: str):
        self.id = id
        self.username = username
        self.password = password
        self.name = name

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "username": self.username,
            "password": self.password,
            "name": self.name,
        }

    def __repr__(self) -> str:
        return f"<User {self.id} {self.username}>"


class Category:
    """Course category with a UI color tag."""

    kind = EntityKind.CATEGORY

    def __init__(self, id: int, name: str, color: str):
        self.id = id
        self.name = name
        self.color = color

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"id": self.id, "name": self.name, "color": self.color}

    def __repr__(self) -> str:
        return f"<Category {self.id} {self.name}>"


class Course:
    """Catalog course.

    Attributes:
        id: Course id
        title: Course title
        description: Short description for cards
        full_description: Long description for the course detail view
        instructor: Instructor display name
        category_id: Category id (not checked against stored categories)
        price: Display price, e.g. "$49"
        duration: Display duration, e.g. "12h 30m"
        level: Difficulty label
        rating: Display rating, e.g. "4.8"
        student_count: Display label, e.g. "2.4k students"
        image_url: Cover image URL
        features: Bullet list shown on the course detail view
    """

    kind = EntityKind.COURSE

    def __init__(
        self,
        id: int,
        title: str,
        description: str,
        full_description: str,
        instructor: str,
        category_id: int,
        price: str,
        duration: str,
        level: str,
        rating: str,
        student_count: str,
        image_url: str,
        features: list[str] | None = None,
    ):
        self.id = id
        self.title = title
        self.description = description
        self.full_description = full_description
        self.instructor = instructor
        self.category_id = category_id
        self.price = price
        self.duration = duration
        self.level = level
        self.rating = rating
        self.student_count = student_count
        self.image_url = image_url
        self.features = list(features or [])

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "full_description": self.full_description,
            "instructor": self.instructor,
            "category_id": self.category_id,
            "price": self.price,
            "duration": self.duration,
            "level": self.level,
            "rating": self.rating,
            "student_count": self.student_count,
            "image_url": self.image_url,
            "features": list(self.features),
        }

    def __repr__(self) -> str:
        return f"<Course {self.id} {self.title}>"


class Lesson:
    """Course lesson.

    ``order_index`` defines numbering and navigation within the course. It is
    not required to be unique; ties fall back to insertion order.
    """

    kind = EntityKind.LESSON

    def __init__(
        self,
        id: int,
        course_id: int,
        title: str,
        duration: str,
        content: str,
        order_index: int,
        video_url: str | None = None,
    ):
        self.id = id
        self.course_id = course_id
        self.title = title
        self.duration = duration
        self.video_url = video_url
        self.content = content
        self.order_index = order_index

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "course_id": self.course_id,
            "title": self.title,
            "duration": self.duration,
            "video_url": self.video_url,
            "content": self.content,
            "order_index": self.order_index,
        }

    def __repr__(self) -> str:
        return f"<Lesson {self.id} course={self.course_id} #{self.order_index}>"


class Enrollment:
    """Course enrollment of a user."""

    kind = EntityKind.ENROLLMENT

    def __init__(
        self,
        id: int,
        user_id: int,
        course_id: int,
        enrolled_at: datetime | None = None,
    ):
        self.id = id
        self.user_id = user_id
        self.course_id = course_id
        self.enrolled_at = enrolled_at or utcnow()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "course_id": self.course_id,
            "enrolled_at": self.enrolled_at,
        }

    def __repr__(self) -> str:
        return f"<Enrollment {self.id} user={self.user_id} course={self.course_id}>"


class LessonProgress:
    """Completion state of one lesson for one user.

    ``completed_at`` is set iff ``completed`` is true. Use
    :meth:`apply_completed` to move between states so both fields stay in
    step.
    """

    kind = EntityKind.LESSON_PROGRESS

    def __init__(
        self,
        id: int,
        user_id: int,
        lesson_id: int,
        completed: bool = False,
        completed_at: datetime | None = None,
    ):
        self.id = id
        self.user_id = user_id
        self.lesson_id = lesson_id
        self.completed = completed
        self.completed_at = (completed_at or utcnow()) if completed else None

    @property
    def status(self) -> LessonProgressStatus:
        """Current state of the record."""
        if self.completed:
            return LessonProgressStatus.COMPLETE
        return LessonProgressStatus.INCOMPLETE

    def apply_completed(self, completed: bool, now: datetime | None = None) -> None:
        """Transition to complete or incomplete.

        Marking complete again refreshes ``completed_at``.
        """
        self.completed = completed
        self.completed_at = (now or utcnow()) if completed else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "lesson_id": self.lesson_id,
            "completed": self.completed,
            "completed_at": self.completed_at,
        }

    def __repr__(self) -> str:
        return (
            f"<LessonProgress {self.id} user={self.user_id} "
            f"lesson={self.lesson_id} {self.status.value}>"
        )


Entity = User | Category | Course | Lesson | Enrollment | LessonProgress
