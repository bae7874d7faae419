"""In-memory catalog store.

Provides:
- Entity classes for users, categories, courses, lessons, enrollments and
  lesson progress
- MemoryStore: keyed collections with per-kind id generators
- StorageService: lookups, scans and guarded writes over a MemoryStore
- Demo seed data
"""

from .memory import MemoryStore
from .models import (
    Category,
    Course,
    EntityKind,
    Enrollment,
    Lesson,
    LessonProgress,
    LessonProgressStatus,
    User,
)
from .seed import seed_store
from .service import (
    ConflictError,
    NotFoundError,
    StorageError,
    StorageService,
)


__all__ = [
    "Category",
    "ConflictError",
    "Course",
    "EntityKind",
    "Enrollment",
    "Lesson",
    "LessonProgress",
    "LessonProgressStatus",
    "MemoryStore",
    "NotFoundError",
    "StorageError",
    "StorageService",
    "User",
    "seed_store",
]
