"""Student progress tracking module.

Provides:
- Course enrollment management
- Lesson completion (mark complete / incomplete)
- Course progress aggregation and enrollment-with-progress views
- Lesson navigation derived from lesson order
"""

from .aggregator import (
    annotate_lessons,
    build_enrollment_view,
    completion_percentage,
    count_completed,
    lesson_navigation,
    summarize_course_progress,
)
from .service import ProgressService


__all__ = [
    "ProgressService",
    "annotate_lessons",
    "build_enrollment_view",
    "completion_percentage",
    "count_completed",
    "lesson_navigation",
    "summarize_course_progress",
]
