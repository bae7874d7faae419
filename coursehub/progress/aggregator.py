"""Progress aggregation.

Pure functions over query results from :class:`StorageService`. Nothing here
touches the store; percentages are recomputed on every request and never
stored.
"""

from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

from coursehub.courses.schemas import (
    CourseResponse,
    LessonNavigation,
    LessonSummary,
)
from coursehub.store.models import Course, Enrollment, Lesson, LessonProgress

from .schemas import (
    CourseProgressResponse,
    EnrollmentWithProgressResponse,
    LessonWithProgress,
)


def completion_percentage(completed: int, total: int) -> int:
    """Percentage of completed lessons, rounded half up.

    Returns 0 for a course without lessons.
    """
    if total <= 0:
        return 0
    ratio = Decimal(100 * completed) / Decimal(total)
    return int(ratio.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def count_completed(progress_records: Iterable[LessonProgress]) -> int:
    """Number of records marked complete."""
    return sum(1 for record in progress_records if record.completed)


def annotate_lessons(
    lessons: Sequence[Lesson],
    progress_records: Iterable[LessonProgress],
) -> list[LessonWithProgress]:
    """Attach ``completed``/``completed_at`` to each lesson, keeping order."""
    by_lesson = {record.lesson_id: record for record in progress_records}
    annotated = []
    for lesson in lessons:
        record = by_lesson.get(lesson.id)
        completed = bool(record and record.completed)
        annotated.append(
            LessonWithProgress(
                **lesson.to_dict(),
                completed=completed,
                completed_at=record.completed_at if completed else None,
            )
        )
    return annotated


def summarize_course_progress(
    lessons: Sequence[Lesson],
    progress_records: Sequence[LessonProgress],
) -> CourseProgressResponse:
    """Course progress view for one user.

    Args:
        lessons: The course's lessons in display order
        progress_records: The user's progress records for those lessons
    """
    annotated = annotate_lessons(lessons, progress_records)
    completed = sum(1 for lesson in annotated if lesson.completed)
    total = len(lessons)
    return CourseProgressResponse(
        lessons=annotated,
        progress=completion_percentage(completed, total),
        completed_lessons=completed,
        total_lessons=total,
    )


def build_enrollment_view(
    enrollment: Enrollment,
    course: Course | None,
    lessons: Sequence[Lesson],
    progress_records: Sequence[LessonProgress],
) -> EnrollmentWithProgressResponse:
    """Join an enrollment with its course and completion figures."""
    completed = count_completed(progress_records)
    total = len(lessons)
    return EnrollmentWithProgressResponse(
        **enrollment.to_dict(),
        course=CourseResponse.model_validate(course) if course else None,
        progress=completion_percentage(completed, total),
        completed_lessons=completed,
        total_lessons=total,
    )


def lesson_navigation(lessons: Sequence[Lesson], lesson_id: int) -> LessonNavigation:
    """Position and neighbours of ``lesson_id`` within an ordered lesson list.

    A lesson missing from ``lessons`` gets position 0 and no neighbours.
    """
    total = len(lessons)
    index = next(
        (i for i, lesson in enumerate(lessons) if lesson.id == lesson_id), None
    )
    if index is None:
        return LessonNavigation(position=0, total=total)

    previous = lessons[index - 1] if index > 0 else None
    following = lessons[index + 1] if index < total - 1 else None
    return LessonNavigation(
        position=index + 1,
        total=total,
        previous=_summary(previous) if previous else None,
        next=_summary(following) if following else None,
    )


def _summary(lesson: Lesson) -> LessonSummary:
    return LessonSummary(
        id=lesson.id, title=lesson.title, order_index=lesson.order_index
    )
