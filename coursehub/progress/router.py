"""Enrollment and lesson progress API endpoints.

Provides routes for:
- Course enrollment and a user's enrollments with progress
- Lesson completion (create or update)
- Progress queries per lesson and per course
"""

from fastapi import APIRouter, status

from coursehub.core.context import set_user_id
from coursehub.store import StorageError
from coursehub.store.dependencies import handle_storage_error
from coursehub.store.schemas import LessonProgressUpdate, NewEnrollment

from .dependencies import ProgressServiceDep
from .schemas import (
    CourseProgressResponse,
    EnrollmentResponse,
    EnrollmentWithProgressResponse,
    LessonProgressDefault,
    LessonProgressResponse,
)


router = APIRouter(prefix="/api/progress", tags=["progress"])
enrollments_router = APIRouter(prefix="/api/enrollments", tags=["enrollments"])


# ==============================================================================
# Enrollment Endpoints
# ==============================================================================


@enrollments_router.get(
    "/{user_id}",
    response_model=list[EnrollmentWithProgressResponse],
    summary="List user enrollments with progress",
)
async def list_enrollments(
    user_id: int,
    progress_service: ProgressServiceDep,
) -> list[EnrollmentWithProgressResponse]:
    """List a user's enrollments joined with course details and progress."""
    set_user_id(user_id)
    return progress_service.get_user_enrollments(user_id)


@enrollments_router.post(
    "",
    response_model=EnrollmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Enroll in course",
)
async def enroll(
    data: NewEnrollment,
    progress_service: ProgressServiceDep,
) -> EnrollmentResponse:
    """Enroll a user in a course.

    Rejects duplicates with 409 and unknown courses with 404.
    """
    set_user_id(data.user_id)
    try:
        enrollment = progress_service.enroll_user(data.user_id, data.course_id)
    except StorageError as e:
        raise handle_storage_error(e) from e
    return EnrollmentResponse.model_validate(enrollment)


# ==============================================================================
# Lesson Progress Endpoints
# ==============================================================================


@router.post(
    "",
    response_model=LessonProgressResponse,
    status_code=status.HTTP_200_OK,
    summary="Update lesson progress",
)
async def update_lesson_progress(
    data: LessonProgressUpdate,
    progress_service: ProgressServiceDep,
) -> LessonProgressResponse:
    """Mark a lesson complete or incomplete for a user."""
    set_user_id(data.user_id)
    try:
        progress = progress_service.set_lesson_completed(
            data.user_id, data.lesson_id, data.completed
        )
    except StorageError as e:
        raise handle_storage_error(e) from e
    return LessonProgressResponse.model_validate(progress)


@router.get(
    "/{user_id}/course/{course_id}",
    response_model=CourseProgressResponse,
    summary="Get course progress",
)
async def get_course_progress(
    user_id: int,
    course_id: int,
    progress_service: ProgressServiceDep,
) -> CourseProgressResponse:
    """Get the course's lessons annotated with completion, plus totals."""
    set_user_id(user_id)
    return progress_service.get_course_progress(user_id, course_id)


@router.get(
    "/{user_id}/{lesson_id}",
    response_model=LessonProgressResponse | LessonProgressDefault,
    summary="Get lesson progress",
)
async def get_lesson_progress(
    user_id: int,
    lesson_id: int,
    progress_service: ProgressServiceDep,
) -> LessonProgressResponse | LessonProgressDefault:
    """Get a user's progress for one lesson.

    Returns ``{"completed": false}`` when nothing was recorded yet.
    """
    set_user_id(user_id)
    progress = progress_service.get_lesson_progress(user_id, lesson_id)
    if progress is None:
        return LessonProgressDefault()
    return LessonProgressResponse.model_validate(progress)
