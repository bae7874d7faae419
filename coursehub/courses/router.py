"""Course catalog API endpoints.

Provides routes for:
- Categories: listing
- Courses: listing (optionally by category) and detail with lessons
- Lessons: detail with parent course and navigation
"""

from typing import Annotated

from fastapi import APIRouter, Query

from coursehub.store import StorageError
from coursehub.store.dependencies import handle_storage_error

from .dependencies import CatalogServiceDep
from .schemas import (
    CategoryResponse,
    CourseDetailResponse,
    CourseResponse,
    LessonDetailResponse,
)


# ==============================================================================
# Categories Router
# ==============================================================================

router_categories = APIRouter(prefix="/api/categories", tags=["categories"])


@router_categories.get(
    "",
    response_model=list[CategoryResponse],
    summary="List categories",
)
async def list_categories(catalog: CatalogServiceDep) -> list[CategoryResponse]:
    """List all course categories."""
    return [CategoryResponse.model_validate(c) for c in catalog.list_categories()]


# ==============================================================================
# Courses Router
# ==============================================================================

router_courses = APIRouter(prefix="/api/courses", tags=["courses"])


@router_courses.get(
    "",
    response_model=list[CourseResponse],
    summary="List courses",
)
async def list_courses(
    catalog: CatalogServiceDep,
    category_id: Annotated[int | None, Query(alias="categoryId", gt=0)] = None,
) -> list[CourseResponse]:
    """List all courses, or only those of ``categoryId``."""
    courses = catalog.list_courses(category_id)
    return [CourseResponse.model_validate(c) for c in courses]


@router_courses.get(
    "/{course_id}",
    response_model=CourseDetailResponse,
    summary="Get course details",
)
async def get_course(
    course_id: int,
    catalog: CatalogServiceDep,
) -> CourseDetailResponse:
    """Get a course with its lessons ordered for display."""
    try:
        return catalog.get_course_detail(course_id)
    except StorageError as e:
        raise handle_storage_error(e) from e


# ==============================================================================
# Lessons Router
# ==============================================================================

router_lessons = APIRouter(prefix="/api/lessons", tags=["lessons"])


@router_lessons.get(
    "/{lesson_id}",
    response_model=LessonDetailResponse,
    summary="Get lesson details",
)
async def get_lesson(
    lesson_id: int,
    catalog: CatalogServiceDep,
) -> LessonDetailResponse:
    """Get a lesson with its course and previous/next lessons."""
    try:
        return catalog.get_lesson_detail(lesson_id)
    except StorageError as e:
        raise handle_storage_error(e) from e
