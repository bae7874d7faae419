"""Tests for ProgressService."""

import pytest

from coursehub.progress import ProgressService
from coursehub.store import ConflictError, NotFoundError, StorageService
from coursehub.store.models import Course
from tests.factories import make_course, make_lesson


@pytest.fixture
def service(seeded_storage: StorageService) -> ProgressService:
    return ProgressService(seeded_storage)


class TestEnrollment:
    """Tests for enroll_user and get_user_enrollments."""

    def test_enroll_then_list(self, service: ProgressService):
        service.enroll_user(1, 4)
        views = service.get_user_enrollments(1)
        assert [v.course_id for v in views] == [1, 2, 4]

    def test_enroll_twice(self, service: ProgressService):
        with pytest.raises(ConflictError):
            service.enroll_user(1, 2)

    def test_enroll_missing_course(self, service: ProgressService):
        with pytest.raises(NotFoundError):
            service.enroll_user(1, 404)

    def test_dangling_course_is_listed(self, storage: StorageService):
        """An enrollment whose course vanished is still listed, course-less."""
        course = storage.create_course(make_course())
        service = ProgressService(storage)
        service.enroll_user(5, course.id)
        # Simulate the course disappearing from the table
        storage.store._tables[course.kind].pop(course.id)

        views = service.get_user_enrollments(5)
        assert len(views) == 1
        assert views[0].course is None
        assert views[0].progress == 0


class TestLessonCompletion:
    """Tests for marking lessons."""

    def test_mark_complete_and_incomplete(self, service: ProgressService):
        done = service.set_lesson_completed(3, 2, completed=True)
        assert done.completed is True
        undone = service.set_lesson_completed(3, 2, completed=False)
        assert undone.id == done.id
        assert undone.completed is False
        assert service.get_lesson_progress(3, 2).completed_at is None

    def test_untouched_lesson_has_no_record(self, service: ProgressService):
        assert service.get_lesson_progress(3, 2) is None


class TestCourseProgress:
    """Tests for get_course_progress."""

    def test_progress_follows_completion(self, storage: StorageService):
        """Progress is recomputed from records on every call."""
        course: Course = storage.create_course(make_course())
        lesson_ids = [
            storage.create_lesson(make_lesson(course.id, i)).id for i in range(1, 9)
        ]
        service = ProgressService(storage)

        service.set_lesson_completed(1, lesson_ids[0], completed=True)
        assert service.get_course_progress(1, course.id).progress == 13

        service.set_lesson_completed(1, lesson_ids[0], completed=False)
        assert service.get_course_progress(1, course.id).progress == 0

    def test_unknown_course(self, service: ProgressService):
        assert service.get_course_progress(1, 99).total_lessons == 0
