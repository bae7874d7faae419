"""Tests for the demo catalog."""

from coursehub.store import EntityKind, StorageService


class TestSeedStore:
    """Tests for seed_store."""

    def test_counts(self, seeded_storage: StorageService):
        """The demo catalog has the expected size."""
        assert seeded_storage.store.counts() == {
            "user": 1,
            "category": 6,
            "course": 6,
            "lesson": 5,
            "enrollment": 2,
            "lesson_progress": 3,
        }

    def test_ids_start_at_one(self, seeded_storage: StorageService):
        """Seeded entities use the store's generators from 1."""
        user = seeded_storage.get_user_by_username("johndoe")
        assert user is not None
        assert user.id == 1
        assert [c.id for c in seeded_storage.list_courses()] == [1, 2, 3, 4, 5, 6]

    def test_new_entities_continue_numbering(self, seeded_storage: StorageService):
        """Ids handed out after seeding follow the seeded ones."""
        assert seeded_storage.store.next_id(EntityKind.COURSE) == 7
        assert seeded_storage.store.next_id(EntityKind.ENROLLMENT) == 3

    def test_demo_progress(self, seeded_storage: StorageService):
        """Lessons 1 and 2 are complete, lesson 3 is not."""
        records = {
            p.lesson_id: p for p in seeded_storage.list_user_course_progress(1, 1)
        }
        assert records[1].completed and records[1].completed_at is not None
        assert records[2].completed
        assert not records[3].completed and records[3].completed_at is None

    def test_demo_enrollments(self, seeded_storage: StorageService):
        """The demo user is enrolled in the first two courses."""
        enrolled = [e.course_id for e in seeded_storage.list_enrollments_by_user(1)]
        assert enrolled == [1, 2]
