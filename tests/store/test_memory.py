"""Tests for the in-memory entity store."""

from coursehub.store import Category, EntityKind, MemoryStore


class TestNextId:
    """Tests for per-kind id generation."""

    def test_starts_at_one(self, store: MemoryStore):
        """Every kind starts counting at 1."""
        for kind in EntityKind:
            assert store.next_id(kind) == 1

    def test_strictly_increasing(self, store: MemoryStore):
        """Consecutive ids increase by one and are never reused."""
        ids = [store.next_id(EntityKind.COURSE) for _ in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_kinds_are_independent(self, store: MemoryStore):
        """Drawing ids for one kind does not advance another."""
        store.next_id(EntityKind.COURSE)
        store.next_id(EntityKind.COURSE)
        assert store.next_id(EntityKind.LESSON) == 1

    def test_put_with_explicit_id_advances_counter(self, store: MemoryStore):
        """An explicitly numbered entity is never handed out again."""
        store.put(EntityKind.CATEGORY, Category(id=7, name="Art", color="pink"))
        assert store.next_id(EntityKind.CATEGORY) == 8


class TestGetPutList:
    """Tests for keyed access."""

    def test_get_missing_returns_none(self, store: MemoryStore):
        """Unknown ids yield None."""
        assert store.get(EntityKind.USER, 1) is None

    def test_put_then_get(self, store: MemoryStore):
        """A stored entity is returned by id."""
        category = Category(id=store.next_id(EntityKind.CATEGORY), name="A", color="x")
        store.put(EntityKind.CATEGORY, category)
        assert store.get(EntityKind.CATEGORY, category.id) is category

    def test_put_overwrites_by_id(self, store: MemoryStore):
        """Putting the same id twice keeps only the latest entity."""
        store.put(EntityKind.CATEGORY, Category(id=1, name="Old", color="x"))
        store.put(EntityKind.CATEGORY, Category(id=1, name="New", color="x"))
        assert store.count(EntityKind.CATEGORY) == 1
        assert store.get(EntityKind.CATEGORY, 1).name == "New"

    def test_list_is_per_kind(self, store: MemoryStore):
        """list() only returns entities of the requested kind."""
        store.put(EntityKind.CATEGORY, Category(id=1, name="A", color="x"))
        assert store.list(EntityKind.COURSE) == []
        assert [c.name for c in store.list(EntityKind.CATEGORY)] == ["A"]

    def test_counts(self, store: MemoryStore):
        """counts() reports every kind."""
        store.put(EntityKind.CATEGORY, Category(id=1, name="A", color="x"))
        counts = store.counts()
        assert counts["category"] == 1
        assert counts["lesson_progress"] == 0
        assert set(counts) == {kind.value for kind in EntityKind}
