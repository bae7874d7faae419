"""Async tests for the enrollment and progress endpoints."""

import asyncio

import httpx

from coursehub.store import EntityKind, StorageService


class TestLearnerFlow:
    """A learner enrolls, works through lessons and checks progress."""

    async def test_enroll_and_complete(self, async_client: httpx.AsyncClient):
        response = await async_client.post(
            "/api/enrollments", json={"userId": 2, "courseId": 1}
        )
        assert response.status_code == 201

        for lesson_id in (1, 2, 3, 4):
            response = await async_client.post(
                "/api/progress",
                json={"userId": 2, "lessonId": lesson_id, "completed": True},
            )
            assert response.status_code == 200

        enrollments = (await async_client.get("/api/enrollments/2")).json()
        assert len(enrollments) == 1
        assert enrollments[0]["progress"] == 80
        assert enrollments[0]["completedLessons"] == 4

    async def test_uncomplete_lowers_progress(self, async_client: httpx.AsyncClient):
        response = await async_client.post(
            "/api/progress", json={"userId": 1, "lessonId": 2, "completed": False}
        )
        assert response.status_code == 200

        summary = (await async_client.get("/api/progress/1/course/1")).json()
        assert summary["progress"] == 20
        assert summary["lessons"][1]["completedAt"] is None


class TestConcurrentRequests:
    """Overlapping requests for the same pair."""

    async def test_duplicate_enrollments(
        self, async_client: httpx.AsyncClient, seeded_storage: StorageService
    ):
        """Only one of several simultaneous enrollments succeeds."""
        responses = await asyncio.gather(
            *(
                async_client.post("/api/enrollments", json={"userId": 3, "courseId": 4})
                for _ in range(10)
            )
        )

        codes = sorted(r.status_code for r in responses)
        assert codes == [201] + [409] * 9
        assert len(seeded_storage.list_enrollments_by_user(3)) == 1

    async def test_repeated_progress_updates(
        self, async_client: httpx.AsyncClient, seeded_storage: StorageService
    ):
        """Simultaneous updates for one lesson keep a single record."""
        before = seeded_storage.store.count(EntityKind.LESSON_PROGRESS)
        responses = await asyncio.gather(
            *(
                async_client.post(
                    "/api/progress",
                    json={"userId": 3, "lessonId": 5, "completed": True},
                )
                for _ in range(10)
            )
        )

        assert {r.status_code for r in responses} == {200}
        assert len({r.json()["id"] for r in responses}) == 1
        assert seeded_storage.store.count(EntityKind.LESSON_PROGRESS) == before + 1

    async def test_request_ids_do_not_leak(self, async_client: httpx.AsyncClient):
        """Each concurrent request keeps its own request id."""
        responses = await asyncio.gather(
            *(
                async_client.get("/health/live", headers={"X-Request-ID": f"req-{i}"})
                for i in range(5)
            )
        )
        assert [r.headers["X-Request-ID"] for r in responses] == [
            f"req-{i}" for i in range(5)
        ]
