"""레코드 저장소 테스트 — 부트스트랩, 영속화, 손상 복구, ID 발급.

Record store tests — Bootstrap seeding, write-through persistence,
corrupt-slot recovery, id issuing, and copy semantics.
"""

import asyncio
import json

from app.repositories.record_store import FEEDBACK_KEY, SEQUENCES_KEY, USERS_KEY, RecordStore
from app.repositories.slot_repository import MemorySlotRepository
from app.services.analytics_service import AnalyticsService
from app.services.feedback_service import FeedbackService
from tests.conftest import sample_payload


class TestBootstrap:
    """부트스트랩 데이터 테스트."""

    async def test_empty_backend_is_seeded_and_persisted(self, backend, store):
        """빈 백엔드 — 부트스트랩 데이터로 채우고 저장."""
        assert [u.email for u in store.users()] == ["admin@example.com", "user@example.com"]
        assert [f.id for f in store.feedback()] == ["1", "2", "3"]

        persisted = json.loads(backend.slots[FEEDBACK_KEY])
        assert [item["id"] for item in persisted] == ["1", "2", "3"]
        assert persisted[0]["userId"] == "2"
        assert "createdAt" in persisted[0]
        assert len(json.loads(backend.slots[USERS_KEY])) == 2

    async def test_bootstrap_statuses(self, store):
        assert [f.status for f in store.feedback()] == ["pending", "in-progress", "resolved"]

    async def test_stored_secrets_are_hashed(self, backend, store):
        """비밀번호는 평문으로 저장되지 않음."""
        raw = backend.slots[USERS_KEY]
        assert "admin123" not in raw
        assert all(u.password.startswith("$2") for u in store.users())

    async def test_existing_slots_are_not_reseeded(self, backend, store):
        """이미 저장된 데이터가 있으면 그대로 사용."""
        service = FeedbackService(store, delay_ms=0)
        await service.delete("1")

        reloaded = RecordStore(backend)
        await reloaded.load()
        assert [f.id for f in reloaded.feedback()] == ["2", "3"]

    async def test_reset_restores_bootstrap(self, backend, store):
        service = FeedbackService(store, delay_ms=0)
        await service.submit(sample_payload())
        await store.reset()
        assert [f.id for f in store.feedback()] == ["1", "2", "3"]
        assert json.loads(backend.slots[SEQUENCES_KEY]) == {"users": 2, "feedback": 3}


class TestCorruptSlots:
    """손상된 슬롯 복구 테스트."""

    async def test_invalid_json_falls_back_to_bootstrap(self):
        backend = MemorySlotRepository({FEEDBACK_KEY: "{not json"})
        store = RecordStore(backend)
        await store.load()

        assert len(store.feedback()) == 3
        # 재저장됨 — re-persisted as valid JSON
        assert len(json.loads(backend.slots[FEEDBACK_KEY])) == 3

    async def test_schema_mismatch_falls_back_to_bootstrap(self):
        backend = MemorySlotRepository({USERS_KEY: json.dumps([{"id": "9"}])})
        store = RecordStore(backend)
        await store.load()

        assert [u.id for u in store.users()] == ["1", "2"]

    async def test_naive_timestamps_fall_back_to_bootstrap(self):
        """UTC 오프셋 없는 타임스탬프는 손상된 슬롯으로 취급."""
        item = {
            "id": "7",
            "userId": "2",
            "locality": "1 Test Lane",
            "issueType": "roads",
            "title": "Naive",
            "description": "No offset",
            "urgency": "low",
            "status": "resolved",
            "createdAt": "2026-10-01T00:00:00",
            "updatedAt": "2026-10-02T00:00:00",
        }
        backend = MemorySlotRepository({FEEDBACK_KEY: json.dumps([item])})
        store = RecordStore(backend)
        await store.load()

        assert [f.id for f in store.feedback()] == ["1", "2", "3"]
        report = await AnalyticsService(store, delay_ms=0).get_analytics()
        assert report.total_feedback == 3

    async def test_non_decimal_ids_do_not_break_load(self):
        """숫자처럼 보이지만 int()가 거부하는 ID("²")는 카운터 계산에서 제외."""
        backend = MemorySlotRepository()
        seeded = RecordStore(backend)
        await seeded.load()
        raw = json.loads(backend.slots[FEEDBACK_KEY])
        raw[0]["id"] = "\u00b2"
        backend.slots[FEEDBACK_KEY] = json.dumps(raw)
        del backend.slots[SEQUENCES_KEY]

        reloaded = RecordStore(backend)
        await reloaded.load()
        assert [f.id for f in reloaded.feedback()] == ["\u00b2", "2", "3"]
        created = await FeedbackService(reloaded, delay_ms=0).submit(sample_payload())
        assert created.id == "4"

    async def test_corrupt_sequences_rebuilt_from_ids(self, backend, store):
        backend.slots[SEQUENCES_KEY] = "garbage"
        reloaded = RecordStore(backend)
        await reloaded.load()

        service = FeedbackService(reloaded, delay_ms=0)
        created = await service.submit(sample_payload())
        assert created.id == "4"


class TestRoundTrip:
    """영속화 후 재로딩 테스트 (simulated restart)."""

    async def test_reload_yields_identical_collections(self, backend, store):
        service = FeedbackService(store, delay_ms=0)
        await service.submit(sample_payload(location={"lat": 12.5, "lng": -3.25}))
        await service.update_status("1", "in-progress", "1", "Crew scheduled")

        reloaded = RecordStore(backend)
        await reloaded.load()

        assert reloaded.feedback() == store.feedback()
        assert reloaded.users() == store.users()

    async def test_media_order_survives_reload(self, backend, store):
        service = FeedbackService(store, delay_ms=0)
        media = ["c.jpg", "a.jpg", "b.jpg", "a.jpg"]
        created = await service.submit(sample_payload(mediaUrls=media))

        reloaded = RecordStore(backend)
        await reloaded.load()
        assert reloaded.find_feedback(created.id).media_urls == media


class TestIdIssuing:
    """ID 발급 테스트 — 삭제 후에도 재사용 없음."""

    async def test_ids_not_reused_after_delete(self, store):
        service = FeedbackService(store, delay_ms=0)
        first = await service.submit(sample_payload())
        await service.delete(first.id)
        second = await service.submit(sample_payload())

        assert first.id == "4"
        assert second.id == "5"

    async def test_counter_survives_reload(self, backend, store):
        service = FeedbackService(store, delay_ms=0)
        created = await service.submit(sample_payload())
        await service.delete(created.id)

        reloaded = RecordStore(backend)
        await reloaded.load()
        again = await FeedbackService(reloaded, delay_ms=0).submit(sample_payload())
        assert again.id == "5"

    async def test_missing_counter_uses_largest_id(self, backend, store):
        """카운터 슬롯이 없으면 최대 ID 기준으로 복구."""
        service = FeedbackService(store, delay_ms=0)
        await service.delete("1")
        await service.delete("2")
        del backend.slots[SEQUENCES_KEY]

        reloaded = RecordStore(backend)
        await reloaded.load()
        created = await FeedbackService(reloaded, delay_ms=0).submit(sample_payload())
        assert created.id == "4"

    async def test_concurrent_submits_get_distinct_ids(self, store):
        service = FeedbackService(store, delay_ms=5)
        created = await asyncio.gather(*(service.submit(sample_payload()) for _ in range(5)))

        ids = [item.id for item in created]
        assert sorted(ids, key=int) == ["4", "5", "6", "7", "8"]
        assert len(store.feedback()) == 8


class TestCopies:
    """반환값은 복사본 — 호출자가 저장 상태를 바꿀 수 없음."""

    async def test_mutating_returned_item_does_not_touch_store(self, store):
        item = store.find_feedback("1")
        item.status = "resolved"
        item.media_urls.append("x.jpg")

        fresh = store.find_feedback("1")
        assert fresh.status == "pending"
        assert fresh.media_urls == []

    async def test_mutating_snapshot_list_does_not_touch_store(self, store):
        snapshot = store.feedback()
        snapshot.clear()
        assert len(store.feedback()) == 3
