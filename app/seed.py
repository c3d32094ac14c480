"""초기 데이터 시드 — 부트스트랩 사용자 및 피드백.

Seed data — Bootstrap users and feedback items.
The record store falls back to this dataset whenever a durable slot is empty
or unreadable. Running the module rewrites the slots from scratch.

Usage:
    python -m app.seed

Creates:
    - 2개 계정: admin@example.com / admin123 (admin), user@example.com / user123 (user)
    - 3개 피드백: pending / in-progress / resolved 각 1건 (one per status)
"""

import asyncio
from datetime import datetime, timedelta, timezone

from app.schemas.feedback import FeedbackItem
from app.schemas.user import User
from app.utils.password import hash_password


def bootstrap_users() -> list[User]:
    """기본 관리자/일반 사용자 계정 (Default admin and resident accounts)."""
    return [
        User(
            id="1",
            email="admin@example.com",
            password=hash_password("admin123"),
            name="Admin User",
            role="admin",
        ),
        User(
            id="2",
            email="user@example.com",
            password=hash_password("user123"),
            name="Regular User",
            phone="555-123-4567",
            role="user",
        ),
    ]


def bootstrap_feedback(now: datetime | None = None) -> list[FeedbackItem]:
    """예시 피드백 3건 — 타임스탬프는 now 기준 상대값.

    Three sample items, timestamps relative to ``now``.
    """
    now = now or datetime.now(timezone.utc)
    day = timedelta(days=1)
    return [
        FeedbackItem(
            id="1",
            user_id="2",
            user_name="Regular User",
            phone="555-123-4567",
            locality="123 Main Street",
            location={"lat": 37.7749, "lng": -122.4194},
            issue_type="roads",
            title="Pothole on Main Street",
            description="There is a large pothole that has been present for several weeks",
            urgency="medium",
            status="pending",
            created_at=now - 7 * day,
            updated_at=now - 7 * day,
        ),
        FeedbackItem(
            id="2",
            user_id="2",
            user_name="Regular User",
            locality="456 Oak Avenue",
            issue_type="water",
            title="Water outage in Oak neighborhood",
            description="No water in the entire street since this morning",
            urgency="high",
            status="in-progress",
            created_at=now - 2 * day,
            updated_at=now - day,
            admin_response="Maintenance team dispatched",
            admin_id="1",
        ),
        FeedbackItem(
            id="3",
            user_id="2",
            user_name="Regular User",
            locality="789 Pine Drive",
            issue_type="electricity",
            title="Street light not working",
            description="The street light at the corner has been out for a week creating safety concerns",
            urgency="low",
            status="resolved",
            created_at=now - 14 * day,
            updated_at=now - 3 * day,
            admin_response="Light replaced and working properly now",
            admin_id="1",
        ),
    ]


async def seed() -> None:
    """영속 슬롯을 부트스트랩 데이터로 덮어씁니다.

    Overwrite the durable slots with the bootstrap dataset.
    """
    from app.repositories.record_store import RecordStore
    from app.repositories.slot_repository import SqlSlotRepository

    store = RecordStore(SqlSlotRepository())
    await store.reset()
    print(f"Seeded: users={len(store.users())}, feedback={len(store.feedback())}")


if __name__ == "__main__":
    asyncio.run(seed())
