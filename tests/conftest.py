"""테스트 인프라 — 메모리 슬롯 저장소, 서비스, httpx 클라이언트 픽스처.

Test infrastructure — In-memory slot backend, record store, services, and
httpx client fixtures. Each test gets a fresh store seeded with the
bootstrap dataset; nothing touches the real database file.
"""

import os

# 설정 로드 전에 환경 변수 지정 — Must be set before app.config is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SIMULATED_DELAY_MS", "0")

from collections.abc import AsyncGenerator
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.api.portal import PortalApi
from app.main import create_app
from app.repositories.record_store import RecordStore
from app.repositories.slot_repository import MemorySlotRepository
from app.schemas.feedback import FeedbackItem
from app.services.analytics_service import AnalyticsService
from app.services.auth_service import AuthService
from app.services.feedback_service import FeedbackService


# ---------------------------------------------------------------------------
# 저장소 / 서비스 — Store and services
# ---------------------------------------------------------------------------
@pytest.fixture
def backend() -> MemorySlotRepository:
    return MemorySlotRepository()


@pytest_asyncio.fixture
async def store(backend: MemorySlotRepository) -> RecordStore:
    """부트스트랩 데이터가 로드된 저장소 (Store loaded with the bootstrap dataset)."""
    s = RecordStore(backend)
    await s.load()
    return s


@pytest.fixture
def auth_service(store: RecordStore) -> AuthService:
    return AuthService(store, delay_ms=0)


@pytest.fixture
def feedback_service(store: RecordStore) -> FeedbackService:
    return FeedbackService(store, delay_ms=0, enforce_forward_transitions=False)


@pytest.fixture
def analytics_service(store: RecordStore) -> AnalyticsService:
    return AnalyticsService(store, delay_ms=0)


@pytest.fixture
def portal(store: RecordStore) -> PortalApi:
    return PortalApi(store, delay_ms=0)


# ---------------------------------------------------------------------------
# HTTP 클라이언트 — ASGI client over an in-memory backend
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def client(backend: MemorySlotRepository) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — 메모리 슬롯 백엔드 사용."""
    application = create_app(backend)
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# 헬퍼 — Helpers
# ---------------------------------------------------------------------------
def sample_payload(**overrides) -> dict:
    """피드백 제출 페이로드 (camelCase, as a client would send it)."""
    payload = {
        "userId": "2",
        "userName": "Regular User",
        "locality": "42 Elm Road",
        "issueType": "sanitation",
        "title": "Overflowing bins",
        "description": "Bins on the corner have not been collected for a week",
        "mediaUrls": ["https://picsum.photos/500/300?random=2", "https://picsum.photos/500/300?random=1"],
        "urgency": "high",
    }
    payload.update(overrides)
    return payload


def make_item(
    item_id: str,
    status: str,
    created_at: datetime,
    updated_at: datetime | None = None,
    issue_type: str = "roads",
    urgency: str = "low",
) -> FeedbackItem:
    return FeedbackItem(
        id=item_id,
        user_id="2",
        locality="Somewhere",
        issue_type=issue_type,
        title=f"Item {item_id}",
        description="Test item",
        urgency=urgency,
        status=status,
        created_at=created_at,
        updated_at=updated_at or created_at,
    )


NOW: datetime = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)
