"""프로세스 내 포털 API — 화면 계층이 호출하는 바깥 경계.

In-process portal API — The outermost call boundary for a presentation layer.
Mirrors the HTTP surface without the network: each method awaits the matching
service call and returns the result envelope, so callers never see a raw
exception for an expected failure.

Usage:
    portal = await PortalApi.create(MemorySlotRepository())
    result = await portal.auth.login("user@example.com", "user123")
    if result["success"]:
        profile = result["data"]
"""

from typing import Any

from app.api.envelope import Envelope, run_enveloped
from app.repositories.record_store import RecordStore
from app.repositories.slot_repository import SlotBackend
from app.schemas.feedback import FeedbackCreate
from app.services.analytics_service import AnalyticsService
from app.services.auth_service import AuthService
from app.services.feedback_service import UNSET, FeedbackService, Unset


async def _wrap(call: Any) -> Envelope:
    envelope, _ = await run_enveloped(call)
    return envelope


class AuthApi:
    """인증 API — 로그인/회원가입 결과를 봉투로 반환.

    Attributes:
        service: 인증 서비스 (Auth service)
    """

    def __init__(self, service: AuthService) -> None:
        self.service: AuthService = service

    async def login(self, email: str, password: str) -> Envelope:
        return await _wrap(self.service.login(email, password))

    async def signup(
        self,
        email: str,
        password: str,
        name: str | None = None,
        phone: str | None = None,
    ) -> Envelope:
        return await _wrap(self.service.signup(email, password, name, phone))


class FeedbackApi:
    """피드백 API — 조회/제출/상태 변경/삭제 결과를 봉투로 반환.

    Attributes:
        service: 피드백 서비스 (Feedback service)
    """

    def __init__(self, service: FeedbackService) -> None:
        self.service: FeedbackService = service

    async def get_all(self) -> Envelope:
        return await _wrap(self.service.get_all())

    async def get_by_id(self, feedback_id: str) -> Envelope:
        return await _wrap(self.service.get_by_id(feedback_id))

    async def get_by_user(self, user_id: str) -> Envelope:
        return await _wrap(self.service.get_by_user(user_id))

    async def search(
        self,
        query: str | None = None,
        status: str | None = None,
        issue_type: str | None = None,
        urgency: str | None = None,
    ) -> Envelope:
        return await _wrap(self.service.search(query, status, issue_type, urgency))

    async def submit(self, data: FeedbackCreate | dict[str, Any]) -> Envelope:
        return await _wrap(self.service.submit(data))

    async def update_status(
        self,
        feedback_id: str,
        status: str,
        admin_id: str,
        admin_response: str | None | Unset = UNSET,
    ) -> Envelope:
        return await _wrap(
            self.service.update_status(feedback_id, status, admin_id, admin_response)
        )

    async def delete(self, feedback_id: str) -> Envelope:
        return await _wrap(self.service.delete(feedback_id))


class ReportsApi:
    """리포트 API (Analytics wrapped in the result envelope).

    Attributes:
        service: 분석 서비스 (Analytics service)
    """

    def __init__(self, service: AnalyticsService) -> None:
        self.service: AnalyticsService = service

    async def get_analytics(self) -> Envelope:
        return await _wrap(self.service.get_analytics())


class PortalApi:
    """인증/피드백/리포트 API 묶음.

    Groups the auth, feedback and reports surfaces over one record store.

    Attributes:
        store: 공유 레코드 저장소 (Shared record store)
        auth: 인증 API (Login/signup)
        feedback: 피드백 API (Feedback CRUD and status changes)
        reports: 리포트 API (Analytics)
    """

    def __init__(self, store: RecordStore, delay_ms: int | None = None) -> None:
        self.store: RecordStore = store
        self.auth: AuthApi = AuthApi(AuthService(store, delay_ms))
        self.feedback: FeedbackApi = FeedbackApi(FeedbackService(store, delay_ms))
        self.reports: ReportsApi = ReportsApi(AnalyticsService(store, delay_ms))

    @classmethod
    async def create(cls, backend: SlotBackend, delay_ms: int | None = None) -> "PortalApi":
        """저장소를 로드한 뒤 API를 생성합니다 (Load the store from ``backend`` and build the API)."""
        store = RecordStore(backend)
        await store.load()
        return cls(store, delay_ms)
