"""피드백 서비스.

Feedback service — Business logic for feedback CRUD and status transitions.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable

from app.config import settings
from app.repositories.record_store import RecordStore
from app.schemas.feedback import STATUS_ORDER, FeedbackCreate, FeedbackItem, FeedbackStatus
from app.services import simulate_latency
from app.utils.exceptions import FeedbackNotFoundError, InvalidTransitionError


class Unset(Enum):
    UNSET = "UNSET"


# 변경 요청 없음 표시 — Marker for "leave the admin response unchanged"
UNSET = Unset.UNSET


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FeedbackService:
    """피드백 관련 비즈니스 로직을 처리하는 서비스.

    Service handling feedback reads, submission, status changes and deletion.

    Attributes:
        store: 레코드 저장소 (Record store holding the feedback collection)
        delay_ms: 호출당 인공 지연, None이면 설정값 (Per-call latency; None uses settings)
        enforce_forward_transitions: 상태 역행 금지 여부 (Reject backwards status moves)
        clock: 현재 시각 제공 함수 (Returns the current aware UTC time)
    """

    def __init__(
        self,
        store: RecordStore,
        delay_ms: int | None = None,
        enforce_forward_transitions: bool | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.store: RecordStore = store
        self.delay_ms: int | None = delay_ms
        self.enforce_forward_transitions: bool = (
            settings.ENFORCE_FORWARD_TRANSITIONS
            if enforce_forward_transitions is None
            else enforce_forward_transitions
        )
        self.clock: Callable[[], datetime] = clock

    # --- 조회 — Reads ---

    async def get_all(self) -> list[FeedbackItem]:
        await simulate_latency(self.delay_ms)
        return self.store.feedback()

    async def get_by_user(self, user_id: str) -> list[FeedbackItem]:
        await simulate_latency(self.delay_ms)
        return [item for item in self.store.feedback() if item.user_id == user_id]

    async def get_by_id(self, feedback_id: str) -> FeedbackItem:
        await simulate_latency(self.delay_ms)
        item = self.store.find_feedback(feedback_id)
        if item is None:
            raise FeedbackNotFoundError()
        return item

    async def search(
        self,
        query: str | None = None,
        status: str | None = None,
        issue_type: str | None = None,
        urgency: str | None = None,
    ) -> list[FeedbackItem]:
        """목록 화면용 필터 — 최신 등록순.

        Filter for list views, newest ``createdAt`` first. ``query`` is a
        case-insensitive substring match over title, description, locality
        and submitter name; the enum filters are exact matches.
        """
        await simulate_latency(self.delay_ms)
        term = query.strip().lower() if query else ""

        def _matches(item: FeedbackItem) -> bool:
            if status and item.status != status:
                return False
            if issue_type and item.issue_type != issue_type:
                return False
            if urgency and item.urgency != urgency:
                return False
            if term:
                haystack = (item.title, item.description, item.locality, item.user_name or "")
                return any(term in field.lower() for field in haystack)
            return True

        results = [item for item in self.store.feedback() if _matches(item)]
        results.sort(key=lambda item: item.created_at, reverse=True)
        return results

    # --- 변경 — Mutations ---

    async def submit(self, data: FeedbackCreate | dict[str, Any]) -> FeedbackItem:
        """피드백을 등록합니다 — 상태는 항상 pending.

        Register a new item. Status is forced to ``pending`` and both
        timestamps are stamped with the same instant.
        """
        await simulate_latency(self.delay_ms)
        if not isinstance(data, FeedbackCreate):
            data = FeedbackCreate.model_validate(data)

        now = self.clock()
        fields = data.model_dump()
        fields.update(status="pending", created_at=now, updated_at=now)
        async with self.store.transaction():
            return await self.store.add_feedback(fields)

    async def update_status(
        self,
        feedback_id: str,
        status: FeedbackStatus,
        admin_id: str,
        admin_response: str | None | Unset = UNSET,
    ) -> FeedbackItem:
        """상태를 변경하고 관리자 응답을 기록합니다.

        Change the status and record the acting admin.

        Args:
            feedback_id: 대상 피드백 ID (Target item id)
            status: 새 상태 (New status)
            admin_id: 처리한 관리자 ID (Acting admin id)
            admin_response: UNSET/None이면 기존 응답 유지, 빈 문자열이면 삭제,
                            그 외에는 교체 (UNSET or None keeps the current
                            response, "" clears it, any other text replaces it)

        Raises:
            FeedbackNotFoundError: 대상이 없음 (No item with that id)
            InvalidTransitionError: 정방향 강제 모드에서 역행 (Backwards move while enforced)
        """
        await simulate_latency(self.delay_ms)

        async with self.store.transaction():
            current = self.store.find_feedback(feedback_id)
            if current is None:
                raise FeedbackNotFoundError()

            if (
                self.enforce_forward_transitions
                and status in STATUS_ORDER
                and STATUS_ORDER.index(status) < STATUS_ORDER.index(current.status)
            ):
                raise InvalidTransitionError(current.status, status)

            if admin_response is UNSET or admin_response is None:
                response = current.admin_response
            else:
                response = admin_response or None

            updated = FeedbackItem.model_validate(
                {
                    **current.model_dump(),
                    "status": status,
                    "updated_at": max(self.clock(), current.created_at),
                    "admin_id": admin_id,
                    "admin_response": response,
                }
            )
            stored = await self.store.replace_feedback(updated)
        if stored is None:
            raise FeedbackNotFoundError()
        return stored

    async def delete(self, feedback_id: str) -> dict[str, bool]:
        await simulate_latency(self.delay_ms)
        async with self.store.transaction():
            deleted = await self.store.remove_feedback(feedback_id)
        if not deleted:
            raise FeedbackNotFoundError()
        return {"success": True}
