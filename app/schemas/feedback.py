"""피드백 Pydantic 스키마.

Feedback request/response schemas.
"""

from typing import Literal

from pydantic import AwareDatetime, BaseModel

from app.schemas.base import CamelModel

IssueType = Literal["roads", "water", "electricity", "sanitation", "public-safety", "other"]
UrgencyLevel = Literal["low", "medium", "high"]
FeedbackStatus = Literal["pending", "in-progress", "resolved"]

# 로그인하지 않은 제보자의 userId — Owner id used for anonymous submissions
ANONYMOUS_USER_ID: str = "anonymous"

# 정방향 진행 순서 — Forward order used when transitions are enforced
STATUS_ORDER: tuple[str, ...] = ("pending", "in-progress", "resolved")


class GeoPoint(BaseModel):
    lat: float
    lng: float


class FeedbackCreate(CamelModel):
    """피드백 제출 요청 스키마.

    Feedback submission schema. id/status/timestamps/admin fields are assigned
    by the service; unknown keys (e.g. adminResponse) are ignored.

    Attributes:
        user_id: 제보자 ID 또는 "anonymous" (Owner id or the anonymous sentinel)
        user_name: 제출 시점의 제보자 이름 (Submitter name, denormalized)
        phone: 제출 시점의 연락처 (Submitter phone, denormalized)
        locality: 발생 위치 주소 (Free-text locality)
        location: 좌표 (Optional geocoordinate)
        issue_type: 이슈 분류 (Issue category)
        title: 제목 (Title)
        description: 상세 설명 (Free-text description)
        media_urls: 첨부 미디어 참조 — 순서 유지 (Media references, order preserved)
        urgency: 긴급도 (Reporter-assigned urgency)
    """

    user_id: str = ANONYMOUS_USER_ID
    user_name: str | None = None
    phone: str | None = None
    locality: str
    location: GeoPoint | None = None
    issue_type: IssueType
    title: str
    description: str
    media_urls: list[str] = []
    urgency: UrgencyLevel


class FeedbackItem(FeedbackCreate):
    """저장된 피드백 레코드 (Stored feedback record)."""

    id: str
    status: FeedbackStatus = "pending"
    created_at: AwareDatetime
    updated_at: AwareDatetime
    admin_response: str | None = None
    admin_id: str | None = None


class FeedbackStatusUpdate(CamelModel):
    """상태 변경 요청 스키마.

    Status update request. Omitting adminResponse keeps the current response;
    an empty string clears it.
    """

    status: FeedbackStatus
    admin_id: str
    admin_response: str | None = None
